import pytest


@pytest.mark.asyncio
async def test_health_ok(api_client):
    async with api_client as ac:
        resp = await ac.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_info_endpoint(api_client):
    async with api_client as ac:
        resp = await ac.get("/api/info")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "ThumpNail API"
        assert isinstance(data["version"], str) and data["version"]


@pytest.mark.asyncio
async def test_info_version_comes_from_version_file(api_client):
    from pathlib import Path

    version = (Path(__file__).resolve().parents[2] / "VERSION").read_text(encoding="utf-8").strip()
    async with api_client as ac:
        resp = await ac.get("/api/info")
    assert resp.json()["version"] == version

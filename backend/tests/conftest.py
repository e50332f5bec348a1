from io import BytesIO
from pathlib import Path
import sys
from typing import Iterator, List

import httpx
import pytest
from PIL import Image

# Ensure the project root is importable for tests (backend.app.*)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Test configuration

Outbound thumbnail requests never leave the process: the `upstream` fixture swaps
the route's httpx client for one backed by httpx.MockTransport and records every
URL requested, in order.
"""


def make_jpeg(width: int = 640, height: int = 360, color=(200, 30, 30)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_jpeg()


class Upstream:
    """Scripted image host: maps URL suffixes to responses and records calls."""

    def __init__(self) -> None:
        self.calls: List[str] = []
        self.routes = {}

    def on(self, suffix: str, response) -> "Upstream":
        # response: bytes (200), int (status code) or an exception instance to raise
        self.routes[suffix] = response
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                if isinstance(response, int):
                    return httpx.Response(response, request=request)
                return httpx.Response(200, content=response, headers={"content-type": "image/jpeg"})
        return httpx.Response(404, request=request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream() -> Iterator[Upstream]:
    """Install a scripted upstream for the generate-thumbnail route."""
    from backend.app.main import app
    from backend.app.api.v1.thumbnails import get_http_client

    fake = Upstream()

    async def _override():
        async with fake.client() as client:
            yield client

    app.dependency_overrides[get_http_client] = _override
    yield fake
    app.dependency_overrides.pop(get_http_client, None)


@pytest.fixture
def api_client() -> httpx.AsyncClient:
    from backend.app.main import app

    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

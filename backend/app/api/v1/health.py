from fastapi import APIRouter

try:
    from ...core.config import settings  # type: ignore
    from ...schemas.models import AppInfo  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore
    from schemas.models import AppInfo  # type: ignore

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/info", response_model=AppInfo)
def info():
    """Return application info: name and version."""
    return AppInfo(name=settings.app_name, version=settings.version)

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel
try:
    from ..app_meta import __version__, __app_name__  # type: ignore
except Exception:  # pragma: no cover
    from app_meta import __version__, __app_name__  # type: ignore


# Load environment variables from .env files without overriding existing env vars.
# Priority: backend/.env first (co-located with app), then project-root/.env as fallback.
_backend_env = Path(__file__).resolve().parents[2] / ".env"
_root_env = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=str(_backend_env), override=False)
load_dotenv(dotenv_path=str(_root_env), override=False)


def _split_csv(value: str | None) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    # Name is sourced from code, not environment
    app_name: str = __app_name__
    # Version is sourced from code, not environment
    version: str = __version__

    # Server
    host: str = os.environ.get("HOST", "0.0.0.0")
    port: int = int(os.environ.get("PORT", "3000"))
    log_level: str = os.environ.get("APP_LOG_LEVEL", "INFO").upper()

    # CORS: every origin unless narrowed explicitly
    cors_origins: List[str] = _split_csv(os.environ.get("CORS_ORIGINS")) or ["*"]

    # Thumbnail processing
    thumbnail_width: int = int(os.environ.get("THUMBNAIL_WIDTH", "1280"))
    thumbnail_quality: int = int(os.environ.get("THUMBNAIL_QUALITY", "90"))
    # Seconds; applies to each outbound thumbnail request
    thumbnail_fetch_timeout: float = float(os.environ.get("THUMBNAIL_FETCH_TIMEOUT", "10"))


settings = Settings()

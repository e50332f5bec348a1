from fastapi import FastAPI, HTTPException
import logging
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from pathlib import Path
from logging.config import dictConfig

# Support both execution modes:
# - "uvicorn backend.app.main:app" (package-relative imports)
# - "uvicorn main:app" with sys.path pointing to backend/app (flat imports)
try:
    from .core.config import settings  # type: ignore
    from .core.logging_config import get_log_config  # type: ignore
    from .api.v1.health import router as health_router  # type: ignore
    from .api.v1.thumbnails import router as thumbnails_router  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore
    from core.logging_config import get_log_config  # type: ignore
    from api.v1.health import router as health_router  # type: ignore
    from api.v1.thumbnails import router as thumbnails_router  # type: ignore

# Apply logging configuration as early as possible (module import time)
dictConfig(get_log_config(settings.log_level))
logger = logging.getLogger(__name__)

tags_metadata = [
    {"name": "health", "description": "Health checks and basic service info."},
    {"name": "thumbnails", "description": "Fetch and re-encode YouTube thumbnails."},
]

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description=(
        "Fetches a YouTube video's thumbnail, re-encodes it at a fixed width and quality"
        " and returns it as a base64 data URL."
    ),
    openapi_tags=tags_metadata,
    # Serve docs under /api/* to match API prefix
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    license_info={
        "name": "MIT",
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    logger.info("%s %s running on http://localhost:%s", settings.app_name, settings.version, settings.port)
    logger.info("Frontend should call POST http://localhost:%s/api/generate-thumbnail", settings.port)


# Routes
app.include_router(health_router, prefix="/api")
app.include_router(thumbnails_router, prefix="/api")

# Front-end (index.html, script.js, style.css) lives in backend/app/static and is served
# from the same origin as the API. Registered last so API routes take precedence.
static_dir = Path(__file__).resolve().parent / "static"


@app.get("/{full_path:path}", include_in_schema=False)
async def static_files(full_path: str):
    # Unknown API paths must stay 404 rather than fall through to the page
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not Found")

    root = static_dir.resolve()
    requested = (root / full_path).resolve() if full_path else root / "index.html"
    if requested.is_dir():
        requested = requested / "index.html"
    if requested.is_relative_to(root) and requested.is_file():
        return FileResponse(str(requested))
    raise HTTPException(status_code=404, detail="Not Found")

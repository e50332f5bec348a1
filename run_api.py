"""
Run the ThumpNail API (and the front-end it serves) with uvicorn.
Usage:
  python run_api.py
Host, port and log level come from HOST / PORT / APP_LOG_LEVEL (default 0.0.0.0:3000).
"""
import os
import sys

from uvicorn import run

ROOT = os.path.dirname(os.path.abspath(__file__))

# Make "backend.app.main" importable without an editable install
if ROOT not in sys.path:
  sys.path.insert(0, ROOT)

from backend.app.core.config import settings  # noqa: E402
from backend.app.core.logging_config import get_log_config  # noqa: E402

if __name__ == "__main__":
  reload = os.environ.get("RELOAD", "0") in {"1", "true", "TRUE", "True"}
  run(
    "backend.app.main:app",
    host=settings.host,
    port=settings.port,
    reload=reload,
    reload_dirs=[os.path.join(ROOT, "backend", "app")] if reload else None,
    log_config=get_log_config(settings.log_level),
    log_level=settings.log_level.lower(),
    access_log=True,
  )

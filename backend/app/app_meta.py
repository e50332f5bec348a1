"""Name and version reported by the API (OpenAPI title, /api/info, startup log).

The version string lives in the repository's VERSION file so packaging and the
running service agree.
"""

from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


def _read_version(path: Path = VERSION_FILE) -> str:
	try:
		return path.read_text(encoding="utf-8").strip() or "0.0.0"
	except OSError:  # pragma: no cover - VERSION missing from a partial checkout
		return "0.0.0"


__app_name__ = "ThumpNail API"
__version__ = _read_version()

from __future__ import annotations

import enum
import logging
import re
from typing import Optional

import httpx

try:
    from ..core.config import settings  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore

logger = logging.getLogger(__name__)

THUMBNAIL_HOST = "https://img.youtube.com/vi"

# Covers watch?v=, youtu.be/, /embed/, /v/, /e/ and youtube.com/<a>/<b>/<id> paths.
# Only the first 11-character token is captured, so trailing query parameters are ignored.
_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)([a-zA-Z0-9_-]{11})"
)


class ThumbnailTier(str, enum.Enum):
    high = "high"
    standard = "standard"

    @property
    def filename(self) -> str:
        return _TIER_FILENAMES[self]


_TIER_FILENAMES = {
    ThumbnailTier.high: "maxresdefault.jpg",
    ThumbnailTier.standard: "hqdefault.jpg",
}


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """Return the 11-character video id embedded in a YouTube URL, or None."""
    if not url:
        return None
    m = _VIDEO_ID_RE.search(url)
    return m.group(1) if m else None


def thumbnail_url(video_id: str, tier: ThumbnailTier = ThumbnailTier.high) -> str:
    """Return the public thumbnail URL for a video id.

    maxresdefault.jpg does not exist for every video; fetch_image falls back to
    hqdefault.jpg, which is widely available.
    """
    return f"{THUMBNAIL_HOST}/{video_id}/{tier.filename}"


async def _get_bytes(client: httpx.AsyncClient, url: str) -> bytes:
    # The image host may redirect; a 3xx is not a failed fetch
    resp = await client.get(url, follow_redirects=True)
    resp.raise_for_status()
    return resp.content


async def fetch_image(image_url: str, client: Optional[httpx.AsyncClient] = None) -> bytes:
    """Download raw image bytes.

    Any failure on a maxresdefault.jpg URL triggers exactly one retry against
    hqdefault.jpg; if that also fails, the fallback's error is raised. Other URLs
    are not retried. Errors are ``httpx.HTTPError`` subclasses, so a missing image
    surfaces as ``httpx.HTTPStatusError`` with ``response.status_code == 404``.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=settings.thumbnail_fetch_timeout, follow_redirects=True) as own_client:
            return await fetch_image(image_url, own_client)

    high = ThumbnailTier.high.filename
    try:
        return await _get_bytes(client, image_url)
    except httpx.HTTPError as e:
        if high not in image_url:
            logger.error("Error fetching thumbnail %s: %s", image_url, e)
            raise
        fallback_url = image_url.replace(high, ThumbnailTier.standard.filename, 1)
        logger.info("%s failed (%s), trying %s", high, e, fallback_url)

    try:
        return await _get_bytes(client, fallback_url)
    except httpx.HTTPError as e:
        logger.error("Error fetching fallback thumbnail %s: %s", fallback_url, e)
        raise

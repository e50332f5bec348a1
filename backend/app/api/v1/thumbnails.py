import logging
from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

try:
    from ...core.config import settings  # type: ignore
    from ...schemas.models import ErrorResponse, GenerateThumbnailResponse  # type: ignore
    from ...utils.images import ThumbnailTier, extract_video_id, fetch_image, thumbnail_url  # type: ignore
    from ...utils.transcode import ThumbnailProcessingError, to_data_url, transcode_thumbnail  # type: ignore
except Exception:  # pragma: no cover
    from core.config import settings  # type: ignore
    from schemas.models import ErrorResponse, GenerateThumbnailResponse  # type: ignore
    from utils.images import ThumbnailTier, extract_video_id, fetch_image, thumbnail_url  # type: ignore
    from utils.transcode import ThumbnailProcessingError, to_data_url, transcode_thumbnail  # type: ignore


logger = logging.getLogger(__name__)

router = APIRouter(tags=["thumbnails"])


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request; overridden in tests with a mock transport."""
    async with httpx.AsyncClient(timeout=settings.thumbnail_fetch_timeout, follow_redirects=True) as client:
        yield client


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/generate-thumbnail",
    response_model=GenerateThumbnailResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_thumbnail(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    """Fetch a video's thumbnail, re-encode it and return it as a JPEG data URL.

    Body: ``{"youtubeUrl": "<any YouTube URL>"}``. The body is read by hand so that
    malformed input maps to the documented 400 payloads instead of a 422.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    youtube_url = payload.get("youtubeUrl") if isinstance(payload, dict) else None
    if not youtube_url or not isinstance(youtube_url, str):
        return _error(400, "Missing or invalid youtubeUrl")

    video_id = extract_video_id(youtube_url)
    if not video_id:
        return _error(400, "Invalid YouTube URL format or unable to extract Video ID")

    original_url = thumbnail_url(video_id, ThumbnailTier.high)
    logger.info("Fetching thumbnail for Video ID: %s from %s", video_id, original_url)
    try:
        image_bytes = await fetch_image(original_url, client)
    except httpx.HTTPError as e:
        logger.error("Error fetching original thumbnail for %s: %s", video_id, e)
        # Decided on the error fetch_image raised, i.e. the fallback's when one was made
        if isinstance(e, httpx.HTTPStatusError) and e.response.status_code == 404:
            return _error(404, f"Original thumbnail not found for Video ID: {video_id}")
        return _error(500, "Failed to fetch original thumbnail. Check server logs.")
    except Exception:
        logger.exception("Unexpected error fetching original thumbnail from %s", original_url)
        return _error(500, "Failed to fetch original thumbnail. Check server logs.")

    try:
        processed = await run_in_threadpool(
            transcode_thumbnail,
            image_bytes,
            settings.thumbnail_width,
            settings.thumbnail_quality,
        )
    except ThumbnailProcessingError as e:
        logger.error("Error processing image for %s: %s", video_id, e)
        return _error(500, "Image processing failed. Check server logs.")

    logger.info("Image processed successfully for %s (%d bytes)", video_id, len(processed))
    return GenerateThumbnailResponse(enhancedThumbnailData=to_data_url(processed))

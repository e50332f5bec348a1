"""
Thumbnail re-encoding.

Resizes to a fixed width (aspect ratio preserved, upscaling allowed) and
re-encodes as JPEG. CPU bound: callers on the event loop should run it in a
thread pool.
"""
from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image

JPEG_MEDIA_TYPE = "image/jpeg"


class ThumbnailProcessingError(Exception):
    """Raised when image bytes cannot be decoded, resized or encoded."""


def transcode_thumbnail(data: bytes, width: int = 1280, quality: int = 90) -> bytes:
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            height = max(1, round(img.height * width / img.width))
            rgb = img if img.mode == "RGB" else img.convert("RGB")
            resized = rgb.resize((width, height), Image.Resampling.LANCZOS)
        out = BytesIO()
        resized.save(out, format="JPEG", quality=quality)
        return out.getvalue()
    except Exception as e:
        raise ThumbnailProcessingError(str(e) or e.__class__.__name__) from e


def to_data_url(data: bytes, media_type: str = JPEG_MEDIA_TYPE) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{encoded}"

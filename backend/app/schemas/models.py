from __future__ import annotations

from pydantic import BaseModel


class GenerateThumbnailResponse(BaseModel):
    enhancedThumbnailData: str


class ErrorResponse(BaseModel):
    error: str


class AppInfo(BaseModel):
    name: str
    version: str

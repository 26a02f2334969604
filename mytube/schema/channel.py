"""Pydantic models for channel listings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mytube.schema.video import VideoListing


class ChannelUploads(BaseModel):
    """A channel together with its uploads in upload order."""

    channel: str
    owner: str
    description: str = ""
    subscriber_count: int = 0
    videos: list[VideoListing] = Field(default_factory=list)

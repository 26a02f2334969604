"""Pydantic read models for videos and comments."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CommentView(BaseModel):
    id: int
    author: str
    text: str
    likes: int
    created_at: datetime


class VideoListing(BaseModel):
    id: int
    title: str
    channel: str
    views: int
    duration: int


class SearchHit(BaseModel):
    """A title match returned by search."""

    id: int
    title: str
    channel: str

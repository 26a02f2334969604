"""Pydantic models describing users and their playlists."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PlaylistEntry(BaseModel):
    position: int
    id: int
    title: str


class PlaylistView(BaseModel):
    """Resolved playlist contents; ``pruned`` counts ids that no longer resolve."""

    name: str
    entries: list[PlaylistEntry] = Field(default_factory=list)
    pruned: int = 0


class UserProfile(BaseModel):
    username: str
    subscriptions: list[str]
    history: list[int]
    playlists: list[str]

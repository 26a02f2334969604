"""Per-user playlist management and playback."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mytube.core.log import PerfTimer
from mytube.core.results import OperationResult
from mytube.db.models import Playlist, User, Video
from mytube.db.store import Store
from mytube.schema.user import PlaylistEntry, PlaylistView

logger = logging.getLogger(__name__)


def create_playlist(user: User, name: str) -> OperationResult:
    name = name.strip()
    if not name:
        return OperationResult.invalid_input("Empty name")
    return user.create_playlist(name)


def add_to_playlist(store: Store, user: User, playlist_name: str, video_id: int) -> OperationResult:
    """Append a video id; duplicates are allowed."""

    playlist = user.get_playlist(playlist_name)
    if playlist is None:
        return OperationResult.not_found("Playlist not found")
    video = store.find_video(video_id)
    if video is None:
        return OperationResult.not_found("Video not found")

    playlist.add(video.id, video.title)
    return OperationResult.ok(f'Added "{video.title}" to playlist "{playlist.name}"', video.id)


def show_playlist(playlist: Playlist, videos: Mapping[int, Video]) -> PlaylistView:
    """Resolve a playlist against the video index, dropping stale ids."""

    resolved = playlist.resolve(videos)
    pruned = len(playlist.video_ids) - len(resolved)
    if pruned:
        logger.debug("Playlist %s has %s unresolvable entries", playlist.name, pruned)
    return PlaylistView(
        name=playlist.name,
        entries=[PlaylistEntry(position=position, id=video.id, title=video.title) for position, video in resolved],
        pruned=pruned,
    )


def play_playlist(store: Store, user: User, playlist_name: str) -> OperationResult:
    """Play then pause every resolvable entry in order.

    Each entry counts one view. Playlist playback is not added to the watch
    history.
    """

    playlist = user.get_playlist(playlist_name)
    if playlist is None:
        return OperationResult.not_found("Playlist not found")

    played = 0
    with PerfTimer("Playlist playback"):
        for _, video in playlist.resolve(store.videos):
            video.play()
            video.pause()
            played += 1
    return OperationResult.ok(f'Playing playlist "{playlist.name}" ({played} videos)')

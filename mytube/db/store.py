"""Process-lifetime registries used to resolve names and ids."""

from __future__ import annotations

from dataclasses import dataclass, field

from mytube.db.models import Channel, User, Video


@dataclass(slots=True)
class Store:
    """Global lookup tables.

    ``channels`` and ``users`` own their entities. ``videos`` is a
    non-owning index into the channels' uploads; deleting a channel would
    have to purge its ids here and from every playlist and watch history.
    """

    users: dict[str, User] = field(default_factory=dict)
    channels: dict[str, Channel] = field(default_factory=dict)
    videos: dict[int, Video] = field(default_factory=dict)

    def find_user(self, username: str) -> User | None:
        return self.users.get(username)

    def find_channel(self, name: str) -> Channel | None:
        return self.channels.get(name)

    def find_video(self, video_id: int) -> Video | None:
        return self.videos.get(video_id)

    def register_video(self, video: Video) -> Video:
        self.videos[video.id] = video
        return video

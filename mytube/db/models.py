"""In-memory entity graph: channels own videos, videos own comments."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from mytube.core.ids import id_generator
from mytube.core.log import PerfTimer
from mytube.core.results import OperationResult

logger = logging.getLogger(__name__)


def _next_id() -> int:
    return id_generator.next()


@dataclass(slots=True)
class Comment:
    author: str
    text: str
    id: int = field(default_factory=_next_id)
    likes: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def like(self) -> int:
        self.likes += 1
        return self.likes


@dataclass(slots=True)
class Video:
    """A single upload with playback state, views and comments.

    ``uploader`` holds the owning channel's name; the channel itself keeps the
    only strong reference to the video.
    """

    title: str
    uploader: str
    duration: int
    id: int = field(default_factory=_next_id)
    views: int = 0
    playing: bool = False
    comments: list[Comment] = field(default_factory=list)

    def play(self) -> OperationResult:
        with PerfTimer("Video.play"):
            if self.playing:
                return OperationResult.already_exists(f'Already playing "{self.title}"')
            self.playing = True
            self.views += 1
            return OperationResult.ok(f'Playing "{self.title}" (views: {self.views})')

    def pause(self) -> OperationResult:
        if not self.playing:
            return OperationResult.invalid_input(f'Not playing "{self.title}"')
        self.playing = False
        return OperationResult.ok(f'Paused "{self.title}"')

    def add_comment(self, author: str, text: str) -> OperationResult:
        with PerfTimer("Video.add_comment"):
            comment = Comment(author=author, text=text)
            self.comments.append(comment)
            return OperationResult.ok(f"Comment added by {author}", comment.id)

    def get_comment(self, comment_id: int) -> Comment | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def like_comment(self, comment_id: int) -> OperationResult:
        with PerfTimer("Video.like_comment"):
            comment = self.get_comment(comment_id)
            if comment is None:
                return OperationResult.not_found("Comment not found")
            likes = comment.like()
            return OperationResult.ok(f"Liked comment {comment_id} (likes={likes})", comment_id)

    def remove_comment(self, comment_id: int, requester: str, channel_owner: str) -> OperationResult:
        """Delete a comment when ``requester`` is its author or the channel owner."""

        for index, comment in enumerate(self.comments):
            if comment.id != comment_id:
                continue
            if requester not in (comment.author, channel_owner):
                return OperationResult.permission_denied()
            del self.comments[index]
            return OperationResult.ok("Comment removed", comment_id)
        return OperationResult.not_found("Comment not found")


@dataclass(slots=True)
class Channel:
    name: str
    owner: str
    description: str = ""
    uploads: list[Video] = field(default_factory=list)
    subscribers: set[str] = field(default_factory=set)

    def upload(self, title: str, duration: int) -> Video:
        """Create a video owned by this channel.

        Registering the video in the global id index is the caller's job.
        """

        if duration < 0:
            raise ValueError(f"Invalid duration: {duration}")
        with PerfTimer("Channel.upload"):
            video = Video(title=title, uploader=self.name, duration=duration)
            self.uploads.append(video)
        logger.info('Uploaded "%s" (id=%s) to channel %s', title, video.id, self.name)
        return video

    def subscribe(self, username: str) -> OperationResult:
        if username in self.subscribers:
            return OperationResult.already_exists(f"{username} already subscribed")
        self.subscribers.add(username)
        return OperationResult.ok(f"{username} subscribed to {self.name}")

    def unsubscribe(self, username: str) -> OperationResult:
        if username not in self.subscribers:
            return OperationResult.not_found(f"{username} was not subscribed")
        self.subscribers.discard(username)
        return OperationResult.ok(f"{username} unsubscribed from {self.name}")


@dataclass(slots=True)
class Playlist:
    """Ordered video ids; ids are looked up, never owned."""

    name: str
    video_ids: list[int] = field(default_factory=list)

    def add(self, video_id: int, video_title: str) -> None:
        self.video_ids.append(video_id)
        logger.info('Added "%s" to playlist "%s"', video_title, self.name)

    def resolve(self, videos: Mapping[int, Video]) -> list[tuple[int, Video]]:
        """Return ``(position, video)`` pairs, skipping ids that no longer resolve.

        Positions are 1-based indexes into the stored id list.
        """

        resolved: list[tuple[int, Video]] = []
        for position, video_id in enumerate(self.video_ids, start=1):
            video = videos.get(video_id)
            if video is not None:
                resolved.append((position, video))
        return resolved


@dataclass(slots=True)
class User:
    username: str
    subscriptions: set[str] = field(default_factory=set)
    history: list[int] = field(default_factory=list)
    playlists: dict[str, Playlist] = field(default_factory=dict)

    def watch(self, video: Video | None) -> OperationResult:
        if video is None:
            return OperationResult.not_found("Video not found")
        self.history.append(video.id)
        return video.play()

    def add_comment(self, video: Video | None, text: str) -> OperationResult:
        if video is None:
            return OperationResult.not_found("Video not found")
        return video.add_comment(self.username, text)

    def like_comment(self, video: Video | None, comment_id: int) -> OperationResult:
        if video is None:
            return OperationResult.not_found("Video not found")
        return video.like_comment(comment_id)

    def create_playlist(self, name: str) -> OperationResult:
        if name in self.playlists:
            return OperationResult.already_exists("Playlist exists")
        self.playlists[name] = Playlist(name=name)
        return OperationResult.ok(f'Created playlist "{name}"')

    def get_playlist(self, name: str) -> Playlist | None:
        return self.playlists.get(name)

    def subscribe_channel(self, channel: Channel) -> OperationResult:
        """Subscribe to ``channel``, updating both sides together."""

        if channel.name in self.subscriptions:
            return OperationResult.already_exists("Already subscribed")
        result = channel.subscribe(self.username)
        # The channel may already list us if the two sets drifted apart; adopt it.
        self.subscriptions.add(channel.name)
        return result

    def unsubscribe_channel(self, channel: Channel) -> OperationResult:
        was_subscribed = channel.name in self.subscriptions
        self.subscriptions.discard(channel.name)
        result = channel.unsubscribe(self.username)
        if not result.is_success() and was_subscribed:
            return OperationResult.ok(f"{self.username} unsubscribed from {channel.name}")
        return result

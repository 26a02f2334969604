"""Playback and comment operations addressed by video id."""

from __future__ import annotations

from mytube.core.log import PerfTimer
from mytube.core.results import OperationResult
from mytube.db.models import User
from mytube.db.store import Store
from mytube.schema.video import CommentView, VideoListing
from mytube.services.channel_registry import listing_for


def watch(store: Store, video_id: int, *, user: User | None = None) -> OperationResult:
    """Play a video, recording it in the user's history when someone is logged in."""

    video = store.find_video(video_id)
    if video is None:
        return OperationResult.not_found("Video not found")
    if user is None:
        return video.play()
    return user.watch(video)


def pause(store: Store, video_id: int) -> OperationResult:
    video = store.find_video(video_id)
    if video is None:
        return OperationResult.not_found("Video not found")
    return video.pause()


def add_comment(store: Store, user: User, video_id: int, text: str) -> OperationResult:
    return user.add_comment(store.find_video(video_id), text)


def like_comment(store: Store, user: User, video_id: int, comment_id: int) -> OperationResult:
    return user.like_comment(store.find_video(video_id), comment_id)


def remove_comment(store: Store, user: User, video_id: int, comment_id: int) -> OperationResult:
    """Remove a comment on behalf of its author or the owner of the video's channel."""

    video = store.find_video(video_id)
    if video is None:
        return OperationResult.not_found("Video not found")
    channel = store.find_channel(video.uploader)
    channel_owner = channel.owner if channel is not None else ""
    return video.remove_comment(comment_id, user.username, channel_owner)


def list_comments(store: Store, video_id: int) -> list[CommentView] | None:
    """Return comments in insertion order, or None for unknown videos."""

    video = store.find_video(video_id)
    if video is None:
        return None
    return [
        CommentView(
            id=comment.id,
            author=comment.author,
            text=comment.text,
            likes=comment.likes,
            created_at=comment.created_at,
        )
        for comment in video.comments
    ]


def list_all_videos(store: Store) -> list[VideoListing]:
    with PerfTimer("List all videos"):
        return [listing_for(store.videos[video_id]) for video_id in sorted(store.videos)]

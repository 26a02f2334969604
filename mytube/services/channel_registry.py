"""Helpers for creating channels and publishing videos."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mytube.core.results import OperationResult
from mytube.db.models import Channel, Video
from mytube.db.store import Store
from mytube.schema.channel import ChannelUploads
from mytube.schema.video import VideoListing

logger = logging.getLogger(__name__)


def listing_for(video: Video) -> VideoListing:
    return VideoListing(
        id=video.id,
        title=video.title,
        channel=video.uploader,
        views=video.views,
        duration=video.duration,
    )


def list_channels(store: Store) -> Sequence[Channel]:
    """Return all channels ordered by name."""

    return sorted(store.channels.values(), key=lambda channel: channel.name)


def create_channel(store: Store, name: str, owner: str, description: str = "") -> OperationResult:
    """Create a channel owned by ``owner``; channel names are unique."""

    name = name.strip()
    if not name:
        return OperationResult.invalid_input("Empty name")
    if name in store.channels:
        return OperationResult.already_exists("Channel exists")

    store.channels[name] = Channel(name=name, owner=owner, description=description)
    logger.info("Created channel %s for %s", name, owner)
    return OperationResult.ok(f'Channel "{name}" created')


def upload_video(
    store: Store,
    channel_name: str,
    *,
    requester: str,
    title: str,
    duration: int,
) -> OperationResult:
    """Upload to a channel the requester owns and index the new video by id."""

    channel = store.find_channel(channel_name)
    if channel is None:
        return OperationResult.not_found("Channel not found")
    if channel.owner != requester:
        return OperationResult.permission_denied("You do not own this channel")
    if duration < 0:
        return OperationResult.invalid_input(f"Invalid duration: {duration}")

    video = store.register_video(channel.upload(title, duration))
    return OperationResult.ok(f'Uploaded "{video.title}" (id={video.id})', video.id)


def list_channel_uploads(store: Store, channel_name: str) -> ChannelUploads | None:
    """Describe a channel's uploads in upload order, or None for unknown channels."""

    channel = store.find_channel(channel_name)
    if channel is None:
        return None
    return ChannelUploads(
        channel=channel.name,
        owner=channel.owner,
        description=channel.description,
        subscriber_count=len(channel.subscribers),
        videos=[listing_for(video) for video in channel.uploads],
    )

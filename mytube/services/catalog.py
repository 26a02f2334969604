"""Demo channels and videos created at startup."""

from __future__ import annotations

import logging

from mytube.core.results import OpStatus
from mytube.db.store import Store
from mytube.services.channel_registry import create_channel, upload_video

logger = logging.getLogger(__name__)

SYSTEM_OWNER = "system"

SEED_CHANNELS: tuple[tuple[str, str], ...] = (
    ("KavyaTech", "C++ tutorials"),
    ("IndieMusic", "Music channel"),
)

SEED_VIDEOS: tuple[tuple[str, str, int], ...] = (
    ("KavyaTech", "C++ OOP Deep Dive", 900),
    ("KavyaTech", "Data Structures Overview", 720),
    ("IndieMusic", "Chill Loops", 300),
)


def seed_catalog(store: Store) -> list[int]:
    """Create the demo catalogue; returns the ids of the seeded videos.

    Channels that already exist are left untouched and get no new uploads.
    """

    created: set[str] = set()
    for name, description in SEED_CHANNELS:
        result = create_channel(store, name, SYSTEM_OWNER, description)
        if result.status is OpStatus.SUCCESS:
            created.add(name)

    video_ids: list[int] = []
    for channel_name, title, duration in SEED_VIDEOS:
        if channel_name not in created:
            continue
        result = upload_video(store, channel_name, requester=SYSTEM_OWNER, title=title, duration=duration)
        if result.id is not None:
            video_ids.append(result.id)

    logger.info("Seeded %s channels and %s videos", len(created), len(video_ids))
    return video_ids

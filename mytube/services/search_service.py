"""Title search across every indexed video."""

from __future__ import annotations

from mytube.core.log import PerfTimer
from mytube.db.store import Store
from mytube.schema.video import SearchHit


def search(store: Store, query: str) -> list[SearchHit]:
    """Case-insensitive substring match on titles, ordered by video id."""

    needle = query.casefold()
    with PerfTimer("Search operation"):
        return [
            SearchHit(id=video.id, title=video.title, channel=video.uploader)
            for video_id, video in sorted(store.videos.items())
            if needle in video.title.casefold()
        ]

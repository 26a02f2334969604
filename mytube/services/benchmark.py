"""Micro benchmark over lookups, comment creation and search."""

from __future__ import annotations

from mytube.core.config import Settings, settings as default_settings
from mytube.core.log import PerfTimer, perf_switch
from mytube.db.store import Store
from mytube.schema.benchmark import BenchmarkReport
from mytube.services.search_service import search

BENCH_AUTHOR = "benchuser"


def run_benchmark(store: Store, settings: Settings | None = None) -> BenchmarkReport:
    """Time the hot paths with performance logging forced on."""

    settings = settings or default_settings
    previous = perf_switch.enabled
    perf_switch.enabled = True
    try:
        probe_id = min(store.videos, default=1)
        with PerfTimer(f"{settings.benchmark_lookups} video lookups") as lookup_timer:
            for _ in range(settings.benchmark_lookups):
                store.find_video(probe_id)

        comments = 0
        with PerfTimer(f"{settings.benchmark_comments} comment additions") as comment_timer:
            target = store.find_video(probe_id)
            if target is not None:
                for _ in range(settings.benchmark_comments):
                    target.add_comment(BENCH_AUTHOR, "test comment")
                    comments += 1

        with PerfTimer("Video search") as search_timer:
            matches = len(search(store, settings.benchmark_query))
    finally:
        perf_switch.enabled = previous

    return BenchmarkReport(
        lookups=settings.benchmark_lookups,
        lookup_us=lookup_timer.elapsed_us or 0,
        comments=comments,
        comment_us=comment_timer.elapsed_us or 0,
        query=settings.benchmark_query,
        matches=matches,
        search_us=search_timer.elapsed_us or 0,
    )

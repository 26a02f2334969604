"""Timings reported by the benchmark run."""

from __future__ import annotations

from pydantic import BaseModel


class BenchmarkReport(BaseModel):
    lookups: int
    lookup_us: int
    comments: int
    comment_us: int
    query: str
    matches: int
    search_us: int

"""Tests for identifier minting."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from mytube.core.ids import IdGenerator
from mytube.db.models import Channel


def test_next_is_strictly_increasing():
    generator = IdGenerator()
    issued = [generator.next() for _ in range(5)]
    assert issued == [1, 2, 3, 4, 5]


def test_ids_unique_under_threads():
    generator = IdGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        issued = list(pool.map(lambda _: generator.next(), range(2000)))
    assert len(set(issued)) == 2000
    assert max(issued) == 2000


def test_videos_and_comments_share_one_sequence():
    channel = Channel(name="C", owner="alice")
    first = channel.upload("V1", 100)
    comment_id = first.add_comment("alice", "hi").id
    second = channel.upload("V2", 50)
    other_comment_id = second.add_comment("bob", "yo").id

    ids = [first.id, comment_id, second.id, other_comment_id]
    assert ids == sorted(ids)
    assert len(set(ids)) == 4


def test_removed_comment_ids_are_not_reused():
    channel = Channel(name="C", owner="alice")
    video = channel.upload("V1", 100)
    removed_id = video.add_comment("alice", "hi").id
    video.remove_comment(removed_id, "alice", "alice")

    assert video.add_comment("alice", "again").id > removed_id

"""Tests for playback, comments and search."""

from __future__ import annotations

from mytube.core.results import OpStatus
from mytube.db.store import Store
from mytube.services import channel_registry, search_service, user_service, video_service


def _alice_with_video(store: Store) -> int:
    user_service.register_user(store, "alice")
    user_service.register_user(store, "bob")
    channel_registry.create_channel(store, "C", "alice")
    result = channel_registry.upload_video(store, "C", requester="alice", title="V1", duration=100)
    assert result.id is not None
    return result.id


def test_watch_scenario(store: Store) -> None:
    video_id = _alice_with_video(store)
    alice = store.users["alice"]
    assert video_id == 1

    first = video_service.watch(store, video_id, user=alice)
    second = video_service.watch(store, video_id, user=alice)

    assert first.status is OpStatus.SUCCESS
    assert first.message == 'Playing "V1" (views: 1)'
    assert second.status is OpStatus.ALREADY_EXISTS
    assert store.videos[video_id].views == 1


def test_watch_without_user_skips_history(store: Store) -> None:
    video_id = _alice_with_video(store)

    assert video_service.watch(store, video_id).is_success()
    assert store.users["alice"].history == []
    assert video_service.watch(store, 404).status is OpStatus.NOT_FOUND


def test_pause_via_service(store: Store) -> None:
    video_id = _alice_with_video(store)
    assert video_service.pause(store, video_id).status is OpStatus.INVALID_INPUT
    video_service.watch(store, video_id)
    assert video_service.pause(store, video_id).is_success()
    assert video_service.pause(store, 404).status is OpStatus.NOT_FOUND


def test_comment_removal_scenario(store: Store) -> None:
    video_id = _alice_with_video(store)
    alice, bob = store.users["alice"], store.users["bob"]

    added = video_service.add_comment(store, alice, video_id, "hi")
    assert added.status is OpStatus.SUCCESS and added.id is not None

    denied = video_service.remove_comment(store, bob, video_id, added.id)
    removed = video_service.remove_comment(store, alice, video_id, added.id)

    assert denied.status is OpStatus.PERMISSION_DENIED
    assert removed.status is OpStatus.SUCCESS
    assert video_service.list_comments(store, video_id) == []
    assert video_service.like_comment(store, alice, video_id, added.id).status is OpStatus.NOT_FOUND


def test_channel_owner_can_remove_any_comment(store: Store) -> None:
    video_id = _alice_with_video(store)
    alice, bob = store.users["alice"], store.users["bob"]
    added = video_service.add_comment(store, bob, video_id, "first!")

    assert video_service.remove_comment(store, alice, video_id, added.id).is_success()


def test_list_comments(store: Store) -> None:
    video_id = _alice_with_video(store)
    alice, bob = store.users["alice"], store.users["bob"]
    video_service.add_comment(store, alice, video_id, "one")
    second = video_service.add_comment(store, bob, video_id, "two")
    video_service.like_comment(store, alice, video_id, second.id)

    comments = video_service.list_comments(store, video_id)

    assert comments is not None
    assert [(c.author, c.text, c.likes) for c in comments] == [("alice", "one", 0), ("bob", "two", 1)]
    assert video_service.list_comments(store, 404) is None


def test_comment_operations_on_missing_video(store: Store) -> None:
    _alice_with_video(store)
    alice = store.users["alice"]

    assert video_service.add_comment(store, alice, 404, "hi").status is OpStatus.NOT_FOUND
    assert video_service.like_comment(store, alice, 404, 1).status is OpStatus.NOT_FOUND
    assert video_service.remove_comment(store, alice, 404, 1).status is OpStatus.NOT_FOUND


def test_search_is_case_insensitive(seeded_store: Store) -> None:
    hits = search_service.search(seeded_store, "c++")

    assert [hit.title for hit in hits] == ["C++ OOP Deep Dive"]
    assert hits[0].channel == "KavyaTech"
    assert search_service.search(seeded_store, "LOOPS")[0].title == "Chill Loops"
    assert search_service.search(seeded_store, "nothing here") == []


def test_list_all_videos_in_id_order(seeded_store: Store) -> None:
    video_service.watch(seeded_store, 3)

    listings = video_service.list_all_videos(seeded_store)

    assert [(v.id, v.title, v.views) for v in listings] == [
        (1, "C++ OOP Deep Dive", 0),
        (2, "Data Structures Overview", 0),
        (3, "Chill Loops", 1),
    ]

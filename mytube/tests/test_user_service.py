"""Tests for registration, login and subscriptions."""

from __future__ import annotations

from mytube.core.results import OpStatus
from mytube.db.store import Store
from mytube.services import subscription_service, user_service


def test_register_user(store: Store) -> None:
    assert user_service.register_user(store, "alice").status is OpStatus.SUCCESS
    assert user_service.register_user(store, "alice").status is OpStatus.ALREADY_EXISTS
    assert user_service.register_user(store, "").status is OpStatus.INVALID_INPUT
    assert list(store.users) == ["alice"]


def test_login_resolves_registered_user(store: Store) -> None:
    user_service.register_user(store, "alice")

    result, user = user_service.login(store, "alice")
    missing, nobody = user_service.login(store, "bob")

    assert result.is_success() and user is store.users["alice"]
    assert missing.status is OpStatus.NOT_FOUND
    assert missing.message == "No such user. Register first."
    assert nobody is None


def test_subscribe_is_idempotent_in_effect(seeded_store: Store) -> None:
    user_service.register_user(seeded_store, "bob")
    bob = seeded_store.users["bob"]

    first = subscription_service.subscribe(seeded_store, bob, "KavyaTech")
    second = subscription_service.subscribe(seeded_store, bob, "KavyaTech")

    assert first.status is OpStatus.SUCCESS
    assert second.status is OpStatus.ALREADY_EXISTS
    assert seeded_store.channels["KavyaTech"].subscribers == {"bob"}
    assert subscription_service.subscribe(seeded_store, bob, "missing").status is OpStatus.NOT_FOUND


def test_unsubscribe(seeded_store: Store) -> None:
    user_service.register_user(seeded_store, "bob")
    bob = seeded_store.users["bob"]
    subscription_service.subscribe(seeded_store, bob, "IndieMusic")

    assert subscription_service.unsubscribe(seeded_store, bob, "IndieMusic").is_success()
    assert subscription_service.unsubscribe(seeded_store, bob, "IndieMusic").status is OpStatus.NOT_FOUND
    assert subscription_service.unsubscribe(seeded_store, bob, "missing").status is OpStatus.NOT_FOUND


def test_user_profile(seeded_store: Store) -> None:
    user_service.register_user(seeded_store, "bob")
    bob = seeded_store.users["bob"]
    subscription_service.subscribe(seeded_store, bob, "KavyaTech")
    subscription_service.subscribe(seeded_store, bob, "IndieMusic")
    bob.create_playlist("later")
    bob.watch(seeded_store.find_video(3))

    profile = user_service.user_profile(bob)

    assert profile.subscriptions == ["IndieMusic", "KavyaTech"]
    assert profile.history == [3]
    assert profile.playlists == ["later"]

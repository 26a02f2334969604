"""Registration and lookup of users."""

from __future__ import annotations

import logging

from mytube.core.results import OperationResult
from mytube.db.models import User
from mytube.db.store import Store
from mytube.schema.user import UserProfile

logger = logging.getLogger(__name__)


def register_user(store: Store, username: str) -> OperationResult:
    """Create a user; names must be non-empty and unique."""

    username = username.strip()
    if not username:
        return OperationResult.invalid_input("Empty name")
    if username in store.users:
        return OperationResult.already_exists("User exists")

    store.users[username] = User(username=username)
    logger.info("Registered user %s", username)
    return OperationResult.ok(f"Registered user: {username}")


def login(store: Store, username: str) -> tuple[OperationResult, User | None]:
    """Resolve a username; the caller keeps the returned user as its session."""

    user = store.find_user(username.strip())
    if user is None:
        return OperationResult.not_found("No such user. Register first."), None
    return OperationResult.ok(f"Logged in as {user.username}"), user


def user_profile(user: User) -> UserProfile:
    return UserProfile(
        username=user.username,
        subscriptions=sorted(user.subscriptions),
        history=list(user.history),
        playlists=sorted(user.playlists),
    )

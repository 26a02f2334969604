"""Business logic for channel subscriptions."""

from __future__ import annotations

from mytube.core.results import OperationResult
from mytube.db.models import User
from mytube.db.store import Store


def subscribe(store: Store, user: User, channel_name: str) -> OperationResult:
    channel = store.find_channel(channel_name)
    if channel is None:
        return OperationResult.not_found("Channel not found")
    return user.subscribe_channel(channel)


def unsubscribe(store: Store, user: User, channel_name: str) -> OperationResult:
    channel = store.find_channel(channel_name)
    if channel is None:
        return OperationResult.not_found("Channel not found")
    return user.unsubscribe_channel(channel)

"""Shared fixtures: a fresh store with identifiers starting from 1."""

from __future__ import annotations

import pytest

from mytube.core.ids import IdGenerator
from mytube.core.log import perf_switch
from mytube.db import models
from mytube.db.store import Store
from mytube.services.catalog import seed_catalog


@pytest.fixture(autouse=True)
def fresh_ids(monkeypatch: pytest.MonkeyPatch) -> IdGenerator:
    generator = IdGenerator()
    monkeypatch.setattr(models, "id_generator", generator)
    return generator


@pytest.fixture(autouse=True)
def perf_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(perf_switch, "enabled", False)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def seeded_store(store: Store) -> Store:
    seed_catalog(store)
    return store

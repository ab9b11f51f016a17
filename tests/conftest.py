"""Pytest configuration and fixtures for the collection tests."""

from __future__ import annotations

from typing import Generator

import pytest

from collection import Collection
from settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and MULTISET_* variables around every test."""
    monkeypatch.delenv("MULTISET_MAX_ITERATIONS", raising=False)
    monkeypatch.delenv("MULTISET_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fruits() -> Collection:
    """Collection with a repeated record."""
    return Collection([("apple", 1), ("orange", 1), ("apple", 4), ("pear", 1)])


@pytest.fixture
def signed() -> Collection:
    """Collection mixing insertions and retractions."""
    return Collection([("a", 1), ("b", 0), ("a", -1), ("a", 2), ("c", -3)])

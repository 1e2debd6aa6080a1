"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Simulated time (manual scheduler)
- In-memory durable slots and record stores
- Navigation recording
"""

import heapq
import itertools
from collections.abc import Callable, Generator
from typing import Any

import pytest

from prereg.adapters.storage.memory import MemorySlotStorage
from prereg.client.stores import NotificationStore, ReservationStore


class ManualScheduler:
    """
    Scheduler driven by explicit ``advance()`` calls.

    Time is tracked in integer milliseconds so that delays add up exactly.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: list[tuple[int, int, Callable[..., None], tuple[Any, ...]]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., None], *args: Any) -> None:
        due = self.now_ms + round(delay * 1000)
        heapq.heappush(self._queue, (due, next(self._seq), callback, args))

    def advance(self, seconds: float) -> None:
        """Move time forward, firing due callbacks in order."""
        target = self.now_ms + round(seconds * 1000)
        while self._queue and self._queue[0][0] <= target:
            due, _, callback, args = heapq.heappop(self._queue)
            self.now_ms = due
            callback(*args)
        self.now_ms = target

    @property
    def pending(self) -> int:
        return len(self._queue)


class RecordingNavigator:
    """Navigator that remembers every path it was sent to."""

    def __init__(self) -> None:
        self.paths: list[str] = []

    def push(self, path: str) -> None:
        self.paths.append(path)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def storage() -> MemorySlotStorage:
    return MemorySlotStorage()


@pytest.fixture
def reservations(storage: MemorySlotStorage) -> Generator[ReservationStore, None, None]:
    with ReservationStore(storage) as store:
        yield store


@pytest.fixture
def notifications(storage: MemorySlotStorage) -> Generator[NotificationStore, None, None]:
    with NotificationStore(storage) as store:
        yield store

"""Shared slot bookkeeping for storage adapters."""

import re
from collections.abc import Callable

from prereg.domain.events import ChangeEmitter, Unsubscribe

_SLOT_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


def check_slot_name(slot: str) -> str:
    """Reject slot names that are not safe as file names."""
    if not _SLOT_NAME.match(slot):
        raise ValueError(f"Invalid slot name: {slot!r}")
    return slot


class WatchedSlots:
    """Per-slot watcher registry; subclasses call ``_notify`` after a write."""

    def __init__(self) -> None:
        self._watchers: dict[str, ChangeEmitter] = {}

    def watch(self, slot: str, callback: Callable[[str], None]) -> Unsubscribe:
        emitter = self._watchers.setdefault(check_slot_name(slot), ChangeEmitter())
        return emitter.subscribe(callback)

    def _notify(self, slot: str) -> None:
        emitter = self._watchers.get(slot)
        if emitter is not None:
            emitter.emit(slot)

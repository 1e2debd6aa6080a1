"""In-memory slot storage - Implements SlotStorage protocol."""

from .base import WatchedSlots, check_slot_name


class MemorySlotStorage(WatchedSlots):
    """
    Slots held in a dict for the lifetime of the process.

    Used by tests and by single-process setups that do not need
    cross-session durability.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__()
        self._slots: dict[str, str] = dict(initial or {})

    def read(self, slot: str) -> str | None:
        return self._slots.get(check_slot_name(slot))

    def write(self, slot: str, payload: str) -> None:
        self._slots[check_slot_name(slot)] = payload
        self._notify(slot)

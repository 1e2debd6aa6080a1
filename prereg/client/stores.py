"""
Persisted record stores - Reservations and notifications.

Each store owns one durable slot and is the only writer of its records.
The whole collection is serialized and written back on every mutation;
there are no partial writes. On construction the store hydrates from its
slot, or starts empty if the slot has never been written.

Slot payload format (one JSON document per slot)::

    {"state": {"reservations": [ {...}, ... ]}, "version": 0}

Known limitation: two processes writing the same slot are
last-write-wins. Within one process, stores over the same storage see
each other's writes through the slot watch and re-hydrate.
"""

import json
import logging
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import fields, replace
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from prereg.domain.events import ChangeEmitter
from prereg.domain.ports import SlotStorage
from prereg.domain.records import Notification, Reservation, ensure_aware

logger = logging.getLogger(__name__)

STATE_VERSION = 0

RESERVATIONS_SLOT = "reservations"
NOTIFICATIONS_SLOT = "notifications"

R = TypeVar("R", Reservation, Notification)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class PersistedRecordStore(Generic[R]):
    """
    Keyed record collection persisted to a single durable slot.

    Subclasses fix the slot name, the collection key inside the payload
    and the record type. Subscribers to ``changes`` are called with the
    store after every mutation that actually changed the collection.
    """

    slot: ClassVar[str]
    collection: ClassVar[str]
    record_type: ClassVar[type]

    def __init__(self, storage: SlotStorage, clock: Callable[[], datetime] = _local_now) -> None:
        self._storage = storage
        self._clock = clock
        self._writing = False
        self._last_id = 0
        self.changes = ChangeEmitter()
        self._records: list[R] = self._hydrate()
        self._unwatch = storage.watch(self.slot, self._on_slot_written)

    def __enter__(self) -> "PersistedRecordStore[R]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(tuple(self._records))

    @property
    def records(self) -> tuple[R, ...]:
        """Snapshot of the collection in storage order."""
        return tuple(self._records)

    def close(self) -> None:
        """Stop following writes made by other store instances."""
        self._unwatch()

    def get_by_id(self, record_id: str) -> R | None:
        """Return the record with ``record_id``, or None."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def delete(self, record_id: str) -> None:
        """Remove the record with ``record_id``; no-op if absent."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) != len(self._records):
            self._commit(remaining)

    def reload(self) -> None:
        """Re-read the slot, replacing the in-memory collection."""
        self._records = self._hydrate()
        self.changes.emit(self)

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped to stay unique and increasing
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return str(self._last_id)

    def _commit(self, records: list[R]) -> None:
        self._records = records
        self._persist()
        self.changes.emit(self)

    def _persist(self) -> None:
        payload = json.dumps(
            {
                "state": {self.collection: [r.to_dict() for r in self._records]},
                "version": STATE_VERSION,
            },
            ensure_ascii=False,
        )
        self._writing = True
        try:
            self._storage.write(self.slot, payload)
        except Exception as error:
            # in-memory records are kept
            logger.warning("Could not persist slot %s: %s", self.slot, error)
        finally:
            self._writing = False

    def _hydrate(self) -> list[R]:
        try:
            payload = self._storage.read(self.slot)
        except (OSError, ValueError) as error:
            logger.warning("Could not read slot %s: %s", self.slot, error)
            return []
        if payload is None:
            return []

        try:
            raw = json.loads(payload)["state"][self.collection]
            records = [self.record_type.from_dict(item) for item in raw]
        except (ValueError, KeyError, TypeError) as error:
            logger.warning("Ignoring malformed slot %s: %s", self.slot, error)
            return []

        numeric = [int(r.id) for r in records if r.id.isdigit()]
        self._last_id = max([self._last_id, *numeric])
        return records

    def _on_slot_written(self, slot: str) -> None:
        if self._writing:
            return
        logger.debug("Slot %s changed by another writer, reloading", slot)
        self.reload()


class ReservationStore(PersistedRecordStore[Reservation]):
    """Reservations in insertion order, oldest first."""

    slot = RESERVATIONS_SLOT
    collection = "reservations"
    record_type = Reservation

    _IMMUTABLE = frozenset({"id", "created_at"})

    def add(
        self,
        name: str,
        email: str,
        interests: Iterable[str],
        created_at: datetime | None = None,
    ) -> None:
        """Append a new reservation with a fresh id."""
        record = Reservation(
            id=self._next_id(),
            name=name,
            email=email,
            interests=tuple(interests),
            created_at=ensure_aware(created_at or self._clock()),
        )
        self._commit([*self._records, record])

    def update(self, record_id: str, **changes: Any) -> None:
        """
        Merge ``changes`` into the reservation with ``record_id``.

        No-op if the id is absent.

        Raises:
            ValueError: If ``changes`` touches ``id`` or ``created_at``
            TypeError: If ``changes`` names an unknown field
        """
        unknown = changes.keys() - {f.name for f in fields(Reservation)}
        if unknown:
            raise TypeError(f"Unknown reservation fields: {', '.join(sorted(unknown))}")
        touched = self._IMMUTABLE & changes.keys()
        if touched:
            raise ValueError(f"Cannot update immutable fields: {', '.join(sorted(touched))}")
        if "interests" in changes:
            changes["interests"] = tuple(changes["interests"])

        updated = False
        records = []
        for record in self._records:
            if record.id == record_id:
                record = replace(record, **changes)
                updated = True
            records.append(record)

        if updated:
            self._commit(records)


class NotificationStore(PersistedRecordStore[Notification]):
    """Admin notifications, most recent first."""

    slot = NOTIFICATIONS_SLOT
    collection = "notifications"
    record_type = Notification

    def add(
        self,
        type: str,
        title: str,
        message: str,
        is_read: bool = False,
        created_at: datetime | None = None,
    ) -> None:
        """Prepend a new notification with a fresh id."""
        record = Notification(
            id=self._next_id(),
            type=type,
            title=title,
            message=message,
            is_read=is_read,
            created_at=ensure_aware(created_at or self._clock()),
        )
        self._commit([record, *self._records])

    def mark_read(self, record_id: str) -> None:
        """Mark one notification read; idempotent."""
        self._mark(lambda n: n.id == record_id)

    def mark_all_read(self) -> None:
        """Mark every notification read; idempotent."""
        self._mark(lambda n: True)

    def get_unread(self) -> list[Notification]:
        return [n for n in self._records if not n.is_read]

    def get_unread_count(self) -> int:
        return sum(1 for n in self._records if not n.is_read)

    def _mark(self, predicate: Callable[[Notification], bool]) -> None:
        changed = False
        records: list[Notification] = []
        for notification in self._records:
            if not notification.is_read and predicate(notification):
                notification = replace(notification, is_read=True)
                changed = True
            records.append(notification)

        if changed:
            self._commit(records)

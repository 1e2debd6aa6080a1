"""
Admin dashboard view-model.

Read-only aggregation over the reservation store (statistics and
pagination) plus pass-through notification actions. Everything is
recomputed on read; changing page only re-slices the in-memory
collection.
"""

import math
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from prereg.domain.events import Unsubscribe
from prereg.domain.interests import interest_label
from prereg.domain.records import Notification, Reservation

from .stores import NotificationStore, ReservationStore

PAGE_SIZE = 10
NO_INTEREST = "N/A"


@dataclass(frozen=True)
class DashboardStats:
    total: int
    this_week: int
    most_popular_interest: str


def calculate_stats(reservations: tuple[Reservation, ...], now: datetime) -> DashboardStats:
    """
    Totals for the dashboard header.

    ``this_week`` counts records created strictly after ``now`` - 7 days.
    Ties for the most popular interest go to the interest seen first.
    """
    week_ago = now - timedelta(days=7)
    this_week = sum(1 for r in reservations if r.created_at > week_ago)

    counts = Counter(interest for r in reservations for interest in r.interests)
    # max() keeps the first maximal key, and Counter preserves first-seen order
    most_popular = max(counts, key=counts.__getitem__) if counts else NO_INTEREST

    return DashboardStats(total=len(reservations), this_week=this_week, most_popular_interest=most_popular)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class AdminDashboard:
    """View-model behind the admin page."""

    def __init__(
        self,
        reservations: ReservationStore,
        notifications: NotificationStore,
        page_size: int = PAGE_SIZE,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._reservations = reservations
        self._notifications = notifications
        self.page_size = page_size
        self._clock = clock
        self._current_page = 1

    # Reservations

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return self._reservations.records

    @property
    def stats(self) -> DashboardStats:
        return calculate_stats(self._reservations.records, self._clock())

    # Pagination

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self._reservations) / self.page_size)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def has_previous(self) -> bool:
        return self._current_page > 1

    @property
    def has_next(self) -> bool:
        return self._current_page < self.total_pages

    @property
    def paginated_reservations(self) -> tuple[Reservation, ...]:
        start = (self._current_page - 1) * self.page_size
        return self._reservations.records[start : start + self.page_size]

    def go_to_page(self, page: int) -> None:
        """Select ``page`` (1-based), clamped to the available pages."""
        self._current_page = min(max(page, 1), max(self.total_pages, 1))

    def next_page(self) -> None:
        if self.has_next:
            self._current_page += 1

    def previous_page(self) -> None:
        if self.has_previous:
            self._current_page -= 1

    # Notifications

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return self._notifications.records

    @property
    def unread_notifications(self) -> list[Notification]:
        return self._notifications.get_unread()

    @property
    def unread_count(self) -> int:
        return self._notifications.get_unread_count()

    def mark_notification_read(self, notification_id: str) -> None:
        self._notifications.mark_read(notification_id)

    def mark_all_read(self) -> None:
        self._notifications.mark_all_read()

    # Utilities

    @staticmethod
    def interest_label(interest_id: str) -> str:
        return interest_label(interest_id)

    def watch(self, callback: Callable[[], None]) -> Unsubscribe:
        """Call ``callback()`` whenever either store changes."""
        unsubscribers = [
            self._reservations.changes.subscribe(lambda _store: callback()),
            self._notifications.changes.subscribe(lambda _store: callback()),
        ]

        def unsubscribe() -> None:
            for unsub in unsubscribers:
                unsub()

        return unsubscribe

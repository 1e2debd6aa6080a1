"""
Change events - Minimal publish/subscribe primitive.

Each store (and each storage slot) owns its own emitter; there is no
global event bus. Consumers subscribe at setup and call the returned
function (or leave the ``subscription`` block) at teardown.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


class ChangeEmitter:
    """Synchronous in-process event emitter."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[..., None]] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[..., None]) -> Unsubscribe:
        """Register ``callback``; the returned function removes it (idempotent)."""
        self._subscribers.append(callback)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if active:
                active = False
                self._subscribers.remove(callback)

        return unsubscribe

    @contextmanager
    def subscription(self, callback: Callable[..., None]) -> Iterator[None]:
        """Keep ``callback`` subscribed for the duration of the block."""
        unsubscribe = self.subscribe(callback)
        try:
            yield
        finally:
            unsubscribe()

    def emit(self, *args: Any) -> None:
        """
        Call every subscriber with ``args``.

        A failing subscriber is logged and does not prevent the others
        from being called.
        """
        for callback in list(self._subscribers):
            try:
                callback(*args)
            except Exception:
                logger.exception("Change subscriber %r failed", callback)

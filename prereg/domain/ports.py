"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain and the client
state layer require from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .emails import OutgoingEmail


@dataclass(frozen=True)
class SubmissionResponse:
    """
    HTTP response of the registration endpoint as seen by the client.

    ``body`` is None when the response body was not parseable JSON.
    """

    status_code: int
    body: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send(self, email: OutgoingEmail) -> None:
        """
        Deliver a single email.

        Args:
            email: Fully rendered message (recipient, subject, bodies)

        Raises:
            EmailDeliveryError: If the message could not be handed off
        """
        ...


class SlotStorage(Protocol):
    """
    Port interface for durable named slots.

    Each slot holds one serialized collection. Writers replace the whole
    payload; there are no partial writes and no transactions.
    """

    def read(self, slot: str) -> str | None:
        """Return the stored payload, or None if the slot was never written."""
        ...

    def write(self, slot: str, payload: str) -> None:
        """
        Replace the slot payload and notify watchers of the slot.

        Raises:
            OSError: If the payload could not be stored
        """
        ...

    def watch(self, slot: str, callback: Callable[[str], None]) -> Callable[[], None]:
        """
        Call ``callback(slot)`` after every successful write to ``slot``.

        Returns:
            A function that removes the watch
        """
        ...


class RegistrationClient(Protocol):
    """Port interface for the remote registration endpoint."""

    async def submit(self, payload: dict[str, Any]) -> SubmissionResponse:
        """
        Send a validated registration payload.

        Raises:
            SubmissionNetworkError: If the request never completed
        """
        ...


class Scheduler(Protocol):
    """Port interface for fixed-delay callbacks (no cancellation)."""

    def call_later(self, delay: float, callback: Callable[..., None], *args: Any) -> None:
        """Run ``callback(*args)`` once, ``delay`` seconds from now."""
        ...


class Navigator(Protocol):
    """Port interface for moving the UI to another view."""

    def push(self, path: str) -> None:
        """Navigate to ``path``."""
        ...

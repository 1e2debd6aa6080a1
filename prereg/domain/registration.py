"""
Reservation domain service - Pre-registration email workflow.

This module contains the server-side business logic for accepting a
pre-registration: the submitter always receives a confirmation email,
and the administrator receives a best-effort notification.

Delivery Rules
==============

1. Confirmation email to the submitter is mandatory. Any delivery failure
   propagates as EmailDeliveryError and fails the request.
2. Admin notification is best-effort. Failures are logged and swallowed.
3. No admin address configured means no admin notification is attempted.

Nothing is persisted server-side; the client keeps its own records.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from .emails import build_admin_notification, build_confirmation_email
from .exceptions import EmailDeliveryError
from .ports import EmailSender

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class ReservationService:
    """
    Domain service for pre-registration.

    Orchestrates the delivery of the confirmation and admin emails.
    """

    email_sender: EmailSender
    admin_email: str = ""
    clock: Callable[[], datetime] = field(default=_local_now)

    def register(self, name: str, email: str, interests: Sequence[str]) -> None:
        """
        Accept a validated pre-registration.

        Args:
            name: Submitter's display name
            email: Submitter's email address
            interests: Selected interest ids

        Raises:
            EmailDeliveryError: If the confirmation email could not be sent
            EmailNotConfigured: If email delivery is not configured
        """
        self.email_sender.send(build_confirmation_email(email, name, interests))
        logger.info("Confirmation email sent to %s", email)

        self._notify_admin(name, email, interests)

    def _notify_admin(self, name: str, email: str, interests: Sequence[str]) -> None:
        """Send the admin notification, logging instead of raising on failure."""
        if not self.admin_email:
            logger.info("No admin email configured, skipping admin notification")
            return

        notification = build_admin_notification(
            self.admin_email, name, email, interests, submitted_at=self.clock()
        )
        try:
            self.email_sender.send(notification)
        except EmailDeliveryError as error:
            logger.warning("Admin notification for %s failed: %s", email, error)

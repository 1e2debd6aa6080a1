"""
Domain layer - Pure business logic with zero framework imports.

This package contains the records, ports, exceptions and the server-side
reservation service. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .emails import OutgoingEmail, build_admin_notification, build_confirmation_email
from .events import ChangeEmitter
from .exceptions import (
    EmailDeliveryError,
    EmailNotConfigured,
    ReservationError,
    SubmissionNetworkError,
)
from .interests import INTEREST_OPTIONS, interest_label
from .ports import (
    EmailSender,
    Navigator,
    RegistrationClient,
    Scheduler,
    SlotStorage,
    SubmissionResponse,
)
from .records import NEW_REGISTRATION, Notification, Reservation
from .registration import ReservationService

__all__ = [
    "INTEREST_OPTIONS",
    "NEW_REGISTRATION",
    "ChangeEmitter",
    "EmailDeliveryError",
    "EmailNotConfigured",
    "EmailSender",
    "Navigator",
    "Notification",
    "OutgoingEmail",
    "RegistrationClient",
    "Reservation",
    "ReservationError",
    "ReservationService",
    "Scheduler",
    "SlotStorage",
    "SubmissionNetworkError",
    "SubmissionResponse",
    "build_admin_notification",
    "build_confirmation_email",
    "interest_label",
]

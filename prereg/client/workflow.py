"""
Registration submission workflow.

Orchestrates one form submission: validate, call the registration
endpoint, record the reservation and admin notification locally, show
banner feedback and navigate to the confirmation view.

Any failure leaves both record stores untouched and does not navigate.
The submitting flag is cleared on every exit path.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from prereg.domain.events import ChangeEmitter
from prereg.domain.exceptions import SubmissionNetworkError
from prereg.domain.ports import Navigator, RegistrationClient, Scheduler, SubmissionResponse
from prereg.domain.records import NEW_REGISTRATION
from prereg.schemas import ReservationForm, validate_reservation

from .banner import BannerStore
from .stores import NotificationStore, ReservationStore

logger = logging.getLogger(__name__)

CONFIRMATION_PATH = "/confirmation"
NAVIGATION_DELAY_SECONDS = 0.5

DEFAULT_SERVER_ERROR = "A server error occurred"
CLIENT_ERROR_FALLBACK = "There was a problem with the request"
SERVER_ERROR_FALLBACK = "The server ran into a problem"


class SubmissionOutcome(str, Enum):
    SUCCESS = "success"
    INVALID = "invalid"
    REJECTED = "rejected"
    NETWORK_ERROR = "network_error"
    UNEXPECTED_ERROR = "unexpected_error"
    BUSY = "busy"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: SubmissionOutcome
    field_errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is SubmissionOutcome.SUCCESS


@dataclass
class RegistrationForm:
    """Draft values of the registration form."""

    name: str = ""
    email: str = ""
    interests: list[str] = field(default_factory=list)

    def toggle_interest(self, interest_id: str, checked: bool) -> None:
        if checked:
            if interest_id not in self.interests:
                self.interests.append(interest_id)
        else:
            self.interests = [i for i in self.interests if i != interest_id]

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.interests = []

    def to_payload(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email, "interests": list(self.interests)}


def error_message_for(response: SubmissionResponse) -> str:
    """
    User-facing message for a non-success response.

    Prefers the server's ``error`` then ``message`` field; falls back to a
    message keyed by status class when the body was not parseable.
    """
    if response.body is not None:
        for key in ("error", "message"):
            value = response.body.get(key)
            if isinstance(value, str) and value:
                return value
        return DEFAULT_SERVER_ERROR
    if 400 <= response.status_code < 500:
        return CLIENT_ERROR_FALLBACK
    if response.status_code >= 500:
        return SERVER_ERROR_FALLBACK
    return DEFAULT_SERVER_ERROR


def _local_now() -> datetime:
    return datetime.now().astimezone()


class RegistrationWorkflow:
    """Submits the registration form and applies its effects."""

    def __init__(
        self,
        client: RegistrationClient,
        reservations: ReservationStore,
        notifications: NotificationStore,
        banner: BannerStore,
        navigator: Navigator,
        scheduler: Scheduler,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._client = client
        self._reservations = reservations
        self._notifications = notifications
        self._banner = banner
        self._navigator = navigator
        self._scheduler = scheduler
        self._clock = clock
        self._submitting = False
        self.changes = ChangeEmitter()

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def validate(self, form: RegistrationForm) -> tuple[ReservationForm | None, dict[str, str]]:
        """Validate ``form``; errors are reduced to one message per field."""
        data, errors = validate_reservation(form.to_payload())
        return data, {name: messages[0] for name, messages in errors.items()}

    async def submit(self, form: RegistrationForm) -> SubmissionResult:
        """
        Submit ``form``.

        Never raises: every failure is reported through the banner and
        the returned SubmissionResult.
        """
        if self._submitting:
            return SubmissionResult(SubmissionOutcome.BUSY)

        data, errors = self.validate(form)
        if data is None:
            return SubmissionResult(SubmissionOutcome.INVALID, field_errors=errors)

        self._set_submitting(True)
        try:
            response = await self._client.submit(data.model_dump())

            if not response.ok:
                message = error_message_for(response)
                logger.warning("Registration rejected (%s): %s", response.status_code, message)
                self._banner.show_error("Registration failed", message)
                return SubmissionResult(SubmissionOutcome.REJECTED, message=message)

            self._record(data)
            self._banner.show_success("Registration complete!", "Please check your confirmation email")
            form.reset()
            self._scheduler.call_later(NAVIGATION_DELAY_SECONDS, self._navigator.push, CONFIRMATION_PATH)
            return SubmissionResult(SubmissionOutcome.SUCCESS)

        except SubmissionNetworkError as error:
            logger.warning("Registration request did not reach the server: %s", error)
            message = "Please check your internet connection"
            self._banner.show_error("Network error", message)
            return SubmissionResult(SubmissionOutcome.NETWORK_ERROR, message=message)

        except Exception:
            logger.exception("Unexpected error during registration submission")
            message = "Please try again later"
            self._banner.show_error("Unexpected error", message)
            return SubmissionResult(SubmissionOutcome.UNEXPECTED_ERROR, message=message)

        finally:
            self._set_submitting(False)

    def _record(self, data: ReservationForm) -> None:
        now = self._clock()
        self._reservations.add(
            name=data.name,
            email=data.email,
            interests=data.interests,
            created_at=now,
        )
        self._notifications.add(
            type=NEW_REGISTRATION,
            title="New registration",
            message=f"{data.name} registered",
            is_read=False,
            created_at=now,
        )

    def _set_submitting(self, value: bool) -> None:
        self._submitting = value
        self.changes.emit(value)

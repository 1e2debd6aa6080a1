"""
Domain exceptions - Semantic error types for pre-registration.

This module defines domain-specific exceptions that communicate
delivery and submission failures without leaking infrastructure details.
"""


class ReservationError(Exception):
    """Base class for reservation domain errors."""

    pass


class EmailNotConfigured(ReservationError):
    """Email delivery is selected but missing required settings."""

    pass


class EmailDeliveryError(ReservationError):
    """The confirmation email could not be delivered."""

    pass


class SubmissionNetworkError(ReservationError):
    """The registration request never reached the server."""

    pass

"""HTTP client adapters."""

from .client import RESERVATION_PATH, HttpRegistrationClient

__all__ = ["RESERVATION_PATH", "HttpRegistrationClient"]

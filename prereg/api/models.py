"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
The request body model is the shared ReservationForm schema.
"""

from pydantic import BaseModel

from prereg.schemas import ReservationForm


class ReservationData(BaseModel):
    """Echo of the accepted registration."""

    name: str
    email: str
    interests: list[str]


class ReservationResponse(BaseModel):
    """Response model for a successful registration."""

    message: str
    data: ReservationData


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    details: dict[str, list[str]] | str | None = None


__all__ = ["ErrorResponse", "ReservationData", "ReservationForm", "ReservationResponse"]

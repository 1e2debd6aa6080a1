"""
API routes - Pre-registration endpoint.

Defines the REST endpoint:
- POST /api/reservation - Accept a registration and send emails
"""

import logging

from fastapi import APIRouter, Depends, status

from prereg.api.dependencies import get_reservation_service
from prereg.api.errors import error_response
from prereg.api.models import ErrorResponse, ReservationData, ReservationResponse
from prereg.config.settings import Settings, get_settings
from prereg.domain.exceptions import EmailDeliveryError, EmailNotConfigured
from prereg.domain.registration import ReservationService
from prereg.schemas import ReservationForm

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reservation"])

DELIVERY_FAILED = "Failed to send confirmation email"


def _delivery_failed(error: Exception, settings: Settings):
    # Error text is only exposed to development clients
    details = str(error) if settings.is_development else None
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, DELIVERY_FAILED, details)


@router.post(
    "/reservation",
    response_model=ReservationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        500: {"model": ErrorResponse, "description": "Email delivery failed or not configured"},
    },
    summary="Submit a pre-registration",
    description="Validate the registration and send a confirmation email to the submitter. "
    "The administrator is notified on a best-effort basis.",
)
def create_reservation(
    request_data: ReservationForm,
    service: ReservationService = Depends(get_reservation_service),
    settings: Settings = Depends(get_settings),
):
    """
    Accept a pre-registration.

    - **name**: 2 to 50 characters
    - **email**: Valid email address
    - **interests**: At least one interest id
    """
    try:
        service.register(request_data.name, request_data.email, request_data.interests)
    except EmailNotConfigured as error:
        logger.error("Email delivery is not configured: %s", error)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Email delivery is not configured")
    except EmailDeliveryError as error:
        logger.error("Confirmation email to %s failed: %s", request_data.email, error)
        return _delivery_failed(error, settings)
    except Exception as error:
        logger.exception("Unexpected error while handling reservation")
        return _delivery_failed(error, settings)

    logger.info("Reservation accepted for %s", request_data.email)
    return ReservationResponse(
        message="Reservation successful and confirmation email sent",
        data=ReservationData(
            name=request_data.name,
            email=request_data.email,
            interests=request_data.interests,
        ),
    )

"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends

from prereg.adapters.smtp.console import ConsoleEmailSender
from prereg.adapters.smtp.smtp import SmtpEmailSender
from prereg.config.settings import Settings, get_settings
from prereg.domain.ports import EmailSender
from prereg.domain.registration import ReservationService

# Module-level singleton - ConsoleEmailSender is stateless
_console_sender = ConsoleEmailSender()


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    """
    Select the email sender from settings.

    ``email_backend="smtp"`` delivers through the configured relay;
    anything else logs emails to the console.
    """
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            mail_from=settings.mail_from,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )
    return _console_sender


def get_reservation_service(
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> ReservationService:
    """
    Create reservation service with injected dependencies.

    Wires together the email sender and admin address for the domain service.
    """
    return ReservationService(email_sender=email_sender, admin_email=settings.admin_email)

"""
Unit tests for ReservationService domain logic.

Tests domain logic with a mocked EmailSender to verify:
- Confirmation email is always sent and failures propagate
- Admin notification is best-effort
- No admin address means no admin email
"""

import logging
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from prereg.domain.emails import OutgoingEmail
from prereg.domain.exceptions import EmailDeliveryError, EmailNotConfigured
from prereg.domain.registration import ReservationService

SUBMITTED_AT = datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc)


def make_service(sender: Mock, admin_email: str = "admin@example.com") -> ReservationService:
    return ReservationService(email_sender=sender, admin_email=admin_email, clock=lambda: SUBMITTED_AT)


def sent(sender: Mock) -> list[OutgoingEmail]:
    return [call.args[0] for call in sender.send.call_args_list]


class TestConfirmationEmail:
    """Tests for the mandatory confirmation email."""

    def test_confirmation_sent_to_submitter(self) -> None:
        """The first email goes to the registrant."""
        sender = Mock()

        make_service(sender).register("Taro", "taro@example.com", ["habit"])

        confirmation = sent(sender)[0]
        assert confirmation.to == "taro@example.com"
        assert "Taro" in confirmation.text

    def test_confirmation_failure_propagates(self) -> None:
        """EmailDeliveryError on the confirmation fails the registration."""
        sender = Mock()
        sender.send.side_effect = EmailDeliveryError("relay down")

        with pytest.raises(EmailDeliveryError):
            make_service(sender).register("Taro", "taro@example.com", ["habit"])

        assert sender.send.call_count == 1

    def test_not_configured_propagates(self) -> None:
        """Missing email configuration is not swallowed."""
        sender = Mock()
        sender.send.side_effect = EmailNotConfigured("no host")

        with pytest.raises(EmailNotConfigured):
            make_service(sender).register("Taro", "taro@example.com", ["habit"])


class TestAdminNotification:
    """Tests for the best-effort admin notification."""

    def test_admin_notified_after_confirmation(self) -> None:
        """Two emails: submitter first, then admin."""
        sender = Mock()

        make_service(sender).register("Taro", "taro@example.com", ["habit", "work"])

        assert [email.to for email in sent(sender)] == ["taro@example.com", "admin@example.com"]
        admin = sent(sender)[1]
        assert "taro@example.com" in admin.text
        assert "2025-01-01 09:30:00" in admin.text

    def test_admin_failure_is_swallowed(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing admin email is logged at WARNING and registration succeeds."""
        sender = Mock()
        sender.send.side_effect = [None, EmailDeliveryError("mailbox full")]

        with caplog.at_level(logging.WARNING):
            make_service(sender).register("Taro", "taro@example.com", ["habit"])

        assert sender.send.call_count == 2
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "mailbox full" in warnings[0].getMessage()

    def test_no_admin_email_skips_notification(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without an admin address only the confirmation is sent."""
        sender = Mock()

        with caplog.at_level(logging.INFO):
            make_service(sender, admin_email="").register("Taro", "taro@example.com", ["habit"])

        assert [email.to for email in sent(sender)] == ["taro@example.com"]
        assert "skipping admin notification" in caplog.text

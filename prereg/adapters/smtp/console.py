"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging outgoing emails for demo purposes.
"""

import logging

from prereg.domain.emails import OutgoingEmail

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - logs recipient, subject and text body.
    """

    def send(self, email: OutgoingEmail) -> None:
        """
        Log the email to console (simulates email delivery).

        In production, this is replaced with SmtpEmailSender.
        The message is logged at INFO level to be visible in server logs.

        Args:
            email: Rendered message
        """
        logger.info("[EMAIL] To: %s Subject: %s\n%s", email.to, email.subject, email.text)

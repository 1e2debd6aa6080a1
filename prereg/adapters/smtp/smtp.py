"""
SMTP email sender adapter - Implements EmailSender protocol.

Sends multipart (plain text + HTML) messages through an SMTP relay.
Every transport failure is reported as EmailDeliveryError so the domain
never sees smtplib exceptions.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from prereg.domain.emails import OutgoingEmail
from prereg.domain.exceptions import EmailDeliveryError, EmailNotConfigured

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """Implements EmailSender protocol via smtplib."""

    def __init__(
        self,
        host: str,
        port: int,
        mail_from: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.mail_from = mail_from
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def build_message(self, email: OutgoingEmail) -> MIMEMultipart:
        """Render the multipart/alternative message for ``email``."""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = email.subject
        msg["From"] = self.mail_from
        msg["To"] = email.to
        msg.attach(MIMEText(email.text, "plain", "utf-8"))
        msg.attach(MIMEText(email.html, "html", "utf-8"))
        return msg

    def send(self, email: OutgoingEmail) -> None:
        """
        Deliver ``email`` through the configured relay.

        Raises:
            EmailNotConfigured: If no host or sender address is set
            EmailDeliveryError: On any SMTP or socket failure
        """
        if not self.host or not self.mail_from:
            raise EmailNotConfigured("SMTP host and sender address are required")

        msg = self.build_message(email)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.sendmail(self.mail_from, [email.to], msg.as_string())
        except (smtplib.SMTPException, OSError) as error:
            logger.error("Failed to send email to %s: %s", email.to, error)
            raise EmailDeliveryError(str(error)) from error

        logger.info("Email sent to %s: %s", email.to, email.subject)

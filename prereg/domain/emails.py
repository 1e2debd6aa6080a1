"""
Email templates - Confirmation and admin notification messages.

Both templates render an HTML body and a plain-text alternative.
User-supplied values are HTML-escaped in the HTML body.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from html import escape

from .interests import interest_label

PRODUCT_NAME = "Mokumoku React"


@dataclass(frozen=True)
class OutgoingEmail:
    """A rendered email ready for delivery."""

    to: str
    subject: str
    html: str
    text: str


def build_confirmation_email(to: str, name: str, interests: Sequence[str]) -> OutgoingEmail:
    """Confirmation sent to the person who registered."""
    labels = [interest_label(i) for i in interests]

    text = "\n".join(
        [
            f"Hello, {name}!",
            "",
            f"Your pre-registration for {PRODUCT_NAME} is complete.",
            "At launch you will get early access to:",
            "",
            *(f"- {label}" for label in labels),
            "",
            "We will be in touch again as the launch date approaches.",
        ]
    )

    features = "".join(
        f'<div class="feature"><strong>&#10003; {escape(label)}</strong></div>' for label in labels
    )
    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Registration confirmed</title></head>
<body>
  <div class="container">
    <div class="header">
      <h1>{PRODUCT_NAME}</h1>
      <p>Thank you for pre-registering!</p>
    </div>
    <div class="content">
      <h2>Hello, {escape(name)}!</h2>
      <p>Your pre-registration is complete. At launch you will get early access to:</p>
      {features}
      <p>We will be in touch again as the launch date approaches.</p>
    </div>
  </div>
</body>
</html>
"""
    return OutgoingEmail(
        to=to,
        subject=f"[{PRODUCT_NAME}] Pre-registration confirmed",
        html=html,
        text=text,
    )


def build_admin_notification(
    to: str,
    name: str,
    email: str,
    interests: Sequence[str],
    submitted_at: datetime,
) -> OutgoingEmail:
    """Notification sent to the administrator for every new registration."""
    labels = [interest_label(i) for i in interests]
    timestamp = submitted_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()

    text = "\n".join(
        [
            f"{PRODUCT_NAME} - New pre-registration",
            "",
            "Registrant:",
            f"Name: {name}",
            f"Email: {email}",
            f"Registered at: {timestamp}",
            "",
            "Interests:",
            *((f"- {label}" for label in labels) if labels else ["None selected"]),
        ]
    )

    interest_html = "".join(f"<p>&bull; {escape(label)}</p>" for label in labels) or "<p>None selected</p>"
    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body>
  <div class="container">
    <div class="header"><h2>{PRODUCT_NAME} - New pre-registration</h2></div>
    <div class="content">
      <div class="info-box">
        <h3>Registrant</h3>
        <p><strong>Name:</strong> {escape(name)}</p>
        <p><strong>Email:</strong> {escape(email)}</p>
        <p><strong>Registered at:</strong> {timestamp}</p>
      </div>
      <div class="info-box">
        <h3>Interests</h3>
        {interest_html}
      </div>
    </div>
  </div>
</body>
</html>
"""
    return OutgoingEmail(
        to=to,
        subject=f"[{PRODUCT_NAME}] New pre-registration: {name}",
        html=html,
        text=text,
    )

"""Notification service — e-mails the admin team when a suggestion is submitted.

Sending is best-effort: a disabled configuration or any delivery failure is
logged and never reaches the caller.
"""

from datetime import datetime
from html import escape

import pytz
import structlog

from suggestion_box.config import get_settings
from suggestion_box.domain.schemas.suggestion import SuggestionNotification
from suggestion_box.infrastructure.brevo_api import BrevoAPIClient

settings = get_settings()
logger = structlog.get_logger(__name__)

BREVO_KEY_PREFIX = "xkeysib-"


def notifications_enabled() -> bool:
    """Check the e-mail configuration, logging why notifications are off."""
    if not settings.BREVO_API_KEY:
        logger.info("Email notifications disabled: BREVO_API_KEY not set")
        return False
    if not settings.BREVO_API_KEY.startswith(BREVO_KEY_PREFIX):
        logger.error("Invalid BREVO_API_KEY format", expected_prefix=BREVO_KEY_PREFIX)
        return False
    if not settings.ADMIN_NOTIFICATION_EMAIL:
        logger.info("Email notifications disabled: ADMIN_NOTIFICATION_EMAIL not set")
        return False
    if not settings.SENDER_EMAIL:
        logger.info("Email notifications disabled: SENDER_EMAIL not set")
        return False
    return True


def format_suggestion_email(notification: SuggestionNotification) -> str:
    """Render the HTML body of the new-suggestion e-mail."""
    tz = pytz.timezone(settings.TIMEZONE)
    received_at = datetime.now(tz).strftime("%d/%m/%Y %H:%M %Z")
    submitter = "Anonymous" if notification.is_anonymous else escape(notification.submitted_by)
    submission_type = "Anonymous" if notification.is_anonymous else "Identified"
    app_name = escape(settings.SENDER_NAME)

    rows = [
        ("Category", escape(notification.category)),
        ("Submitted By", submitter),
        ("Submission Type", submission_type),
        ("Received", received_at),
    ]
    table = "\n".join(
        f'<tr><td style="padding: 10px; background-color: #f0f0f0;"><strong>{label}:</strong></td>'
        f'<td style="padding: 10px; background-color: #f9f9f9;">{value}</td></tr>'
        for label, value in rows
    )

    return f"""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>New Suggestion</title></head>
  <body style="margin: 0; padding: 0; font-family: Arial, sans-serif; background-color: #f4f4f4;">
    <h1 style="margin: 0; padding: 20px 0; text-align: center; color: #ffffff; background-color: #4bdcf5;">{app_name}</h1>
    <div style="max-width: 600px; margin: 20px auto; background-color: #ffffff; padding: 20px;">
      <h2 style="margin: 0 0 10px 0; color: #333333;">New Suggestion Received</h2>
      <p style="color: #666666;">A new suggestion has been submitted to the {app_name}.</p>
      <div style="background-color: #f9f9f9; border-left: 4px solid #4bdcf5; padding: 15px; margin-bottom: 20px;">
        <h3 style="margin: 0 0 10px 0; color: #333333;">{escape(notification.title)}</h3>
        <p style="margin: 0; color: #666666; white-space: pre-wrap;">{escape(notification.content)}</p>
      </div>
      <table role="presentation" style="width: 100%; border-collapse: collapse;">
{table}
      </table>
      <p style="margin-top: 20px; color: #999999; font-size: 12px; text-align: center;">
        This is an automated notification from {app_name}.
      </p>
    </div>
  </body>
</html>
"""


async def send_suggestion_notification(notification: SuggestionNotification) -> bool:
    """Notify the admin team; returns whether the e-mail was accepted."""
    try:
        if not notifications_enabled():
            return False

        client = BrevoAPIClient()
        await client.send_email(
            subject=f"New Suggestion: {notification.title}",
            html_content=format_suggestion_email(notification),
            to_email=settings.ADMIN_NOTIFICATION_EMAIL,
            to_name="Admin Team",
            sender_email=settings.SENDER_EMAIL,
            sender_name=settings.SENDER_NAME,
        )
        logger.info("Suggestion notification email sent", title=notification.title)
        return True
    except Exception:
        # Delivery is not part of the submission's success criteria
        logger.exception("Error sending suggestion notification email", title=notification.title)
        return False

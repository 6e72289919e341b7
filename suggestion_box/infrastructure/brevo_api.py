"""Brevo transactional e-mail HTTP client.

Retries transient failures (connection errors, 429 and 5xx) with a linear
backoff; other HTTP errors are raised immediately.
"""

import asyncio
from typing import Optional

import httpx
import structlog

from suggestion_box.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)

RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


class BrevoAPIError(Exception):
    """Raised when an e-mail could not be handed to Brevo."""


class BrevoAPIClient:
    """Client for the Brevo ``/smtp/email`` endpoint."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.base_url = (base_url or settings.BREVO_API_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.BREVO_API_KEY
        self.headers = {
            "api-key": self.api_key,
            "accept": "application/json",
            "content-type": "application/json",
        }
        self.max_retries = 3
        self.retry_delay = 2  # seconds
        self.timeout = 15

    async def send_email(
        self,
        subject: str,
        html_content: str,
        to_email: str,
        to_name: str,
        sender_email: str,
        sender_name: str,
    ) -> dict:
        """Send a transactional e-mail, returning Brevo's response body."""
        url = f"{self.base_url}/smtp/email"
        payload = {
            "sender": {"name": sender_name, "email": sender_email},
            "to": [{"email": to_email, "name": to_name}],
            "replyTo": {"email": sender_email, "name": sender_name},
            "subject": subject,
            "htmlContent": html_content,
        }

        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(url, json=payload, headers=self.headers)
                    response.raise_for_status()
                    logger.info("E-mail accepted by Brevo", to=to_email, attempt=attempt)
                    return response.json()
            except httpx.HTTPStatusError as e:
                last_error = e
                logger.warning(
                    "Brevo API error",
                    attempt=attempt,
                    max_retries=self.max_retries,
                    status_code=e.response.status_code,
                    body=e.response.text[:200],
                )
                if e.response.status_code not in RETRYABLE_STATUS_CODES:
                    break
            except httpx.HTTPError as e:
                last_error = e
                logger.warning("Brevo connection error", attempt=attempt, max_retries=self.max_retries, error=str(e))

            if attempt < self.max_retries:
                await asyncio.sleep(self.retry_delay * attempt)

        raise BrevoAPIError(f"Failed to send e-mail after {attempt} attempt(s): {last_error}")

"""Resend HTTP client for outbound no-reply email.

Delivery failures are logged and reported as ``False``; callers never see an
exception from here.
"""

from typing import Optional, Sequence, Union

import httpx
import structlog

from stagecrew.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)

REQUEST_TIMEOUT = 10.0  # seconds


class ResendClient:
    """Minimal client for the Resend ``/emails`` endpoint."""

    def __init__(self):
        self.api_url = settings.RESEND_API_URL
        self.api_key = settings.RESEND_API_KEY
        self.sender = settings.EMAIL_FROM
        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _recipients(self, to: Union[str, Sequence[str]]) -> list[str]:
        recipients = [to] if isinstance(to, str) else list(to)
        if settings.ENVIRONMENT == "development" and settings.EMAIL_TEST_OVERRIDE:
            logger.info("Dev recipient override", original=recipients, override=settings.EMAIL_TEST_OVERRIDE)
            return [settings.EMAIL_TEST_OVERRIDE]
        return recipients

    async def send(
        self,
        to: Union[str, Sequence[str]],
        subject: str,
        html: str,
        text: Optional[str] = None,
    ) -> bool:
        if not self.configured:
            logger.warning("RESEND_API_KEY not configured, email not sent", subject=subject, to=to)
            return False

        payload = {
            "from": self.sender,
            "to": self._recipients(to),
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text

        try:
            async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
                response = await client.post(self.api_url, json=payload, headers=self.headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Resend rejected email", status_code=e.response.status_code, body=e.response.text)
            return False
        except httpx.HTTPError as e:
            logger.error("Resend request failed", error=str(e))
            return False

        logger.info("Email sent", subject=subject, status_code=response.status_code)
        return True


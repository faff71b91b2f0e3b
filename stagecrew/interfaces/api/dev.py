"""Development-only routes."""

from typing import Optional

from fastapi import APIRouter, Query

from stagecrew.config import get_settings
from stagecrew.core.exceptions import ForbiddenException
from stagecrew.infrastructure.email import ResendClient

settings = get_settings()
router = APIRouter(prefix="/api", tags=["Dev"])

TEST_RECIPIENT = "delivered@resend.dev"


@router.get("/test-email")
async def test_email(to: Optional[str] = Query(None)):
    """Send a probe email to check the Resend configuration."""
    if settings.ENVIRONMENT != "development":
        raise ForbiddenException("Development only")

    recipient = to or TEST_RECIPIENT
    client = ResendClient()
    sent = await client.send(
        to=recipient,
        subject="Test Teatri Apuani",
        html="<p>Se ricevi questa email, Resend è configurato correttamente.</p>",
        text="Se ricevi questa email, Resend è configurato correttamente.",
    )

    return {
        "sent": sent,
        "has_api_key": client.configured,
        "to": recipient,
        "message": "Email sent. Check the inbox (and spam)." if sent else "Delivery failed. Check the server logs.",
    }

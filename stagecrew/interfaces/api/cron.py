"""Cron API routes — called by the hosting platform's scheduler.

Nothing here retries: the external scheduler calls again on its next tick.
"""

import hmac
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from stagecrew.application.services import notification_service
from stagecrew.config import get_settings
from stagecrew.core.exceptions import ServerErrorException, UnauthorizedException, server_errors
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.schemas.notification import MissingHoursRunResult
from stagecrew.infrastructure.database import get_db, ping
from stagecrew.interfaces.deps import (
    get_assignment_repository,
    get_notification_repository,
    get_user_repository,
)

settings = get_settings()
logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/cron", tags=["Cron"])


def _bearer_matches(request: Request, secret: str) -> bool:
    header = request.headers.get("authorization") or ""
    return hmac.compare_digest(header.encode(), f"Bearer {secret}".encode())


@router.get("/keep-warm")
def keep_warm(
    request: Request,
    secret: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Keep the database connection warm between real requests."""
    expected = settings.CRON_SECRET
    if not expected:
        raise UnauthorizedException()

    query_ok = secret is not None and hmac.compare_digest(secret.encode(), expected.encode())
    if not (_bearer_matches(request, expected) or query_ok):
        raise UnauthorizedException()

    try:
        ping(db)
    except Exception as e:
        logger.error("Keep-warm DB ping failed", error=str(e))
        raise ServerErrorException("DB ping failed", details=str(e)) from e

    return {"ok": True, "status": "warm"}


@router.get("/notify-missing-hours", response_model=MissingHoursRunResult)
def notify_missing_hours(
    request: Request,
    assignments: AssignmentRepository = Depends(get_assignment_repository),
    users: UserRepository = Depends(get_user_repository),
    repo: NotificationRepository = Depends(get_notification_repository),
):
    """Daily reminder run for workers who have not entered their hours."""
    if settings.CRON_SECRET and not _bearer_matches(request, settings.CRON_SECRET):
        raise UnauthorizedException()

    with server_errors("Cron failed"):
        created = notification_service.create_missing_hours_reminders(assignments, users, repo)
    return MissingHoursRunResult(created=created, users_notified=created)

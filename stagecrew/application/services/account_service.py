"""Account service — lockouts, uniqueness checks and the caller's own profile."""

from datetime import datetime, timezone
from typing import List, Optional

import structlog

from stagecrew.application.services import notification_service
from stagecrew.application.services.formatting import format_area_duties
from stagecrew.core.exceptions import BadRequestException, EntityNotFoundException
from stagecrew.domain.models.user import User
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.schemas.user import AreaMembership, CompanyRef, LockedAccount, UserProfile

logger = structlog.get_logger(__name__)

UNIQUE_FIELDS = ("email", "fiscal_code")


def list_locked_accounts(repo: UserRepository, now: Optional[datetime] = None) -> List[LockedAccount]:
    now = now or datetime.now(timezone.utc)
    return [
        LockedAccount(
            id=u.id,
            email=u.email,
            name=u.name,
            surname=u.surname,
            code=u.code,
            locked_until=u.locked_until,
            failed_login_attempts=u.failed_login_attempts or 0,
        )
        for u in repo.list_locked(now)
    ]


def unlock_account(
    repo: UserRepository,
    notifications: NotificationRepository,
    email: str,
) -> User:
    """Operator maintenance: clear the lockout of the account holding ``email``.

    Runs outside the authenticated HTTP surface (see ``scripts/unlock_user.py``),
    so no role check happens here.
    """
    user = repo.get_by_email(email)
    if user is None:
        raise EntityNotFoundException(f"User not found: {email}")

    repo.clear_lock(user.id)
    logger.info("Account unlocked", user_id=user.id, email=email)

    notification_service.notify_super_admins_locked_accounts(repo, notifications)
    return user


def check_unique(repo: UserRepository, field: str, value: str, exclude_id: Optional[int] = None) -> bool:
    """True when no other user holds ``value`` for ``field``."""
    if field not in UNIQUE_FIELDS:
        raise BadRequestException(f"Unsupported field: {field}")
    return not repo.exists_with(field, value, exclude_id)


def _memberships(user: User) -> List[AreaMembership]:
    grouped: dict[str, List[str]] = {}
    for link in user.area_duties:
        duties = grouped.setdefault(link.area.name, [])
        if link.duty is not None:
            duties.append(link.duty.name)
    return [AreaMembership(area=area, duties=duties) for area, duties in grouped.items()]


def get_current_user_profile(repo: UserRepository, user_id: int) -> UserProfile:
    # Sessions can outlive the account they point at
    user = repo.get_profile(user_id)
    if user is None:
        raise EntityNotFoundException("User not found")

    memberships = _memberships(user)
    return UserProfile(
        id=user.id,
        name=user.name,
        surname=user.surname,
        email=user.email,
        role=user.role,
        is_worker=bool(user.is_worker),
        company_id=user.company_id,
        company=CompanyRef.model_validate(user.company) if user.company else None,
        areas=memberships,
        areas_label=format_area_duties(memberships),
    )

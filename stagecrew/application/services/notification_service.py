"""Notification service — read-state workflow and the reminders that feed it.

Features:
- unread -> read transitions, single and set-based, never reverted
- "has the user still got shifts without hours" predicate
- Visible-type resolution by role and work mode
- Daily missing-hours reminders (triggered by the external cron)
- Super-admin summary of locked accounts
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence

import pytz
import structlog

from stagecrew.application.services.formatting import full_name
from stagecrew.config import get_settings
from stagecrew.core.exceptions import (
    BadRequestException,
    EntityNotFoundException,
    ForbiddenException,
)
from stagecrew.domain.models.notification import (
    ADMIN_LOCKED_ACCOUNTS,
    ADMIN_NOTIFICATION_TYPES,
    MISSING_HOURS_REMINDER,
    SUPER_ADMIN_ONLY_TYPES,
    WORKER_NOTIFICATION_TYPES,
    Notification,
)
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.roles import Principal, Role, WorkMode

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MESSAGE_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")

MISSING_HOURS_TITLE = "Orari da inserire"
LOCKED_ACCOUNTS_TITLE = "Account bloccati"


# ---------------------------------------------------------------------------
# Read-state transitions
# ---------------------------------------------------------------------------


def mark_read(repo: NotificationRepository, notification_id: int, caller_id: int) -> Notification:
    notification = repo.get_by_id(notification_id)
    if notification is None:
        raise EntityNotFoundException("Notification not found")
    if notification.user_id != caller_id:
        raise ForbiddenException()

    if not notification.read:
        repo.mark_read(notification)
        logger.info("Notification read", notification_id=notification_id, user_id=caller_id)
    return notification


def mark_all_read(repo: NotificationRepository, caller_id: int, type: Optional[str] = None) -> int:
    updated = repo.mark_all_read(caller_id, type or None)
    logger.info("Notifications marked read", user_id=caller_id, type=type, count=updated)
    return updated


def mark_many_read(repo: NotificationRepository, caller_id: int, ids: Sequence) -> int:
    """Mark the given ids read. Ids owned by someone else are silently skipped."""
    if not ids:
        raise BadRequestException("ids is required (array of notification ids)")

    valid_ids = []
    for raw in ids:
        if isinstance(raw, bool):
            continue
        if isinstance(raw, int):
            valid_ids.append(raw)
        elif isinstance(raw, str) and raw.strip().isdigit():
            valid_ids.append(int(raw.strip()))

    if not valid_ids:
        return 0
    return repo.mark_ids_read(caller_id, valid_ids)


# ---------------------------------------------------------------------------
# Missing hours
# ---------------------------------------------------------------------------


def user_has_missing_shifts(repo: AssignmentRepository, user_id: int, dates: Iterable[str]) -> bool:
    """True as soon as one of the user's shifts in the date span has no time entry of theirs."""
    sorted_dates = sorted(dates)
    if not sorted_dates:
        return False

    start = date.fromisoformat(sorted_dates[0])
    end = date.fromisoformat(sorted_dates[-1])

    return any(
        not any(te.user_id == user_id for te in a.time_entries)
        for a in repo.iter_user_shifts_in_range(user_id, start, end)
    )


def _is_calendar_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def notification_dates(notification: Notification) -> List[str]:
    """ISO dates a reminder refers to: metadata first, then dd/mm/yyyy in the message.

    Impossible dates such as 31/02 are dropped, so such a reminder counts as undatable.
    """
    meta = notification.meta or {}
    dates = meta.get("dates") if isinstance(meta, dict) else None
    if isinstance(dates, list) and dates:
        candidates = [d for d in dates if isinstance(d, str) and ISO_DATE.match(d)]
    else:
        candidates = [
            f"{year}-{month.zfill(2)}-{day.zfill(2)}"
            for day, month, year in MESSAGE_DATE.findall(notification.message or "")
        ]
    return [d for d in candidates if _is_calendar_date(d)]


def visible_types(principal: Principal, work_mode: WorkMode, scope: Optional[str] = None) -> tuple:
    if principal.role == Role.SUPER_ADMIN:
        admin_types = ADMIN_NOTIFICATION_TYPES
    else:
        admin_types = tuple(t for t in ADMIN_NOTIFICATION_TYPES if t not in SUPER_ADMIN_ONLY_TYPES)

    if scope == "worker":
        return WORKER_NOTIFICATION_TYPES
    if scope == "admin":
        return admin_types if principal.is_approver else WORKER_NOTIFICATION_TYPES

    acting_as_worker = work_mode == WorkMode.WORKER and principal.is_worker
    if acting_as_worker or not principal.is_approver:
        return WORKER_NOTIFICATION_TYPES
    return admin_types


def list_notifications(
    repo: NotificationRepository,
    assignments: AssignmentRepository,
    principal: Principal,
    work_mode: WorkMode,
    scope: Optional[str] = None,
    unread_only: bool = False,
    now: Optional[datetime] = None,
) -> List[Notification]:
    types = visible_types(principal, work_mode, scope)
    if not types:
        return []

    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=settings.NOTIFICATION_WINDOW_DAYS)
    notifications = repo.list_for_user(principal.id, types, since, unread_only)

    visible = []
    for n in notifications:
        if n.type != MISSING_HOURS_REMINDER:
            visible.append(n)
            continue

        dates = notification_dates(n)
        if not dates or user_has_missing_shifts(assignments, n.user_id, dates):
            visible.append(n)
        elif not n.read:
            # Hours were filled in since the reminder went out
            repo.mark_read(n)
            logger.info("Stale reminder closed", notification_id=n.id, user_id=n.user_id)
    return visible


def create_missing_hours_reminders(
    assignments: AssignmentRepository,
    users: UserRepository,
    repo: NotificationRepository,
    now: Optional[datetime] = None,
) -> int:
    """One reminder per worker with past shifts lacking hours.

    Window: first day of the previous month up to yesterday, in the venue timezone.
    """
    now = now or datetime.now(timezone.utc)
    today = now.astimezone(tz).date()
    end = today - timedelta(days=1)
    first_of_month = today.replace(day=1)
    start = (first_of_month - timedelta(days=1)).replace(day=1)

    worker_ids = set(users.list_active_worker_ids())
    missing: dict[int, set[str]] = {}

    for a in assignments.list_shifts_in_range(start, end):
        if a.user_id is None or a.user_id not in worker_ids:
            continue
        if a.workday.date >= today:
            continue
        if any(te.user_id == a.user_id for te in a.time_entries):
            continue
        missing.setdefault(a.user_id, set()).add(a.workday.date.isoformat())

    dedup_since = now - timedelta(hours=settings.MISSING_HOURS_DEDUP_HOURS)
    created = 0
    for user_id, dates in missing.items():
        if repo.exists_since(user_id, MISSING_HOURS_REMINDER, dedup_since):
            continue

        sorted_dates = sorted(dates)
        formatted = ", ".join(date.fromisoformat(d).strftime("%d/%m/%Y") for d in sorted_dates)
        repo.add(
            user_id=user_id,
            type=MISSING_HOURS_REMINDER,
            title=MISSING_HOURS_TITLE,
            message=f"Hai ore non ancora inserite per i turni del {formatted}. Inseriscile da I Miei Turni.",
            meta={"dates": sorted_dates},
        )
        created += 1

    logger.info(
        "Missing hours reminders created",
        window_start=start.isoformat(),
        window_end=end.isoformat(),
        users_with_missing=len(missing),
        created=created,
    )
    return created


# ---------------------------------------------------------------------------
# Locked accounts summary
# ---------------------------------------------------------------------------


def notify_super_admins_locked_accounts(
    users: UserRepository,
    repo: NotificationRepository,
    now: Optional[datetime] = None,
) -> None:
    now = now or datetime.now(timezone.utc)
    locked = users.list_locked(now)

    if not locked:
        repo.delete_by_type(ADMIN_LOCKED_ACCOUNTS)
        return

    lines = [f"{full_name(u)} - {u.email}" for u in locked]
    if len(lines) == 1:
        message = f"1 account bloccato:\n{lines[0]}"
    else:
        message = f"{len(lines)} account bloccati:\n" + "\n".join(lines)

    for admin in users.list_active_super_admins():
        existing = repo.find_unread(admin.id, ADMIN_LOCKED_ACCOUNTS)
        if existing is not None:
            repo.update(existing, {"title": LOCKED_ACCOUNTS_TITLE, "message": message, "created_at": now})
        else:
            repo.add(admin.id, ADMIN_LOCKED_ACCOUNTS, LOCKED_ACCOUNTS_TITLE, message)

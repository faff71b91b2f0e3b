"""Notifications API routes — listing and read-state transitions."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stagecrew.application.services import notification_service
from stagecrew.core.exceptions import server_errors
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.domain.roles import Principal, WorkMode
from stagecrew.domain.schemas.notification import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationRead,
    OkResponse,
)
from stagecrew.interfaces.api.deps import get_principal, get_work_mode
from stagecrew.interfaces.deps import get_assignment_repository, get_notification_repository

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=List[NotificationRead])
def list_notifications(
    unread_only: bool = Query(False, alias="unreadOnly"),
    scope: Optional[str] = Query(None, alias="type", pattern="^(worker|admin)$"),
    principal: Principal = Depends(get_principal),
    work_mode: WorkMode = Depends(get_work_mode),
    repo: NotificationRepository = Depends(get_notification_repository),
    assignments: AssignmentRepository = Depends(get_assignment_repository),
):
    with server_errors("Failed to fetch notifications"):
        notifications = notification_service.list_notifications(
            repo, assignments, principal, work_mode, scope=scope, unread_only=unread_only
        )
        return [NotificationRead.model_validate(n) for n in notifications]


@router.post("/mark-all-read", response_model=OkResponse)
def mark_all_read(
    type: Optional[str] = Query(None),
    principal: Principal = Depends(get_principal),
    repo: NotificationRepository = Depends(get_notification_repository),
):
    with server_errors("Failed to mark as read"):
        notification_service.mark_all_read(repo, principal.id, type)
    return OkResponse()


@router.post("/mark-read", response_model=MarkReadResponse)
def mark_read_many(
    body: MarkReadRequest,
    principal: Principal = Depends(get_principal),
    repo: NotificationRepository = Depends(get_notification_repository),
):
    with server_errors("Failed to update notifications"):
        count = notification_service.mark_many_read(repo, principal.id, body.ids)
    return MarkReadResponse(count=count)


@router.patch("/{notification_id}", response_model=OkResponse)
def mark_read(
    notification_id: int,
    principal: Principal = Depends(get_principal),
    repo: NotificationRepository = Depends(get_notification_repository),
):
    with server_errors("Failed to update notification"):
        notification_service.mark_read(repo, notification_id, principal.id)
    return OkResponse()

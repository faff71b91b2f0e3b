"""Unavailability API routes."""

from fastapi import APIRouter, Depends

from stagecrew.application.services import schedule_service
from stagecrew.core.exceptions import server_errors
from stagecrew.domain.repositories.unavailability_repository import UnavailabilityRepository
from stagecrew.domain.roles import Action, Principal, WorkMode
from stagecrew.domain.schemas.assignment import PendingCount
from stagecrew.interfaces.api.deps import get_work_mode, require_permission
from stagecrew.interfaces.deps import get_unavailability_repository

router = APIRouter(prefix="/api/unavailabilities", tags=["Unavailabilities"])


@router.get("/pending-count", response_model=PendingCount)
def pending_count(
    principal: Principal = Depends(require_permission(Action.PENDING_APPROVALS)),
    work_mode: WorkMode = Depends(get_work_mode),
    repo: UnavailabilityRepository = Depends(get_unavailability_repository),
):
    with server_errors("Server error"):
        count = schedule_service.count_pending_unavailabilities(repo, principal, work_mode)
    return PendingCount(count=count)

"""Workday API routes."""

from typing import List

from fastapi import APIRouter, Depends

from stagecrew.application.services import schedule_service
from stagecrew.core.exceptions import server_errors
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.roles import Principal
from stagecrew.domain.schemas.assignment import AssignmentRead
from stagecrew.interfaces.api.deps import get_principal
from stagecrew.interfaces.deps import get_assignment_repository

router = APIRouter(prefix="/api/workdays", tags=["Workdays"])


# TODO: restrict to the caller's company once workdays carry a company reference
@router.get("/{workday_id}/assignments", response_model=List[AssignmentRead])
def list_assignments(
    workday_id: int,
    _: Principal = Depends(get_principal),
    repo: AssignmentRepository = Depends(get_assignment_repository),
):
    with server_errors("Error fetching assignments"):
        return schedule_service.list_assignments_for_workday(repo, workday_id)

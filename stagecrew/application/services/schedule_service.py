"""Schedule service — workday assignments and approval counters."""

from typing import List

from stagecrew.application.services.formatting import format_user_name
from stagecrew.domain.models.unavailability import UnavailabilityStatus
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository
from stagecrew.domain.repositories.unavailability_repository import UnavailabilityRepository
from stagecrew.domain.roles import Principal, WorkMode
from stagecrew.domain.schemas.assignment import AssignmentRead


def list_assignments_for_workday(repo: AssignmentRepository, workday_id: int) -> List[AssignmentRead]:
    assignments = repo.list_for_workday(workday_id)
    staff = list({a.user.id: a.user for a in assignments if a.user is not None}.values())

    result = []
    for a in assignments:
        item = AssignmentRead.model_validate(a)
        if item.user is not None:
            item.user.display_name = format_user_name(a.user, staff)
        result.append(item)
    return result


def count_pending_unavailabilities(
    repo: UnavailabilityRepository,
    principal: Principal,
    work_mode: WorkMode,
) -> int:
    """Requests awaiting a decision.

    An approver who also works shifts sees nothing while in worker mode.
    """
    if principal.is_approver and principal.is_worker and work_mode == WorkMode.WORKER:
        return 0
    return repo.count_by_status(UnavailabilityStatus.PENDING_APPROVAL)

"""
Assignment Repository Interface.
"""

from datetime import date
from typing import Iterator, List

from stagecrew.domain.models.workday import Assignment


class AssignmentRepository:
    """Interface for assignment queries."""

    def list_for_workday(self, workday_id: int) -> List[Assignment]:
        """Assignments with user and task type loaded, by start time."""
        ...

    def iter_user_shifts_in_range(self, user_id: int, start: date, end: date) -> Iterator[Assignment]:
        """SHIFT assignments of ``user_id`` whose workday falls in [start, end]."""
        ...

    def list_shifts_in_range(self, start: date, end: date) -> List[Assignment]:
        """SHIFT assignments with workday and time entries loaded."""
        ...

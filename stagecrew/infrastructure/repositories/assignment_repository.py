"""
SQLAlchemy Implementation of Assignment Repository.
"""

from datetime import date
from typing import Iterator, List

from sqlalchemy.orm import Session, contains_eager, joinedload, selectinload

from stagecrew.domain.models.workday import SHIFT, Assignment, TaskType, Workday
from stagecrew.domain.repositories.assignment_repository import AssignmentRepository


class SQLAlchemyAssignmentRepository(AssignmentRepository):
    """Assignment queries joining workdays, users and task types."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_workday(self, workday_id: int) -> List[Assignment]:
        return (
            self.db.query(Assignment)
            .options(joinedload(Assignment.user), joinedload(Assignment.task_type))
            .filter(Assignment.workday_id == workday_id)
            .order_by(Assignment.start_time.asc(), Assignment.id.asc())
            .all()
        )

    def _shifts_in_range(self, start: date, end: date):
        return (
            self.db.query(Assignment)
            .join(Assignment.task_type)
            .join(Assignment.workday)
            .filter(
                TaskType.type == SHIFT,
                Workday.date >= start,
                Workday.date <= end,
            )
        )

    def iter_user_shifts_in_range(self, user_id: int, start: date, end: date) -> Iterator[Assignment]:
        query = (
            self._shifts_in_range(start, end)
            .options(selectinload(Assignment.time_entries))
            .filter(Assignment.user_id == user_id)
            .order_by(Workday.date.asc(), Assignment.start_time.asc())
        )
        yield from query.all()

    def list_shifts_in_range(self, start: date, end: date) -> List[Assignment]:
        return (
            self._shifts_in_range(start, end)
            .options(
                contains_eager(Assignment.workday),
                selectinload(Assignment.time_entries),
            )
            .order_by(Workday.date.asc())
            .all()
        )

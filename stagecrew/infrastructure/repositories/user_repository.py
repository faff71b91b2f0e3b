"""
SQLAlchemy Implementation of User Repository.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import joinedload, selectinload

from stagecrew.domain.models.taxonomy import UserAreaDuty
from stagecrew.domain.models.user import User
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.roles import Role
from stagecrew.infrastructure.repositories.base_repository import SQLAlchemyRepository

UNIQUE_FIELDS = {
    "email": User.email,
    "fiscal_code": User.fiscal_code,
}


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_profile(self, user_id: int) -> Optional[User]:
        return (
            self.db.query(User)
            .options(
                joinedload(User.company),
                selectinload(User.area_duties).joinedload(UserAreaDuty.area),
                selectinload(User.area_duties).joinedload(UserAreaDuty.duty),
            )
            .filter(User.id == user_id)
            .first()
        )

    def list_locked(self, now: datetime) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.locked_until > now)
            .order_by(User.locked_until.asc())
            .all()
        )

    def clear_lock(self, user_id: int) -> None:
        self.db.query(User).filter(User.id == user_id).update(
            {User.locked_until: None, User.failed_login_attempts: 0},
            synchronize_session="fetch",
        )
        self.db.commit()

    def exists_with(self, field: str, value: str, exclude_id: Optional[int] = None) -> bool:
        column = UNIQUE_FIELDS[field]
        query = self.db.query(User.id).filter(column == value)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def list_active_super_admins(self) -> List[User]:
        return (
            self.db.query(User)
            .filter(
                User.role == Role.SUPER_ADMIN,
                User.is_active.is_(True),
                User.is_archived.is_(False),
            )
            .all()
        )

    def list_active_worker_ids(self) -> List[int]:
        rows = (
            self.db.query(User.id)
            .filter(
                User.is_active.is_(True),
                User.is_archived.is_(False),
                or_(User.role == Role.WORKER, User.is_worker.is_(True)),
            )
            .all()
        )
        return [r[0] for r in rows]

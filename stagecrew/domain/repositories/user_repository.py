"""
User Repository Interface.
"""

from datetime import datetime
from typing import List, Optional

from stagecrew.domain.models.user import User
from stagecrew.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for user lookups and account maintenance."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def get_profile(self, user_id: int) -> Optional[User]:
        """Get a user with company and area/duty memberships loaded."""
        ...

    def list_locked(self, now: datetime) -> List[User]:
        """Users whose lock expires strictly after ``now``, soonest first."""
        ...

    def clear_lock(self, user_id: int) -> None:
        """Reset lockout fields in a single update."""
        ...

    def exists_with(self, field: str, value: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another user already holds ``value`` for ``field``."""
        ...

    def list_active_super_admins(self) -> List[User]:
        ...

    def list_active_worker_ids(self) -> List[int]:
        """Active, non-archived users who work shifts."""
        ...

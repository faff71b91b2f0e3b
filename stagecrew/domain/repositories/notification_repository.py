"""
Notification Repository Interface.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from stagecrew.domain.models.notification import Notification
from stagecrew.domain.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Interface for notification reads and read-state transitions."""

    def mark_read(self, notification: Notification) -> None:
        ...

    def mark_all_read(self, user_id: int, type: Optional[str] = None) -> int:
        """Set-based unread -> read for one user. Returns rows touched."""
        ...

    def mark_ids_read(self, user_id: int, ids: Iterable[int]) -> int:
        ...

    def list_for_user(
        self,
        user_id: int,
        types: Iterable[str],
        since: datetime,
        unread_only: bool = False,
    ) -> List[Notification]:
        """Newest first."""
        ...

    def find_unread(self, user_id: int, type: str) -> Optional[Notification]:
        ...

    def exists_since(self, user_id: int, type: str, since: datetime) -> bool:
        ...

    def delete_by_type(self, type: str) -> int:
        ...

    def add(self, user_id: int, type: str, title: str, message: str, meta: Optional[dict[str, Any]] = None) -> Notification:
        ...

"""
SQLAlchemy Implementation of Notification Repository.

Read-state transitions are issued as set-based UPDATEs so that concurrent
calls from the same user cannot lose each other's writes.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from sqlalchemy import update

from stagecrew.domain.models.notification import Notification
from stagecrew.domain.repositories.notification_repository import NotificationRepository
from stagecrew.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyNotificationRepository(SQLAlchemyRepository[Notification], NotificationRepository):
    """Notification repository implementation using SQLAlchemy."""

    def mark_read(self, notification: Notification) -> None:
        self.db.execute(
            update(Notification)
            .where(Notification.id == notification.id, Notification.read.is_(False))
            .values(read=True)
        )
        self.db.commit()
        self.db.refresh(notification)

    def mark_all_read(self, user_id: int, type: Optional[str] = None) -> int:
        stmt = update(Notification).where(
            Notification.user_id == user_id,
            Notification.read.is_(False),
        )
        if type:
            stmt = stmt.where(Notification.type == type)
        result = self.db.execute(stmt.values(read=True))
        self.db.commit()
        return result.rowcount

    def mark_ids_read(self, user_id: int, ids: Iterable[int]) -> int:
        result = self.db.execute(
            update(Notification)
            .where(Notification.id.in_(list(ids)), Notification.user_id == user_id)
            .values(read=True)
        )
        self.db.commit()
        return result.rowcount

    def list_for_user(
        self,
        user_id: int,
        types: Iterable[str],
        since: datetime,
        unread_only: bool = False,
    ) -> List[Notification]:
        query = self.db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.type.in_(list(types)),
            Notification.created_at >= since,
        )
        if unread_only:
            query = query.filter(Notification.read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    def find_unread(self, user_id: int, type: str) -> Optional[Notification]:
        return (
            self.db.query(Notification)
            .filter(
                Notification.user_id == user_id,
                Notification.type == type,
                Notification.read.is_(False),
            )
            .first()
        )

    def exists_since(self, user_id: int, type: str, since: datetime) -> bool:
        return (
            self.db.query(Notification.id)
            .filter(
                Notification.user_id == user_id,
                Notification.type == type,
                Notification.created_at >= since,
            )
            .first()
            is not None
        )

    def delete_by_type(self, type: str) -> int:
        deleted = self.db.query(Notification).filter(Notification.type == type).delete(synchronize_session=False)
        self.db.commit()
        return deleted

    def add(self, user_id: int, type: str, title: str, message: str, meta: Optional[dict[str, Any]] = None) -> Notification:
        return self.create(
            {"user_id": user_id, "type": type, "title": title, "message": message, "meta": meta, "read": False}
        )

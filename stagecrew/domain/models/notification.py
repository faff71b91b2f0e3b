"""Per-user notification — unread until the owner marks it read."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from stagecrew.infrastructure.database import Base

MISSING_HOURS_REMINDER = "MISSING_HOURS_REMINDER"
ADMIN_LOCKED_ACCOUNTS = "ADMIN_LOCKED_ACCOUNTS"

WORKER_NOTIFICATION_TYPES = (MISSING_HOURS_REMINDER,)
ADMIN_NOTIFICATION_TYPES = (ADMIN_LOCKED_ACCOUNTS,)
SUPER_ADMIN_ONLY_TYPES = (ADMIN_LOCKED_ACCOUNTS,)


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    def __repr__(self):
        return f"<Notification {self.type} user={self.user_id} read={self.read}>"

"""Unavailability requests raised by workers."""

from datetime import datetime, timezone
from enum import Enum as PyEnum

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Integer, Text

from stagecrew.infrastructure.database import Base


class UnavailabilityStatus(str, PyEnum):
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Unavailability(Base):
    __tablename__ = "unavailabilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date_start = Column(Date, nullable=False)
    date_end = Column(Date, nullable=False)
    status = Column(
        Enum(UnavailabilityStatus, native_enum=False, length=20),
        nullable=False,
        default=UnavailabilityStatus.PENDING_APPROVAL,
        index=True,
    )
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

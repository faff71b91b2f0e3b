"""Area / duty taxonomy and the user membership relation."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from stagecrew.infrastructure.database import Base


class Area(Base):
    __tablename__ = "areas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    code = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    duties = relationship("Duty", back_populates="area")

    def __repr__(self):
        return f"<Area {self.code} {self.name}>"


class Duty(Base):
    __tablename__ = "duties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    code = Column(String(10), nullable=False)
    area_id = Column(Integer, ForeignKey("areas.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    area = relationship("Area", back_populates="duties")

    def __repr__(self):
        return f"<Duty {self.code} {self.name}>"


class UserAreaDuty(Base):
    """A user's membership of an area, optionally with a specific duty."""

    __tablename__ = "user_area_duties"
    __table_args__ = (UniqueConstraint("user_id", "area_id", "duty_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    area_id = Column(Integer, ForeignKey("areas.id"), nullable=False)
    duty_id = Column(Integer, ForeignKey("duties.id"), nullable=True)

    user = relationship("User", back_populates="area_duties")
    area = relationship("Area")
    duty = relationship("Duty")

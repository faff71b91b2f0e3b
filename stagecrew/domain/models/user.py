"""User domain model — maps to the 'users' table."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from stagecrew.domain.roles import Role
from stagecrew.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    surname = Column(String(100), nullable=True)
    code = Column(String(20), unique=True, nullable=False)
    fiscal_code = Column(String(16), unique=True, nullable=True)
    password_hash = Column(String(255), nullable=True)
    role = Column(Enum(Role, native_enum=False, length=20), nullable=False, default=Role.WORKER)
    is_worker = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_archived = Column(Boolean, nullable=False, default=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)

    # Lockout
    locked_until = Column(DateTime(timezone=True), nullable=True, index=True)
    failed_login_attempts = Column(Integer, nullable=True, default=0)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    company = relationship("Company", back_populates="users")
    area_duties = relationship("UserAreaDuty", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email}>"

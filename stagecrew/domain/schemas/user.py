"""Pydantic schemas for users, profiles and account maintenance."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_serializer

from stagecrew.domain.roles import Role


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 string, naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class CompanyRef(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class AreaMembership(BaseModel):
    area: str
    duties: list[str] = []


class UserProfile(BaseModel):
    id: int
    name: Optional[str] = None
    surname: Optional[str] = None
    email: str
    role: Role
    is_worker: bool
    company_id: Optional[int] = None
    company: Optional[CompanyRef] = None
    areas: list[AreaMembership] = []
    areas_label: str = "-"


class LockedAccount(BaseModel):
    """Public-safe projection of a locked user. Never carries the password hash."""

    id: int
    email: str
    name: Optional[str] = None
    surname: Optional[str] = None
    code: str
    locked_until: Optional[datetime] = None
    failed_login_attempts: int = 0

    @field_serializer("locked_until")
    def _serialize_locked_until(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso(value)


class VerifyPasswordRequest(BaseModel):
    password: Optional[str] = None


class Availability(BaseModel):
    available: bool

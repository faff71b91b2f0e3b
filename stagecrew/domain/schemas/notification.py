"""Pydantic schemas for notifications."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    id: int
    user_id: int
    type: str
    title: str
    message: str
    read: bool
    metadata: Optional[dict[str, Any]] = Field(default=None, validation_alias="meta")
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class MarkReadRequest(BaseModel):
    ids: list[Any] = []


class OkResponse(BaseModel):
    ok: bool = True


class MarkReadResponse(OkResponse):
    count: int


class MissingHoursRunResult(OkResponse):
    created: int
    users_notified: int

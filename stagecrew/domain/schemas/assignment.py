"""Pydantic schemas for workday assignments and approval counters."""

from typing import Optional

from pydantic import BaseModel


class AssignmentUser(BaseModel):
    id: int
    name: Optional[str] = None
    code: str
    display_name: Optional[str] = None

    model_config = {"from_attributes": True}


class AssignmentTaskType(BaseModel):
    id: int
    name: str
    type: str
    color: Optional[str] = None

    model_config = {"from_attributes": True}


class AssignmentRead(BaseModel):
    id: int
    workday_id: int
    user_id: Optional[int] = None
    task_type_id: int
    start_time: str
    end_time: str
    user: Optional[AssignmentUser] = None
    task_type: AssignmentTaskType

    model_config = {"from_attributes": True}


class PendingCount(BaseModel):
    count: int

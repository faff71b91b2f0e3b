"""
Shared fixtures: in-memory database, API client and session tokens.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["CRON_SECRET"] = "test-cron-secret"
os.environ["ENVIRONMENT"] = "test"
os.environ["RESEND_API_KEY"] = ""

from datetime import date, datetime, timezone  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from stagecrew.application.services.auth_service import create_access_token  # noqa: E402
from stagecrew.domain.models import (  # noqa: E402
    Assignment,
    Notification,
    TaskType,
    TimeEntry,
    User,
    Workday,
)
from stagecrew.domain.roles import Principal, Role  # noqa: E402
from stagecrew.infrastructure.database import Base, SessionLocal, engine, get_db  # noqa: E402
from stagecrew.main import app  # noqa: E402

_codes = count(1)


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast tests against in-memory SQLite")


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(role: Role = Role.WORKER, **fields) -> User:
        n = next(_codes)
        fields.setdefault("email", f"user{n}@example.com")
        fields.setdefault("code", f"U{n:04d}")
        fields.setdefault("name", f"Name{n}")
        fields.setdefault("surname", f"Surname{n}")
        user = User(role=role, **fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_notification(db):
    def _make_notification(user: User, type: str = "MISSING_HOURS_REMINDER", read: bool = False, **fields) -> Notification:
        fields.setdefault("title", "Titolo")
        fields.setdefault("message", "Messaggio")
        notification = Notification(user_id=user.id, type=type, read=read, **fields)
        db.add(notification)
        db.commit()
        db.refresh(notification)
        return notification

    return _make_notification


@pytest.fixture
def make_shift(db):
    """Create a SHIFT assignment for ``user`` on ``day``, optionally with hours already entered."""
    shift_type = {}

    def _make_shift(user: User, day: date, start: str = "09:00", end: str = "13:00", with_hours: bool = False) -> Assignment:
        if "type" not in shift_type:
            shift_type["type"] = TaskType(name="Turno", type="SHIFT", color="#ff0000")
            db.add(shift_type["type"])
            db.flush()
        workday = Workday(date=day)
        db.add(workday)
        db.flush()
        assignment = Assignment(
            workday_id=workday.id,
            user_id=user.id,
            task_type_id=shift_type["type"].id,
            start_time=start,
            end_time=end,
        )
        db.add(assignment)
        db.flush()
        if with_hours:
            db.add(TimeEntry(assignment_id=assignment.id, user_id=user.id, start_time=start, end_time=end, hours=4))
        db.commit()
        db.refresh(assignment)
        return assignment

    return _make_shift


def auth_headers(user_or_id, role: Role = None, is_worker: bool = None) -> dict:
    if isinstance(user_or_id, User):
        principal = Principal(
            id=user_or_id.id,
            role=role or user_or_id.role,
            is_worker=bool(user_or_id.is_worker) if is_worker is None else is_worker,
        )
    else:
        principal = Principal(id=user_or_id, role=role or Role.WORKER, is_worker=bool(is_worker))
    return {"Authorization": f"Bearer {create_access_token(principal)}"}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)

from datetime import date

import pytest

from conftest import auth_headers
from stagecrew.domain.models import Assignment, TaskType, Unavailability, UnavailabilityStatus, Workday
from stagecrew.domain.roles import Role

pytestmark = pytest.mark.unit


@pytest.fixture
def workday(db):
    day = Workday(date=date(2026, 4, 10))
    db.add(day)
    db.commit()
    db.refresh(day)
    return day


def _assign(db, workday, user, start, end, task_type):
    assignment = Assignment(
        workday_id=workday.id,
        user_id=user.id if user else None,
        task_type_id=task_type.id,
        start_time=start,
        end_time=end,
    )
    db.add(assignment)
    db.commit()
    return assignment


def test_assignments_ordered_with_display_names(client, db, workday, make_user):
    shift = TaskType(name="Sala", type="SHIFT", color="#00ff00")
    db.add(shift)
    db.commit()
    mario = make_user(name="Mario", surname="Rossi")
    marta = make_user(name="Marta", surname="Rossi")
    luca = make_user(name="Luca", surname="Bianchi")
    late = _assign(db, workday, luca, "18:00", "23:00", shift)
    early = _assign(db, workday, mario, "09:00", "13:00", shift)
    middle = _assign(db, workday, marta, "14:00", "18:00", shift)
    open_slot = _assign(db, workday, None, "14:00", "18:00", shift)

    response = client.get(f"/api/workdays/{workday.id}/assignments", headers=auth_headers(luca))

    assert response.status_code == 200
    body = response.json()
    assert [a["id"] for a in body] == [early.id, middle.id, open_slot.id, late.id]
    assert body[0]["user"]["display_name"] == "Mario Rossi"
    assert body[1]["user"]["display_name"] == "Marta Rossi"
    assert body[2]["user"] is None
    assert body[3]["user"]["display_name"] == "L. Bianchi"
    assert body[3]["task_type"] == {"id": shift.id, "name": "Sala", "type": "SHIFT", "color": "#00ff00"}


def test_assignments_for_empty_workday(client, workday, make_user):
    response = client.get(f"/api/workdays/{workday.id}/assignments", headers=auth_headers(make_user()))

    assert response.status_code == 200
    assert response.json() == []


def test_assignments_require_session(client, workday):
    assert client.get(f"/api/workdays/{workday.id}/assignments").status_code == 401


# ---------------------------------------------------------------------------
# Pending unavailabilities
# ---------------------------------------------------------------------------


@pytest.fixture
def pending_requests(db, make_user):
    worker = make_user()
    for status in (
        UnavailabilityStatus.PENDING_APPROVAL,
        UnavailabilityStatus.PENDING_APPROVAL,
        UnavailabilityStatus.APPROVED,
        UnavailabilityStatus.REJECTED,
    ):
        db.add(Unavailability(user_id=worker.id, date_start=date(2026, 5, 1), date_end=date(2026, 5, 2), status=status))
    db.commit()


@pytest.mark.parametrize("role", [Role.SUPER_ADMIN, Role.ADMIN, Role.RESPONSABILE])
def test_pending_count_for_approvers(client, make_user, pending_requests, role):
    approver = make_user(role)

    response = client.get("/api/unavailabilities/pending-count", headers=auth_headers(approver))

    assert response.status_code == 200
    assert response.json() == {"count": 2}


def test_pending_count_hidden_in_worker_mode(client, make_user, pending_requests):
    responsabile = make_user(Role.RESPONSABILE, is_worker=True)
    headers = auth_headers(responsabile)

    as_worker = client.get("/api/unavailabilities/pending-count", headers={**headers, "X-Work-Mode": "worker"})
    as_admin = client.get("/api/unavailabilities/pending-count", headers={**headers, "X-Work-Mode": "admin"})

    assert as_worker.json() == {"count": 0}
    assert as_admin.json() == {"count": 2}


def test_worker_mode_ignored_for_non_working_approver(client, make_user, pending_requests):
    admin = make_user(Role.ADMIN)

    response = client.get(
        "/api/unavailabilities/pending-count",
        headers={**auth_headers(admin), "X-Work-Mode": "worker"},
    )

    assert response.json() == {"count": 2}


def test_pending_count_gate(client, make_user):
    assert client.get("/api/unavailabilities/pending-count").status_code == 401

    worker = make_user()
    response = client.get("/api/unavailabilities/pending-count", headers=auth_headers(worker))
    assert response.status_code == 403


def test_two_shifts_for_one_person_are_not_a_clash(client, db, workday, make_user):
    shift = TaskType(name="Sala", type="SHIFT")
    db.add(shift)
    db.commit()
    luca = make_user(name="Luca", surname="Bianchi")
    _assign(db, workday, luca, "09:00", "13:00", shift)
    _assign(db, workday, luca, "14:00", "18:00", shift)

    body = client.get(f"/api/workdays/{workday.id}/assignments", headers=auth_headers(luca)).json()

    assert [a["user"]["display_name"] for a in body] == ["L. Bianchi", "L. Bianchi"]

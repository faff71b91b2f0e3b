from datetime import date, timedelta

import pytest

from conftest import auth_headers, utcnow
from stagecrew.application.services import notification_service
from stagecrew.domain.models import Notification
from stagecrew.domain.roles import Role

pytestmark = pytest.mark.unit


def _read_states(db, user):
    db.expire_all()
    return {n.id: n.read for n in db.query(Notification).filter(Notification.user_id == user.id)}


# ---------------------------------------------------------------------------
# PATCH /api/notifications/{id}
# ---------------------------------------------------------------------------


def test_mark_read_requires_session(client, make_user, make_notification):
    owner = make_user()
    notification = make_notification(owner)

    response = client.patch(f"/api/notifications/{notification.id}")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_mark_read_by_owner(client, db, make_user, make_notification):
    owner = make_user()
    notification = make_notification(owner)

    response = client.patch(f"/api/notifications/{notification.id}", headers=auth_headers(owner))

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert _read_states(db, owner) == {notification.id: True}


def test_mark_read_twice_is_a_no_op(client, db, make_user, make_notification):
    owner = make_user()
    notification = make_notification(owner)
    headers = auth_headers(owner)

    first = client.patch(f"/api/notifications/{notification.id}", headers=headers)
    second = client.patch(f"/api/notifications/{notification.id}", headers=headers)

    assert first.status_code == second.status_code == 200
    assert _read_states(db, owner) == {notification.id: True}


def test_mark_read_of_someone_elses_notification_is_forbidden(client, db, make_user, make_notification):
    owner = make_user()
    intruder = make_user()
    notification = make_notification(owner)

    response = client.patch(f"/api/notifications/{notification.id}", headers=auth_headers(intruder))

    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}
    assert _read_states(db, owner) == {notification.id: False}


def test_mark_read_unknown_notification(client, make_user):
    user = make_user()

    response = client.patch("/api/notifications/999", headers=auth_headers(user))

    assert response.status_code == 404
    assert "error" in response.json()


def test_mark_read_store_failure_reports_details(client, make_user, make_notification, monkeypatch):
    from stagecrew.infrastructure.repositories.notification_repository import SQLAlchemyNotificationRepository

    owner = make_user()
    notification = make_notification(owner)

    def boom(self, notification):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(SQLAlchemyNotificationRepository, "mark_read", boom)

    response = client.patch(f"/api/notifications/{notification.id}", headers=auth_headers(owner))

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update notification", "details": "connection reset"}


# ---------------------------------------------------------------------------
# POST /api/notifications/mark-all-read
# ---------------------------------------------------------------------------


def test_mark_all_read_only_touches_the_caller(client, db, make_user, make_notification):
    me = make_user()
    other = make_user()
    mine = [make_notification(me), make_notification(me, type="ADMIN_LOCKED_ACCOUNTS")]
    theirs = make_notification(other)

    response = client.post("/api/notifications/mark-all-read", headers=auth_headers(me))

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert _read_states(db, me) == {n.id: True for n in mine}
    assert _read_states(db, other) == {theirs.id: False}


def test_mark_all_read_with_type_filter(client, db, make_user, make_notification):
    me = make_user()
    reminder = make_notification(me, type="MISSING_HOURS_REMINDER")
    locked = make_notification(me, type="ADMIN_LOCKED_ACCOUNTS")

    response = client.post(
        "/api/notifications/mark-all-read",
        params={"type": "MISSING_HOURS_REMINDER"},
        headers=auth_headers(me),
    )

    assert response.status_code == 200
    assert _read_states(db, me) == {reminder.id: True, locked.id: False}


def test_mark_all_read_with_nothing_to_mark(client, db, make_user):
    me = make_user()

    response = client.post("/api/notifications/mark-all-read", headers=auth_headers(me))

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert db.query(Notification).count() == 0


def test_mark_all_read_requires_session(client):
    assert client.post("/api/notifications/mark-all-read").status_code == 401


# ---------------------------------------------------------------------------
# POST /api/notifications/mark-read
# ---------------------------------------------------------------------------


def test_mark_selected_ids_read(client, db, make_user, make_notification):
    me = make_user()
    other = make_user()
    a = make_notification(me)
    b = make_notification(me)
    theirs = make_notification(other)

    response = client.post(
        "/api/notifications/mark-read",
        json={"ids": [a.id, str(theirs.id), "", None]},
        headers=auth_headers(me),
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True, "count": 1}
    assert _read_states(db, me) == {a.id: True, b.id: False}
    assert _read_states(db, other) == {theirs.id: False}


def test_mark_selected_ids_requires_ids(client, make_user):
    me = make_user()

    response = client.post("/api/notifications/mark-read", json={"ids": []}, headers=auth_headers(me))

    assert response.status_code == 400


# ---------------------------------------------------------------------------
# GET /api/notifications
# ---------------------------------------------------------------------------


def test_worker_sees_only_worker_notifications(client, make_user, make_notification):
    worker = make_user()
    reminder = make_notification(worker, message="Hai ore da inserire")
    make_notification(worker, type="ADMIN_LOCKED_ACCOUNTS")

    response = client.get("/api/notifications", headers=auth_headers(worker))

    assert response.status_code == 200
    assert [n["id"] for n in response.json()] == [reminder.id]


def test_locked_accounts_summary_is_super_admin_only(client, make_user, make_notification):
    admin = make_user(Role.ADMIN)
    super_admin = make_user(Role.SUPER_ADMIN)
    make_notification(admin, type="ADMIN_LOCKED_ACCOUNTS")
    summary = make_notification(super_admin, type="ADMIN_LOCKED_ACCOUNTS")

    admin_view = client.get("/api/notifications", params={"type": "admin"}, headers=auth_headers(admin))
    super_view = client.get("/api/notifications", params={"type": "admin"}, headers=auth_headers(super_admin))

    assert admin_view.json() == []
    assert [n["id"] for n in super_view.json()] == [summary.id]


def test_worker_flagged_approver_in_worker_mode_sees_reminders(client, make_user, make_notification):
    responsabile = make_user(Role.RESPONSABILE, is_worker=True)
    reminder = make_notification(responsabile, message="nessuna data")

    as_admin = client.get("/api/notifications", headers=auth_headers(responsabile))
    as_worker = client.get(
        "/api/notifications",
        headers={**auth_headers(responsabile), "X-Work-Mode": "worker"},
    )

    assert as_admin.json() == []
    assert [n["id"] for n in as_worker.json()] == [reminder.id]


def test_old_notifications_fall_out_of_the_window(client, make_user, make_notification):
    worker = make_user()
    make_notification(worker, created_at=utcnow() - timedelta(days=8))
    recent = make_notification(worker)

    response = client.get("/api/notifications", headers=auth_headers(worker))

    assert [n["id"] for n in response.json()] == [recent.id]


def test_stale_reminder_is_closed_and_hidden(client, db, make_user, make_notification, make_shift):
    worker = make_user()
    day = date.today() - timedelta(days=2)
    make_shift(worker, day, with_hours=True)
    stale = make_notification(worker, meta={"dates": [day.isoformat()]})

    response = client.get("/api/notifications", headers=auth_headers(worker))

    assert response.json() == []
    assert _read_states(db, worker) == {stale.id: True}


def test_reminder_dates_parsed_from_message(client, make_user, make_notification, make_shift):
    worker = make_user()
    day = date.today() - timedelta(days=2)
    make_shift(worker, day)
    reminder = make_notification(
        worker,
        message=f"Hai ore non ancora inserite per i turni del {day.strftime('%d/%m/%Y')}.",
    )

    response = client.get("/api/notifications", params={"unreadOnly": "true"}, headers=auth_headers(worker))

    body = response.json()
    assert [n["id"] for n in body] == [reminder.id]
    assert body[0]["read"] is False


def test_reminder_with_impossible_date_stays_visible(client, make_user, make_notification):
    worker = make_user()
    reminder = make_notification(worker, message="Hai ore non ancora inserite per i turni del 31/02/2026.")

    response = client.get("/api/notifications", headers=auth_headers(worker))

    assert response.status_code == 200
    assert [n["id"] for n in response.json()] == [reminder.id]


def test_impossible_dates_are_dropped(make_user, make_notification):
    worker = make_user()
    from_meta = make_notification(worker, meta={"dates": ["2026-13-01", "2026-02-10"]})
    from_message = make_notification(worker, message="Turni del 31/02/2026 e 10/02/2026.")

    assert notification_service.notification_dates(from_meta) == ["2026-02-10"]
    assert notification_service.notification_dates(from_message) == ["2026-02-10"]

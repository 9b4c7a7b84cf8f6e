"""Reminder API tests."""

from datetime import UTC, datetime, timedelta

import pytest

from crm.exceptions import ValidationError
from crm.services.reminder_service import MAX_YEAR, ReminderService, month_bounds


def iso(value: datetime) -> str:
    return value.isoformat()


def create_reminder(client, title, reminder_date, **fields):
    response = client.post(
        "/api/reminders", json={"title": title, "reminder_date": reminder_date, **fields}
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_reminder(client, contact):
    """Test creating a reminder linked to a contact."""
    data = create_reminder(
        client, "Coffee with Sarah", "2026-11-05T15:00:00Z", contact_id=contact["id"]
    )
    assert data["is_completed"] is False
    assert data["contact_first_name"] == "Sarah"
    assert data["reminder_date"].startswith("2026-11-05T15:00:00")


def test_create_reminder_normalizes_offset_to_utc(client):
    """Test that reminder dates with an offset are stored as UTC."""
    data = create_reminder(client, "Offset", "2026-11-05T10:00:00-05:00")
    assert datetime.fromisoformat(data["reminder_date"]) == datetime(2026, 11, 5, 15, tzinfo=UTC)


def test_create_reminder_blank_title_rejected(client):
    """Test that a blank title is refused."""
    response = client.post(
        "/api/reminders", json={"title": "  ", "reminder_date": "2026-11-05T15:00:00Z"}
    )
    assert response.status_code == 400


def test_create_reminder_unknown_task_rejected(client):
    """Test that a dangling task reference is a constraint error."""
    response = client.post(
        "/api/reminders",
        json={"title": "Dangling", "reminder_date": "2026-11-05T15:00:00Z", "task_id": 9999},
    )
    assert response.status_code == 400


def test_list_reminders_ordered_by_date(client):
    """Test that reminders are listed soonest first."""
    later = create_reminder(client, "Later", "2026-12-01T09:00:00Z")
    sooner = create_reminder(client, "Sooner", "2026-11-01T09:00:00Z")

    response = client.get("/api/reminders")
    assert [r["id"] for r in response.json()] == [sooner["id"], later["id"]]


def test_list_upcoming_reminders(client):
    """Test that upcoming excludes past and completed reminders."""
    now = datetime.now(UTC)
    upcoming = create_reminder(client, "Upcoming", iso(now + timedelta(days=2)))
    create_reminder(client, "Overdue", iso(now - timedelta(days=2)))
    done = create_reminder(client, "Done", iso(now + timedelta(days=3)))
    client.put(f"/api/reminders/{done['id']}", json={"is_completed": True})

    response = client.get("/api/reminders", params={"upcoming": "true"})
    assert [r["id"] for r in response.json()] == [upcoming["id"]]


def test_list_reminders_by_month(client):
    """Test the calendar month filter, including month boundaries."""
    create_reminder(client, "Feb end", "2026-02-28T23:59:59Z")
    start = create_reminder(client, "Mar start", "2026-03-01T00:00:00Z")
    mid = create_reminder(client, "Mar mid", "2026-03-15T12:00:00Z")
    create_reminder(client, "Apr start", "2026-04-01T00:00:00Z")

    response = client.get("/api/reminders", params={"month": 3, "year": 2026})
    assert [r["id"] for r in response.json()] == [start["id"], mid["id"]]


def test_list_reminders_december_rolls_into_next_year(client):
    """Test that December's range ends at the next January."""
    december = create_reminder(client, "Holiday", "2026-12-31T20:00:00Z")
    create_reminder(client, "New year", "2027-01-01T00:00:00Z")

    response = client.get("/api/reminders", params={"month": 12, "year": 2026})
    assert [r["id"] for r in response.json()] == [december["id"]]


def test_list_reminders_month_without_year_rejected(client):
    """Test that month and year must be used together."""
    response = client.get("/api/reminders", params={"month": 3})
    assert response.status_code == 400


def test_list_reminders_month_out_of_range(client):
    """Test that month must be 1-12."""
    response = client.get("/api/reminders", params={"month": 13, "year": 2026})
    assert response.status_code == 400


def test_list_reminders_by_contact(client, contact):
    """Test filtering reminders by contact, combined with month."""
    mine = create_reminder(client, "Mine", "2026-03-10T10:00:00Z", contact_id=contact["id"])
    create_reminder(client, "Mine other month", "2026-04-10T10:00:00Z", contact_id=contact["id"])
    create_reminder(client, "Not mine", "2026-03-11T10:00:00Z")

    response = client.get(
        "/api/reminders", params={"contact_id": contact["id"], "month": 3, "year": 2026}
    )
    assert [r["id"] for r in response.json()] == [mine["id"]]


def test_update_reminder(client, contact):
    """Test patch semantics on reminders."""
    reminder = create_reminder(
        client,
        "Call",
        "2026-11-05T15:00:00Z",
        description="Discuss terms",
        contact_id=contact["id"],
    )

    response = client.put(
        f"/api/reminders/{reminder['id']}",
        json={"is_completed": True, "description": "", "reminder_date": None},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["is_completed"] is True
    assert data["description"] is None
    assert data["reminder_date"] == reminder["reminder_date"]
    assert data["contact_id"] == contact["id"]


def test_delete_reminder(client):
    """Test deleting a reminder."""
    reminder = create_reminder(client, "Gone", "2026-11-05T15:00:00Z")

    response = client.delete(f"/api/reminders/{reminder['id']}")
    assert response.status_code == 204
    assert client.get(f"/api/reminders/{reminder['id']}").status_code == 404


def test_month_bounds():
    """Test month range computation."""
    assert month_bounds(2026, 2) == (
        datetime(2026, 2, 1, tzinfo=UTC),
        datetime(2026, 3, 1, tzinfo=UTC),
    )
    with pytest.raises(ValidationError):
        month_bounds(2026, 0)


def test_service_rejects_year_without_month(db):
    """Test the service-level pairing check."""
    with pytest.raises(ValidationError):
        ReminderService(db).list_reminders(year=2026)


def test_list_reminders_last_supported_december(client):
    """Test December of the last supported year and the year after it."""
    response = client.get("/api/reminders", params={"month": 12, "year": 9998})
    assert response.status_code == 200
    assert response.json() == []

    response = client.get("/api/reminders", params={"month": 12, "year": 9999})
    assert response.status_code == 400


def test_month_bounds_year_range():
    """Test that the year must leave room for the following January."""
    assert month_bounds(MAX_YEAR, 12) == (
        datetime(MAX_YEAR, 12, 1, tzinfo=UTC),
        datetime(MAX_YEAR + 1, 1, 1, tzinfo=UTC),
    )
    with pytest.raises(ValidationError):
        month_bounds(MAX_YEAR + 1, 12)
    with pytest.raises(ValidationError):
        month_bounds(0, 1)

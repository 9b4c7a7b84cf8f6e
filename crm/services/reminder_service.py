"""Reminder service."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload

from crm.exceptions import NotFoundError, ValidationError
from crm.models.reminder import Reminder
from crm.schemas.reminder import ReminderCreate
from crm.services.base import commit_or_raise, require_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {"title", "reminder_date", "is_completed"}

# December of MAX_YEAR must still have a representable "first of next month"
MAX_YEAR = 9998


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Return the [start, end) UTC range covering a calendar month."""
    if not 1 <= month <= 12:
        raise ValidationError.for_field("month", "Month must be between 1 and 12")
    if not 1 <= year <= MAX_YEAR:
        raise ValidationError.for_field("year", f"Year must be between 1 and {MAX_YEAR}")
    start = datetime(year, month, 1, tzinfo=UTC)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=UTC)
    else:
        end = datetime(year, month + 1, 1, tzinfo=UTC)
    return start, end


class ReminderService:
    """Service for reminder CRUD and calendar/upcoming queries."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(Reminder).options(joinedload(Reminder.contact))

    def list_reminders(
        self,
        upcoming: bool = False,
        month: int | None = None,
        year: int | None = None,
        contact_id: int | None = None,
    ) -> list[Reminder]:
        """List reminders matching all given filters, soonest first.

        upcoming keeps open reminders dated at or after the database's current
        time. month and year must be given together.
        """
        query = self._query()

        if upcoming:
            query = query.filter(
                Reminder.is_completed.is_(False),
                Reminder.reminder_date >= func.now(),
            )
        if contact_id is not None:
            query = query.filter(Reminder.contact_id == contact_id)
        if (month is None) != (year is None):
            raise ValidationError.for_field(
                "month" if month is None else "year", "month and year must be given together"
            )
        if month is not None and year is not None:
            start, end = month_bounds(year, month)
            query = query.filter(Reminder.reminder_date >= start, Reminder.reminder_date < end)

        return query.order_by(Reminder.reminder_date.asc(), Reminder.id.asc()).all()

    def get_reminder(self, reminder_id: int) -> Reminder:
        reminder = self._query().filter(Reminder.id == reminder_id).first()
        if not reminder:
            raise NotFoundError("Reminder", reminder_id)
        return reminder

    def create_reminder(self, data: ReminderCreate) -> Reminder:
        reminder = Reminder(
            title=require_text(data.title, "title"),
            description=data.description,
            reminder_date=data.reminder_date,
            contact_id=data.contact_id,
            task_id=data.task_id,
        )
        self.db.add(reminder)
        commit_or_raise(self.db)
        self.db.refresh(reminder)
        logger.info(f"Created reminder {reminder.id}")
        return reminder

    def update_reminder(self, reminder_id: int, changes: dict[str, Any]) -> Reminder:
        reminder = self.get_reminder(reminder_id)
        changes = dict(changes)
        if changes.get("title") is not None:
            changes["title"] = require_text(changes["title"], "title")

        for field, value in changes.items():
            if value is None and field in REQUIRED_FIELDS:
                continue
            setattr(reminder, field, value)

        commit_or_raise(self.db)
        self.db.refresh(reminder)
        return reminder

    def delete_reminder(self, reminder_id: int) -> None:
        reminder = self.get_reminder(reminder_id)
        self.db.delete(reminder)
        commit_or_raise(self.db)
        logger.info(f"Deleted reminder {reminder_id}")

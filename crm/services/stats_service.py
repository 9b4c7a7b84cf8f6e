"""Dashboard statistics."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from crm.models.contact import Contact
from crm.models.enums import TaskStatus
from crm.models.reminder import Reminder
from crm.models.task import Task
from crm.schemas.stats import StatsResponse


class StatsService:
    """Aggregate counters for the dashboard."""

    def __init__(self, db: Session):
        self.db = db

    def _count(self, model, *criteria) -> int:
        return self.db.query(func.count(model.id)).filter(*criteria).scalar() or 0

    def get_stats(self) -> StatsResponse:
        """Count contacts, open/closed tasks and open reminders either side of now.

        "Now" is the database clock at query time.
        """
        open_reminder = Reminder.is_completed.is_(False)
        return StatsResponse(
            total_contacts=self._count(Contact),
            pending_tasks=self._count(Task, Task.status != TaskStatus.COMPLETED),
            completed_tasks=self._count(Task, Task.status == TaskStatus.COMPLETED),
            upcoming_reminders=self._count(
                Reminder, open_reminder, Reminder.reminder_date >= func.now()
            ),
            overdue_reminders=self._count(
                Reminder, open_reminder, Reminder.reminder_date < func.now()
            ),
        )

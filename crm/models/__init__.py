"""SQLAlchemy models."""

from crm.models.contact import Contact
from crm.models.reminder import Reminder
from crm.models.task import Task

__all__ = [
    "Contact",
    "Task",
    "Reminder",
]

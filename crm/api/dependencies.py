"""FastAPI dependencies that build services on the request's database session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from crm.database import get_db
from crm.services.contact_service import ContactService
from crm.services.reminder_service import ReminderService
from crm.services.stats_service import StatsService
from crm.services.task_service import TaskService


def get_contact_service(
    db: Annotated[Session, Depends(get_db)],
) -> ContactService:
    """Get contact service with its own random source for avatar colours."""
    return ContactService(db)


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service."""
    return TaskService(db)


def get_reminder_service(
    db: Annotated[Session, Depends(get_db)],
) -> ReminderService:
    """Get reminder service."""
    return ReminderService(db)


def get_stats_service(
    db: Annotated[Session, Depends(get_db)],
) -> StatsService:
    """Get stats service."""
    return StatsService(db)

"""Reminder API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from crm.api.dependencies import get_reminder_service
from crm.schemas.reminder import ReminderCreate, ReminderResponse, ReminderUpdate
from crm.services.reminder_service import MAX_YEAR, ReminderService

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.get("", response_model=list[ReminderResponse])
def get_reminders(
    service: Annotated[ReminderService, Depends(get_reminder_service)],
    upcoming: bool = Query(default=False, description="Only open reminders from now on"),
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=MAX_YEAR),
    contact_id: int | None = Query(default=None),
):
    """Get reminders, soonest first."""
    return service.list_reminders(upcoming=upcoming, month=month, year=year, contact_id=contact_id)


@router.post("", response_model=ReminderResponse, status_code=status.HTTP_201_CREATED)
def create_reminder(
    reminder_data: ReminderCreate,
    service: Annotated[ReminderService, Depends(get_reminder_service)],
):
    """Create a reminder."""
    return service.create_reminder(reminder_data)


@router.get("/{reminder_id}", response_model=ReminderResponse)
def get_reminder(
    reminder_id: int,
    service: Annotated[ReminderService, Depends(get_reminder_service)],
):
    """Get a specific reminder."""
    return service.get_reminder(reminder_id)


@router.put("/{reminder_id}", response_model=ReminderResponse)
def update_reminder(
    reminder_id: int,
    reminder_data: ReminderUpdate,
    service: Annotated[ReminderService, Depends(get_reminder_service)],
):
    """Update a reminder."""
    return service.update_reminder(reminder_id, reminder_data.model_dump(exclude_unset=True))


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reminder(
    reminder_id: int,
    service: Annotated[ReminderService, Depends(get_reminder_service)],
):
    """Delete a reminder."""
    service.delete_reminder(reminder_id)

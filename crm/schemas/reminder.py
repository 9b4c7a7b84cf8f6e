"""Reminder schemas."""

from pydantic import BaseModel, ConfigDict, Field

from crm.schemas.types import OptionalId, OptionalLongText, UTCDateTime


class ReminderCreate(BaseModel):
    """Create a new reminder."""

    title: str = Field(..., max_length=500)
    description: OptionalLongText = None
    reminder_date: UTCDateTime
    contact_id: OptionalId = None
    task_id: OptionalId = None


class ReminderUpdate(BaseModel):
    """Update a reminder. Only fields present in the request body are applied."""

    title: str | None = Field(None, max_length=500)
    description: OptionalLongText = None
    reminder_date: UTCDateTime | None = None
    is_completed: bool | None = None
    contact_id: OptionalId = None
    task_id: OptionalId = None


class ReminderResponse(BaseModel):
    """Reminder response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    contact_id: int | None
    task_id: int | None
    title: str
    description: str | None
    reminder_date: UTCDateTime
    is_completed: bool
    created_at: UTCDateTime
    contact_first_name: str | None = None
    contact_last_name: str | None = None

"""Contact schemas."""

from pydantic import BaseModel, ConfigDict, Field

from crm.schemas.reminder import ReminderResponse
from crm.schemas.task import TaskResponse
from crm.schemas.types import (
    OptionalEmail,
    OptionalLongText,
    OptionalPhone,
    OptionalShortText,
    UTCDateTime,
)


class ContactCreate(BaseModel):
    """Create a new contact. avatar_color is assigned by the server."""

    first_name: str = Field(..., max_length=255)
    last_name: str = Field(..., max_length=255)
    email: OptionalEmail = None
    phone: OptionalPhone = None
    company: OptionalShortText = None
    title: OptionalShortText = None
    notes: OptionalLongText = None


class ContactUpdate(BaseModel):
    """Update a contact. Only fields present in the request body are applied."""

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    email: OptionalEmail = None
    phone: OptionalPhone = None
    company: OptionalShortText = None
    title: OptionalShortText = None
    notes: OptionalLongText = None


class ContactResponse(BaseModel):
    """Contact response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str | None
    phone: str | None
    company: str | None
    title: str | None
    notes: str | None
    avatar_color: str
    created_at: UTCDateTime
    updated_at: UTCDateTime


class ContactDetailResponse(ContactResponse):
    """Contact with its tasks and reminders."""

    tasks: list[TaskResponse] = []
    reminders: list[ReminderResponse] = []

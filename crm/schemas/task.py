"""Task schemas."""

from pydantic import BaseModel, ConfigDict, Field

from crm.models.enums import TaskCategory, TaskPriority, TaskStatus
from crm.schemas.types import OptionalId, OptionalLongText, OptionalUTCDateTime, UTCDateTime


class TaskCreate(BaseModel):
    """Create a new task. sort_order is assigned by the server."""

    title: str = Field(..., max_length=500)
    description: OptionalLongText = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.PERSONAL
    due_date: OptionalUTCDateTime = None
    contact_id: OptionalId = None


class TaskUpdate(BaseModel):
    """Update a task. Only fields present in the request body are applied."""

    title: str | None = Field(None, max_length=500)
    description: OptionalLongText = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    category: TaskCategory | None = None
    due_date: OptionalUTCDateTime = None
    contact_id: OptionalId = None


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    contact_id: int | None
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    category: TaskCategory
    sort_order: int
    due_date: UTCDateTime | None
    created_at: UTCDateTime
    updated_at: UTCDateTime
    contact_first_name: str | None = None
    contact_last_name: str | None = None


class TaskReorderItem(BaseModel):
    """New position of one task after a drag-and-drop move."""

    id: int
    category: TaskCategory
    sort_order: int = Field(..., ge=0, le=2**31 - 1)


class TaskReorderRequest(BaseModel):
    """Full recomputed order of every category touched by a move."""

    items: list[TaskReorderItem]


class TaskReorderResponse(BaseModel):
    message: str
    updated: int

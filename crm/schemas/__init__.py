"""Pydantic schemas for API requests and responses."""

from crm.schemas.contact import (
    ContactCreate,
    ContactDetailResponse,
    ContactResponse,
    ContactUpdate,
)
from crm.schemas.reminder import ReminderCreate, ReminderResponse, ReminderUpdate
from crm.schemas.stats import StatsResponse
from crm.schemas.task import (
    TaskCreate,
    TaskReorderItem,
    TaskReorderRequest,
    TaskReorderResponse,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    "ContactCreate",
    "ContactUpdate",
    "ContactResponse",
    "ContactDetailResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskReorderItem",
    "TaskReorderRequest",
    "TaskReorderResponse",
    "ReminderCreate",
    "ReminderUpdate",
    "ReminderResponse",
    "StatsResponse",
]

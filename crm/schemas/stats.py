"""Dashboard stats schema."""

from pydantic import BaseModel, ConfigDict, Field


class StatsResponse(BaseModel):
    """Dashboard counters, serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    total_contacts: int = Field(..., alias="totalContacts")
    pending_tasks: int = Field(..., alias="pendingTasks")
    completed_tasks: int = Field(..., alias="completedTasks")
    upcoming_reminders: int = Field(..., alias="upcomingReminders")
    overdue_reminders: int = Field(..., alias="overdueReminders")

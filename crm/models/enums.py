"""Enums for model fields."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task workflow status. Any transition is allowed."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        """Quick-toggle between completed and pending, skipping in_progress."""
        if self == TaskStatus.COMPLETED:
            return TaskStatus.PENDING
        return TaskStatus.COMPLETED


class TaskPriority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort rank, high priority first."""
        return {TaskPriority.HIGH: 1, TaskPriority.MEDIUM: 2, TaskPriority.LOW: 3}[self]


class TaskCategory(str, Enum):
    """The three fixed task lists, in display order."""

    WORK = "work"
    PEOPLE = "people"
    PERSONAL = "personal"

    @property
    def rank(self) -> int:
        return list(TaskCategory).index(self)

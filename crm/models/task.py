"""Task model."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from crm.database import Base
from crm.exceptions import ConstraintError
from crm.models.enums import TaskCategory, TaskPriority, TaskStatus
from crm.models.mixins import TimestampMixin


def _enum_column_type(enum_cls: type, name: str) -> Enum:
    """Store enum values as strings guarded by a CHECK constraint."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        values_callable=lambda members: [member.value for member in members],
    )


class Task(Base, TimestampMixin):
    """Task in one of the three category lists, ordered by sort_order."""

    __tablename__ = "tasks"
    __table_args__ = (Index("ix_tasks_category_sort_order", "category", "sort_order"),)

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(
        Integer, ForeignKey("contacts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        _enum_column_type(TaskStatus, "task_status"),
        nullable=False,
        default=TaskStatus.PENDING,
        index=True,
    )
    priority = Column(
        _enum_column_type(TaskPriority, "task_priority"),
        nullable=False,
        default=TaskPriority.MEDIUM,
    )
    category = Column(
        _enum_column_type(TaskCategory, "task_category"),
        nullable=False,
        default=TaskCategory.PERSONAL,
        index=True,
    )
    # Not unique: duplicates are tolerated and tie-break on priority, due_date
    sort_order = Column(Integer, nullable=False, default=0)
    due_date = Column(DateTime(timezone=True), nullable=True, index=True)

    # Relationships
    contact = relationship("Contact", back_populates="tasks")
    reminders = relationship("Reminder", back_populates="task", passive_deletes=True)

    @validates("status", "priority", "category")
    def validate_enum_field(self, key, value):
        """Reject values outside the column's enumeration before they reach the database."""
        enum_cls = {"status": TaskStatus, "priority": TaskPriority, "category": TaskCategory}[key]
        try:
            return enum_cls(value)
        except ValueError:
            raise ConstraintError(f"Invalid {key}: {value!r}") from None

    @property
    def contact_first_name(self) -> str | None:
        return self.contact.first_name if self.contact else None

    @property
    def contact_last_name(self) -> str | None:
        return self.contact.last_name if self.contact else None

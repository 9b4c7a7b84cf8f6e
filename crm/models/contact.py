"""Contact model."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from crm.database import Base
from crm.models.mixins import TimestampMixin

DEFAULT_AVATAR_COLOR = "#0071e3"


class Contact(Base, TimestampMixin):
    """A person tracked in the CRM."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    avatar_color = Column(String(20), nullable=False, default=DEFAULT_AVATAR_COLOR)

    # Relationships
    # The database nulls tasks.contact_id and deletes reminders on contact delete
    tasks = relationship(
        "Task",
        back_populates="contact",
        passive_deletes=True,
        order_by="Task.due_date",
    )
    reminders = relationship(
        "Reminder",
        back_populates="contact",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Reminder.reminder_date",
    )

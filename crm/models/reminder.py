"""Reminder model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from crm.database import Base
from crm.models.mixins import CreatedAtMixin


class Reminder(Base, CreatedAtMixin):
    """Dated note, optionally linked to a contact and a task. Never delivered."""

    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(
        Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=True, index=True
    )
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="SET NULL"), nullable=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    reminder_date = Column(DateTime(timezone=True), nullable=False, index=True)
    is_completed = Column(Boolean, nullable=False, default=False)

    # Relationships
    contact = relationship("Contact", back_populates="reminders")
    task = relationship("Task", back_populates="reminders")

    @property
    def contact_first_name(self) -> str | None:
        return self.contact.first_name if self.contact else None

    @property
    def contact_last_name(self) -> str | None:
        return self.contact.last_name if self.contact else None

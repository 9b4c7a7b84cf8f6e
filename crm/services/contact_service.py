"""Contact service."""

import logging
import random
from typing import Any, Literal

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from crm.exceptions import NotFoundError
from crm.models.contact import Contact
from crm.models.task import Task
from crm.schemas.contact import ContactCreate
from crm.services.avatar import pick_avatar_color
from crm.services.base import commit_or_raise, require_text

logger = logging.getLogger(__name__)

ContactSortField = Literal["first_name", "last_name", "company", "created_at", "updated_at"]
SortDirection = Literal["asc", "desc"]

REQUIRED_FIELDS = {"first_name", "last_name"}


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ContactService:
    """Service for contact CRUD and search."""

    def __init__(self, db: Session, rng: random.Random | None = None):
        self.db = db
        self.rng = rng or random.Random()

    def list_contacts(
        self,
        search: str | None = None,
        sort: ContactSortField = "updated_at",
        order: SortDirection = "desc",
    ) -> list[Contact]:
        """List contacts, optionally filtered by a case-insensitive substring."""
        query = self.db.query(Contact)

        if search and search.strip():
            pattern = _like_pattern(search.strip())
            query = query.filter(
                or_(
                    Contact.first_name.ilike(pattern, escape="\\"),
                    Contact.last_name.ilike(pattern, escape="\\"),
                    Contact.email.ilike(pattern, escape="\\"),
                    Contact.company.ilike(pattern, escape="\\"),
                )
            )

        column = getattr(Contact, sort)
        if order == "asc":
            query = query.order_by(column.asc(), Contact.id.asc())
        else:
            query = query.order_by(column.desc(), Contact.id.desc())
        return query.all()

    def get_contact(self, contact_id: int, with_related: bool = False) -> Contact:
        query = self.db.query(Contact)
        if with_related:
            query = query.options(
                selectinload(Contact.tasks).joinedload(Task.contact),
                selectinload(Contact.reminders),
            )
        contact = query.filter(Contact.id == contact_id).first()
        if not contact:
            raise NotFoundError("Contact", contact_id)
        return contact

    def create_contact(self, data: ContactCreate) -> Contact:
        """Create a contact with a randomly assigned avatar colour."""
        contact = Contact(
            first_name=require_text(data.first_name, "first_name"),
            last_name=require_text(data.last_name, "last_name"),
            email=data.email,
            phone=data.phone,
            company=data.company,
            title=data.title,
            notes=data.notes,
            avatar_color=pick_avatar_color(self.rng),
        )
        self.db.add(contact)
        commit_or_raise(self.db)
        self.db.refresh(contact)
        logger.info(f"Created contact {contact.id}")
        return contact

    def update_contact(self, contact_id: int, changes: dict[str, Any]) -> Contact:
        """Apply the fields present in changes; null or empty clears optional fields."""
        contact = self.get_contact(contact_id)
        changes = dict(changes)
        for field in REQUIRED_FIELDS:
            if changes.get(field) is not None:
                changes[field] = require_text(changes[field], field)

        for field, value in changes.items():
            if value is None and field in REQUIRED_FIELDS:
                continue
            setattr(contact, field, value)

        commit_or_raise(self.db)
        self.db.refresh(contact)
        return contact

    def delete_contact(self, contact_id: int) -> None:
        """Delete a contact, its reminders, and unlink its tasks."""
        contact = self.get_contact(contact_id)
        self.db.delete(contact)
        commit_or_raise(self.db)
        logger.info(f"Deleted contact {contact_id}")

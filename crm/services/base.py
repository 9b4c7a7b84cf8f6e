"""Helpers shared by the CRUD services."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crm.exceptions import ConstraintError, ValidationError

logger = logging.getLogger(__name__)


def require_text(value: str | None, field: str) -> str:
    """Return the stripped value, or raise if it is missing or blank."""
    cleaned = (value or "").strip()
    if not cleaned:
        label = field.replace("_", " ").capitalize()
        raise ValidationError.for_field(field, f"{label} is required")
    return cleaned


def describe_integrity_error(error: IntegrityError) -> str:
    """Turn a driver integrity message into a caller-safe description."""
    text = str(error.orig).lower()
    if "foreign key" in text:
        return "Referenced record does not exist"
    if "check constraint" in text or "constraint failed" in text:
        return "Value violates a database constraint"
    return "Database constraint violated"


def commit_or_raise(db: Session) -> None:
    """Commit the session, mapping integrity failures to ConstraintError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error on commit: {e.orig}")
        raise ConstraintError(describe_integrity_error(e)) from e

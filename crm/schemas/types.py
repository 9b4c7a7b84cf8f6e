"""Shared field types for request and response schemas."""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, EmailStr, Field


def blank_to_none(value: Any) -> Any:
    """Treat an empty or whitespace-only string as an explicit null."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def as_utc(value: datetime) -> datetime:
    """Normalize to an aware UTC datetime; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def optional_text(max_length: int) -> Any:
    """Nullable string where present-but-empty clears the stored value."""
    return Annotated[
        Annotated[str, Field(max_length=max_length)] | None,
        BeforeValidator(blank_to_none),
    ]


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

OptionalEmail = Annotated[EmailStr | None, BeforeValidator(blank_to_none)]
OptionalId = Annotated[int | None, BeforeValidator(blank_to_none)]
OptionalUTCDateTime = Annotated[UTCDateTime | None, BeforeValidator(blank_to_none)]
OptionalShortText = optional_text(255)
OptionalPhone = optional_text(50)
OptionalLongText = optional_text(10000)

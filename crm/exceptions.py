"""Domain errors raised by services and translated to HTTP responses in crm.main."""

from typing import Any


class CRMError(Exception):
    """Base class for errors the API reports to the caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message}


class ValidationError(CRMError):
    """A required field is missing or malformed."""

    status_code = 400

    def __init__(self, errors: list[dict[str, str]]):
        super().__init__("Validation failed")
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "errors": self.errors}


class NotFoundError(CRMError):
    """A referenced record does not exist."""

    status_code = 404

    def __init__(self, resource: str, ids: int | list[int] | None = None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.ids = ids


class ConstraintError(CRMError):
    """An enumeration or foreign key constraint was violated."""

    status_code = 400


class TransactionError(CRMError):
    """A batch write failed and was rolled back; the caller should refetch."""

    status_code = 409

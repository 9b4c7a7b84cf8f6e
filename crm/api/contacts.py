"""Contact API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from crm.api.dependencies import get_contact_service
from crm.schemas.contact import (
    ContactCreate,
    ContactDetailResponse,
    ContactResponse,
    ContactUpdate,
)
from crm.services.contact_service import ContactService, ContactSortField, SortDirection

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("", response_model=list[ContactResponse])
def get_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)],
    search: str | None = Query(default=None, description="Match name, email or company"),
    sort: ContactSortField = Query(default="updated_at"),
    order: SortDirection = Query(default="desc"),
):
    """Get all contacts."""
    return service.list_contacts(search=search, sort=sort, order=order)


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_data: ContactCreate,
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Create a new contact."""
    return service.create_contact(contact_data)


@router.get("/{contact_id}", response_model=ContactDetailResponse)
def get_contact(
    contact_id: int,
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Get a contact with its tasks and reminders."""
    return service.get_contact(contact_id, with_related=True)


@router.put("/{contact_id}", response_model=ContactResponse)
def update_contact(
    contact_id: int,
    contact_data: ContactUpdate,
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Update a contact."""
    return service.update_contact(contact_id, contact_data.model_dump(exclude_unset=True))


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(
    contact_id: int,
    service: Annotated[ContactService, Depends(get_contact_service)],
):
    """Delete a contact and its reminders; its tasks are kept unlinked."""
    service.delete_contact(contact_id)

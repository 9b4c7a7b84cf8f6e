"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from crm.api.dependencies import get_task_service
from crm.models.enums import TaskCategory, TaskPriority, TaskStatus
from crm.schemas.task import (
    TaskCreate,
    TaskReorderRequest,
    TaskReorderResponse,
    TaskResponse,
    TaskUpdate,
)
from crm.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def get_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    task_status: TaskStatus | None = Query(default=None, alias="status"),
    priority: TaskPriority | None = Query(default=None),
    category: TaskCategory | None = Query(default=None),
    contact_id: int | None = Query(default=None),
):
    """Get all tasks, grouped by category and ordered within each list."""
    return service.list_tasks(
        status=task_status, priority=priority, category=category, contact_id=contact_id
    )


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task at the end of its category."""
    return service.create_task(task_data)


# Declared before /{task_id} so "reorder" is not parsed as an id
@router.put("/reorder", response_model=TaskReorderResponse)
def reorder_tasks(
    reorder_data: TaskReorderRequest,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Apply a drag-and-drop move as one all-or-nothing batch."""
    updated = service.reorder(reorder_data.items)
    return TaskReorderResponse(message="Tasks reordered", updated=updated)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a specific task."""
    return service.get_task(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update a task."""
    return service.update_task(task_id, task_data.model_dump(exclude_unset=True))


@router.post("/{task_id}/toggle", response_model=TaskResponse)
def toggle_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Toggle a task between completed and pending."""
    return service.toggle_task(task_id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    service.delete_task(task_id)

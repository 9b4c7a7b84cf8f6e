"""Task service: per-category ordering, filtered reads and batch reordering."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import case, func
from sqlalchemy.orm import Query, Session, joinedload

from crm.exceptions import CRMError, NotFoundError, TransactionError, ValidationError
from crm.models.enums import TaskCategory, TaskPriority, TaskStatus
from crm.models.task import Task
from crm.schemas.task import TaskCreate, TaskReorderItem
from crm.services.base import commit_or_raise, require_text

logger = logging.getLogger(__name__)

# Columns that cannot be cleared; an explicit null in an update leaves them unchanged
REQUIRED_FIELDS = {"title", "status", "priority", "category"}


def task_ordering() -> list:
    """ORDER BY for task lists: category, sort_order, then priority and due date as tie-breaks."""
    category_rank = case(
        *[(Task.category == category, category.rank) for category in TaskCategory],
        else_=len(TaskCategory),
    )
    priority_rank = case(
        *[(Task.priority == priority, priority.rank) for priority in TaskPriority],
        else_=len(TaskPriority) + 1,
    )
    return [
        category_rank,
        Task.sort_order.asc(),
        priority_rank,
        Task.due_date.asc().nullslast(),
        Task.id.asc(),
    ]


class TaskService:
    """Service for task CRUD and the drag-and-drop ordering protocol."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(Task).options(joinedload(Task.contact))

    def list_tasks(
        self,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        category: TaskCategory | None = None,
        contact_id: int | None = None,
    ) -> list[Task]:
        """List tasks matching all given filters, in display order."""
        query = self._query()
        if status is not None:
            query = query.filter(Task.status == status)
        if priority is not None:
            query = query.filter(Task.priority == priority)
        if category is not None:
            query = query.filter(Task.category == category)
        if contact_id is not None:
            query = query.filter(Task.contact_id == contact_id)
        return query.order_by(*task_ordering()).all()

    def get_task(self, task_id: int) -> Task:
        task = self._query().filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task", task_id)
        return task

    def next_sort_order(self, category: TaskCategory | str) -> int:
        """Position one past the last task in the category, 0 when it is empty."""
        max_order = (
            self.db.query(func.max(Task.sort_order)).filter(Task.category == category).scalar()
        )
        return 0 if max_order is None else max_order + 1

    def create_task(self, data: TaskCreate) -> Task:
        """Create a task appended to the end of its category."""
        title = require_text(data.title, "title")
        task = Task(
            title=title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            category=data.category,
            due_date=data.due_date,
            contact_id=data.contact_id,
        )
        task.sort_order = self.next_sort_order(task.category)
        self.db.add(task)
        commit_or_raise(self.db)
        self.db.refresh(task)
        logger.info(f"Created task {task.id} in {task.category.value} at position {task.sort_order}")
        return task

    def update_task(self, task_id: int, changes: dict[str, Any]) -> Task:
        """Apply the fields present in changes.

        Moving a task to another category through an update appends it to the
        destination list; the source list keeps a gap until the next reorder.
        """
        task = self.get_task(task_id)
        changes = dict(changes)
        if changes.get("title") is not None:
            changes["title"] = require_text(changes["title"], "title")

        for field, value in changes.items():
            if field == "category":
                continue
            if value is None and field in REQUIRED_FIELDS:
                continue
            setattr(task, field, value)

        new_category = changes.get("category")
        if new_category is not None and TaskCategory(new_category) != task.category:
            task.sort_order = self.next_sort_order(new_category)
            task.category = new_category

        commit_or_raise(self.db)
        self.db.refresh(task)
        return task

    def toggle_task(self, task_id: int) -> Task:
        """Flip between completed and pending."""
        task = self.get_task(task_id)
        task.status = TaskStatus(task.status).toggled()
        commit_or_raise(self.db)
        self.db.refresh(task)
        return task

    def delete_task(self, task_id: int) -> None:
        """Delete a task. Linked reminders keep existing with task_id cleared."""
        task = self.get_task(task_id)
        self.db.delete(task)
        commit_or_raise(self.db)
        logger.info(f"Deleted task {task_id}")

    def reorder(self, items: Sequence[TaskReorderItem]) -> int:
        """Apply a batch of (id, category, sort_order) positions atomically.

        The batch is the complete recomputed order of every category touched by
        a move. Either every position is written or none is. Returns the number
        of tasks updated.
        """
        ids = [item.id for item in items]
        duplicates = sorted({task_id for task_id in ids if ids.count(task_id) > 1})
        if duplicates:
            raise ValidationError.for_field("items", f"Duplicate task ids in batch: {duplicates}")
        if not items:
            return 0

        try:
            # Row locks where supported; SQLite serializes writers on its own
            tasks = {
                task.id: task
                for task in self.db.query(Task).filter(Task.id.in_(ids)).with_for_update().all()
            }
            missing = [task_id for task_id in ids if task_id not in tasks]
            if missing:
                logger.warning(f"Rejected reorder referencing unknown tasks {missing}")
                raise NotFoundError("Task", missing)

            for item in items:
                self._apply_position(tasks[item.id], item.category, item.sort_order)

            self.db.commit()
        except CRMError:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            logger.exception("Reorder failed and was rolled back")
            raise TransactionError("Reorder failed; refetch tasks") from e

        logger.info(f"Reordered {len(items)} tasks")
        return len(items)

    def _apply_position(self, task: Task, category: TaskCategory | str, sort_order: int) -> None:
        task.category = category
        task.sort_order = sort_order
        self.db.flush()

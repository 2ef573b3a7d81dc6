"""
Task Repository.

Data access layer for tasks.
"""

from sqlalchemy import ColumnElement, case, select

from mindnote.backend.core.pagination import Page, PageRequest
from mindnote.backend.models.tag import Tag
from mindnote.backend.models.task import Task, TaskPriority, TaskStatus
from mindnote.backend.repositories.base import BaseRepository

# Enum columns sort by rank, not by label
_PRIORITY_RANK = case(
    {TaskPriority.LOW: 0, TaskPriority.MEDIUM: 1, TaskPriority.HIGH: 2},
    value=Task.priority,
)
_STATUS_RANK = case(
    {TaskStatus.TODO: 0, TaskStatus.IN_PROGRESS: 1, TaskStatus.DONE: 2},
    value=Task.status,
)


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model."""

    model = Task
    sort_columns = {
        "due_date": Task.due_date,
        "created_at": Task.created_at,
        "updated_at": Task.updated_at,
        "priority": _PRIORITY_RANK,
        "status": _STATUS_RANK,
    }

    async def find_by_filters(
        self,
        page_request: PageRequest,
        status: TaskStatus | None = None,
        category_id: int | None = None,
        tag_name: str | None = None,
        note_id: int | None = None,
    ) -> Page[Task]:
        """
        Get one page of tasks matching every given filter.

        A filter left as None matches all tasks.

        Args:
            page_request: Page index, size and ordering
            status: Lifecycle state
            category_id: ID of the task's category
            tag_name: Exact name of one of the task's tags
            note_id: ID of the note the task is linked to

        Returns:
            Page of matching tasks
        """
        criteria = []
        if status is not None:
            criteria.append(Task.status == status)
        if category_id is not None:
            criteria.append(Task.category_id == category_id)
        if tag_name is not None:
            criteria.append(Task.tags.any(Tag.name == tag_name))
        if note_id is not None:
            criteria.append(Task.note_id == note_id)
        return await self.find_page(page_request, *criteria)

    async def clear_note(self, note_id: int) -> int:
        """
        Unlink every task from a note that is about to be deleted.

        Returns:
            Number of tasks updated
        """
        tasks = await self._where(Task.note_id == note_id)
        for task in tasks:
            task.note = None
        await self.session.flush()
        return len(tasks)

    async def clear_category(self, category_id: int) -> int:
        """
        Detach a category from every task that uses it.

        Returns:
            Number of tasks updated
        """
        tasks = await self._where(Task.category_id == category_id)
        for task in tasks:
            task.category = None
        await self.session.flush()
        return len(tasks)

    async def _where(self, criterion: ColumnElement[bool]) -> list[Task]:
        result = await self.session.execute(select(Task).where(criterion))
        return list(result.scalars().all())

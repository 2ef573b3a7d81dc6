"""
Task Service.

Business logic layer for tasks: filtered listing, full-replacement
updates, and the status lifecycle that drives ``completed_at``.
"""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.exceptions import NotFoundError
from mindnote.backend.core.pagination import Page, PageRequest, SortDirection
from mindnote.backend.core.utils import utc_now
from mindnote.backend.models.task import Task, TaskPriority, TaskStatus
from mindnote.backend.repositories.task import TaskRepository
from mindnote.backend.schemas.task import TaskRequest, TaskResponse
from mindnote.backend.services.base import BaseService
from mindnote.backend.services.relations import RelationBinder
from mindnote.backend.services.tag import TagResolver

DEFAULT_TASK_PAGE = PageRequest(sort="due_date", direction=SortDirection.ASC)


def next_completed_at(
    current: datetime | None,
    new_status: TaskStatus,
    now: datetime | None = None,
) -> datetime | None:
    """
    Compute ``completed_at`` after a task moves to ``new_status``.

    Moving to DONE keeps an existing completion time and otherwise
    stamps ``now``. Any other status clears it.

    Args:
        current: Completion time before the transition
        new_status: Status being applied
        now: Timestamp to use when stamping; defaults to the current time

    Returns:
        The completion time to store
    """
    if new_status == TaskStatus.DONE:
        if current is not None:
            return current
        return now or utc_now()
    return None


class TaskService(BaseService):
    """
    Service for task business logic.

    Update replaces title, description, due date, category, tags and
    the note link. Status and priority are only changed when supplied.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TaskRepository(session)
        self.relations = RelationBinder(session)
        self.tags = TagResolver(session)

    async def list_tasks(
        self,
        status: TaskStatus | None = None,
        category_id: int | None = None,
        tag: str | None = None,
        note_id: int | None = None,
        page: PageRequest | None = None,
    ) -> Page[TaskResponse]:
        """
        List tasks matching every supplied filter.

        Args:
            status: Lifecycle state
            category_id: Category ID
            tag: Tag name
            note_id: Linked note ID
            page: Page request; defaults to earliest due date first

        Returns:
            Page of task projections
        """
        page = page or DEFAULT_TASK_PAGE
        self._log_debug(
            "Listing tasks",
            status=status,
            category_id=category_id,
            tag=tag,
            note_id=note_id,
            page=page.page,
            size=page.size,
        )

        if status is None and category_id is None and tag is None and note_id is None:
            tasks = await self.repo.get_page(page)
        else:
            tasks = await self.repo.find_by_filters(
                page,
                status=status,
                category_id=category_id,
                tag_name=tag,
                note_id=note_id,
            )
        return tasks.map(TaskResponse.from_model)

    async def get_task(self, task_id: int) -> TaskResponse:
        """
        Get a task by ID.

        Raises:
            NotFoundError: If task not found
        """
        return TaskResponse.from_model(await self.repo.get_by_id(task_id))

    async def create_task(self, data: TaskRequest) -> TaskResponse:
        """
        Create a new task.

        Status defaults to TODO and priority to MEDIUM. A task created
        as DONE is stamped as completed now.

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If the category or note does not exist
        """
        self._validate_required({"title": data.title}, ["title"])
        self._log_operation("Creating task", title=data.title)

        category = await self.relations.bind_category(data.category_id)
        note = await self.relations.bind_note(data.note_id)
        tags = await self.tags.resolve_tags(data.tags)

        now = utc_now()
        status = data.status or TaskStatus.TODO
        task = Task(
            title=data.title,
            description=data.description,
            status=status,
            priority=data.priority or TaskPriority.MEDIUM,
            due_date=data.due_date,
            completed_at=next_completed_at(None, status, now),
            category=category,
            note=note,
            tags=tags,
            created_at=now,
            updated_at=now,
        )
        task = await self._execute_db_operation("create_task", self.repo.save(task))

        self._log_debug("Task created", task_id=task.id, status=task.status)
        return TaskResponse.from_model(task)

    async def update_task(self, task_id: int, data: TaskRequest) -> TaskResponse:
        """
        Replace an existing task.

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If the task, category or note does not exist
        """
        self._validate_required({"title": data.title}, ["title"])
        task = await self.repo.get_by_id(task_id)

        self._log_operation(
            "Updating task",
            task_id=task_id,
            status=data.status,
            previous_status=task.status,
        )

        category = await self.relations.bind_category(data.category_id)
        note = await self.relations.bind_note(data.note_id)
        tags = await self.tags.resolve_tags(data.tags)

        now = utc_now()
        task.title = data.title
        task.description = data.description
        task.due_date = data.due_date
        task.category = category
        task.note = note
        task.tags = tags

        if data.status is not None:
            task.completed_at = next_completed_at(task.completed_at, data.status, now)
            task.status = data.status

        # Priority keeps its value when the request leaves it out
        if data.priority is not None:
            task.priority = data.priority

        task.updated_at = now

        task = await self._execute_db_operation("update_task", self.repo.save(task))
        return TaskResponse.from_model(task)

    async def delete_task(self, task_id: int) -> None:
        """
        Delete a task and its tag links.

        Raises:
            NotFoundError: If task not found
        """
        if not await self.repo.exists(task_id):
            raise NotFoundError.for_entity("Task", task_id)

        self._log_operation("Deleting task", task_id=task_id)
        await self._execute_db_operation("delete_task", self.repo.delete(task_id))

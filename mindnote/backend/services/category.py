"""
Category Service.

Categories are shared reference data: created and deleted on their own,
assigned to notes and tasks by ID.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.exceptions import ConflictError
from mindnote.backend.repositories.category import CategoryRepository
from mindnote.backend.repositories.note import NoteRepository
from mindnote.backend.repositories.task import TaskRepository
from mindnote.backend.schemas.category import CategoryCreate, CategoryResponse
from mindnote.backend.services.base import BaseService


class CategoryService(BaseService):
    """Service for category business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = CategoryRepository(session)
        self.note_repo = NoteRepository(session)
        self.task_repo = TaskRepository(session)

    async def list_categories(self) -> list[CategoryResponse]:
        """List every category ordered by name."""
        categories = await self.repo.list_all()
        return [CategoryResponse.model_validate(c) for c in categories]

    async def get_category(self, category_id: int) -> CategoryResponse:
        """
        Get a category by ID.

        Raises:
            NotFoundError: If category not found
        """
        category = await self.repo.get_by_id(category_id)
        return CategoryResponse.model_validate(category)

    async def create_category(self, data: CategoryCreate) -> CategoryResponse:
        """
        Create a category with a unique name.

        Raises:
            ValidationError: If the name is blank
            ConflictError: If the name is already taken
        """
        self._validate_required({"name": data.name}, ["name"])

        if await self.repo.get_by_name(data.name) is not None:
            raise ConflictError(f"Category already exists: {data.name}")

        self._log_operation("Creating category", name=data.name)
        category = await self._execute_db_operation(
            "create_category",
            self.repo.create(name=data.name),
        )
        return CategoryResponse.model_validate(category)

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category and detach it from notes and tasks.

        Raises:
            NotFoundError: If category not found
        """
        category = await self.repo.get_by_id(category_id)

        self._log_operation("Deleting category", category_id=category_id)
        notes = await self.note_repo.clear_category(category_id)
        tasks = await self.task_repo.clear_category(category_id)
        await self._execute_db_operation(
            "delete_category",
            self.repo.delete_instance(category),
        )
        self._log_debug(
            "Category detached",
            category_id=category_id,
            notes=notes,
            tasks=tasks,
        )

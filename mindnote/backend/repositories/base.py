"""
Base Repository.

Base class for all repositories with common CRUD operations and the
filtered, paged query used by every list endpoint.
"""

from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.exceptions import NotFoundError
from mindnote.backend.core.logging import get_logger
from mindnote.backend.core.pagination import Page, PageRequest
from mindnote.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses set the model class and, if they can be listed page by
    page, the sortable fields:

        class NoteRepository(BaseRepository[Note]):
            model = Note
            sort_columns = {"title": Note.title}
    """

    model: type[ModelType]
    sort_columns: ClassVar[dict[str, Any]] = {}

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    async def get_by_id(self, id: int) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)
        if instance is None:
            raise NotFoundError.for_entity(self.entity_name, id)
        return instance

    async def get_by_id_or_none(self, id: int) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_all(self, limit: int = 50, offset: int = 0) -> list[ModelType]:
        """Get all records ordered by ID."""
        result = await self.session.execute(
            select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        )
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """Insert or update an instance whose relations are already set."""
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def delete(self, id: int) -> None:
        """
        Delete a record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id(id)
        await self.delete_instance(instance)

    async def delete_instance(self, instance: ModelType) -> None:
        """Delete an already loaded record, including its link rows."""
        await self.session.delete(instance)
        await self.session.flush()

    async def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None

    async def get_page(self, page_request: PageRequest) -> Page[ModelType]:
        """Unfiltered paged scan."""
        return await self.find_page(page_request)

    async def find_page(
        self,
        page_request: PageRequest,
        *criteria: ColumnElement[bool],
    ) -> Page[ModelType]:
        """
        Run one paged query with every criterion AND-ed together.

        Ordering is the requested sort field with NULLs last, then ID
        ascending so rows with equal sort values keep a stable order
        across pages.

        Raises:
            ValidationError: If the sort field is not in ``sort_columns``
        """
        page_request.ensure_sortable(self.sort_columns)

        sort_expr = self.sort_columns[page_request.sort]
        ordered = sort_expr.desc() if page_request.descending else sort_expr.asc()

        query = select(self.model)
        count_query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
            count_query = count_query.where(*criteria)

        query = (
            query.order_by(ordered.nulls_last(), self.model.id.asc())
            .limit(page_request.size)
            .offset(page_request.offset)
        )

        total = (await self.session.execute(count_query)).scalar_one()
        items = list((await self.session.execute(query)).scalars().all())

        logger.debug(
            "Page fetched",
            extra={
                "entity": self.entity_name,
                "page": page_request.page,
                "returned": len(items),
                "total": total,
                "filtered": bool(criteria),
            },
        )

        return Page(
            items=items,
            page=page_request.page,
            size=page_request.size,
            total=total,
            sort=page_request.sort,
            direction=page_request.direction,
        )

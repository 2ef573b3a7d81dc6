"""
Category Repository.

Data access layer for categories.
"""

from sqlalchemy import select

from mindnote.backend.models.category import Category
from mindnote.backend.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model."""

    model = Category

    async def get_by_name(self, name: str) -> Category | None:
        """Get a category by exact name."""
        result = await self.session.execute(
            select(Category).where(Category.name == name)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Category]:
        """Get all categories ordered by name."""
        result = await self.session.execute(
            select(Category).order_by(Category.name, Category.id)
        )
        return list(result.scalars().all())

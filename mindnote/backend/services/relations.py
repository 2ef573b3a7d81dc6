"""
Relation Binder.

Resolves the category and note references carried by a request into
loaded records, so that services never persist a dangling reference.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.models.category import Category
from mindnote.backend.models.note import Note
from mindnote.backend.repositories.category import CategoryRepository
from mindnote.backend.repositories.note import NoteRepository
from mindnote.backend.services.base import BaseService


class RelationBinder(BaseService):
    """Existence-checked lookup of referenced records."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.category_repo = CategoryRepository(session)
        self.note_repo = NoteRepository(session)

    async def bind_category(self, category_id: int | None) -> Category | None:
        """
        Resolve a category reference.

        Returns None when no ID is given, which clears the association.

        Raises:
            NotFoundError: If no category has this ID
        """
        if category_id is None:
            return None
        return await self.category_repo.get_by_id(category_id)

    async def bind_note(self, note_id: int | None) -> Note | None:
        """
        Resolve a note reference.

        Raises:
            NotFoundError: If no note has this ID
        """
        if note_id is None:
            return None
        return await self.note_repo.get_by_id(note_id)

"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import select

from mindnote.backend.core.pagination import Page, PageRequest
from mindnote.backend.models.category import Category
from mindnote.backend.models.note import Note
from mindnote.backend.models.tag import Tag
from mindnote.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note
    sort_columns = {
        "title": Note.title,
        "created_at": Note.created_at,
        "updated_at": Note.updated_at,
    }

    async def find_by_filters(
        self,
        page_request: PageRequest,
        category_name: str | None = None,
        tag_name: str | None = None,
    ) -> Page[Note]:
        """
        Get one page of notes matching every given filter.

        A filter left as None matches all notes.

        Args:
            page_request: Page index, size and ordering
            category_name: Exact name of the note's category
            tag_name: Exact name of one of the note's tags

        Returns:
            Page of matching notes
        """
        criteria = []
        if category_name is not None:
            criteria.append(Note.category.has(Category.name == category_name))
        if tag_name is not None:
            criteria.append(Note.tags.any(Tag.name == tag_name))
        return await self.find_page(page_request, *criteria)

    async def clear_category(self, category_id: int) -> int:
        """
        Detach a category from every note that uses it.

        Returns:
            Number of notes updated
        """
        result = await self.session.execute(
            select(Note).where(Note.category_id == category_id)
        )
        notes = list(result.scalars().all())
        for note in notes:
            note.category = None
        await self.session.flush()
        return len(notes)

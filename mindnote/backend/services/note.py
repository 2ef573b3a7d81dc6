"""
Note Service.

Business logic layer for notes. Orchestrates repositories, resolves
category and tag references, and projects notes into response shapes.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.pagination import Page, PageRequest, SortDirection
from mindnote.backend.core.utils import utc_now
from mindnote.backend.models.note import Note
from mindnote.backend.repositories.note import NoteRepository
from mindnote.backend.repositories.task import TaskRepository
from mindnote.backend.schemas.note import NoteRequest, NoteResponse
from mindnote.backend.services.base import BaseService
from mindnote.backend.services.relations import RelationBinder
from mindnote.backend.services.tag import TagResolver

DEFAULT_NOTE_PAGE = PageRequest(sort="updated_at", direction=SortDirection.DESC)


class NoteService(BaseService):
    """
    Service for note business logic.

    Create and update both take a full NoteRequest: an update replaces
    title, content, category and the complete tag set.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.task_repo = TaskRepository(session)
        self.relations = RelationBinder(session)
        self.tags = TagResolver(session)

    async def list_notes(
        self,
        category: str | None = None,
        tag: str | None = None,
        page: PageRequest | None = None,
    ) -> Page[NoteResponse]:
        """
        List notes, optionally filtered by category name and tag name.

        Without filters this is a plain paged scan.

        Args:
            category: Category name to match
            tag: Tag name to match
            page: Page request; defaults to newest updates first

        Returns:
            Page of note projections
        """
        page = page or DEFAULT_NOTE_PAGE
        self._log_debug(
            "Listing notes",
            category=category,
            tag=tag,
            page=page.page,
            size=page.size,
        )

        if category is None and tag is None:
            notes = await self.repo.get_page(page)
        else:
            notes = await self.repo.find_by_filters(
                page,
                category_name=category,
                tag_name=tag,
            )
        return notes.map(NoteResponse.from_model)

    async def get_note(self, note_id: int) -> NoteResponse:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return NoteResponse.from_model(await self.repo.get_by_id(note_id))

    async def create_note(self, data: NoteRequest) -> NoteResponse:
        """
        Create a new note.

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If the category does not exist
        """
        self._validate_required({"title": data.title}, ["title"])
        self._log_operation("Creating note", title=data.title)

        category = await self.relations.bind_category(data.category_id)
        tags = await self.tags.resolve_tags(data.tags)

        now = utc_now()
        note = Note(
            title=data.title,
            content=data.content,
            category=category,
            tags=tags,
            created_at=now,
            updated_at=now,
        )
        note = await self._execute_db_operation("create_note", self.repo.save(note))

        self._log_debug("Note created", note_id=note.id)
        return NoteResponse.from_model(note)

    async def update_note(self, note_id: int, data: NoteRequest) -> NoteResponse:
        """
        Replace an existing note.

        Tags not named in the request are removed from the note.

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If the note or the category does not exist
        """
        self._validate_required({"title": data.title}, ["title"])
        note = await self.repo.get_by_id(note_id)

        self._log_operation("Updating note", note_id=note_id)

        category = await self.relations.bind_category(data.category_id)
        tags = await self.tags.resolve_tags(data.tags)

        note.title = data.title
        note.content = data.content
        note.category = category
        note.tags = tags
        note.updated_at = utc_now()

        note = await self._execute_db_operation("update_note", self.repo.save(note))
        return NoteResponse.from_model(note)

    async def delete_note(self, note_id: int) -> None:
        """
        Delete a note and its tag links.

        Tasks linked to the note stay, with the link cleared.

        Raises:
            NotFoundError: If note not found
        """
        note = await self.repo.get_by_id(note_id)

        self._log_operation("Deleting note", note_id=note_id)
        unlinked = await self.task_repo.clear_note(note_id)
        await self._execute_db_operation(
            "delete_note",
            self.repo.delete_instance(note),
        )
        if unlinked:
            self._log_debug("Tasks unlinked from deleted note", note_id=note_id, tasks=unlinked)

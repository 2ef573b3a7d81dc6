"""
Tag Repository.

Data access for tags, including the find-or-create primitive that keeps
one row per tag name when several requests create the same tag at once.
"""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError

from mindnote.backend.core.exceptions import DatabaseError
from mindnote.backend.core.logging import get_logger
from mindnote.backend.models.tag import Tag
from mindnote.backend.repositories.base import BaseRepository

logger = get_logger(__name__)

# Dialects with INSERT ... ON CONFLICT DO NOTHING
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag model."""

    model = Tag

    async def get_by_name(self, name: str) -> Tag | None:
        """Get a tag by exact (case-sensitive) name."""
        result = await self.session.execute(
            select(Tag).where(Tag.name == name)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Tag]:
        """Get all tags ordered by name."""
        result = await self.session.execute(select(Tag).order_by(Tag.name, Tag.id))
        return list(result.scalars().all())

    async def get_or_create(self, name: str) -> Tag:
        """
        Return the tag with this name, creating it if needed.

        The insert ignores a unique-name conflict, so a tag created by a
        concurrent request in the meantime is picked up by the single
        re-read instead of surfacing as an error.

        Raises:
            DatabaseError: If the tag is still missing after the insert
        """
        tag = await self.get_by_name(name)
        if tag is not None:
            return tag

        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)

        if insert is not None:
            result = await self.session.execute(
                insert(Tag)
                .values(name=name)
                .on_conflict_do_nothing(index_elements=["name"])
            )
            if result.rowcount == 0:
                logger.info("Tag created concurrently, reusing it", extra={"tag": name})
        else:
            await self._insert_in_savepoint(name)

        tag = await self.get_by_name(name)
        if tag is None:
            logger.error("Tag missing after insert", extra={"tag": name})
            raise DatabaseError("Tag could not be created")
        return tag

    async def _insert_in_savepoint(self, name: str) -> None:
        """Insert inside a SAVEPOINT; a duplicate name only rolls back the savepoint."""
        try:
            async with self.session.begin_nested():
                self.session.add(Tag(name=name))
        except IntegrityError:
            logger.info("Tag created concurrently, reusing it", extra={"tag": name})

"""
Integration Tests for Tag find-or-create.

Runs the upsert path against a real database.
"""

import asyncio
from unittest.mock import patch

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from mindnote.backend.models import Base, Note, Tag
from mindnote.backend.repositories.tag import TagRepository
from mindnote.backend.schemas.note import NoteRequest
from mindnote.backend.services.note import NoteService


async def _tag_count(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Tag))).scalar_one()


async def test_creates_missing_tag(db_session: AsyncSession):
    repo = TagRepository(db_session)

    tag = await repo.get_or_create("Urgent")

    assert tag.id is not None
    assert tag.name == "Urgent"
    assert await _tag_count(db_session) == 1


async def test_repeated_calls_return_same_row(db_session: AsyncSession):
    repo = TagRepository(db_session)

    first = await repo.get_or_create("Urgent")
    second = await repo.get_or_create("Urgent")

    assert first.id == second.id
    assert await _tag_count(db_session) == 1


async def test_names_differing_in_case_are_distinct(db_session: AsyncSession):
    repo = TagRepository(db_session)

    await repo.get_or_create("urgent")
    await repo.get_or_create("Urgent")

    assert await _tag_count(db_session) == 2


async def test_converges_when_tag_appears_after_lookup(db_session: AsyncSession):
    """A row inserted by someone else between lookup and insert is reused."""
    winner = Tag(name="Urgent")
    db_session.add(winner)
    await db_session.flush()

    repo = TagRepository(db_session)
    real_lookup = repo.get_by_name
    lookups = []

    async def stale_first_lookup(name):
        lookups.append(name)
        if len(lookups) == 1:
            return None
        return await real_lookup(name)

    with patch.object(repo, "get_by_name", side_effect=stale_first_lookup):
        tag = await repo.get_or_create("Urgent")

    assert tag.id == winner.id
    assert lookups == ["Urgent", "Urgent"]
    assert await _tag_count(db_session) == 1


async def test_concurrent_sessions_share_one_tag_row(tmp_path):
    """Two requests creating the same tag at once end up with a single row."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tags.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def create(title: str, tags: set[str]):
        async with factory() as session:
            note = await NoteService(session).create_note(NoteRequest(title=title, tags=tags))
            await session.commit()
            return note

    try:
        first, second = await asyncio.gather(
            create("A", {"Work", "Urgent"}),
            create("B", {"Urgent", "Home"}),
        )

        async with factory() as session:
            names = (await session.execute(select(Tag.name))).scalars().all()
            notes = (await session.execute(select(func.count()).select_from(Note))).scalar_one()
    finally:
        await engine.dispose()

    assert sorted(names) == ["Home", "Urgent", "Work"]
    assert notes == 2
    assert first.tags == ["Urgent", "Work"]
    assert second.tags == ["Home", "Urgent"]

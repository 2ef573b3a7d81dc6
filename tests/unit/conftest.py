"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from mindnote.backend.models import Category, Note, Tag, Task, TaskPriority, TaskStatus


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    ``get_bind`` is synchronous on AsyncSession, so it is a MagicMock
    reporting a SQLite dialect.
    """
    session = AsyncMock()
    session.add = MagicMock()
    session.get_bind = MagicMock()
    session.get_bind.return_value.dialect.name = "sqlite"
    return session


@pytest.fixture
def mock_db_result() -> MagicMock:
    """
    Mock database query result.

    Usage:
        def test_query(mock_db_session, mock_db_result):
            mock_db_result.scalar_one_or_none.return_value = Tag(id=1, name="x")
            mock_db_session.execute.return_value = mock_db_result
    """
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=None)
    result.scalars = MagicMock()
    result.scalars.return_value.all = MagicMock(return_value=[])
    return result


@pytest.fixture
def make_note():
    """Build a transient Note with IDs and timestamps filled in."""

    def _make(id=1, title="Note", content=None, category=None, tags=()):
        stamp = datetime(2024, 1, 1, 12, 0, 0)
        return Note(
            id=id,
            title=title,
            content=content,
            category=category,
            tags=set(tags),
            created_at=stamp,
            updated_at=stamp,
        )

    return _make


@pytest.fixture
def make_task():
    """Build a transient Task with IDs and timestamps filled in."""

    def _make(
        id=1,
        title="Task",
        status=TaskStatus.TODO,
        priority=TaskPriority.MEDIUM,
        completed_at=None,
        category=None,
        note=None,
        tags=(),
    ):
        stamp = datetime(2024, 1, 1, 12, 0, 0)
        return Task(
            id=id,
            title=title,
            status=status,
            priority=priority,
            completed_at=completed_at,
            category=category,
            note=note,
            tags=set(tags),
            created_at=stamp,
            updated_at=stamp,
        )

    return _make


@pytest.fixture
def work_category() -> Category:
    return Category(id=7, name="Work")


@pytest.fixture
def urgent_tag() -> Tag:
    return Tag(id=3, name="Urgent")

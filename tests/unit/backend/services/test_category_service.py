"""
Unit Tests for Category Service.
"""

from unittest.mock import patch

import pytest

from mindnote.backend.core.exceptions import ConflictError, NotFoundError
from mindnote.backend.models import Category
from mindnote.backend.schemas.category import CategoryCreate
from mindnote.backend.services.category import CategoryService


@pytest.fixture
def service(mock_db_session):
    return CategoryService(mock_db_session)


async def test_create_category(service):
    with patch.object(service.repo, "get_by_name", return_value=None), \
         patch.object(service.repo, "create", return_value=Category(id=1, name="Work")) as mock_create:
        result = await service.create_category(CategoryCreate(name="Work"))

    mock_create.assert_awaited_once_with(name="Work")
    assert result.model_dump() == {"id": 1, "name": "Work"}


async def test_duplicate_name_conflicts(service, work_category):
    with patch.object(service.repo, "get_by_name", return_value=work_category), \
         patch.object(service.repo, "create") as mock_create:
        with pytest.raises(ConflictError):
            await service.create_category(CategoryCreate(name="Work"))

    mock_create.assert_not_called()


async def test_delete_detaches_notes_and_tasks(service, work_category):
    with patch.object(service.repo, "get_by_id", return_value=work_category), \
         patch.object(service.note_repo, "clear_category", return_value=1) as clear_notes, \
         patch.object(service.task_repo, "clear_category", return_value=0) as clear_tasks, \
         patch.object(service.repo, "delete_instance") as mock_delete:
        await service.delete_category(7)

    clear_notes.assert_awaited_once_with(7)
    clear_tasks.assert_awaited_once_with(7)
    mock_delete.assert_awaited_once_with(work_category)


async def test_get_missing_category(service):
    with patch.object(
        service.repo,
        "get_by_id",
        side_effect=NotFoundError.for_entity("Category", 2),
    ):
        with pytest.raises(NotFoundError):
            await service.get_category(2)

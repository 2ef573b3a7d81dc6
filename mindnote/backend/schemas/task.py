"""
Task Schemas.

Pydantic schemas for task API request/response validation.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindnote.backend.models.task import TaskPriority, TaskStatus

if TYPE_CHECKING:
    from mindnote.backend.models.task import Task


class TaskRequest(BaseModel):
    """
    Schema for creating or replacing a task.

    ``status`` and ``priority`` are optional. On create they default to
    TODO and MEDIUM; on update an omitted status or priority keeps the
    current value. ``completed_at`` is not accepted: it follows status.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Task title",
        examples=["Ship release 1.2"],
    )
    description: str | None = Field(
        default=None,
        description="Task description",
    )
    status: TaskStatus | None = Field(
        default=None,
        description="Lifecycle state",
    )
    priority: TaskPriority | None = Field(
        default=None,
        description="Priority level",
    )
    due_date: datetime | None = Field(
        default=None,
        description="Due date (UTC)",
    )
    category_id: int | None = Field(
        default=None,
        description="ID of an existing category",
    )
    tags: set[str] = Field(
        default_factory=set,
        description="Tag names; unknown names are created",
    )
    note_id: int | None = Field(
        default=None,
        description="ID of the note this task came from",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_empty_set(cls, value: object) -> object:
        return set() if value is None else value


class TaskResponse(BaseModel):
    """Schema for task in API responses."""

    id: int
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None
    completed_at: datetime | None
    category_id: int | None
    category_name: str | None
    tags: list[str]
    note_id: int | None
    note_title: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_model(cls, task: "Task") -> "TaskResponse":
        """Project a persisted task into its response shape."""
        category = task.category
        note = task.note
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            completed_at=task.completed_at,
            category_id=category.id if category else None,
            category_name=category.name if category else None,
            tags=sorted(tag.name for tag in task.tags),
            note_id=note.id if note else None,
            note_title=note.title if note else None,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

"""
Note Schemas.

Pydantic schemas for note API request/response validation.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from mindnote.backend.models.note import Note


class NoteRequest(BaseModel):
    """
    Schema for creating or replacing a note.

    Updates use the same schema: every field is replaced, so an omitted
    category or tag list clears the association.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Note title",
        examples=["Sprint planning"],
    )
    content: str | None = Field(
        default=None,
        description="Note content",
        examples=["Topics to cover on Monday."],
    )
    category_id: int | None = Field(
        default=None,
        description="ID of an existing category",
    )
    tags: set[str] = Field(
        default_factory=set,
        description="Tag names; unknown names are created",
        examples=[["Work", "Urgent"]],
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_empty_set(cls, value: object) -> object:
        return set() if value is None else value


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str | None = Field(description="Note content")
    category_id: int | None = Field(description="Category identifier")
    category_name: str | None = Field(description="Category name")
    tags: list[str] = Field(description="Tag names, sorted")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_model(cls, note: "Note") -> "NoteResponse":
        """Project a persisted note into its response shape."""
        category = note.category
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            category_id=category.id if category else None,
            category_name=category.name if category else None,
            tags=sorted(tag.name for tag in note.tags),
            created_at=note.created_at,
            updated_at=note.updated_at,
        )

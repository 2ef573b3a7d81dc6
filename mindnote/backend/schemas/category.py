"""
Category Schemas.

Pydantic schemas for category API request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Unique category name",
        examples=["Work"],
    )


class CategoryResponse(BaseModel):
    """Schema for category in API responses."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

"""
Tag Schemas.

Tags are created implicitly through notes and tasks, so only a
response schema exists.
"""

from pydantic import BaseModel, ConfigDict


class TagResponse(BaseModel):
    """Schema for tag in API responses."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

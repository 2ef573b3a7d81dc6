"""
Category Model.

Shared reference data. Notes and tasks point at a category but never
own it; deleting a note or task leaves its category untouched.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mindnote.backend.models.base import Base, IntegerIdMixin


class Category(IntegerIdMixin, Base):
    """Category database model."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r})>"

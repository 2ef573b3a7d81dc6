"""
Tag Model.

Tags are identified by their case-sensitive name. The unique constraint
on ``name`` is what lets concurrent find-or-create calls converge on a
single row.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mindnote.backend.models.base import Base, IntegerIdMixin


class Tag(IntegerIdMixin, Base):
    """Tag database model."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name!r})>"

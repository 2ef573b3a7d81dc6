"""
Note Model.

Database model for notes. Tags are attached through plain link rows in
``note_tags``; Tag has no collection pointing back at notes.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindnote.backend.models.base import Base, IntegerIdMixin, TimestampMixin
from mindnote.backend.models.category import Category
from mindnote.backend.models.tag import Tag

note_tags = Table(
    "note_tags",
    Base.metadata,
    Column("note_id", Integer, ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    A note has a title, optional content, at most one category and any
    number of tags. Updates replace the whole tag set.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    category: Mapped[Category | None] = relationship(lazy="selectin")
    tags: Mapped[set[Tag]] = relationship(
        secondary=note_tags,
        collection_class=set,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"

"""
Tag Resolver.

Turns the tag names of a note or task request into Tag records,
creating the ones that do not exist yet.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mindnote.backend.core.exceptions import ValidationError
from mindnote.backend.models.tag import Tag
from mindnote.backend.repositories.tag import TagRepository
from mindnote.backend.schemas.tag import TagResponse
from mindnote.backend.services.base import BaseService

MAX_TAG_LENGTH = 100


class TagResolver(BaseService):
    """Find-or-create resolution of tag names."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TagRepository(session)

    async def resolve_tags(self, names: set[str] | None) -> set[Tag]:
        """
        Resolve tag names to Tag records.

        Names are matched exactly, case included. Existing tags are
        returned untouched; missing ones are created.

        Args:
            names: Tag names; None or empty yields an empty set

        Returns:
            One Tag per distinct name

        Raises:
            ValidationError: If a name is blank or too long
        """
        if not names:
            return set()

        for name in names:
            if not name or not name.strip():
                raise ValidationError(
                    "Tag names must not be blank",
                    details={"missing_fields": ["tags"]},
                )
            self._validate_string_length(name, "tags", max_length=MAX_TAG_LENGTH)

        tags = set()
        for name in sorted(names):
            tags.add(await self.repo.get_or_create(name))

        self._log_debug("Tags resolved", tags=sorted(names))
        return tags

    async def list_tags(self) -> list[TagResponse]:
        """List every tag ordered by name."""
        return [TagResponse.model_validate(tag) for tag in await self.repo.list_all()]

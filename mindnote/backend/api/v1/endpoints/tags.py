"""
Tags API Endpoints.

Tags are created through notes and tasks; this router only lists them.
"""

from fastapi import APIRouter

from mindnote.backend.core.dependencies import DbSession, RequestId
from mindnote.backend.schemas.base import ApiResponse, ResponseMetadata
from mindnote.backend.schemas.tag import TagResponse
from mindnote.backend.services.tag import TagResolver

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[TagResponse]],
    summary="List tags",
)
async def list_tags(
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[TagResponse]]:
    """List all tags ordered by name."""
    tags = await TagResolver(db).list_tags()
    return ApiResponse(data=tags, metadata=ResponseMetadata(request_id=request_id))

"""
Notes API Endpoints.

REST API endpoints for note management.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from mindnote.backend.core.dependencies import DbSession, RequestId
from mindnote.backend.core.pagination import (
    PageRequest,
    SortDirection,
    create_paginated_response,
    page_request_dependency,
)
from mindnote.backend.schemas.base import ApiResponse, ResponseMetadata
from mindnote.backend.schemas.note import NoteRequest, NoteResponse
from mindnote.backend.services.note import NoteService

router = APIRouter()

note_page = page_request_dependency("updated_at", SortDirection.DESC)


@router.get(
    "",
    summary="List notes (paginated)",
    description=(
        "Get a page of notes. Filter by category name and/or tag name; "
        "sort by title, created_at or updated_at."
    ),
)
async def list_notes(
    db: DbSession,
    request_id: RequestId,
    page: PageRequest = Depends(note_page),
    category: str | None = Query(
        default=None,
        description="Only notes in the category with this name",
    ),
    tag: str | None = Query(
        default=None,
        description="Only notes carrying the tag with this name",
    ),
) -> dict[str, Any]:
    """List notes with filters and pagination."""
    service = NoteService(db)
    notes = await service.list_notes(category=category, tag=tag, page=page)
    return create_paginated_response(notes, request_id=request_id)


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a note. Unknown tag names are created on the fly.",
)
async def create_note(
    data: NoteRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    service = NoteService(db)
    note = await service.create_note(data)
    return ApiResponse(data=note, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    service = NoteService(db)
    note = await service.get_note(note_id)
    return ApiResponse(data=note, metadata=ResponseMetadata(request_id=request_id))


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Replace a note",
    description=(
        "Replace every field of a note. Omitted category or tags clear "
        "the association."
    ),
)
async def update_note(
    note_id: int,
    data: NoteRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Replace an existing note."""
    service = NoteService(db)
    note = await service.update_note(note_id, data)
    return ApiResponse(data=note, metadata=ResponseMetadata(request_id=request_id))


@router.delete(
    "/{note_id}",
    status_code=204,
    summary="Delete a note",
    description="Delete a note. Tasks linked to it are kept and unlinked.",
)
async def delete_note(
    note_id: int,
    db: DbSession,
) -> Response:
    """Delete a note."""
    service = NoteService(db)
    await service.delete_note(note_id)
    return Response(status_code=204)

"""
Categories API Endpoints.
"""

from fastapi import APIRouter, Response

from mindnote.backend.core.dependencies import DbSession, RequestId
from mindnote.backend.schemas.base import ApiResponse, ResponseMetadata
from mindnote.backend.schemas.category import CategoryCreate, CategoryResponse
from mindnote.backend.services.category import CategoryService

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[CategoryResponse]],
    summary="List categories",
)
async def list_categories(
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[CategoryResponse]]:
    """List all categories ordered by name."""
    categories = await CategoryService(db).list_categories()
    return ApiResponse(data=categories, metadata=ResponseMetadata(request_id=request_id))


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    status_code=201,
    summary="Create a category",
    description="Create a category. Names are unique.",
)
async def create_category(
    data: CategoryCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[CategoryResponse]:
    category = await CategoryService(db).create_category(data)
    return ApiResponse(data=category, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    summary="Get a category",
)
async def get_category(
    category_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[CategoryResponse]:
    category = await CategoryService(db).get_category(category_id)
    return ApiResponse(data=category, metadata=ResponseMetadata(request_id=request_id))


@router.delete(
    "/{category_id}",
    status_code=204,
    summary="Delete a category",
    description="Delete a category. Notes and tasks using it keep existing without one.",
)
async def delete_category(
    category_id: int,
    db: DbSession,
) -> Response:
    await CategoryService(db).delete_category(category_id)
    return Response(status_code=204)

"""Category API endpoints.

Provides category browsing (listing, featured, by slug) and management.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status

from app.application.category_service import CategoryService, get_category_service
from app.domain.entities import Category
from app.schemas import (
    CategoryCreateRequest,
    CategoryFeaturedItem,
    CategoryListItem,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdateRequest,
    ErrorResponse,
    MessageResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/category", tags=["Categories"])

CategoryId = Annotated[int, Path(gt=0, description="Category ID")]
Service = Annotated[CategoryService, Depends(get_category_service)]


# ============================================================================
# Converters
# ============================================================================


def category_to_response(category: Category) -> SuccessResponse[CategoryResponse]:
    """Wrap a category entity in the success envelope."""
    return SuccessResponse[CategoryResponse](data=CategoryResponse.model_validate(category))


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=SuccessResponse[CategoryListResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    request: Request,
    service: Service,
) -> SuccessResponse[CategoryListResponse]:
    """List categories.

    Query parameters: ``parentId``, ``activeOnly`` (default true) and
    ``featured``.
    """
    categories = service.list_categories(dict(request.query_params))
    return SuccessResponse[CategoryListResponse](
        data=CategoryListResponse(
            items=[CategoryListItem.model_validate(c) for c in categories]
        )
    )


@router.get(
    "/featured",
    response_model=SuccessResponse[list[CategoryFeaturedItem]],
    summary="Featured categories",
)
async def get_featured_categories(
    service: Service,
) -> SuccessResponse[list[CategoryFeaturedItem]]:
    """Active featured categories for the home page."""
    return SuccessResponse[list[CategoryFeaturedItem]](
        data=[CategoryFeaturedItem.model_validate(c) for c in service.get_featured()]
    )


@router.get(
    "/slug/{slug}",
    response_model=SuccessResponse[CategoryResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get category by slug",
)
async def get_category_by_slug(
    slug: str,
    service: Service,
) -> SuccessResponse[CategoryResponse]:
    """Get a category by its URL slug."""
    return category_to_response(service.get_by_slug(slug))


@router.get(
    "/{category_id}",
    response_model=SuccessResponse[CategoryResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: CategoryId,
    service: Service,
) -> SuccessResponse[CategoryResponse]:
    """Get a category by ID."""
    return category_to_response(service.get_category(category_id))


@router.post(
    "",
    response_model=SuccessResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    body: CategoryCreateRequest,
    service: Service,
) -> SuccessResponse[CategoryResponse]:
    """Create a category.

    The slug is derived from the name and the level from the parent.
    """
    return category_to_response(service.create_category(body))


@router.put(
    "/{category_id}",
    response_model=SuccessResponse[CategoryResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update category",
)
async def update_category(
    category_id: CategoryId,
    body: CategoryUpdateRequest,
    service: Service,
) -> SuccessResponse[CategoryResponse]:
    """Replace a category's editable fields.

    Renaming a category also changes its slug.
    """
    return category_to_response(service.update_category(category_id, body))


@router.delete(
    "/{category_id}",
    response_model=SuccessResponse[MessageResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete category",
)
async def delete_category(
    category_id: CategoryId,
    service: Service,
) -> SuccessResponse[MessageResponse]:
    """Delete a category that has no subcategories."""
    service.delete_category(category_id)
    return SuccessResponse[MessageResponse](
        data=MessageResponse(message="Category deleted successfully")
    )

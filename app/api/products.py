"""Product API endpoints.

Provides the paginated catalog listing and product details.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from app.application.product_service import ProductService, get_product_service
from app.schemas import (
    ErrorResponse,
    ProductListResponse,
    ProductResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/product", tags=["Products"])

Service = Annotated[ProductService, Depends(get_product_service)]


@router.get(
    "",
    response_model=SuccessResponse[ProductListResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List products",
)
async def list_products(
    request: Request,
    service: Service,
) -> SuccessResponse[ProductListResponse]:
    """List products with search, category filter, sorting and pagination.

    Query parameters: ``search``, ``category``, ``sortBy`` (name_asc,
    name_desc, date_desc, date_asc), ``page`` and ``pageSize`` (9, 18, 27
    or 36).
    """
    result = service.list_products(dict(request.query_params))
    return SuccessResponse[ProductListResponse](
        data=ProductListResponse.model_validate(result.to_dict())
    )


@router.get(
    "/{product_id}",
    response_model=SuccessResponse[ProductResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: Annotated[int, Path(gt=0, description="Product ID")],
    service: Service,
) -> SuccessResponse[ProductResponse]:
    """Get full product details."""
    product = service.get_product(product_id)
    return SuccessResponse[ProductResponse](data=ProductResponse.model_validate(product))

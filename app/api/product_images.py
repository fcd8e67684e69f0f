"""Product image API endpoints.

Provides gallery listing, image management and reordering.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.application.product_image_service import (
    ProductImageService,
    get_product_image_service,
)
from app.domain.entities import ProductImage
from app.schemas import (
    ErrorResponse,
    MessageResponse,
    ProductImageCreateRequest,
    ProductImageReorderRequest,
    ProductImageResponse,
    ProductImageUpdateRequest,
    SuccessResponse,
)

router = APIRouter(tags=["Product Images"])

ProductId = Annotated[int, Path(gt=0, description="Product ID")]
ImageId = Annotated[int, Path(gt=0, description="Product image ID")]
Service = Annotated[ProductImageService, Depends(get_product_image_service)]

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def image_to_response(image: ProductImage) -> SuccessResponse[ProductImageResponse]:
    """Wrap an image entity in the success envelope."""
    return SuccessResponse[ProductImageResponse](
        data=ProductImageResponse.model_validate(image)
    )


# ============================================================================
# Gallery Endpoints
# ============================================================================


@router.get(
    "/product/{product_id}/image",
    response_model=SuccessResponse[list[ProductImageResponse]],
    responses=ERROR_RESPONSES,
    summary="List product images",
)
async def list_product_images(
    product_id: ProductId,
    service: Service,
) -> SuccessResponse[list[ProductImageResponse]]:
    """List a product's images by display order."""
    images = service.list_images(product_id)
    return SuccessResponse[list[ProductImageResponse]](
        data=[ProductImageResponse.model_validate(img) for img in images]
    )


@router.post(
    "/product/{product_id}/image",
    response_model=SuccessResponse[ProductImageResponse],
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Add product image",
)
async def create_product_image(
    product_id: ProductId,
    body: ProductImageCreateRequest,
    service: Service,
) -> SuccessResponse[ProductImageResponse]:
    """Add an image to a product gallery (at most 10 per product)."""
    return image_to_response(service.create_image(product_id, body))


@router.put(
    "/product/{product_id}/image/reorder",
    response_model=SuccessResponse[MessageResponse],
    responses=ERROR_RESPONSES,
    summary="Reorder product images",
)
async def reorder_product_images(
    product_id: ProductId,
    body: ProductImageReorderRequest,
    service: Service,
) -> SuccessResponse[MessageResponse]:
    """Assign new display orders to a product's images."""
    service.reorder_images(product_id, body)
    return SuccessResponse[MessageResponse](
        data=MessageResponse(message="Product images reordered successfully")
    )


# ============================================================================
# Image Endpoints
# ============================================================================


@router.get(
    "/product-image/{image_id}",
    response_model=SuccessResponse[ProductImageResponse],
    responses=ERROR_RESPONSES,
    summary="Get product image",
)
async def get_product_image(
    image_id: ImageId,
    service: Service,
) -> SuccessResponse[ProductImageResponse]:
    """Get a single gallery image."""
    return image_to_response(service.get_image(image_id))


@router.put(
    "/product-image/{image_id}",
    response_model=SuccessResponse[ProductImageResponse],
    responses=ERROR_RESPONSES,
    summary="Update product image",
)
async def update_product_image(
    image_id: ImageId,
    body: ProductImageUpdateRequest,
    service: Service,
) -> SuccessResponse[ProductImageResponse]:
    """Replace a gallery image's editable fields."""
    return image_to_response(service.update_image(image_id, body))


@router.delete(
    "/product-image/{image_id}",
    response_model=SuccessResponse[MessageResponse],
    responses=ERROR_RESPONSES,
    summary="Delete product image",
)
async def delete_product_image(
    image_id: ImageId,
    service: Service,
) -> SuccessResponse[MessageResponse]:
    """Delete a gallery image; the last image of a product is kept."""
    service.delete_image(image_id)
    return SuccessResponse[MessageResponse](
        data=MessageResponse(message="Product image deleted successfully")
    )

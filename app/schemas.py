"""API schemas for the catalog service.

Pydantic models for request validation and response serialization.
JSON field names are camelCase; Python attributes are snake_case.
"""

from datetime import datetime
from typing import Any, Generic, Literal, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.domain.entities import (
    CATEGORY_DESCRIPTION_MAX_LENGTH,
    CATEGORY_IMAGE_URL_MAX_LENGTH,
    CATEGORY_META_DESCRIPTION_MAX_LENGTH,
    CATEGORY_META_TITLE_MAX_LENGTH,
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    CATEGORY_SLUG_MAX_LENGTH,
    IMAGE_ALT_TEXT_MAX_LENGTH,
    IMAGE_CAPTION_MAX_LENGTH,
    IMAGE_URL_MAX_LENGTH,
    PRODUCT_CATEGORY_MAX_LENGTH,
    PRODUCT_PAGE_SIZES,
    PRODUCT_SEARCH_MAX_LENGTH,
    ProductSortOrder,
    ViewAngle,
)
from app.domain.exceptions import ValidationError, details_from_pydantic

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def validate_input(
    model: type[M],
    data: M | Mapping[str, Any] | None,
    message: str = "Validation failed",
) -> M:
    """Validate raw input against a schema.

    Args:
        model: Schema class.
        data: Raw mapping, or an already validated instance.
        message: Error message used on failure.

    Returns:
        Validated model instance.

    Raises:
        ValidationError: With one detail per invalid field.
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(dict(data or {}))
    except PydanticValidationError as e:
        raise ValidationError(message, details_from_pydantic(e.errors())) from e


# ============================================================================
# Envelope
# ============================================================================


class ErrorDetail(BaseModel):
    """Field-level error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorBody(BaseModel):
    """Error payload."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: Literal[False] = False
    error: ErrorBody


class SuccessResponse(BaseModel, Generic[T]):
    """Success envelope."""

    success: Literal[True] = True
    data: T


class MessageResponse(BaseModel):
    """Confirmation payload for operations without a resource body."""

    message: str


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreateRequest(CamelModel):
    """Request to create a category."""

    name: str = Field(
        ...,
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
    )
    parent_id: PositiveInt | None = Field(default=None, description="Parent category ID")
    description: str | None = Field(default=None, max_length=CATEGORY_DESCRIPTION_MAX_LENGTH)
    image_url: str | None = Field(default=None, max_length=CATEGORY_IMAGE_URL_MAX_LENGTH)
    display_order: int | None = Field(default=None, ge=0)
    active: bool | None = None
    featured: bool | None = None
    meta_title: str | None = Field(default=None, max_length=CATEGORY_META_TITLE_MAX_LENGTH)
    meta_description: str | None = Field(
        default=None, max_length=CATEGORY_META_DESCRIPTION_MAX_LENGTH
    )


class CategoryUpdateRequest(CamelModel):
    """Request to replace the editable fields of a category.

    ``parent_id`` must be sent explicitly; ``null`` moves the category to
    the root level.
    """

    name: str = Field(
        ...,
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
    )
    parent_id: PositiveInt | None
    description: str | None = Field(default=None, max_length=CATEGORY_DESCRIPTION_MAX_LENGTH)
    image_url: str | None = Field(default=None, max_length=CATEGORY_IMAGE_URL_MAX_LENGTH)
    display_order: int = Field(..., ge=0)
    active: bool
    featured: bool
    meta_title: str | None = Field(default=None, max_length=CATEGORY_META_TITLE_MAX_LENGTH)
    meta_description: str | None = Field(
        default=None, max_length=CATEGORY_META_DESCRIPTION_MAX_LENGTH
    )


class CategoryListQuery(CamelModel):
    """Query parameters for category listing."""

    parent_id: PositiveInt | None = None
    active_only: bool | None = None
    featured: bool | None = None

    @field_validator("active_only", "featured", mode="before")
    @classmethod
    def parse_flag(cls, value: Any) -> Any:
        """Query strings count as true only when exactly ``"true"``."""
        if isinstance(value, str):
            return value == "true"
        return value


class CategorySlugParams(CamelModel):
    """Slug path parameter."""

    slug: str = Field(..., min_length=1, max_length=CATEGORY_SLUG_MAX_LENGTH)


class CategoryResponse(CamelModel):
    """Full category representation."""

    id: int
    name: str
    slug: str
    parent_id: int | None
    level: int
    description: str | None
    image_url: str | None
    display_order: int
    active: bool
    featured: bool
    meta_title: str | None
    meta_description: str | None
    product_count: int
    date_created: datetime
    date_modified: datetime


class CategoryListItem(CamelModel):
    """Category as returned by listings."""

    id: int
    name: str
    slug: str
    parent_id: int | None
    level: int
    description: str | None
    image_url: str | None
    display_order: int
    active: bool
    featured: bool
    product_count: int
    date_created: datetime


class CategoryListResponse(CamelModel):
    """Category listing."""

    items: list[CategoryListItem]


class CategoryFeaturedItem(CamelModel):
    """Category as promoted on the home page."""

    id: int
    name: str
    slug: str
    description: str | None
    image_url: str | None
    product_count: int


# ============================================================================
# Product Schemas
# ============================================================================


class ProductListQuery(CamelModel):
    """Query parameters for product listing."""

    search: str | None = Field(default=None, max_length=PRODUCT_SEARCH_MAX_LENGTH)
    category: str | None = Field(default=None, max_length=PRODUCT_CATEGORY_MAX_LENGTH)
    sort_by: ProductSortOrder | None = None
    page: PositiveInt | None = None
    page_size: PositiveInt | None = None

    @field_validator("page_size")
    @classmethod
    def check_page_size(cls, value: int | None) -> int | None:
        """Only the catalog grid sizes are accepted."""
        if value is not None and value not in PRODUCT_PAGE_SIZES:
            raise ValueError("Page size must be 9, 18, 27, or 36")
        return value


class ProductSpecificationsSchema(CamelModel):
    """Product specifications."""

    dimensions: str | None
    material: str | None


class ProductResponse(CamelModel):
    """Full product representation."""

    id: int
    name: str
    description: str | None
    category: str
    image_url: str
    additional_images: list[str]
    specifications: ProductSpecificationsSchema
    date_created: datetime
    date_modified: datetime


class ProductListItem(CamelModel):
    """Product as returned by listings."""

    id: int
    name: str
    category: str
    image_url: str
    date_created: datetime


class ProductListResponse(CamelModel):
    """Paginated product listing."""

    items: list[ProductListItem]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool


# ============================================================================
# Product Image Schemas
# ============================================================================


class ProductImageCreateRequest(CamelModel):
    """Request to add an image to a product gallery."""

    image_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    thumbnail_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    high_res_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    display_order: PositiveInt | None = None
    caption: str | None = Field(default=None, max_length=IMAGE_CAPTION_MAX_LENGTH)
    alt_text: str = Field(..., min_length=1, max_length=IMAGE_ALT_TEXT_MAX_LENGTH)
    view_angle: ViewAngle


class ProductImageUpdateRequest(CamelModel):
    """Request to replace the editable fields of a gallery image."""

    image_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    thumbnail_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    high_res_url: str = Field(..., min_length=1, max_length=IMAGE_URL_MAX_LENGTH)
    display_order: PositiveInt
    caption: str | None = Field(default=None, max_length=IMAGE_CAPTION_MAX_LENGTH)
    alt_text: str = Field(..., min_length=1, max_length=IMAGE_ALT_TEXT_MAX_LENGTH)
    view_angle: ViewAngle


class ImageOrderItem(CamelModel):
    """New position of one image."""

    id: PositiveInt
    display_order: PositiveInt


class ProductImageReorderRequest(CamelModel):
    """Request to reposition images in a gallery."""

    image_order: list[ImageOrderItem]


class ProductImageResponse(CamelModel):
    """Gallery image representation."""

    id: int
    product_id: int
    image_url: str
    thumbnail_url: str
    high_res_url: str
    display_order: int
    caption: str | None
    alt_text: str
    view_angle: ViewAngle
    date_created: datetime
    date_modified: datetime

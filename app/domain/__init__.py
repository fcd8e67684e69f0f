"""Domain layer module.

Catalog entities, business constants, slug helpers and domain errors.
"""

from app.domain.entities import (
    MAX_HIERARCHY_LEVEL,
    MAX_IMAGES_PER_PRODUCT,
    Category,
    Product,
    ProductImage,
    ProductSortOrder,
    ProductSpecifications,
    ViewAngle,
)
from app.domain.exceptions import (
    BusinessRuleError,
    DomainError,
    ErrorCode,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from app.domain.slug import collation_key, generate_slug

__all__ = [
    # Entities
    "Category",
    "Product",
    "ProductImage",
    "ProductSortOrder",
    "ProductSpecifications",
    "ViewAngle",
    "MAX_HIERARCHY_LEVEL",
    "MAX_IMAGES_PER_PRODUCT",
    # Errors
    "BusinessRuleError",
    "DomainError",
    "ErrorCode",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
    # Slugs
    "collation_key",
    "generate_slug",
]

"""Application layer module.

Contains the catalog services that apply business rules on top of the
in-memory stores.
"""

from app.application.category_service import (
    CategoryService,
    get_category_service,
)
from app.application.product_image_service import (
    ProductImageService,
    get_product_image_service,
)
from app.application.product_service import (
    PaginatedResult,
    ProductService,
    get_product_service,
)

__all__ = [
    "CategoryService",
    "get_category_service",
    "PaginatedResult",
    "ProductImageService",
    "get_product_image_service",
    "ProductService",
    "get_product_service",
]

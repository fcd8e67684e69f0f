"""API layer module.

Contains FastAPI routers and middleware.
"""

from app.api.categories import router as categories_router
from app.api.health import router as health_router
from app.api.product_images import router as product_images_router
from app.api.products import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "product_images_router",
    "products_router",
]

"""Product catalog service.

Turns listing query parameters into a filtered, sorted, paginated view of
the product store.
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

import structlog

from app.domain.entities import (
    PRODUCT_DEFAULT_PAGE,
    PRODUCT_DEFAULT_PAGE_SIZE,
    PRODUCT_DEFAULT_SORT,
    Product,
    ProductSortOrder,
)
from app.domain.exceptions import NotFoundError
from app.domain.slug import collation_key
from app.infrastructure.store import CatalogStores, get_catalog_stores
from app.schemas import ProductListQuery, validate_input

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the requested page.
        total: Number of items across all pages.
        page: Current page (1-indexed).
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary with items and pagination metadata.
        """
        return {
            "items": self.items,
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
        }


def sort_products(products: list[Product], sort_by: ProductSortOrder) -> list[Product]:
    """Sort products, keeping store order for ties.

    Args:
        products: Products to sort.
        sort_by: Requested order.

    Returns:
        New sorted list.
    """
    if sort_by in (ProductSortOrder.NAME_ASC, ProductSortOrder.NAME_DESC):
        return sorted(
            products,
            key=lambda p: collation_key(p.name),
            reverse=sort_by == ProductSortOrder.NAME_DESC,
        )
    return sorted(
        products,
        key=lambda p: p.date_created,
        reverse=sort_by == ProductSortOrder.DATE_DESC,
    )


class ProductService:
    """Service for product catalog queries.

    Example usage:
        service = ProductService(get_catalog_stores())
        result = service.list_products({"search": "mesa", "pageSize": "18"})
        print(result.total, result.has_next)
    """

    def __init__(self, stores: CatalogStores) -> None:
        """Initialize service with the catalog stores.

        Args:
            stores: Catalog stores.
        """
        self.stores = stores

    def list_products(
        self, query: ProductListQuery | Mapping[str, Any] | None = None
    ) -> PaginatedResult[dict[str, Any]]:
        """List products with filtering, sorting and pagination.

        ``search`` matches name or description (case-insensitive substring);
        ``category`` matches the product's category name exactly. Pages past
        the end come back empty.

        Args:
            query: Raw or validated listing parameters.

        Returns:
            Page of list items (id, name, category, image_url, date_created).

        Raises:
            ValidationError: If the query is malformed.
        """
        params = validate_input(ProductListQuery, query, "Invalid query parameters")
        page = params.page or PRODUCT_DEFAULT_PAGE
        page_size = params.page_size or PRODUCT_DEFAULT_PAGE_SIZE
        sort_by = params.sort_by or PRODUCT_DEFAULT_SORT

        products = self.stores.products.get_all()

        if params.search:
            needle = params.search.lower()
            products = [
                p
                for p in products
                if needle in p.name.lower()
                or (p.description and needle in p.description.lower())
            ]

        if params.category:
            products = [p for p in products if p.category == params.category]

        products = sort_products(products, sort_by)

        offset = (page - 1) * page_size
        page_items = products[offset:offset + page_size]

        return PaginatedResult(
            items=[p.to_list_item() for p in page_items],
            total=len(products),
            page=page,
            page_size=page_size,
        )

    def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Raises:
            NotFoundError: If the product does not exist.
        """
        product = self.stores.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product


def get_product_service() -> ProductService:
    """Get ProductService bound to the process-wide stores."""
    return ProductService(get_catalog_stores())

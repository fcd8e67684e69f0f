"""In-memory record stores.

Each store is a map of integer ID to record with a sequential ID counter.
``CategoryStore`` keeps a secondary slug index. ``CatalogStores`` bundles
the three stores and is what the services receive.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

import structlog

from app.domain.entities import (
    CATEGORY_MAX_RECORDS,
    PRODUCT_IMAGE_MAX_RECORDS,
    PRODUCT_MAX_RECORDS,
    Category,
    Product,
    ProductImage,
)

logger = structlog.get_logger()

T = TypeVar("T")


class StoreCapacityError(Exception):
    """Raised when a store already holds its maximum number of records."""

    def __init__(self, store_name: str, max_records: int) -> None:
        super().__init__(f"{store_name} reached its limit of {max_records} records")
        self.store_name = store_name
        self.max_records = max_records


class RecordStore(Generic[T]):
    """In-memory store keyed by integer ID.

    Records are dataclasses with an ``id`` attribute. ``update`` replaces the
    stored record with a modified copy, so callers holding an old reference
    keep seeing the old values.

    Example usage:
        store = RecordStore[Product]("products", max_records=100)
        product = store.add(Product(id=store.next_id(), ...))
        store.update(product.id, name="Sofá Retrátil")
    """

    def __init__(self, name: str, max_records: int) -> None:
        """Initialize an empty store.

        Args:
            name: Store name used in errors and logs.
            max_records: Maximum number of records held at once.
        """
        self.name = name
        self.max_records = max_records
        self._records: dict[int, T] = {}
        self._current_id = 0

    def next_id(self) -> int:
        """Reserve the next sequential ID."""
        self._current_id += 1
        return self._current_id

    def get_all(self) -> list[T]:
        """Get all records in insertion order."""
        return list(self._records.values())

    def get_by_id(self, record_id: int) -> T | None:
        """Get record by ID.

        Args:
            record_id: Record ID.

        Returns:
            Record if found, None otherwise.
        """
        return self._records.get(record_id)

    def add(self, record: T) -> T:
        """Add a record.

        Args:
            record: Record to store.

        Returns:
            The stored record.

        Raises:
            StoreCapacityError: If the store is full.
        """
        if len(self._records) >= self.max_records:
            raise StoreCapacityError(self.name, self.max_records)
        record_id = record.id  # type: ignore[attr-defined]
        self._records[record_id] = record
        # Keep the counter ahead of explicitly assigned IDs
        self._current_id = max(self._current_id, record_id)
        return record

    def update(self, record_id: int, **changes: Any) -> T | None:
        """Apply a partial update.

        Args:
            record_id: Record ID.
            **changes: Attribute values to replace.

        Returns:
            Updated record, or None if the ID is unknown.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None
        updated = replace(existing, **changes)  # type: ignore[type-var]
        self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        """Delete a record.

        Returns:
            True if a record was removed.
        """
        return self._records.pop(record_id, None) is not None

    def exists(self, record_id: int) -> bool:
        """Check if a record exists."""
        return record_id in self._records

    def count(self) -> int:
        """Number of stored records."""
        return len(self._records)

    def clear(self) -> None:
        """Remove all records and reset the ID counter."""
        self._records.clear()
        self._current_id = 0


class CategoryStore(RecordStore[Category]):
    """Category store with a slug index."""

    def __init__(self, max_records: int = CATEGORY_MAX_RECORDS) -> None:
        super().__init__("categories", max_records)
        self._slug_index: dict[str, int] = {}

    def get_by_slug(self, slug: str) -> Category | None:
        """Get category by slug.

        Args:
            slug: Category slug.

        Returns:
            Category if found, None otherwise.
        """
        category_id = self._slug_index.get(slug)
        if category_id is None:
            return None
        return self._records.get(category_id)

    def add(self, record: Category) -> Category:
        category = super().add(record)
        self._slug_index[category.slug] = category.id
        return category

    def update(self, record_id: int, **changes: Any) -> Category | None:
        existing = self._records.get(record_id)
        if existing is None:
            return None

        new_slug = changes.get("slug")
        if new_slug and new_slug != existing.slug:
            self._slug_index.pop(existing.slug, None)
            self._slug_index[new_slug] = record_id

        return super().update(record_id, **changes)

    def delete(self, record_id: int) -> bool:
        existing = self._records.get(record_id)
        if existing is not None:
            self._slug_index.pop(existing.slug, None)
        return super().delete(record_id)

    def clear(self) -> None:
        super().clear()
        self._slug_index.clear()


@dataclass
class CatalogStores:
    """The three catalog stores, passed to services as one repository."""

    categories: CategoryStore = field(default_factory=CategoryStore)
    products: RecordStore[Product] = field(
        default_factory=lambda: RecordStore("products", PRODUCT_MAX_RECORDS)
    )
    images: RecordStore[ProductImage] = field(
        default_factory=lambda: RecordStore("product_images", PRODUCT_IMAGE_MAX_RECORDS)
    )

    def clear(self) -> None:
        """Empty every store."""
        self.categories.clear()
        self.products.clear()
        self.images.clear()


# Global store instance
_catalog_stores: CatalogStores | None = None


def get_catalog_stores(seed: bool | None = None) -> CatalogStores:
    """Get or create the process-wide stores.

    Args:
        seed: Load the demonstration catalog into fresh stores. Defaults to
            ``settings.seed_data``.

    Returns:
        CatalogStores instance.
    """
    global _catalog_stores
    if _catalog_stores is None:
        from app.infrastructure.config import settings
        from app.infrastructure.seed import seed_catalog

        stores = CatalogStores()
        if settings.seed_data if seed is None else seed:
            seed_catalog(stores)
        logger.info(
            "Catalog stores initialized",
            categories=stores.categories.count(),
            products=stores.products.count(),
            images=stores.images.count(),
        )
        _catalog_stores = stores
    return _catalog_stores


def reset_catalog_stores() -> None:
    """Drop the process-wide stores so the next access rebuilds them."""
    global _catalog_stores
    _catalog_stores = None

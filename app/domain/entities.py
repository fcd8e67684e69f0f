"""Domain entities for the furniture catalog.

Categories form a forest of at most three levels. Products reference their
category by display name only. Product images belong to a product and are
ordered by ``display_order`` inside that product's gallery.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


# ============================================================================
# Constants
# ============================================================================

MAX_HIERARCHY_LEVEL = 3

CATEGORY_DEFAULT_ACTIVE = True
CATEGORY_DEFAULT_FEATURED = False
CATEGORY_DEFAULT_DISPLAY_ORDER = 0
CATEGORY_MAX_RECORDS = 1000

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 50
CATEGORY_SLUG_MAX_LENGTH = 60
CATEGORY_DESCRIPTION_MAX_LENGTH = 500
CATEGORY_IMAGE_URL_MAX_LENGTH = 500
CATEGORY_META_TITLE_MAX_LENGTH = 70
CATEGORY_META_DESCRIPTION_MAX_LENGTH = 160

PRODUCT_DEFAULT_PAGE = 1
PRODUCT_DEFAULT_PAGE_SIZE = 9
PRODUCT_PAGE_SIZES = (9, 18, 27, 36)
PRODUCT_MAX_RECORDS = 10000
PRODUCT_SEARCH_MAX_LENGTH = 200
PRODUCT_CATEGORY_MAX_LENGTH = 100

MAX_IMAGES_PER_PRODUCT = 10
MIN_IMAGES_PER_PRODUCT = 1
PRODUCT_IMAGE_MAX_RECORDS = 50000
IMAGE_URL_MAX_LENGTH = 500
IMAGE_CAPTION_MAX_LENGTH = 100
IMAGE_ALT_TEXT_MAX_LENGTH = 100


def utc_now() -> datetime:
    """Current UTC timestamp."""
    return datetime.now(timezone.utc)


class ProductSortOrder(str, Enum):
    """Sort orders accepted by the product listing."""

    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"


PRODUCT_DEFAULT_SORT = ProductSortOrder.DATE_DESC


class ViewAngle(str, Enum):
    """Camera angle of a gallery image."""

    FRONTAL = "frontal"
    LATERAL_ESQUERDA = "lateral_esquerda"
    LATERAL_DIREITA = "lateral_direita"
    SUPERIOR = "superior"
    INFERIOR = "inferior"
    TRASEIRA = "traseira"
    DETALHE = "detalhe"
    AMBIENTE = "ambiente"


# ============================================================================
# Category
# ============================================================================


@dataclass
class Category:
    """A node of the category hierarchy.

    Attributes:
        id: Unique, immutable identifier.
        name: Display name, unique among siblings (case-insensitive).
        slug: URL identifier derived from the name, globally unique.
        parent_id: Parent category ID (None for a root).
        level: Depth in the tree, root = 1, at most ``MAX_HIERARCHY_LEVEL``.
        product_count: Products associated with this category or any
            descendant. Never negative.
    """

    id: int
    name: str
    slug: str
    parent_id: int | None = None
    level: int = 1
    description: str | None = None
    image_url: str | None = None
    display_order: int = CATEGORY_DEFAULT_DISPLAY_ORDER
    active: bool = CATEGORY_DEFAULT_ACTIVE
    featured: bool = CATEGORY_DEFAULT_FEATURED
    meta_title: str | None = None
    meta_description: str | None = None
    product_count: int = 0
    date_created: datetime = field(default_factory=utc_now)
    date_modified: datetime = field(default_factory=utc_now)

    @property
    def is_root(self) -> bool:
        """Check if this category has no parent."""
        return self.parent_id is None


# ============================================================================
# Product
# ============================================================================


@dataclass
class ProductSpecifications:
    """Technical specifications shown on the product page."""

    dimensions: str | None = None
    material: str | None = None


@dataclass
class Product:
    """A catalog product.

    ``category`` is the display name of a category, not a reference to a
    ``Category`` record.
    """

    id: int
    name: str
    category: str
    image_url: str
    description: str | None = None
    additional_images: list[str] = field(default_factory=list)
    specifications: ProductSpecifications = field(default_factory=ProductSpecifications)
    date_created: datetime = field(default_factory=utc_now)
    date_modified: datetime = field(default_factory=utc_now)

    def to_list_item(self) -> dict[str, Any]:
        """Project to the fields returned by product listings.

        Returns:
            Dictionary with id, name, category, image_url and date_created.
        """
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "image_url": self.image_url,
            "date_created": self.date_created,
        }


# ============================================================================
# Product Image
# ============================================================================


@dataclass
class ProductImage:
    """An image in a product's gallery.

    Attributes:
        display_order: Sort key within the product's gallery. Not unique;
            ties keep insertion order.
    """

    id: int
    product_id: int
    image_url: str
    thumbnail_url: str
    high_res_url: str
    display_order: int
    alt_text: str
    view_angle: ViewAngle
    caption: str | None = None
    date_created: datetime = field(default_factory=utc_now)
    date_modified: datetime = field(default_factory=utc_now)


"""Category application service.

Maintains the structural rules of the category tree (depth, sibling name
uniqueness, slug uniqueness, no cycles, product counts) and builds the
listing and featured views.
"""

from typing import Any, Mapping

import structlog

from app.domain.entities import (
    CATEGORY_DEFAULT_ACTIVE,
    CATEGORY_DEFAULT_DISPLAY_ORDER,
    CATEGORY_DEFAULT_FEATURED,
    MAX_HIERARCHY_LEVEL,
    Category,
    utc_now,
)
from app.domain.exceptions import BusinessRuleError, NotFoundError, ValidationError
from app.domain.slug import collation_key, generate_slug
from app.infrastructure.store import CatalogStores, CategoryStore, get_catalog_stores
from app.schemas import (
    CategoryCreateRequest,
    CategoryListQuery,
    CategorySlugParams,
    CategoryUpdateRequest,
    validate_input,
)

logger = structlog.get_logger()


class CategoryService:
    """Service for category hierarchy operations.

    Example usage:
        service = CategoryService(get_catalog_stores())
        living = service.create_category({"name": "Sala de Estar"})
        sofas = service.create_category({"name": "Sofás", "parentId": living.id})
        service.add_product(sofas.id)  # living.product_count grows too
    """

    def __init__(self, stores: CatalogStores) -> None:
        """Initialize service with the catalog stores.

        Args:
            stores: Catalog stores.
        """
        self.stores = stores

    @property
    def categories(self) -> CategoryStore:
        return self.stores.categories

    # ------------------------------------------------------------------------
    # Hierarchy rules
    # ------------------------------------------------------------------------

    def calculate_level(self, parent_id: int | None) -> int:
        """Compute the level a category would have under ``parent_id``.

        Args:
            parent_id: Parent category ID, or None for a root.

        Returns:
            Level between 1 and ``MAX_HIERARCHY_LEVEL``.

        Raises:
            ValidationError: If the parent does not exist.
            BusinessRuleError: If the hierarchy would become too deep.
        """
        if parent_id is None:
            return 1

        parent = self.categories.get_by_id(parent_id)
        if parent is None:
            raise ValidationError(
                "Parent category does not exist",
                details=[{"field": "parentId", "message": "Parent category does not exist"}],
            )

        level = parent.level + 1
        if level > MAX_HIERARCHY_LEVEL:
            raise BusinessRuleError(
                f"Cannot create more than {MAX_HIERARCHY_LEVEL} levels of categories"
            )
        return level

    def validate_unique_name_at_level(
        self,
        name: str,
        parent_id: int | None,
        exclude_id: int | None = None,
    ) -> None:
        """Reject a name already used by a sibling (case-insensitive).

        Raises:
            BusinessRuleError: If a sibling has the same name.
        """
        lowered = name.lower()
        for category in self.categories.get_all():
            if (
                category.parent_id == parent_id
                and category.id != exclude_id
                and category.name.lower() == lowered
            ):
                raise BusinessRuleError(
                    "A category with this name already exists at this level"
                )

    def validate_unique_slug(self, slug: str, exclude_id: int | None = None) -> None:
        """Reject a slug already used by another category.

        Raises:
            BusinessRuleError: If the slug is taken.
        """
        for category in self.categories.get_all():
            if category.slug == slug and category.id != exclude_id:
                raise BusinessRuleError("A category with this slug already exists")

    def validate_no_cycle(self, category_id: int, new_parent_id: int | None) -> None:
        """Reject a parent that is the category itself or one of its descendants.

        Walks the ancestor chain of ``new_parent_id``. A visited set stops
        the walk on corrupted data that already contains a loop.

        Raises:
            BusinessRuleError: If the move would create a cycle.
        """
        if new_parent_id is None:
            return

        if new_parent_id == category_id:
            raise BusinessRuleError("A category cannot be its own parent")

        visited: set[int] = set()
        current_id: int | None = new_parent_id
        while current_id is not None:
            if current_id in visited:
                raise BusinessRuleError("Circular reference detected")
            visited.add(current_id)

            if current_id == category_id:
                raise BusinessRuleError("Cannot create circular category hierarchy")

            current = self.categories.get_by_id(current_id)
            if current is None or current.is_root:
                break
            current_id = current.parent_id

    def update_product_count(self, category_id: int, delta: int) -> None:
        """Apply ``delta`` to a category and every ancestor, clamped at zero.

        Unknown IDs end the walk silently.

        Args:
            category_id: Category whose product set changed.
            delta: Change in product count.
        """
        visited: set[int] = set()
        current_id: int | None = category_id
        while current_id is not None and current_id not in visited:
            visited.add(current_id)
            category = self.categories.get_by_id(current_id)
            if category is None:
                return
            self.categories.update(
                current_id,
                product_count=max(0, category.product_count + delta),
            )
            current_id = category.parent_id

    def add_product(self, category_id: int) -> None:
        """Count one more product in a category and its ancestors.

        Raises:
            NotFoundError: If the category does not exist.
        """
        self._require(category_id)
        self.update_product_count(category_id, 1)

    def remove_product(self, category_id: int) -> None:
        """Count one product less in a category and its ancestors.

        Raises:
            NotFoundError: If the category does not exist.
        """
        self._require(category_id)
        self.update_product_count(category_id, -1)

    # ------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------

    def list_categories(
        self, query: CategoryListQuery | Mapping[str, Any] | None = None
    ) -> list[Category]:
        """List categories.

        Only active categories are returned unless ``activeOnly`` is false.
        Results are ordered by display order, then by name.

        Args:
            query: Filters (``parentId``, ``activeOnly``, ``featured``).

        Returns:
            Matching categories.

        Raises:
            ValidationError: If the query is malformed.
        """
        params = validate_input(CategoryListQuery, query, "Invalid query parameters")
        categories = self.categories.get_all()

        if params.parent_id is not None:
            categories = [c for c in categories if c.parent_id == params.parent_id]

        if params.active_only is not False:
            categories = [c for c in categories if c.active]

        if params.featured is True:
            categories = [c for c in categories if c.featured]

        categories.sort(key=lambda c: (c.display_order, collation_key(c.name)))
        return categories

    def get_featured(self) -> list[Category]:
        """Active featured categories ordered by display order."""
        categories = [c for c in self.categories.get_all() if c.active and c.featured]
        categories.sort(key=lambda c: c.display_order)
        return categories

    def get_category(self, category_id: int) -> Category:
        """Get category by ID.

        Raises:
            NotFoundError: If the category does not exist.
        """
        return self._require(category_id)

    def get_by_slug(self, slug: str) -> Category:
        """Get category by slug.

        Raises:
            ValidationError: If the slug is empty or too long.
            NotFoundError: If no category has this slug.
        """
        params = validate_input(CategorySlugParams, {"slug": slug}, "Invalid slug")
        category = self.categories.get_by_slug(params.slug)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    # ------------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------------

    def create_category(
        self, data: CategoryCreateRequest | Mapping[str, Any]
    ) -> Category:
        """Create a category.

        Args:
            data: Category fields.

        Returns:
            Created category.

        Raises:
            ValidationError: If input is invalid or the parent is unknown.
            BusinessRuleError: On duplicate name/slug or excessive depth.
        """
        params = validate_input(CategoryCreateRequest, data)

        self.validate_unique_name_at_level(params.name, params.parent_id)
        slug = generate_slug(params.name)
        self.validate_unique_slug(slug)
        level = self.calculate_level(params.parent_id)

        now = utc_now()
        category = self.categories.add(
            Category(
                id=self.categories.next_id(),
                name=params.name,
                slug=slug,
                parent_id=params.parent_id,
                level=level,
                description=params.description,
                image_url=params.image_url,
                display_order=(
                    params.display_order
                    if params.display_order is not None
                    else CATEGORY_DEFAULT_DISPLAY_ORDER
                ),
                active=params.active if params.active is not None else CATEGORY_DEFAULT_ACTIVE,
                featured=(
                    params.featured if params.featured is not None else CATEGORY_DEFAULT_FEATURED
                ),
                meta_title=params.meta_title,
                meta_description=params.meta_description,
                product_count=0,
                date_created=now,
                date_modified=now,
            )
        )

        logger.info(
            "Category created",
            category_id=category.id,
            slug=category.slug,
            level=category.level,
        )
        return category

    def update_category(
        self,
        category_id: int,
        data: CategoryUpdateRequest | Mapping[str, Any],
    ) -> Category:
        """Replace the editable fields of a category.

        The slug is regenerated from the name on every update and the level
        is recomputed from the (possibly new) parent.

        Raises:
            ValidationError: If input is invalid or the parent is unknown.
            NotFoundError: If the category does not exist.
            BusinessRuleError: On duplicate name/slug, cycles or excessive depth.
        """
        params = validate_input(CategoryUpdateRequest, data)
        self._require(category_id)

        self.validate_unique_name_at_level(params.name, params.parent_id, category_id)
        self.validate_no_cycle(category_id, params.parent_id)
        slug = generate_slug(params.name)
        self.validate_unique_slug(slug, category_id)
        level = self.calculate_level(params.parent_id)

        updated = self.categories.update(
            category_id,
            name=params.name,
            slug=slug,
            parent_id=params.parent_id,
            level=level,
            description=params.description,
            image_url=params.image_url,
            display_order=params.display_order,
            active=params.active,
            featured=params.featured,
            meta_title=params.meta_title,
            meta_description=params.meta_description,
            date_modified=utc_now(),
        )

        logger.info(
            "Category updated",
            category_id=category_id,
            slug=slug,
            level=level,
        )
        return updated

    def delete_category(self, category_id: int) -> None:
        """Delete a category without subcategories.

        Raises:
            NotFoundError: If the category does not exist.
            BusinessRuleError: If the category has children.
        """
        self._require(category_id)

        if any(c.parent_id == category_id for c in self.categories.get_all()):
            logger.warning("Category delete blocked by children", category_id=category_id)
            raise BusinessRuleError("Cannot delete category with subcategories")

        self.categories.delete(category_id)
        logger.info("Category deleted", category_id=category_id)

    def _require(self, category_id: int) -> Category:
        category = self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category


def get_category_service() -> CategoryService:
    """Get CategoryService bound to the process-wide stores."""
    return CategoryService(get_catalog_stores())

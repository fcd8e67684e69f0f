"""Tests for the category hierarchy service."""

import pytest

from app.application.category_service import CategoryService
from app.domain.entities import Category
from app.domain.exceptions import (
    BusinessRuleError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from app.infrastructure.store import CatalogStores


@pytest.fixture
def service(empty_stores: CatalogStores) -> CategoryService:
    """Category service over empty stores."""
    return CategoryService(empty_stores)


@pytest.fixture
def tree(service: CategoryService) -> dict:
    """Three-level tree: Móveis > Sala > Sofás."""
    root = service.create_category({"name": "Móveis"})
    middle = service.create_category({"name": "Sala", "parentId": root.id})
    leaf = service.create_category({"name": "Sofás", "parentId": middle.id})
    return {"root": root, "middle": middle, "leaf": leaf}


def update_payload(category, **changes) -> dict:
    payload = {
        "name": category.name,
        "parentId": category.parent_id,
        "displayOrder": category.display_order,
        "active": category.active,
        "featured": category.featured,
    }
    payload.update(changes)
    return payload


class TestCreateCategory:
    """Tests for category creation."""

    def test_root_defaults(self, service: CategoryService):
        """Roots get level 1, a slug and default flags."""
        category = service.create_category({"name": "Sala & Estar!!"})

        assert category.level == 1
        assert category.slug == "sala-estar"
        assert category.parent_id is None
        assert category.active is True
        assert category.featured is False
        assert category.display_order == 0
        assert category.product_count == 0

    def test_child_level(self, tree: dict):
        """Levels follow the parent chain."""
        assert tree["middle"].level == 2
        assert tree["leaf"].level == 3

    def test_fourth_level_rejected(self, service: CategoryService, tree: dict):
        """A child of a level-3 category is refused."""
        with pytest.raises(BusinessRuleError) as exc_info:
            service.create_category({"name": "Retráteis", "parentId": tree["leaf"].id})

        assert exc_info.value.code == ErrorCode.BUSINESS_RULE_ERROR
        assert service.categories.count() == 3

    def test_unknown_parent(self, service: CategoryService):
        """A missing parent is a validation error on parentId."""
        with pytest.raises(ValidationError) as exc_info:
            service.create_category({"name": "Sofás", "parentId": 42})

        assert exc_info.value.details[0]["field"] == "parentId"

    def test_duplicate_name_same_level(self, service: CategoryService):
        """Sibling names are unique ignoring case."""
        service.create_category({"name": "Quarto"})

        with pytest.raises(BusinessRuleError, match="name already exists"):
            service.create_category({"name": "QUARTO"})

    def test_same_name_other_parent_blocked_by_slug(self, service: CategoryService):
        """Equal names under different parents still collide on slug."""
        sala = service.create_category({"name": "Sala"})
        quarto = service.create_category({"name": "Quarto"})
        service.create_category({"name": "Cadeiras", "parentId": sala.id})

        with pytest.raises(BusinessRuleError, match="slug already exists"):
            service.create_category({"name": "Cadeiras", "parentId": quarto.id})

    def test_duplicate_slug(self, service: CategoryService):
        """Different names producing the same slug are refused."""
        service.create_category({"name": "Mesa Jantar"})

        with pytest.raises(BusinessRuleError, match="slug"):
            service.create_category({"name": "Mesa-Jantar"})

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"name": "A"},
            {"name": "x" * 51},
            {"name": "Sala", "parentId": 0},
            {"name": "Sala", "displayOrder": -1},
            {"name": "Sala", "metaTitle": "t" * 71},
        ],
    )
    def test_invalid_input(self, service: CategoryService, payload: dict):
        """Malformed input raises ValidationError with details."""
        with pytest.raises(ValidationError) as exc_info:
            service.create_category(payload)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details


class TestUpdateCategory:
    """Tests for category updates."""

    def test_rename_regenerates_slug(self, service: CategoryService):
        """Slug follows the new name."""
        category = service.create_category({"name": "Quarto"})

        updated = service.update_category(
            category.id, update_payload(category, name="Dormitório Casal")
        )

        assert updated.slug == "dormitorio-casal"
        assert service.categories.get_by_slug("quarto") is None
        assert updated.date_modified >= category.date_modified

    def test_self_parent_rejected(self, service: CategoryService):
        """A category cannot be its own parent."""
        category = service.create_category({"name": "Quarto"})

        with pytest.raises(BusinessRuleError, match="own parent"):
            service.update_category(category.id, update_payload(category, parentId=category.id))

    def test_descendant_parent_rejected(self, service: CategoryService, tree: dict):
        """Moving a category under its own descendant is refused."""
        root = tree["root"]

        with pytest.raises(BusinessRuleError, match="circular"):
            service.update_category(root.id, update_payload(root, parentId=tree["leaf"].id))

        assert service.get_category(root.id).parent_id is None

    def test_move_to_root(self, service: CategoryService, tree: dict):
        """A null parent moves the category to level 1."""
        middle = tree["middle"]

        updated = service.update_category(middle.id, update_payload(middle, parentId=None))

        assert updated.level == 1
        assert updated.parent_id is None

    def test_keep_own_name(self, service: CategoryService):
        """Saving a category with its current name is not a duplicate."""
        category = service.create_category({"name": "Quarto"})

        updated = service.update_category(category.id, update_payload(category, featured=True))

        assert updated.featured is True
        assert updated.slug == "quarto"

    def test_not_found(self, service: CategoryService):
        """Updating a missing category raises NotFoundError."""
        with pytest.raises(NotFoundError):
            service.update_category(
                99,
                {"name": "Quarto", "parentId": None, "displayOrder": 0,
                 "active": True, "featured": False},
            )

    def test_parent_id_required(self, service: CategoryService):
        """Full replacement requires parentId to be sent."""
        category = service.create_category({"name": "Quarto"})
        payload = update_payload(category)
        del payload["parentId"]

        with pytest.raises(ValidationError):
            service.update_category(category.id, payload)


class TestDeleteCategory:
    """Tests for category deletion."""

    def test_delete_leaf(self, service: CategoryService, tree: dict):
        """Leaves can be deleted."""
        service.delete_category(tree["leaf"].id)

        with pytest.raises(NotFoundError):
            service.get_category(tree["leaf"].id)

    def test_delete_with_children_blocked(self, service: CategoryService, tree: dict):
        """Categories with children are kept."""
        with pytest.raises(BusinessRuleError, match="subcategories"):
            service.delete_category(tree["middle"].id)

        assert service.categories.exists(tree["middle"].id)

    def test_delete_missing(self, service: CategoryService):
        """Deleting a missing category raises NotFoundError."""
        with pytest.raises(NotFoundError):
            service.delete_category(99)


class TestCorruptedHierarchy:
    """Tests for parent chains that already contain a loop."""

    @pytest.fixture
    def looped(self, service: CategoryService) -> CategoryService:
        """Categories 1 and 2 point at each other."""
        service.categories.add(Category(id=1, name="Sala", slug="sala", parent_id=2, level=2))
        service.categories.add(Category(id=2, name="Quarto", slug="quarto", parent_id=1, level=2))
        return service

    def test_cycle_check_stops(self, looped: CategoryService):
        """The ancestor walk detects the loop instead of spinning."""
        with pytest.raises(BusinessRuleError, match="Circular reference detected"):
            looped.validate_no_cycle(3, 1)

    def test_product_count_walk_stops(self, looped: CategoryService):
        """Count propagation visits each category once."""
        looped.update_product_count(1, 1)

        assert looped.get_category(1).product_count == 1
        assert looped.get_category(2).product_count == 1

    def test_walk_ends_at_root(self, service: CategoryService, tree: dict):
        """A chain ending in a root category is accepted."""
        assert service.get_category(tree["root"].id).is_root
        assert not tree["leaf"].is_root

        service.validate_no_cycle(99, tree["leaf"].id)


class TestProductCount:
    """Tests for product count propagation."""

    def test_add_propagates_to_ancestors(self, service: CategoryService, tree: dict):
        """Adding to a leaf increments the whole chain."""
        service.add_product(tree["leaf"].id)
        service.add_product(tree["leaf"].id)

        for key in ("root", "middle", "leaf"):
            assert service.get_category(tree[key].id).product_count == 2

    def test_remove_propagates(self, service: CategoryService, tree: dict):
        """Removing decrements the whole chain."""
        service.add_product(tree["leaf"].id)
        service.add_product(tree["middle"].id)

        service.remove_product(tree["leaf"].id)

        assert service.get_category(tree["leaf"].id).product_count == 0
        assert service.get_category(tree["middle"].id).product_count == 1
        assert service.get_category(tree["root"].id).product_count == 1

    def test_never_negative(self, service: CategoryService, tree: dict):
        """Counts are clamped at zero."""
        service.remove_product(tree["leaf"].id)

        for key in ("root", "middle", "leaf"):
            assert service.get_category(tree[key].id).product_count == 0

    def test_unknown_category_is_noop(self, service: CategoryService):
        """update_product_count ignores unknown IDs."""
        service.update_product_count(99, 1)

    def test_add_to_missing_category(self, service: CategoryService):
        """add_product requires an existing category."""
        with pytest.raises(NotFoundError):
            service.add_product(99)


class TestCategoryQueries:
    """Tests for listing, featured and slug lookup."""

    def test_list_ordering(self, service: CategoryService):
        """Listing orders by display order, then name."""
        service.create_category({"name": "Quarto", "displayOrder": 2})
        service.create_category({"name": "Escritório", "displayOrder": 1})
        service.create_category({"name": "Cozinha", "displayOrder": 1})

        names = [c.name for c in service.list_categories()]

        assert names == ["Cozinha", "Escritório", "Quarto"]

    def test_list_hides_inactive_by_default(self, service: CategoryService):
        """Inactive categories only appear with activeOnly=false."""
        service.create_category({"name": "Quarto"})
        service.create_category({"name": "Antigos", "active": False})

        assert [c.name for c in service.list_categories()] == ["Quarto"]
        assert len(service.list_categories({"activeOnly": "false"})) == 2

    def test_list_by_parent(self, service: CategoryService, tree: dict):
        """parentId filters direct children."""
        children = service.list_categories({"parentId": str(tree["root"].id)})
        assert [c.id for c in children] == [tree["middle"].id]

    def test_list_featured_filter(self, service: CategoryService):
        """featured=true keeps only featured categories."""
        service.create_category({"name": "Quarto", "featured": True})
        service.create_category({"name": "Cozinha"})

        assert [c.name for c in service.list_categories({"featured": "true"})] == ["Quarto"]

    def test_list_flags_true_only_when_exact(self, service: CategoryService):
        """Flag values other than "true" read as false."""
        service.create_category({"name": "Quarto", "featured": True})
        service.create_category({"name": "Antigos", "active": False})

        assert len(service.list_categories({"activeOnly": "yes"})) == 2
        assert len(service.list_categories({"activeOnly": "1", "featured": "TRUE"})) == 2
        assert [c.name for c in service.list_categories({"activeOnly": "true"})] == ["Quarto"]

    def test_list_invalid_query(self, service: CategoryService):
        """A non-numeric parentId is a validation error."""
        with pytest.raises(ValidationError):
            service.list_categories({"parentId": "abc"})

    def test_featured(self, stores: CatalogStores):
        """Featured view lists active featured categories by display order."""
        service = CategoryService(stores)
        service.update_category(
            1, update_payload(service.get_category(1), active=False, featured=True)
        )

        featured = service.get_featured()

        assert [c.name for c in featured] == ["Quarto", "Cozinha", "Escritório"]

    def test_get_by_slug(self, stores: CatalogStores):
        """Seeded categories resolve by slug."""
        service = CategoryService(stores)
        assert service.get_by_slug("sala-de-estar").product_count == 4

    def test_get_by_slug_missing(self, service: CategoryService):
        """Unknown slugs raise NotFoundError."""
        with pytest.raises(NotFoundError):
            service.get_by_slug("nada")

    def test_get_by_slug_too_long(self, service: CategoryService):
        """Slugs over 60 characters are invalid."""
        with pytest.raises(ValidationError):
            service.get_by_slug("s" * 61)

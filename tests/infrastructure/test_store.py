"""Tests for in-memory record stores."""

import pytest

from app.domain.entities import Category, Product
from app.infrastructure.config import Settings
from app.infrastructure.store import (
    CatalogStores,
    CategoryStore,
    RecordStore,
    StoreCapacityError,
    get_catalog_stores,
    reset_catalog_stores,
)


def make_product(store: RecordStore[Product], name: str = "Mesa") -> Product:
    return store.add(
        Product(id=store.next_id(), name=name, category="Cozinha", image_url="x.jpg")
    )


class TestRecordStore:
    """Tests for RecordStore."""

    def test_sequential_ids(self):
        """IDs are assigned sequentially from 1."""
        store = RecordStore[Product]("products", max_records=10)
        first = make_product(store)
        second = make_product(store)
        assert (first.id, second.id) == (1, 2)
        assert store.count() == 2

    def test_get_missing_returns_none(self):
        """Unknown IDs return None."""
        store = RecordStore[Product]("products", max_records=10)
        assert store.get_by_id(99) is None
        assert store.update(99, name="x") is None
        assert store.delete(99) is False

    def test_update_replaces_record(self):
        """Update stores a modified copy and keeps old references intact."""
        store = RecordStore[Product]("products", max_records=10)
        original = make_product(store, "Mesa")

        updated = store.update(original.id, name="Mesa Redonda")

        assert updated.name == "Mesa Redonda"
        assert original.name == "Mesa"
        assert store.get_by_id(original.id).name == "Mesa Redonda"

    def test_capacity_limit(self):
        """Adding past the cap raises StoreCapacityError."""
        store = RecordStore[Product]("products", max_records=2)
        make_product(store)
        make_product(store)

        with pytest.raises(StoreCapacityError):
            make_product(store)

    def test_clear_resets_counter(self):
        """Clear empties the store and restarts IDs."""
        store = RecordStore[Product]("products", max_records=10)
        make_product(store)
        make_product(store)

        store.clear()

        assert store.count() == 0
        assert make_product(store).id == 1

    def test_explicit_id_advances_counter(self):
        """Records added with a high ID push the counter forward."""
        store = RecordStore[Product]("products", max_records=10)
        store.add(Product(id=7, name="Rack", category="Sala", image_url="x.jpg"))
        assert store.next_id() == 8


class TestCategoryStore:
    """Tests for CategoryStore slug index."""

    def test_lookup_by_slug(self):
        """Added categories are reachable by slug."""
        store = CategoryStore()
        store.add(Category(id=store.next_id(), name="Quarto", slug="quarto"))

        assert store.get_by_slug("quarto").name == "Quarto"
        assert store.get_by_slug("sala") is None

    def test_slug_change_moves_index(self):
        """Updating the slug drops the old key."""
        store = CategoryStore()
        category = store.add(Category(id=store.next_id(), name="Quarto", slug="quarto"))

        store.update(category.id, name="Dormitório", slug="dormitorio")

        assert store.get_by_slug("quarto") is None
        assert store.get_by_slug("dormitorio").id == category.id

    def test_delete_removes_slug(self):
        """Deleted categories leave the index."""
        store = CategoryStore()
        category = store.add(Category(id=store.next_id(), name="Quarto", slug="quarto"))

        store.delete(category.id)

        assert store.get_by_slug("quarto") is None

    def test_clear_empties_index(self):
        """Clear empties the slug index too."""
        store = CategoryStore()
        store.add(Category(id=store.next_id(), name="Quarto", slug="quarto"))

        store.clear()

        assert store.get_by_slug("quarto") is None


class TestCatalogStores:
    """Tests for the process-wide stores."""

    def test_global_instance_is_shared(self):
        """Repeated access returns the same stores."""
        assert get_catalog_stores() is get_catalog_stores()

    def test_reset_builds_new_instance(self):
        """Reset drops the global instance."""
        first = get_catalog_stores()
        reset_catalog_stores()
        assert get_catalog_stores() is not first

    def test_unseeded_stores_are_empty(self):
        """seed=False builds empty stores."""
        stores = get_catalog_stores(seed=False)
        assert stores.categories.count() == 0
        assert stores.products.count() == 0

    def test_seeded_catalog(self, stores: CatalogStores):
        """Demonstration catalog has 4 categories, 10 products, 7 images."""
        assert stores.categories.count() == 4
        assert stores.products.count() == 10
        assert stores.images.count() == 7
        assert stores.categories.get_by_slug("escritorio").name == "Escritório"

    def test_clear_all(self, stores: CatalogStores):
        """Clear empties every store."""
        stores.clear()
        assert stores.categories.count() == 0
        assert stores.products.count() == 0
        assert stores.images.count() == 0


class TestSettings:
    """Tests for configuration defaults."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Defaults match the documented values."""
        monkeypatch.delenv("API_PREFIX", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_prefix == "/api/internal"
        assert settings.seed_data is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("SEED_DATA", "false")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.seed_data is False
        assert settings.log_level == "DEBUG"

"""Shared test fixtures for the catalog API."""

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.seed import seed_catalog
from app.infrastructure.store import CatalogStores, reset_catalog_stores


@pytest.fixture(autouse=True)
def reset_stores():
    """Reset global stores before each test."""
    reset_catalog_stores()
    yield
    reset_catalog_stores()


@pytest.fixture
def client():
    """Create test client."""
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def stores() -> CatalogStores:
    """Isolated stores holding the demonstration catalog."""
    stores = CatalogStores()
    seed_catalog(stores)
    return stores


@pytest.fixture
def empty_stores() -> CatalogStores:
    """Isolated empty stores."""
    return CatalogStores()


@pytest.fixture
def image_payload() -> dict:
    """Valid gallery image input."""
    return {
        "imageUrl": "https://cdn.example.com/img/800.jpg",
        "thumbnailUrl": "https://cdn.example.com/img/200.jpg",
        "highResUrl": "https://cdn.example.com/img/1600.jpg",
        "altText": "Vista frontal",
        "viewAngle": "frontal",
    }

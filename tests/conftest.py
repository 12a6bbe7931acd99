"""
Shared fixtures for the catalogue tests.

``make_wine`` builds products with only the fields a test cares about;
``example_catalog`` is the three-wine catalogue used by the worked
examples; ``client`` is a TestClient whose session engine is fresh for
each test.
"""

import pytest
from fastapi.testclient import TestClient

from vinoteca.catalog.engine import CatalogViewEngine
from vinoteca.catalog.router import get_engine
from vinoteca.catalog.schemas import WineProduct
from vinoteca.catalog.store import load_catalog
from vinoteca.config import DATA_DIR
from vinoteca.main import app


@pytest.fixture
def make_wine():
    def _make(id, type="Tinto", price="10,00", rating=4.0, **extra):
        data = {
            "id": id,
            "name": f"Vino {id}",
            "type": type,
            "region": "Rioja",
            "grapeVariety": "Tempranillo",
            "price": price,
            "rating": rating,
        }
        data.update(extra)
        return WineProduct.model_validate(data)

    return _make


@pytest.fixture
def example_catalog(make_wine):
    return [
        make_wine(1, type="Tinto", price="29,99"),
        make_wine(2, type="Blanco", price="19,99"),
        make_wine(3, type="Tinto", price="45,99"),
    ]


@pytest.fixture
def shop_catalog():
    return load_catalog(DATA_DIR / "wines.json")


@pytest.fixture
def client(shop_catalog):
    engine = CatalogViewEngine(shop_catalog)
    app.dependency_overrides[get_engine] = lambda: engine
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

"""
Shared fixtures: sample records and an isolated store.
"""

from datetime import datetime

import pytest

from core.models import (
    Business,
    Catalog,
    CatalogSettings,
    GridLayout,
    Product,
    Template,
)
from core.storage import MemStorage
from core.templating.registry import InMemoryTemplateRegistry

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0)


# ============================================================
# Record factories
# ============================================================

def _make_product(product_id=1, business_id=1, **fields) -> Product:
    data = {"id": product_id, "business_id": business_id, "name": f"Product {product_id}"}
    data.update(fields)
    return Product(**data)


def _make_catalog(catalog_id=1, business_id=1, template_id=1, **fields) -> Catalog:
    data = {
        "id": catalog_id,
        "business_id": business_id,
        "template_id": template_id,
        "name": "Summer Line",
        "settings": CatalogSettings(),
    }
    data.update(fields)
    return Catalog(**data)


def _make_template(layout=None, template_id=1, name="Product Grid") -> Template:
    return Template(id=template_id, name=name, layout=layout or GridLayout())


# ============================================================
# Fixtures
# ============================================================

@pytest.fixture
def make_product():
    return _make_product


@pytest.fixture
def make_catalog():
    return _make_catalog


@pytest.fixture
def make_template():
    return _make_template


@pytest.fixture
def fixed_time():
    return FIXED_TIME


@pytest.fixture
def business():
    return Business(id=1, name="Acme Supply")


@pytest.fixture
def products():
    return [
        _make_product(1, name="Widget", sku="W1", price="9.99",
                     description="Sturdy. Light. Blue.", images=["https://img.example/w.png"]),
        _make_product(2, name="Gadget"),
    ]


@pytest.fixture
def catalog():
    return _make_catalog(description="Warm weather picks", product_ids=[1, 2])


@pytest.fixture
def grid_template():
    return _make_template(GridLayout(columns=2, show_price=True, show_sku=True))


@pytest.fixture
def empty_registry():
    return InMemoryTemplateRegistry()


@pytest.fixture
def storage():
    return MemStorage()

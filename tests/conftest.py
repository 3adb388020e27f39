"""
Test configuration and fixtures for the storefront
"""

import json
import os
from unittest.mock import patch

import pytest

from storefront.application.session import BasketSession, StorefrontData
from storefront.config import reset_config
from storefront.domain.entities.company_entity import CompanyInfo
from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.price import Price
from storefront.domain.value_objects.product_id import ProductId
from storefront.infrastructure.repositories.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from storefront.infrastructure.utilities.i18n import SiteCopy


@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'DEBUG',
        'DATA_SOURCE': 'data',
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


def make_product(product_id: str, name: str, price, url: str = "") -> Product:
    return Product(
        id=ProductId(product_id),
        name=name,
        url=url or product_id.lower(),
        price=Price(price),
    )


@pytest.fixture
def products():
    """A and B carry no digits (weight 0); the others weigh 1, 2.5 and 5 kg"""
    return [
        make_product("A", "Product A", 100),
        make_product("B", "Product B", 50),
        make_product("ZY1000", "Olive Oil 1 L", 450),
        make_product("ZY2500", "Olive Oil 2.5 L", 1000),
        make_product("ZY5000", "Olive Oil 5 L", 1950),
    ]


@pytest.fixture
def catalog(products):
    return InMemoryCatalogRepository(products)


@pytest.fixture
def company():
    return CompanyInfo(
        name="Ege Zeytin",
        phone="+90 555 123 45 67",
        email="siparis@egezeytin.com.tr",
    )


@pytest.fixture
def storefront_data(catalog, company):
    return StorefrontData(catalog=catalog, company=company, copy=SiteCopy(), loaded=True)


@pytest.fixture
def session(storefront_data):
    return BasketSession(storefront_data)


@pytest.fixture
def store(session):
    return session.store


@pytest.fixture
def data_dir(tmp_path):
    """Directory with the three startup documents"""
    (tmp_path / "company.json").write_text(
        json.dumps({"name": "Ege Zeytin", "phone": "+90 555 123 45 67", "email": "a@b.c"}),
        encoding="utf-8",
    )
    (tmp_path / "products.json").write_text(
        json.dumps(
            {
                "products": [
                    {"id": "A", "name": "Product A", "url": "a", "price": 100},
                    {"id": "B", "name": "Product B", "url": "b", "price": 50},
                ]
            }
        ),
        encoding="utf-8",
    )
    (tmp_path / "site.json").write_text(
        json.dumps({"grandTotal": "Toplam"}), encoding="utf-8"
    )
    return tmp_path

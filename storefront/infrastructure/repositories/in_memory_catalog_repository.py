"""
In-memory implementation of CatalogRepository
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from storefront.domain.entities.product_entity import Product
from storefront.domain.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in a dict keyed by product id, built once at startup"""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._logger = logging.getLogger(self.__class__.__name__)
        self._products: Dict[str, Product] = {}
        for product in products or []:
            self.save(product)

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "InMemoryCatalogRepository":
        """Build the catalog from raw product records, skipping malformed ones"""
        repository = cls()
        for index, record in enumerate(records):
            try:
                product = Product.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                repository._logger.warning("⚠️ Skipping malformed product #%d: %s", index, e)
                continue
            if repository.exists(product.id.value):
                repository._logger.warning(
                    "⚠️ Skipping duplicate product id %s", product.id.value
                )
                continue
            repository.save(product)
        repository._logger.info("📦 CATALOG BUILT: %d products", len(repository))
        return repository

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by exact id"""
        if not isinstance(product_id, str):
            return None
        return self._products.get(product_id)

    def find_all(self) -> List[Product]:
        """All products in insertion order"""
        return list(self._products.values())

    def save(self, product: Product) -> Product:
        """Store or replace a product record"""
        self._products[product.id.value] = product
        return product

    def __len__(self) -> int:
        return len(self._products)

"""
Catalog repository interface

Defines the contract for product lookups.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from storefront.domain.entities.product_entity import Product


class CatalogRepository(ABC):
    """Repository interface for catalog lookups"""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by exact id, None when unknown"""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """All products in catalog order"""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Save product"""

    def exists(self, product_id: str) -> bool:
        return self.find_by_id(product_id) is not None

"""
Product Entity - catalog record as supplied by products.json
"""

from dataclasses import dataclass
from typing import Any, Dict

from storefront.domain.value_objects.price import Price
from storefront.domain.value_objects.product_id import ProductId


@dataclass(frozen=True)
class Product:
    """Product domain entity"""

    id: ProductId
    name: str
    url: str
    price: Price
    short_desc: str = ""

    def __post_init__(self):
        """Validate the product after initialization"""
        if not self.name or not self.name.strip():
            raise ValueError("Product name cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Create a product from a catalog document entry.

        Raises ValueError (or KeyError/TypeError) on malformed entries.
        """
        raw_id = data["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)):
            raise ValueError(f"Invalid product id: {raw_id!r}")
        raw_price = data["price"]
        if isinstance(raw_price, bool) or not isinstance(raw_price, (int, float, str)):
            raise ValueError(f"Invalid product price: {raw_price!r}")
        return cls(
            id=ProductId(str(raw_id)),
            name=str(data["name"]),
            url=str(data.get("url") or ""),
            price=Price(raw_price),
            short_desc=str(data.get("shortDesc") or ""),
        )

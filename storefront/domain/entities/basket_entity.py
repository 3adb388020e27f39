"""
Basket Entity - ordered collection of basket lines
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from storefront.domain.entities.product_entity import Product
from storefront.domain.value_objects.price import Price
from storefront.domain.value_objects.product_id import ProductId
from storefront.domain.value_objects.quantity import Quantity


@dataclass
class BasketItem:
    """
    One basket line.

    Name, url and price are copied from the product when the line is created
    and never follow later catalog changes.
    """

    product_id: ProductId
    name: str
    url: str
    price: Price
    quantity: Quantity

    @classmethod
    def snapshot(cls, product: Product, quantity: int) -> "BasketItem":
        """Create a line from the product as it is right now"""
        return cls(
            product_id=product.id,
            name=product.name,
            url=product.url,
            price=product.price,
            quantity=Quantity(quantity),
        )

    @property
    def id(self) -> str:
        return self.product_id.value

    @property
    def line_total(self) -> Price:
        return self.price * self.quantity.value

    def increase(self):
        self.quantity = self.quantity.increment()

    def decrease(self):
        """Raises ValueError at quantity 1; the line must be removed instead"""
        self.quantity = self.quantity.decrement()


@dataclass
class Basket:
    """Basket domain entity, insertion ordered, one line per product id"""

    items: List[BasketItem] = field(default_factory=list)

    def find(self, product_id: str) -> Optional[BasketItem]:
        """Find the line for a product id"""
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def contains(self, product_id: str) -> bool:
        return self.find(product_id) is not None

    def append(self, item: BasketItem):
        """Add a new line at the end"""
        if self.contains(item.id):
            raise ValueError(f"Basket already holds {item.id}")
        self.items.append(item)

    def remove(self, product_id: str) -> bool:
        """Remove a line, returns False when it was not there"""
        before = len(self.items)
        self.items = [item for item in self.items if item.id != product_id]
        return len(self.items) != before

    def clear(self):
        self.items = []

    def quantity_of(self, product_id: str) -> int:
        item = self.find(product_id)
        return item.quantity.value if item else 0

    @property
    def item_count(self) -> int:
        """Total number of units, shown on the basket badge"""
        return sum(item.quantity.value for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[BasketItem]:
        return iter(list(self.items))

    def __len__(self) -> int:
        return len(self.items)

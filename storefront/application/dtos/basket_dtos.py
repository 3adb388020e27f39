"""
Basket DTOs

Commands accepted by the basket store and the read models it returns.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Union

from storefront.domain.entities.basket_entity import BasketItem
from storefront.domain.value_objects.money import Money
from storefront.domain.value_objects.platform import Platform


@dataclass(frozen=True)
class AddItem:
    """Add a product, or bump an existing line by one"""
    product_id: str
    quantity: int = 1


@dataclass(frozen=True)
class DecreaseItem:
    """Take one unit off a line holding more than one"""
    product_id: str


@dataclass(frozen=True)
class RemoveItem:
    """Drop a line regardless of quantity"""
    product_id: str


@dataclass(frozen=True)
class ClearBasket:
    """Empty the basket"""


BasketCommand = Union[AddItem, DecreaseItem, RemoveItem, ClearBasket]


@dataclass(frozen=True)
class Totals:
    """Derived basket totals, never stored"""
    subtotal: Money
    shipping_cost: Money
    grand_total: Money
    weight: Decimal
    is_free_shipping: bool = False


@dataclass
class BasketLineInfo:
    """Basket line information"""
    product_id: str
    name: str
    url: str
    unit_price: Money
    quantity: int
    total_price: Money

    @classmethod
    def from_item(cls, item: BasketItem) -> "BasketLineInfo":
        return cls(
            product_id=item.id,
            name=item.name,
            url=item.url,
            unit_price=item.price,
            quantity=item.quantity.value,
            total_price=item.line_total,
        )


@dataclass
class BasketSummary:
    """Basket summary information"""
    items: List[BasketLineInfo]
    totals: Totals
    item_count: int
    query: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class BasketOperationResponse:
    """Response for basket operations"""
    success: bool
    summary: Optional[BasketSummary] = None
    error_message: Optional[str] = None


@dataclass
class OrderMessage:
    """Order text plus the deep link that carries it"""
    text: str
    link: str
    platform: Platform

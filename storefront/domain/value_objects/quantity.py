"""Basket line quantity value object"""

from dataclasses import dataclass

from storefront.infrastructure.utilities.constants import BusinessSettings


@dataclass(frozen=True)
class Quantity:
    """Positive integer quantity of a basket line"""

    value: int

    def __post_init__(self):
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or self.value < BusinessSettings.MIN_BASKET_ITEM_QUANTITY
        ):
            raise ValueError("Quantity must be a positive integer")

    def increment(self) -> "Quantity":
        return Quantity(self.value + 1)

    def decrement(self) -> "Quantity":
        """Raises ValueError when the result would drop below 1"""
        return Quantity(self.value - 1)

    def __int__(self) -> int:
        return self.value

"""Product ID value object"""

import re
from dataclasses import dataclass
from decimal import Decimal

from storefront.infrastructure.utilities.constants import ShippingSettings


@dataclass(frozen=True)
class ProductId:
    """
    Product identifier value object

    The digits inside the identifier double as a weight proxy in grams:
    "P2500" weighs 2.5 kg for shipping purposes.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Product ID must be a non-empty string")
        object.__setattr__(self, "value", self.value.strip())

    @property
    def weight_grams(self) -> int:
        """Numeric part of the id, 0 when it has no digits"""
        digits = re.sub(r"\D", "", self.value)
        return int(digits) if digits else 0

    @property
    def weight_kg(self) -> Decimal:
        """Weight proxy in kilograms"""
        return Decimal(self.weight_grams) / ShippingSettings.GRAMS_PER_KILOGRAM

    def __str__(self) -> str:
        return self.value

"""
Money value object

Represents monetary amounts in the store's single currency.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from storefront.infrastructure.utilities.constants import BusinessSettings

DEFAULT_CURRENCY = BusinessSettings.DEFAULT_CURRENCY


@dataclass(frozen=True)
class Money:
    """
    Money value object that handles currency amounts properly
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        """Validate money object on creation"""
        if isinstance(self.amount, bool):
            raise ValueError("Money amount must be a number")
        if not isinstance(self.amount, Decimal):
            # Convert to Decimal for precise currency calculations
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except ArithmeticError as exc:
                raise ValueError(f"Invalid money amount: {self.amount!r}") from exc

        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")

        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter code")

        # Amounts stay exact; rounding to cents happens only when formatting
        object.__setattr__(self, 'currency', self.currency.upper())

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Create zero money amount"""
        return cls(Decimal('0'), currency)

    def add(self, other: 'Money') -> 'Money':
        """Add two money amounts"""
        if self.currency != other.currency:
            raise ValueError(f"Cannot add different currencies: {self.currency} and {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: Union[int, Decimal]) -> 'Money':
        """Multiply money by a factor"""
        if not isinstance(factor, Decimal):
            factor = Decimal(str(factor))
        if factor < 0:
            raise ValueError("Cannot multiply money by negative factor")
        return Money(self.amount * factor, self.currency)

    def is_zero(self) -> bool:
        """Check if amount is zero"""
        return self.amount == Decimal('0')

    def to_float(self) -> float:
        """Convert to float (use with caution for display only)"""
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money amounts using + operator"""
        return self.add(other)

    def __mul__(self, factor: Union[int, Decimal]) -> 'Money':
        """Multiply money by a factor using * operator"""
        return self.multiply(factor)

    def __rmul__(self, factor: Union[int, Decimal]) -> 'Money':
        """Reverse multiply for factor * money"""
        return self.multiply(factor)

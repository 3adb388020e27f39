"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .money import Money
from .phone_number import PhoneNumber
from .platform import Platform
from .price import Price
from .product_id import ProductId
from .quantity import Quantity

__all__ = [
    "Money",
    "PhoneNumber",
    "Platform",
    "Price",
    "ProductId",
    "Quantity",
]

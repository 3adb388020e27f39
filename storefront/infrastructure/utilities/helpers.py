"""
Utility functions for the storefront
"""

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Union
from urllib.parse import quote

from storefront.infrastructure.utilities.constants import (
    BusinessSettings,
    DeepLinkSettings,
)

Number = Union[int, float, Decimal]

_QUANTITY_PATTERN = re.compile(r"[0-9]+")


def digits_only(value: str) -> str:
    """Strip every non-digit character"""
    return re.sub(r"\D", "", value or "")


def format_number(value: Number) -> str:
    """Format a number with Turkish grouping: 1.250,5"""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    integer, _, fraction = f"{amount:,.2f}".partition(".")
    integer = integer.replace(",", ".")
    fraction = fraction.rstrip("0")
    if fraction:
        return f"{integer},{fraction}"
    return integer


def format_plain_number(value: Number) -> str:
    """Plain decimal notation without grouping or trailing zeros: 1250.5"""
    text = format(Decimal(str(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_price(price: Number, suffix: str = BusinessSettings.DEFAULT_CURRENCY_SUFFIX) -> str:
    """Format price with currency suffix"""
    return f"{format_number(price)} {suffix}"


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way browsers' encodeURIComponent does"""
    return quote(text, safe=DeepLinkSettings.SAFE_CHARACTERS)


def parse_quantity(value: str) -> int | None:
    """Parse a query-string quantity, None when it is not a positive integer"""
    if not isinstance(value, str) or not _QUANTITY_PATTERN.fullmatch(value.strip()):
        return None
    quantity = int(value.strip())
    if quantity < BusinessSettings.MIN_BASKET_ITEM_QUANTITY:
        return None
    return quantity

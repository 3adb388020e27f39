"""
Custom exceptions for the storefront basket engine

None of these are fatal: every caller in the engine catches them and degrades
to "behave as if the offending data didn't exist".
"""

import logging

from storefront.infrastructure.utilities.constants import ErrorCodes

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """Base exception for the storefront"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or ErrorCodes.GENERIC_ERROR_MESSAGE
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR


class DataUnavailableError(StorefrontError):
    """A startup document could not be fetched or parsed"""

    def __init__(self, document: str, reason: str = None):
        super().__init__(
            f"Data unavailable: {document} ({reason})",
            "Some store data could not be loaded.",
            ErrorCodes.DATA_UNAVAILABLE,
        )
        self.document = document


class UnknownProductError(StorefrontError):
    """Product id is not in the catalog"""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            "This product is not available.",
            ErrorCodes.UNKNOWN_PRODUCT,
        )
        self.product_id = product_id


class InvalidQuantityError(StorefrontError):
    """Quantity is not a positive integer"""

    def __init__(self, quantity):
        super().__init__(
            f"Invalid quantity: {quantity!r}",
            "Quantity must be at least 1.",
            ErrorCodes.INVALID_QUANTITY,
        )
        self.quantity = quantity


class BasketItemNotFoundError(StorefrontError):
    """Item is not in the basket"""

    def __init__(self, product_id: str):
        super().__init__(
            f"Item not in basket: {product_id}",
            "This item is not in your basket.",
            ErrorCodes.ITEM_NOT_IN_BASKET,
        )
        self.product_id = product_id


class EmptyBasketError(StorefrontError):
    """An order was requested for a basket with no lines"""

    def __init__(self):
        super().__init__(
            "Cannot build an order for an empty basket",
            "Your basket is empty.",
            ErrorCodes.EMPTY_BASKET,
        )


def validate_and_raise(condition: bool, error_class: type, *args, **kwargs):
    """Helper function to validate condition and raise specific error"""
    if not condition:
        raise error_class(*args, **kwargs)

"""
Application constants for the storefront

Centralizes all magic numbers and hard-coded values to improve maintainability
and follow the "Avoid magic numbers and hard-coded strings" principle.
"""

from decimal import Decimal
from typing import Final


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    PERFORMANCE_LOG_FILE_SIZE: Final[int] = 5 * 1024 * 1024  # 5MB

    # Backup counts
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10
    PERFORMANCE_LOG_BACKUP_COUNT: Final[int] = 5


# File and directory constants
class FileSettings:
    """File paths and directory settings"""

    LOGS_DIRECTORY: Final[str] = "logs"
    DATA_DIRECTORY: Final[str] = "data"

    # Startup documents
    COMPANY_FILE: Final[str] = "company.json"
    PRODUCTS_FILE: Final[str] = "products.json"
    SITE_FILE: Final[str] = "site.json"

    # Log file names
    MAIN_LOG_FILE: Final[str] = "app.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"
    PERFORMANCE_LOG_FILE: Final[str] = "performance.log"


# Shipping rules
class ShippingSettings:
    """Weight-based shipping tiers, evaluated in ascending order"""

    # (upper bound in kg, inclusive?, cost)
    TIERS: Final[tuple] = (
        (Decimal("3"), True, Decimal("146")),
        (Decimal("5"), True, Decimal("168")),
        (Decimal("10"), True, Decimal("96")),
        (Decimal("15"), False, Decimal("123.5")),
    )
    FREE_SHIPPING_WEIGHT: Final[Decimal] = Decimal("15")
    GRAMS_PER_KILOGRAM: Final[Decimal] = Decimal("1000")


# Business logic constants
class BusinessSettings:
    """Business rules and default values"""

    DEFAULT_CURRENCY: Final[str] = "TRY"
    DEFAULT_CURRENCY_SUFFIX: Final[str] = "TL"
    DEFAULT_REHYDRATE_DELAY_SECONDS: Final[float] = 0.987
    MIN_BASKET_ITEM_QUANTITY: Final[int] = 1


# Messaging deep links
class DeepLinkSettings:
    """WhatsApp deep link templates"""

    MOBILE_TEMPLATE: Final[str] = "https://wa.me/{phone}?text={text}"
    WEB_TEMPLATE: Final[str] = "https://web.whatsapp.com/send?phone={phone}&text={text}"

    # Characters encodeURIComponent leaves untouched
    SAFE_CHARACTERS: Final[str] = "-_.!~*'()"

    MOBILE_USER_AGENT_PATTERN: Final[str] = (
        r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini"
    )


# Basket panel presentation
class PanelSettings:
    """Basket panel sizing"""

    SHOWN_HEIGHT: Final[str] = "fit-content"
    COLLAPSED_HEIGHT: Final[str] = "220px"
    COLLAPSED_HEIGHT_NARROW: Final[str] = "260px"
    NARROW_VIEWPORT_WIDTH: Final[int] = 777


# Error codes and messages
class ErrorCodes:
    """Standardized error codes and messages"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    DATA_UNAVAILABLE: Final[str] = "DATA_UNAVAILABLE"
    UNKNOWN_PRODUCT: Final[str] = "UNKNOWN_PRODUCT"
    INVALID_QUANTITY: Final[str] = "INVALID_QUANTITY"
    ITEM_NOT_IN_BASKET: Final[str] = "ITEM_NOT_IN_BASKET"
    EMPTY_BASKET: Final[str] = "EMPTY_BASKET"

    # User-friendly messages
    GENERIC_ERROR_MESSAGE: Final[str] = "An error occurred. Please try again."

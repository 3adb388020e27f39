"""
Logging Infrastructure

JSON file logging, structured loggers and performance timing.
"""

from .logging_config import (
    PerformanceLogger,
    ProductionLogger,
    StorefrontJsonFormatter,
    get_structured_logger,
)

__all__ = [
    "PerformanceLogger",
    "ProductionLogger",
    "StorefrontJsonFormatter",
    "get_structured_logger",
]

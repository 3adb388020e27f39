"""
Basket engine services: totals, location-state sync, order messages and
change notification.
"""

from .location_service import LocationState, LocationStateSynchronizer
from .notification_service import RenderNotifier
from .order_message_service import OrderMessageFormatter
from .totals_service import TotalsCalculator

__all__ = [
    "LocationState",
    "LocationStateSynchronizer",
    "OrderMessageFormatter",
    "RenderNotifier",
    "TotalsCalculator",
]

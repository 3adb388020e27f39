"""
Totals calculation

Pure projection of a basket: subtotal, weight-based shipping, grand total.
Recomputed on every call, nothing is cached.
"""

import logging
from decimal import Decimal

from storefront.application.dtos.basket_dtos import Totals
from storefront.domain.entities.basket_entity import Basket
from storefront.domain.value_objects.money import DEFAULT_CURRENCY, Money
from storefront.infrastructure.utilities.constants import ShippingSettings

logger = logging.getLogger(__name__)


class TotalsCalculator:
    """Service for basket totals"""

    def __init__(self, currency: str = DEFAULT_CURRENCY):
        self._currency = currency

    def weight(self, basket: Basket) -> Decimal:
        """Shipment weight in kg from the digits of each product id"""
        return sum(
            (item.product_id.weight_kg * item.quantity.value for item in basket),
            Decimal("0"),
        )

    def shipping_cost(self, weight: Decimal) -> Money:
        """Step function over the shipping tiers, first match wins"""
        weight = Decimal(str(weight))
        for bound, inclusive, cost in ShippingSettings.TIERS:
            if weight < bound or (inclusive and weight == bound):
                return Money(cost, self._currency)
        return Money.zero(self._currency)

    def is_free_shipping(self, weight: Decimal) -> bool:
        return Decimal(str(weight)) >= ShippingSettings.FREE_SHIPPING_WEIGHT

    def subtotal(self, basket: Basket) -> Money:
        """Sum of quantity x snapshotted price"""
        total = Money.zero(self._currency)
        for item in basket:
            total = total + Money(item.price.amount, self._currency) * item.quantity.value
        return total

    def calculate(self, basket: Basket) -> Totals:
        """Compute every total from scratch"""
        weight = self.weight(basket)
        subtotal = self.subtotal(basket)
        shipping = self.shipping_cost(weight)
        totals = Totals(
            subtotal=subtotal,
            shipping_cost=shipping,
            grand_total=subtotal + shipping,
            weight=weight,
            is_free_shipping=self.is_free_shipping(weight),
        )
        logger.debug(
            "  -> Totals: Subtotal=%s, Shipping=%s, Total=%s, Weight=%s",
            totals.subtotal.amount,
            totals.shipping_cost.amount,
            totals.grand_total.amount,
            totals.weight,
        )
        return totals

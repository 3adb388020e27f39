"""
Basket management use case

Owns every basket mutation. Each operation is synchronous, never raises for
ordinary input, and ends with recompute -> sync location -> notify.
"""

import logging

from storefront.application.dtos.basket_dtos import (
    AddItem,
    BasketCommand,
    BasketLineInfo,
    BasketOperationResponse,
    BasketSummary,
    ClearBasket,
    DecreaseItem,
    RemoveItem,
)
from storefront.domain.entities.basket_entity import Basket, BasketItem
from storefront.domain.entities.product_entity import Product
from storefront.domain.repositories.catalog_repository import CatalogRepository
from storefront.infrastructure.utilities.exceptions import (
    BasketItemNotFoundError,
    InvalidQuantityError,
    StorefrontError,
    UnknownProductError,
    validate_and_raise,
)
from storefront.services.location_service import LocationStateSynchronizer
from storefront.services.notification_service import RenderNotifier
from storefront.services.totals_service import TotalsCalculator

logger = logging.getLogger(__name__)


class BasketManagementUseCase:
    """
    Use case for basket operations

    Handles:
    1. Adding items (first add snapshots name and price)
    2. Decreasing quantities
    3. Removing items
    4. Clearing the basket
    5. Badge / stepper queries for the presentation layer
    """

    def __init__(
        self,
        basket: Basket,
        catalog: CatalogRepository,
        totals_calculator: TotalsCalculator,
        synchronizer: LocationStateSynchronizer,
        notifier: RenderNotifier,
    ):
        self._basket = basket
        self._catalog = catalog
        self._totals = totals_calculator
        self._synchronizer = synchronizer
        self._notifier = notifier
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def basket(self) -> Basket:
        return self._basket

    def add(self, product_id: str, quantity: int = 1) -> BasketOperationResponse:
        """
        Add a product to the basket.

        An existing line always grows by exactly one; ``quantity`` only
        applies when the line is created.
        """
        self._logger.info("🛒 ADD TO BASKET: Product: %s, Qty: %s", product_id, quantity)

        try:
            product = self._validate_product(product_id)

            existing = self._basket.find(product.id.value)
            if existing:
                existing.increase()
                self._logger.info(
                    "  -> Increased %s to %d", existing.id, existing.quantity.value
                )
            else:
                self._validate_quantity(quantity)
                self._basket.append(BasketItem.snapshot(product, quantity))
                self._logger.info("  -> New line %s x %d", product.id.value, quantity)

            return self.refresh()

        except StorefrontError as e:
            self._logger.warning("⚠️ ADD IGNORED: %s", e)
            return self.refresh(error_message=e.user_message)

    def decrease(self, product_id: str) -> BasketOperationResponse:
        """
        Take one unit off a line.

        A line at quantity 1 is left alone; callers remove it instead.
        """
        self._logger.info("➖ DECREASE: Product: %s", product_id)

        try:
            item = self._find_item(product_id)
            if item.quantity.value <= 1:
                raise InvalidQuantityError(item.quantity.value - 1)
            item.decrease()
            self._logger.info("  -> Decreased %s to %d", item.id, item.quantity.value)
            return self.refresh()

        except StorefrontError as e:
            self._logger.warning("⚠️ DECREASE IGNORED: %s", e)
            return self.refresh(error_message=e.user_message)

    def remove(self, product_id: str) -> BasketOperationResponse:
        """Remove a line regardless of its quantity"""
        self._logger.info("🗑️ REMOVE: Product: %s", product_id)

        try:
            self._find_item(product_id)
            self._basket.remove(product_id)
            return self.refresh()

        except StorefrontError as e:
            self._logger.warning("⚠️ REMOVE IGNORED: %s", e)
            return self.refresh(error_message=e.user_message)

    def clear(self) -> BasketOperationResponse:
        """Empty the basket"""
        self._logger.info("🗑️ CLEAR BASKET: %d lines", len(self._basket))
        self._basket.clear()
        return self.refresh()

    def dispatch(self, command: BasketCommand) -> BasketOperationResponse:
        """Typed entry point for the presentation layer"""
        if isinstance(command, AddItem):
            return self.add(command.product_id, command.quantity)
        if isinstance(command, DecreaseItem):
            return self.decrease(command.product_id)
        if isinstance(command, RemoveItem):
            return self.remove(command.product_id)
        if isinstance(command, ClearBasket):
            return self.clear()
        raise TypeError(f"Unsupported basket command: {command!r}")

    def refresh(self, error_message: str | None = None) -> BasketOperationResponse:
        """Recompute totals, sync the location state, then notify listeners"""
        summary = self.get_summary()
        summary.query = self._synchronizer.sync(self._basket)
        self._notifier.notify()
        return BasketOperationResponse(
            success=error_message is None,
            summary=summary,
            error_message=error_message,
        )

    def get_summary(self) -> BasketSummary:
        """Lines and freshly computed totals"""
        return BasketSummary(
            items=[BasketLineInfo.from_item(item) for item in self._basket],
            totals=self._totals.calculate(self._basket),
            item_count=self._basket.item_count,
            query=self._synchronizer.location.query,
        )

    def item_count(self) -> int:
        """Units in the basket, for the badge"""
        return self._basket.item_count

    def quantity_of(self, product_id: str) -> int:
        """Quantity of a product in the basket, 0 when absent"""
        return self._basket.quantity_of(product_id)

    def is_in_basket(self, product_id: str) -> bool:
        return self._basket.contains(product_id)

    def _validate_product(self, product_id: str) -> Product:
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return product

    @staticmethod
    def _validate_quantity(quantity: int):
        validate_and_raise(
            not isinstance(quantity, bool) and isinstance(quantity, int) and quantity >= 1,
            InvalidQuantityError,
            quantity,
        )

    def _find_item(self, product_id: str) -> BasketItem:
        item = self._basket.find(product_id)
        if item is None:
            raise BasketItemNotFoundError(product_id)
        return item

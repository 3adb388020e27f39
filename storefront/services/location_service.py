"""
Location-state synchronization

The basket lives in the page's query string ("?P100=2&P250=1") so a cart
survives reloads and can be shared as a link. The synchronizer overwrites
that state after every mutation and replays it once at startup.
"""

import logging
from typing import TYPE_CHECKING, List, Tuple
from urllib.parse import parse_qsl, urlencode

from storefront.domain.entities.basket_entity import Basket
from storefront.domain.repositories.catalog_repository import CatalogRepository
from storefront.infrastructure.utilities.helpers import parse_quantity

if TYPE_CHECKING:
    from storefront.application.dtos.basket_dtos import BasketOperationResponse
    from storefront.application.use_cases.basket_management_use_case import (
        BasketManagementUseCase,
    )

logger = logging.getLogger(__name__)


class LocationState:
    """
    The addressable query state of one session.

    ``replace`` swaps the whole query in place; no history entry is kept.
    """

    def __init__(self, query: str = ""):
        self._query = query.lstrip("?")
        self.replacements = 0

    @property
    def query(self) -> str:
        return self._query

    @property
    def search(self) -> str:
        """Query with its leading '?', empty for an empty basket"""
        return f"?{self._query}" if self._query else ""

    def replace(self, query: str) -> None:
        self._query = query.lstrip("?")
        self.replacements += 1

    def __repr__(self) -> str:
        return f"LocationState({self._query!r})"


class LocationStateSynchronizer:
    """Encodes the basket into the location state and decodes it back"""

    def __init__(self, location: LocationState, catalog: CatalogRepository):
        self._location = location
        self._catalog = catalog
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def location(self) -> LocationState:
        return self._location

    @staticmethod
    def encode(basket: Basket) -> str:
        """id=quantity pairs in basket order"""
        return urlencode([(item.id, item.quantity.value) for item in basket])

    @staticmethod
    def decode(query: str) -> List[Tuple[str, int]]:
        """Every well-formed pair in order, duplicates included"""
        pairs: List[Tuple[str, int]] = []
        for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
            quantity = parse_quantity(value)
            if not key or quantity is None:
                logger.warning("⚠️ Ignoring malformed location entry %r=%r", key, value)
                continue
            pairs.append((key, quantity))
        return pairs

    def sync(self, basket: Basket) -> str:
        """Overwrite the location state with the current basket"""
        query = self.encode(basket)
        self._location.replace(query)
        self._logger.debug("🔗 LOCATION SYNCED: %r", query)
        return query

    def rehydrate(
        self, query: str, store: "BasketManagementUseCase"
    ) -> "BasketOperationResponse":
        """
        Replay a query through the store's add operation.

        Known ids go through ``store.add`` so they get the same validation and
        price snapshot as a manual add; a repeated id therefore increments by
        one instead of overwriting the quantity. Unknown ids are skipped.
        """
        pairs = self.decode(query)
        self._logger.info("♻️ REHYDRATING BASKET: %d entries", len(pairs))

        for product_id, quantity in pairs:
            if not self._catalog.exists(product_id):
                self._logger.info("  -> Skipping unknown product %s", product_id)
                continue
            store.add(product_id, quantity)

        return store.refresh()

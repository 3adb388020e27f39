"""
Storefront state

``StorefrontData`` is what startup loads once and every session shares;
``BasketSession`` is one shopper's basket with everything wired around it.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from storefront.application.basket_panel import BasketPanel
from storefront.application.dtos.basket_dtos import (
    BasketCommand,
    BasketOperationResponse,
    OrderMessage,
)
from storefront.application.use_cases.basket_management_use_case import (
    BasketManagementUseCase,
)
from storefront.domain.entities.basket_entity import Basket
from storefront.domain.entities.company_entity import CompanyInfo
from storefront.domain.repositories.catalog_repository import CatalogRepository
from storefront.domain.value_objects.platform import Platform
from storefront.infrastructure.repositories.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from storefront.infrastructure.utilities.constants import BusinessSettings
from storefront.infrastructure.utilities.i18n import SiteCopy
from storefront.services.location_service import LocationState, LocationStateSynchronizer
from storefront.services.notification_service import RenderNotifier
from storefront.services.order_message_service import OrderMessageFormatter
from storefront.services.totals_service import TotalsCalculator

logger = logging.getLogger(__name__)


@dataclass
class StorefrontData:
    """Startup data shared by every session"""

    catalog: CatalogRepository = field(default_factory=InMemoryCatalogRepository)
    company: CompanyInfo = field(default_factory=CompanyInfo)
    copy: SiteCopy = field(default_factory=SiteCopy)
    loaded: bool = False
    degraded: bool = False


class BasketSession:
    """One shopper's basket, its location state and the services around it"""

    def __init__(
        self,
        data: StorefrontData,
        initial_query: str = "",
        platform: Platform = Platform.WEB,
        is_narrow: bool = False,
        currency: str = BusinessSettings.DEFAULT_CURRENCY,
        currency_suffix: str = BusinessSettings.DEFAULT_CURRENCY_SUFFIX,
    ):
        self.data = data
        self.initial_query = initial_query.lstrip("?")
        self.platform = platform
        self.rehydrated = False

        self.basket = Basket()
        self.location = LocationState(self.initial_query)
        self.notifier = RenderNotifier()
        self.totals = TotalsCalculator(currency)
        self.synchronizer = LocationStateSynchronizer(self.location, data.catalog)
        self.store = BasketManagementUseCase(
            basket=self.basket,
            catalog=data.catalog,
            totals_calculator=self.totals,
            synchronizer=self.synchronizer,
            notifier=self.notifier,
        )
        self.formatter = OrderMessageFormatter(data.company, data.copy, currency_suffix)
        self.panel = BasketPanel(data.copy, is_narrow).attach(self.notifier)

    async def start(self, delay: float = BusinessSettings.DEFAULT_REHYDRATE_DELAY_SECONDS) -> BasketOperationResponse:
        """Wait for the page to settle, then replay the initial query once"""
        if delay > 0:
            await asyncio.sleep(delay)
        return self.rehydrate()

    def rehydrate(self) -> BasketOperationResponse:
        """Replay the query captured when the session opened; runs only once"""
        if self.rehydrated:
            logger.warning("⚠️ Session already rehydrated, ignoring")
            return self.store.refresh()
        self.rehydrated = True
        return self.synchronizer.rehydrate(self.initial_query, self.store)

    def dispatch(self, command: BasketCommand) -> BasketOperationResponse:
        return self.store.dispatch(command)

    def order_message(self) -> OrderMessage:
        """Raises EmptyBasketError when there is nothing to order"""
        return self.formatter.build_order(
            self.basket, self.totals.calculate(self.basket), self.platform
        )

    def contact_link(self) -> str:
        return self.formatter.contact_link(self.platform)

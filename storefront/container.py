"""
Storefront controller.

Owns the startup data and hands out basket sessions wired against it.
"""

import logging
from typing import Optional

from storefront.application.basket_panel import BasketPanel
from storefront.application.session import BasketSession, StorefrontData
from storefront.config import Settings, get_config
from storefront.domain.entities.company_entity import CompanyInfo
from storefront.domain.value_objects.platform import Platform
from storefront.infrastructure.data.data_loader import DataLoader
from storefront.infrastructure.logging.logging_config import PerformanceLogger
from storefront.infrastructure.repositories.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from storefront.infrastructure.utilities.i18n import SiteCopy

logger = logging.getLogger(__name__)


class StorefrontController:
    """Single owner of the application state"""

    def __init__(self, settings: Optional[Settings] = None, loader: Optional[DataLoader] = None):
        self.settings = settings or get_config()
        self._loader = loader or DataLoader(self.settings.data_source)
        self.data = StorefrontData()

    @property
    def is_loaded(self) -> bool:
        return self.data.loaded

    async def load(self) -> StorefrontData:
        """Fetch the startup documents once and build the catalog"""
        with PerformanceLogger("startup data load", logger):
            documents = await self._loader.load()

        self.data = StorefrontData(
            catalog=InMemoryCatalogRepository.from_records(documents.product_records),
            company=CompanyInfo.from_dict(documents.company),
            copy=SiteCopy.from_dict(documents.site),
            loaded=True,
            degraded=documents.degraded,
        )
        logger.info(
            "🏪 STOREFRONT READY: %d products%s",
            len(self.data.catalog.find_all()),
            " (degraded)" if self.data.degraded else "",
        )
        return self.data

    def open_session(
        self,
        initial_query: str = "",
        user_agent: Optional[str] = None,
        viewport_width: Optional[int] = None,
    ) -> BasketSession:
        """New session over the current data; the query is captured, not applied"""
        return BasketSession(
            self.data,
            initial_query=initial_query,
            platform=Platform.from_user_agent(user_agent),
            is_narrow=BasketPanel.is_narrow_viewport(viewport_width),
            currency=self.settings.currency,
            currency_suffix=self.settings.currency_suffix,
        )

    async def start_session(
        self,
        initial_query: str = "",
        user_agent: Optional[str] = None,
        viewport_width: Optional[int] = None,
    ) -> BasketSession:
        """Open a session and rehydrate it after the configured delay"""
        if not self.is_loaded:
            await self.load()
        session = self.open_session(initial_query, user_agent, viewport_width)
        await session.start(self.settings.rehydrate_delay_seconds)
        return session

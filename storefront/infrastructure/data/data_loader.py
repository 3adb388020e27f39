"""
Startup data loader

Fetches company.json, products.json and site.json once at startup, either
over HTTP or from a local directory. A document that cannot be loaded is
reported and replaced by None; the caller falls back to defaults.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import httpx

from storefront.infrastructure.utilities.constants import FileSettings
from storefront.infrastructure.utilities.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class StartupDocuments:
    """Raw startup documents, None where loading failed"""

    company: Optional[Any] = None
    products: Optional[Any] = None
    site: Optional[Any] = None
    errors: List[DataUnavailableError] = field(default_factory=list)

    @property
    def has_product_list(self) -> bool:
        return isinstance(self.products, dict) and isinstance(self.products.get("products"), list)

    @property
    def product_records(self) -> List[Any]:
        """The product list inside products.json, [] when missing or malformed"""
        return self.products["products"] if self.has_product_list else []

    @property
    def degraded(self) -> bool:
        """True when a document failed to load or the catalog document is malformed"""
        return bool(self.errors) or not self.has_product_list


class DataLoader:
    """Loads the three startup documents concurrently"""

    def __init__(self, source: str, client: Optional[httpx.AsyncClient] = None):
        self._source = source
        self._client = client
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def is_remote(self) -> bool:
        return self._source.startswith(("http://", "https://"))

    async def load(self) -> StartupDocuments:
        """Load every document; never raises for unavailable data"""
        self._logger.info("📥 LOADING STARTUP DATA from %s", self._source)
        documents = StartupDocuments()

        if self.is_remote and self._client is None:
            async with httpx.AsyncClient() as client:
                results = await self._load_all(client, documents)
        else:
            results = await self._load_all(self._client, documents)

        documents.company, documents.products, documents.site = results

        if documents.products is not None and not documents.has_product_list:
            error = DataUnavailableError(FileSettings.PRODUCTS_FILE, "no 'products' list")
            documents.errors.append(error)
            self._logger.error("💥 %s", error)

        if documents.degraded:
            self._logger.warning(
                "⚠️ STARTUP DATA DEGRADED: %d document(s) unavailable", len(documents.errors)
            )
        else:
            self._logger.info("✅ STARTUP DATA LOADED")
        return documents

    async def _load_all(self, client: Optional[httpx.AsyncClient], documents: StartupDocuments):
        return await asyncio.gather(
            self._load_document(client, FileSettings.COMPANY_FILE, documents),
            self._load_document(client, FileSettings.PRODUCTS_FILE, documents),
            self._load_document(client, FileSettings.SITE_FILE, documents),
        )

    async def _load_document(
        self, client: Optional[httpx.AsyncClient], name: str, documents: StartupDocuments
    ) -> Optional[Any]:
        try:
            if self.is_remote:
                return await self._fetch(client, name)
            return self._read(name)
        except (httpx.HTTPError, OSError, ValueError) as e:
            error = DataUnavailableError(name, str(e))
            documents.errors.append(error)
            self._logger.error("💥 %s", error)
            return None

    async def _fetch(self, client: httpx.AsyncClient, name: str) -> Any:
        url = f"{self._source.rstrip('/')}/{name}"
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    def _read(self, name: str) -> Any:
        path = Path(self._source) / name
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

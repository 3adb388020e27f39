"""
Session, panel and controller tests
"""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from storefront.application.basket_panel import BasketPanel, PanelState
from storefront.application.session import BasketSession
from storefront.config import Settings
from storefront.container import StorefrontController
from storefront.domain.value_objects.platform import Platform
from storefront.infrastructure.data.data_loader import DataLoader
from storefront.infrastructure.utilities.exceptions import EmptyBasketError
from storefront.infrastructure.utilities.i18n import SiteCopy
from storefront.services.notification_service import RenderNotifier


class TestBasketPanel:
    """Test the show / hide state machine"""

    def test_initial_state(self):
        panel = BasketPanel(SiteCopy())
        assert panel.state is PanelState.HIDDEN
        assert panel.button_label == "Sepeti Göster"
        assert panel.height == "220px"

    def test_narrow_viewport_height(self):
        assert BasketPanel(SiteCopy(), is_narrow=True).height == "260px"

    def test_narrow_viewport_breakpoint(self):
        assert BasketPanel.is_narrow_viewport(776) is True
        assert BasketPanel.is_narrow_viewport(777) is False
        assert BasketPanel.is_narrow_viewport(None) is False

    def test_toggle(self):
        panel = BasketPanel(SiteCopy())

        panel.toggle()
        assert panel.is_shown
        assert panel.button_label == "Sepeti Gizle"
        assert panel.height == "fit-content"

        panel.toggle()
        assert not panel.is_shown

    def test_show_on_change(self):
        notifier = RenderNotifier()
        panel = BasketPanel(SiteCopy()).attach(notifier)

        notifier.notify()
        assert panel.is_shown

        panel.hide()
        notifier.notify()
        assert panel.is_shown


class TestBasketSession:
    """Test session wiring and startup rehydration"""

    @pytest.mark.asyncio
    async def test_start_waits_then_rehydrates(self, storefront_data):
        session = BasketSession(storefront_data, initial_query="?A=2&B=1")

        with patch(
            "storefront.application.session.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            response = await session.start(0.987)

        mock_sleep.assert_awaited_once_with(0.987)
        assert session.store.quantity_of("A") == 2
        assert session.store.quantity_of("B") == 1
        assert response.summary.query == "A=2&B=1"

    @pytest.mark.asyncio
    async def test_start_without_delay(self, storefront_data):
        session = BasketSession(storefront_data, initial_query="A=1")

        with patch(
            "storefront.application.session.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await session.start(0)

        mock_sleep.assert_not_awaited()
        assert session.store.quantity_of("A") == 1

    def test_rehydrate_runs_once(self, storefront_data):
        session = BasketSession(storefront_data, initial_query="A=2")

        session.rehydrate()
        response = session.rehydrate()

        assert session.store.quantity_of("A") == 2
        assert response.summary.query == "A=2"

    def test_query_untouched_until_rehydrated(self, storefront_data):
        session = BasketSession(storefront_data, initial_query="A=2")
        assert session.location.query == "A=2"
        assert session.location.replacements == 0

    def test_panel_opens_on_add(self, session):
        assert not session.panel.is_shown
        session.store.add("A")
        assert session.panel.is_shown

    def test_order_message(self, storefront_data):
        session = BasketSession(storefront_data, platform=Platform.MOBILE)
        session.store.add("A", 2)

        order = session.order_message()

        assert "Genel Toplam : 346 TL" in order.text
        assert order.link.startswith("https://wa.me/905551234567?text=")

    def test_order_message_requires_items(self, session):
        with pytest.raises(EmptyBasketError):
            session.order_message()

    def test_contact_link(self, session):
        assert session.contact_link() == (
            "https://web.whatsapp.com/send?phone=905551234567&text=Merhaba"
        )


def mock_transport(documents, failing=()):
    """Serve startup documents by file name; names in *failing* return 500"""

    def handler(request: httpx.Request) -> httpx.Response:
        name = request.url.path.rsplit("/", 1)[-1]
        if name in failing:
            return httpx.Response(500)
        if name not in documents:
            return httpx.Response(404)
        return httpx.Response(200, content=json.dumps(documents[name]).encode("utf-8"))

    return httpx.MockTransport(handler)


REMOTE_DOCUMENTS = {
    "company.json": {"name": "Ege Zeytin", "phone": "+90 555 123 45 67", "email": "a@b.c"},
    "products.json": {
        "products": [
            {"id": "ZY1000", "name": "Oil 1 L", "url": "oil-1", "price": 450},
            {"id": "ZY5000", "name": "Oil 5 L", "url": "oil-5", "price": 1950},
        ]
    },
    "site.json": {"showBasket": "Sepet"},
}


class TestStorefrontController:
    """Test startup loading and session creation"""

    @pytest.mark.asyncio
    async def test_load_from_directory(self, data_dir):
        controller = StorefrontController(Settings(data_source=str(data_dir)))

        data = await controller.load()

        assert controller.is_loaded
        assert data.degraded is False
        assert [p.id.value for p in data.catalog.find_all()] == ["A", "B"]
        assert data.company.name == "Ege Zeytin"
        assert data.copy.tr("grandTotal") == "Toplam"

    @pytest.mark.asyncio
    async def test_load_from_url(self):
        async with httpx.AsyncClient(transport=mock_transport(REMOTE_DOCUMENTS)) as client:
            loader = DataLoader("https://cdn.example.com/data/", client=client)
            controller = StorefrontController(Settings(), loader=loader)
            data = await controller.load()

        assert len(data.catalog) == 2
        assert data.copy.tr("showBasket") == "Sepet"
        assert data.degraded is False

    @pytest.mark.asyncio
    async def test_load_degraded(self):
        """A failed document leaves an empty but usable storefront"""
        transport = mock_transport(REMOTE_DOCUMENTS, failing={"products.json"})
        async with httpx.AsyncClient(transport=transport) as client:
            controller = StorefrontController(
                Settings(), loader=DataLoader("https://cdn.example.com", client=client)
            )
            data = await controller.load()

        assert data.loaded is True
        assert data.degraded is True
        assert data.catalog.find_all() == []
        assert data.company.name == "Ege Zeytin"

        session = controller.open_session("ZY1000=2")
        response = session.rehydrate()
        assert response.summary.is_empty
        assert session.location.query == ""

    @pytest.mark.asyncio
    async def test_start_session(self, data_dir):
        controller = StorefrontController(
            Settings(data_source=str(data_dir), rehydrate_delay_seconds=0.5)
        )

        with patch(
            "storefront.application.session.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            session = await controller.start_session(
                "A=2", user_agent="Mozilla/5.0 (iPhone; CPU iPhone OS 17_0)"
            )

        mock_sleep.assert_awaited_once_with(0.5)
        assert controller.is_loaded
        assert session.platform is Platform.MOBILE
        assert session.store.quantity_of("A") == 2

    def test_open_session_uses_settings(self, storefront_data):
        controller = StorefrontController(Settings(currency_suffix="₺"))
        controller.data = storefront_data

        session = controller.open_session("?A=1", viewport_width=500)

        assert session.platform is Platform.WEB
        assert session.initial_query == "A=1"
        assert session.panel.height == "260px"
        session.store.add("A", 2)
        assert "Genel Toplam : 346 ₺" in session.order_message().text

    def test_open_session_wide_viewport(self, storefront_data):
        controller = StorefrontController(Settings())
        controller.data = storefront_data

        assert controller.open_session(viewport_width=1280).panel.height == "220px"
        assert controller.open_session().panel.height == "220px"

    @pytest.mark.asyncio
    async def test_load_malformed_catalog_document(self):
        documents = dict(REMOTE_DOCUMENTS, **{"products.json": [{"id": "ZY1000"}]})
        async with httpx.AsyncClient(transport=mock_transport(documents)) as client:
            controller = StorefrontController(
                Settings(), loader=DataLoader("https://cdn.example.com", client=client)
            )
            data = await controller.load()

        assert data.degraded is True
        assert data.catalog.find_all() == []

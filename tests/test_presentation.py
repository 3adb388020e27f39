"""
Presentation Tests - basket view models and API schemas
"""

import pytest
from pydantic import ValidationError

from storefront.application.dtos.basket_dtos import (
    AddItem,
    ClearBasket,
    DecreaseItem,
    RemoveItem,
)
from storefront.infrastructure.utilities.i18n import SiteCopy
from storefront.presentation.basket_view import BasketPanelView, CartLineControl
from storefront.presentation.web.schemas import BasketCommandRequest


class TestCartLineControl:
    """Test the minus control of a cart line"""

    def test_single_unit_removes(self, store):
        store.add("A")
        line = store.get_summary().items[0]

        control = CartLineControl.for_line(line, SiteCopy())

        assert control.minus_icon == "minus"
        assert control.minus_label == "sil"
        assert control.minus_command == RemoveItem("A")
        assert control.quantity_label == "1 Adet"
        assert control.plus_icon == "plus"
        assert control.plus_label == "ekle"
        assert control.plus_command == AddItem("A")

    def test_several_units_decrease(self, store):
        store.add("A", 3)
        line = store.get_summary().items[0]

        control = CartLineControl.for_line(line, SiteCopy())

        assert control.minus_icon == "minus"
        assert control.minus_label == "çıkart"
        assert control.minus_command == DecreaseItem("A")

    def test_dispatching_the_control(self, store):
        store.add("A", 2)
        for _ in range(2):
            line = store.get_summary().items[0]
            store.dispatch(CartLineControl.for_line(line, SiteCopy()).minus_command)

        assert store.get_summary().is_empty


class TestBasketPanelView:
    """Test basket panel texts"""

    def test_paid_shipping(self, store):
        store.add("A", 2)

        view = BasketPanelView.from_summary(store.get_summary(), SiteCopy(), "TL")

        assert view.badge_count == 2
        assert view.badge_visible is True
        assert view.product_total_line == "Ürün Tutarı : 200 TL (KDV Dahil)"
        assert view.shipping_line == "Kargo Ücreti : 146 TL (Vergiler Dahil)"
        assert view.shipping_note == SiteCopy().tr("freeShippingNote")
        assert view.grand_total_line == "Genel Toplam : 346 TL"
        assert view.order_button_label == "Whatsapp'dan Siparişini İlet"

    def test_free_shipping(self, store):
        store.add("ZY5000", 3)

        view = BasketPanelView.from_summary(store.get_summary(), SiteCopy(), "TL")

        assert view.shipping_line is None
        assert view.shipping_note == "Kargonuz ücretsiz."
        assert view.grand_total_line == "Genel Toplam : 5.850 TL"

    def test_empty_basket_hides_badge(self, store):
        view = BasketPanelView.from_summary(store.get_summary(), SiteCopy(), "TL")
        assert view.badge_visible is False
        assert view.lines == []


class TestBasketCommandRequest:
    """Test API command validation"""

    def test_to_command(self):
        test_cases = [
            ({"type": "add", "product_id": "A", "quantity": 2}, AddItem("A", 2)),
            ({"type": "add", "product_id": "A"}, AddItem("A", 1)),
            ({"type": "decrease", "product_id": "A"}, DecreaseItem("A")),
            ({"type": "remove", "product_id": "A"}, RemoveItem("A")),
            ({"type": "clear"}, ClearBasket()),
        ]
        for payload, expected in test_cases:
            assert BasketCommandRequest(**payload).to_command() == expected

    def test_invalid_requests(self):
        invalid = [
            {"type": "add"},
            {"type": "remove", "product_id": ""},
            {"type": "add", "product_id": "A", "quantity": 0},
            {"type": "replace", "product_id": "A"},
        ]
        for payload in invalid:
            with pytest.raises(ValidationError):
                BasketCommandRequest(**payload)

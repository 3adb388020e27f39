"""
Application Use Cases Tests
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from storefront.application.dtos.basket_dtos import (
    AddItem,
    ClearBasket,
    DecreaseItem,
    RemoveItem,
)
from storefront.application.use_cases.basket_management_use_case import (
    BasketManagementUseCase,
)
from storefront.domain.entities.basket_entity import Basket
from storefront.services.location_service import LocationState, LocationStateSynchronizer
from storefront.services.notification_service import RenderNotifier
from storefront.services.totals_service import TotalsCalculator

from tests.conftest import make_product


def lines(response):
    return [(line.product_id, line.quantity) for line in response.summary.items]


class TestAddToBasket:
    """Test adding products"""

    def test_add_new_product(self, store):
        response = store.add("A", 2)

        assert response.success is True
        assert lines(response) == [("A", 2)]
        assert response.summary.totals.subtotal.amount == Decimal("200")
        assert response.summary.query == "A=2"

    def test_add_existing_product_increments_by_one(self, store):
        """Quantity only applies to a new line"""
        store.add("A", 2)
        response = store.add("A", 5)

        assert lines(response) == [("A", 3)]

    def test_add_keeps_one_line_per_product(self, store):
        for product_id in ["A", "B", "A", "A", "B"]:
            store.add(product_id)

        assert [line.product_id for line in store.get_summary().items] == ["A", "B"]
        assert store.item_count() == 5

    def test_add_unknown_product(self, store, session):
        response = store.add("NOPE")

        assert response.success is False
        assert response.error_message == "This product is not available."
        assert response.summary.is_empty
        assert session.notifier.notifications == 1

    def test_add_invalid_quantity(self, store):
        for quantity in [0, -2, 1.5, True]:
            response = store.add("A", quantity)
            assert response.success is False
            assert response.error_message == "Quantity must be at least 1."
        assert store.quantity_of("A") == 0

    def test_add_ignores_quantity_for_existing_line(self, store):
        store.add("A")
        response = store.add("A", 0)

        assert response.success is True
        assert store.quantity_of("A") == 2

    def test_price_snapshot(self, store, catalog):
        """Catalog changes after the first add do not reach the line"""
        store.add("A")
        catalog.save(make_product("A", "Renamed A", 999))
        store.add("A")

        line = store.get_summary().items[0]
        assert line.name == "Product A"
        assert line.unit_price.amount == Decimal("100")
        assert line.total_price.amount == Decimal("200")


class TestDecreaseAndRemove:
    """Test decreasing, removing and clearing"""

    def test_decrease(self, store):
        store.add("A", 3)
        response = store.decrease("A")

        assert response.success is True
        assert lines(response) == [("A", 2)]
        assert response.summary.query == "A=2"

    def test_decrease_at_one_is_noop(self, store, session):
        store.add("A")
        notifications = session.notifier.notifications

        response = store.decrease("A")

        assert response.success is False
        assert lines(response) == [("A", 1)]
        assert session.notifier.notifications == notifications + 1

    def test_decrease_missing_item(self, store):
        response = store.decrease("B")
        assert response.success is False
        assert response.error_message == "This item is not in your basket."

    def test_remove(self, store):
        store.add("A", 4)
        store.add("B")

        response = store.remove("A")

        assert lines(response) == [("B", 1)]
        assert response.summary.query == "B=1"
        assert store.is_in_basket("A") is False

    def test_remove_missing_item(self, store):
        store.add("A")
        response = store.remove("B")

        assert response.success is False
        assert lines(response) == [("A", 1)]

    def test_clear(self, store, session):
        store.add("A")
        store.add("B")

        response = store.clear()

        assert response.success is True
        assert response.summary.is_empty
        assert response.summary.item_count == 0
        assert session.location.query == ""

    def test_readd_after_remove_goes_to_end(self, store):
        store.add("A")
        store.add("B")
        store.remove("A")
        response = store.add("A", 2)

        assert lines(response) == [("B", 1), ("A", 2)]


class TestDispatch:
    """Test the typed command entry point"""

    def test_dispatch_commands(self, store):
        store.dispatch(AddItem("A", 3))
        store.dispatch(AddItem("B"))
        store.dispatch(DecreaseItem("A"))
        response = store.dispatch(RemoveItem("B"))

        assert lines(response) == [("A", 2)]

        response = store.dispatch(ClearBasket())
        assert response.summary.is_empty

    def test_dispatch_unknown_command(self, store):
        with pytest.raises(TypeError):
            store.dispatch("add A")


class TestRefreshOrder:
    """Every operation recomputes, syncs the location, then notifies"""

    def test_location_synced_before_notify(self, session, store):
        seen = []
        session.notifier.subscribe(lambda: seen.append(session.location.query))

        store.add("A")
        store.add("B", 2)
        store.decrease("B")

        assert seen == ["A=1", "A=1&B=2", "A=1&B=1"]

    def test_refresh_with_mocked_collaborators(self, catalog):
        synchronizer = MagicMock(spec=LocationStateSynchronizer)
        synchronizer.location = LocationState()
        synchronizer.sync.return_value = "A=1"
        notifier = MagicMock(spec=RenderNotifier)

        store = BasketManagementUseCase(
            basket=Basket(),
            catalog=catalog,
            totals_calculator=TotalsCalculator(),
            synchronizer=synchronizer,
            notifier=notifier,
        )
        response = store.add("A")

        synchronizer.sync.assert_called_once_with(store.basket)
        notifier.notify.assert_called_once()
        assert response.summary.query == "A=1"

    def test_every_failed_operation_still_notifies(self, session, store):
        store.add("X")
        store.decrease("A")
        store.remove("A")
        store.clear()

        assert session.notifier.notifications == 4
        assert session.location.replacements == 4


class TestExactPricing:
    """Sub-cent catalog prices are summed exactly"""

    def test_sub_cent_price_is_not_rounded(self, store, catalog):
        catalog.save(make_product("P1", "Fine", "0.125"))

        response = store.add("P1", 4)

        assert response.summary.items[0].unit_price.amount == Decimal("0.125")
        assert response.summary.totals.subtotal.amount == Decimal("0.5")

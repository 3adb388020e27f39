"""
Basket view models

Display-ready text for the basket panel and cart lines, derived from the
store's summary. Nothing here feeds back into basket arithmetic.
"""

from dataclasses import dataclass
from typing import List, Optional

from storefront.application.dtos.basket_dtos import (
    AddItem,
    BasketCommand,
    BasketLineInfo,
    BasketSummary,
    DecreaseItem,
    RemoveItem,
)
from storefront.infrastructure.utilities.helpers import format_price
from storefront.infrastructure.utilities.i18n import SiteCopy


@dataclass(frozen=True)
class CartLineControl:
    """Minus / quantity / plus control of one cart line"""

    product_id: str
    quantity: int
    quantity_label: str
    minus_icon: str
    minus_label: str
    minus_command: BasketCommand
    plus_icon: str
    plus_label: str
    plus_command: BasketCommand

    @classmethod
    def for_line(cls, line: BasketLineInfo, copy: SiteCopy) -> "CartLineControl":
        # Icon stays "minus" at quantity 1 too; only the label and the
        # dispatched command switch to delete.
        removes = line.quantity <= 1
        return cls(
            product_id=line.product_id,
            quantity=line.quantity,
            quantity_label=f"{line.quantity} {copy.tr('quantity')}",
            minus_icon="minus",
            minus_label=copy.tr("deleteItem" if removes else "decreaseItem"),
            minus_command=RemoveItem(line.product_id) if removes else DecreaseItem(line.product_id),
            plus_icon="plus",
            plus_label=copy.tr("addToBasket"),
            plus_command=AddItem(line.product_id),
        )


@dataclass(frozen=True)
class BasketPanelView:
    """Text shown in the basket panel"""

    badge_count: int
    badge_visible: bool
    product_total_line: str
    shipping_line: Optional[str]
    shipping_note: str
    grand_total_line: str
    order_button_label: str
    lines: List[CartLineControl]

    @classmethod
    def from_summary(
        cls, summary: BasketSummary, copy: SiteCopy, currency_suffix: str
    ) -> "BasketPanelView":
        totals = summary.totals

        def price(amount) -> str:
            return format_price(amount, currency_suffix)

        if totals.is_free_shipping:
            shipping_line = None
            shipping_note = copy.tr("shippingFree")
        else:
            shipping_line = (
                f"{copy.tr('shippingCost')} : {price(totals.shipping_cost.amount)} "
                f"{copy.tr('shippingTaxNote')}"
            )
            shipping_note = copy.tr("freeShippingNote")

        return cls(
            badge_count=summary.item_count,
            badge_visible=summary.item_count > 0,
            product_total_line=(
                f"{copy.tr('productTotal')} : {price(totals.subtotal.amount)} "
                f"{copy.tr('vatIncluded')}"
            ),
            shipping_line=shipping_line,
            shipping_note=shipping_note,
            grand_total_line=f"{copy.tr('grandTotal')} : {price(totals.grand_total.amount)}",
            order_button_label=copy.tr("orderViaWhatsapp"),
            lines=[CartLineControl.for_line(line, copy) for line in summary.items],
        )

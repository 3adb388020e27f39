"""
Order message formatting

Renders the basket as a plain-text WhatsApp order and builds the deep link
that opens a pre-filled conversation with the store. Opening the link is the
caller's job.
"""

import logging

from storefront.application.dtos.basket_dtos import OrderMessage, Totals
from storefront.domain.entities.basket_entity import Basket
from storefront.domain.entities.company_entity import CompanyInfo
from storefront.domain.value_objects.platform import Platform
from storefront.infrastructure.utilities.constants import (
    BusinessSettings,
    DeepLinkSettings,
)
from storefront.infrastructure.utilities.exceptions import EmptyBasketError
from storefront.infrastructure.utilities.helpers import (
    encode_uri_component,
    format_plain_number,
    format_price,
)
from storefront.infrastructure.utilities.i18n import SiteCopy

logger = logging.getLogger(__name__)


class OrderMessageFormatter:
    """Builds order texts and messaging deep links"""

    def __init__(
        self,
        company: CompanyInfo,
        copy: SiteCopy,
        currency_suffix: str = BusinessSettings.DEFAULT_CURRENCY_SUFFIX,
    ):
        self._company = company
        self._copy = copy
        self._suffix = currency_suffix
        self._logger = logging.getLogger(self.__class__.__name__)

    def format_message(self, basket: Basket, totals: Totals) -> str:
        """
        Plain-text order summary:

            Merhaba,

            1 A (100 x 1)

            Ürün Tutarı : 100 TL
            Kargo Ücreti : 146 TL
            Genel Toplam : 246 TL

            Satın almak istiyorum.
        """
        lines = [f"{self._copy.tr('greeting')},", ""]
        for item in basket:
            quantity = item.quantity.value
            lines.append(
                f"{quantity} {item.name} ({format_plain_number(item.price.amount)} x {quantity})"
            )
        lines.append("")
        lines.append(f"{self._copy.tr('productTotal')} : {self._price(totals.subtotal.amount)}")
        lines.append(f"{self._copy.tr('shippingCost')} : {self._price(totals.shipping_cost.amount)}")
        lines.append(f"{self._copy.tr('grandTotal')} : {self._price(totals.grand_total.amount)}")
        lines.append("")
        lines.append(self._copy.tr("orderIntent"))
        return "\n".join(lines)

    def deep_link(self, message: str, platform: Platform) -> str:
        """WhatsApp link for the platform with the message pre-filled"""
        template = (
            DeepLinkSettings.MOBILE_TEMPLATE
            if platform is Platform.MOBILE
            else DeepLinkSettings.WEB_TEMPLATE
        )
        return template.format(
            phone=self._phone_digits(),
            text=encode_uri_component(message),
        )

    def build_order(self, basket: Basket, totals: Totals, platform: Platform) -> OrderMessage:
        """Order text and the link that carries it.

        Raises EmptyBasketError when the basket has no lines.
        """
        if basket.is_empty():
            raise EmptyBasketError()
        text = self.format_message(basket, totals)
        link = self.deep_link(text, platform)
        self._logger.info(
            "📨 ORDER MESSAGE BUILT: %d lines, total %s, platform %s",
            len(basket),
            totals.grand_total.amount,
            platform.value,
        )
        return OrderMessage(text=text, link=link, platform=platform)

    def contact_link(self, platform: Platform) -> str:
        """Greeting-only link for the contact button"""
        return self.deep_link(self._copy.tr("greeting"), platform)

    def no_messenger_note(self) -> str:
        """E-mail fallback for shoppers who do not use WhatsApp"""
        return (
            f"{self._copy.tr('notUsingWhatsapp')}, "
            f"{self._copy.tr('contactUsWithEmail')} {self._company.email} "
            f"{self._copy.tr('reachUsViaEmail')}."
        )

    def _phone_digits(self) -> str:
        phone = self._company.phone_number
        return phone.digits if phone else ""

    def _price(self, amount) -> str:
        return format_price(amount, self._suffix)

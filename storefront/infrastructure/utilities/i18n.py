"""
Site copy (UI strings) with baked-in defaults.

Usage
-----
copy = SiteCopy.from_dict(site_document)
text = copy.tr("grandTotal")  # "Genel Toplam" unless site.json overrides it

Every key the engine reads has a Turkish default, so a missing or broken
site.json never leaves a label empty. Unknown keys fall back to the key name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

DEFAULT_COPY: Dict[str, str] = {
    "greeting": "Merhaba",
    "orderIntent": "Satın almak istiyorum.",
    "quantity": "Adet",
    "productTotal": "Ürün Tutarı",
    "vatIncluded": "(KDV Dahil)",
    "shippingCost": "Kargo Ücreti",
    "shippingTaxNote": "(Vergiler Dahil)",
    "freeShippingNote": "15 kg ve üzeri siparişlerde kargo ücretsizdir.",
    "shippingFree": "Kargonuz ücretsiz.",
    "grandTotal": "Genel Toplam",
    "orderViaWhatsapp": "Whatsapp'dan Siparişini İlet",
    "notUsingWhatsapp": "WhatsApp kullanmıyorsanız",
    "contactUsWithEmail": "sipariş ve sorularınız için bize",
    "reachUsViaEmail": "adresimizden ulaşabilirsiniz",
    "showBasket": "Sepeti Göster",
    "hideBasket": "Sepeti Gizle",
    "addedToBasket": "Sepete Eklendi",
    "addToBasket": "ekle",
    "decreaseItem": "çıkart",
    "deleteItem": "sil",
}


@dataclass(frozen=True)
class SiteCopy:
    """UI strings keyed by logical name"""

    strings: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "SiteCopy":
        """Build from the site document, keeping only non-empty string values"""
        if not isinstance(data, dict):
            logger.warning("Site copy is not an object, using defaults")
            return cls()
        strings = {
            key: value
            for key, value in data.items()
            if isinstance(key, str) and isinstance(value, str) and value
        }
        return cls(strings=strings)

    def tr(self, key: str) -> str:
        """Translate *key*.

        Falls back to the baked-in default, then to the key itself.
        """
        if key in self.strings:
            return self.strings[key]
        return DEFAULT_COPY.get(key, key)

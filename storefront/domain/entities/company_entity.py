"""
Company Entity - contact details from company.json
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from storefront.domain.value_objects.phone_number import PhoneNumber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompanyInfo:
    """Company contact information"""

    name: str = ""
    legal_name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    instagram: str = ""
    slogan: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CompanyInfo":
        """Create from the company document; non-string fields are dropped"""
        if not isinstance(data, dict):
            logger.warning("Company info is not an object, using empty defaults")
            return cls()

        def text(key: str) -> str:
            value = data.get(key)
            return value if isinstance(value, str) else ""

        return cls(
            name=text("name"),
            legal_name=text("legalName"),
            address=text("address"),
            phone=text("phone"),
            email=text("email"),
            instagram=text("instagram"),
            slogan=text("slogan"),
        )

    @property
    def phone_number(self) -> Optional[PhoneNumber]:
        """Validated phone, None when the company has no usable number"""
        try:
            return PhoneNumber(self.phone)
        except ValueError:
            return None

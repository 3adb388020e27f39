"""Client platform value object"""

import re
from enum import Enum

from storefront.infrastructure.utilities.constants import DeepLinkSettings

_MOBILE_PATTERN = re.compile(DeepLinkSettings.MOBILE_USER_AGENT_PATTERN, re.IGNORECASE)


class Platform(Enum):
    """Which messaging client a deep link should target"""

    MOBILE = "mobile"
    WEB = "web"

    @classmethod
    def from_user_agent(cls, user_agent: str | None) -> "Platform":
        """Detect the platform from a device signature"""
        if user_agent and _MOBILE_PATTERN.search(user_agent):
            return cls.MOBILE
        return cls.WEB

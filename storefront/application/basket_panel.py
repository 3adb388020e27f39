"""
Basket panel visibility

Two states, hidden (initial) and shown. The panel listens on the basket's
render notifier and opens on every change.
"""

import logging
from enum import Enum
from typing import Optional

from storefront.infrastructure.utilities.constants import PanelSettings
from storefront.infrastructure.utilities.i18n import SiteCopy
from storefront.services.notification_service import RenderNotifier

logger = logging.getLogger(__name__)


class PanelState(Enum):
    HIDDEN = "hidden"
    SHOWN = "shown"


class BasketPanel:
    """Show / hide / toggle state machine for the basket panel"""

    def __init__(self, copy: SiteCopy, is_narrow: bool = False):
        self._copy = copy
        self._is_narrow = is_narrow
        self.state = PanelState.HIDDEN

    @staticmethod
    def is_narrow_viewport(width: Optional[int]) -> bool:
        """Viewports narrower than the breakpoint get the taller collapsed panel"""
        return width is not None and width < PanelSettings.NARROW_VIEWPORT_WIDTH

    def attach(self, notifier: RenderNotifier) -> "BasketPanel":
        notifier.subscribe(self.show)
        return self

    @property
    def is_shown(self) -> bool:
        return self.state is PanelState.SHOWN

    def show(self):
        self.state = PanelState.SHOWN

    def hide(self):
        self.state = PanelState.HIDDEN

    def toggle(self):
        if self.is_shown:
            self.hide()
        else:
            self.show()

    @property
    def button_label(self) -> str:
        return self._copy.tr("hideBasket" if self.is_shown else "showBasket")

    @property
    def height(self) -> str:
        if self.is_shown:
            return PanelSettings.SHOWN_HEIGHT
        if self._is_narrow:
            return PanelSettings.COLLAPSED_HEIGHT_NARROW
        return PanelSettings.COLLAPSED_HEIGHT

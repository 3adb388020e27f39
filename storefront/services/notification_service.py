"""
Render notifier

The basket store emits a payload-free "basket changed" signal after every
mutation. Subscribers re-read the store; they never receive basket data.
"""

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class RenderNotifier:
    """Synchronous basket-changed signal"""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._logger = logging.getLogger(self.__class__.__name__)
        self.notifications = 0

    def subscribe(self, listener: Listener) -> Listener:
        """Register a listener, returns it so it can be unsubscribed later"""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self) -> None:
        """Call every listener in subscription order"""
        self.notifications += 1
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:  # pylint: disable=broad-except
                # Listener failures never reach the mutating caller
                self._logger.error("💥 RENDER LISTENER FAILED: %s", e, exc_info=True)

"""Notifier interface."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseNotifier(ABC):
    """Best-effort notification channel.

    ``send`` never raises: delivery errors are logged and dropped so a broken
    gateway can never change the driver's outcome. ``deliver`` is the strict
    variant for callers that need to know whether the message went out.
    """

    name = "base"

    def send(self, message: str) -> None:
        try:
            self.deliver(message)
        except Exception as e:
            logger.warning(f"Notification via {self.name} failed: {e}")

    @abstractmethod
    def deliver(self, message: str) -> None:
        """Deliver a message.

        Raises:
            NotificationError: If the message could not be delivered
        """
        pass


class NullNotifier(BaseNotifier):
    """Notifier that drops every message."""

    name = "none"

    def deliver(self, message: str) -> None:
        logger.debug(f"Notifications disabled, dropping: {message}")

"""HTTP webhook notifier."""

import logging

import httpx

from ralph_loop.clients.base import BaseNotifier
from ralph_loop.constants import NOTIFY_HTTP_TIMEOUT
from ralph_loop.exceptions import NotificationError

logger = logging.getLogger(__name__)


class WebhookNotifier(BaseNotifier):
    """POSTs ``{"text": ..., "mode": "now"}`` to a wake gateway URL."""

    name = "webhook"

    def __init__(self, url: str, timeout: float = NOTIFY_HTTP_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def deliver(self, message: str) -> None:
        try:
            response = httpx.post(
                self.url,
                json={"text": message, "mode": "now"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationError(f"Webhook delivery to {self.url} failed: {e}") from e
        logger.debug(f"Webhook accepted notification ({response.status_code})")

"""Notification service."""

import logging

from ralph_loop.clients.base import BaseNotifier, NullNotifier
from ralph_loop.clients.gateway import GatewayNotifier
from ralph_loop.clients.telegram import TelegramNotifier
from ralph_loop.clients.webhook import WebhookNotifier
from ralph_loop.config import LoopConfig
from ralph_loop.constants import NOTIFY_GATEWAY, NOTIFY_NONE, NOTIFY_TELEGRAM, NOTIFY_WEBHOOK
from ralph_loop.exceptions import ConfigError

logger = logging.getLogger(__name__)


def create_notifier(config: LoopConfig) -> BaseNotifier:
    """Create the notifier selected by ``config.notify_mode``."""
    mode = config.notify_mode
    if mode == NOTIFY_GATEWAY:
        return GatewayNotifier()
    if mode == NOTIFY_WEBHOOK:
        return WebhookNotifier(config.webhook_url)
    if mode == NOTIFY_TELEGRAM:
        return TelegramNotifier.from_env(config.env_file)
    if mode == NOTIFY_NONE:
        return NullNotifier()
    raise ConfigError(f"Unknown notify mode '{mode}'")

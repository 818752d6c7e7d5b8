"""Telegram bot notifier."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import requests
from dotenv import dotenv_values

from ralph_loop.clients.base import BaseNotifier
from ralph_loop.constants import DEFAULT_ENV_FILE, NOTIFY_HTTP_TIMEOUT, TELEGRAM_API_BASE_URL
from ralph_loop.exceptions import NotificationError

logger = logging.getLogger(__name__)

TOKEN_VAR = "RALPH_TELEGRAM_BOT_TOKEN"
CHAT_ID_VAR = "RALPH_TELEGRAM_CHAT_ID"


class TelegramNotifier(BaseNotifier):
    """Sends messages through the Telegram Bot API ``sendMessage`` method."""

    name = "telegram"

    def __init__(
        self,
        bot_token: Optional[str],
        chat_id: Optional[str],
        env_file: Path = DEFAULT_ENV_FILE,
        timeout: float = NOTIFY_HTTP_TIMEOUT,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.env_file = env_file
        self.timeout = timeout

    @classmethod
    def from_env(
        cls, env_file: Path = DEFAULT_ENV_FILE, environ: Optional[Mapping[str, str]] = None
    ) -> "TelegramNotifier":
        """Read credentials from the environment, falling back to the env file.

        The env file is only consulted when the bot token is not already set.
        """
        if environ is None:
            environ = os.environ

        file_values: Mapping[str, Optional[str]] = {}
        if not environ.get(TOKEN_VAR) and env_file.is_file():
            file_values = dotenv_values(env_file)

        return cls(
            bot_token=environ.get(TOKEN_VAR) or file_values.get(TOKEN_VAR),
            chat_id=environ.get(CHAT_ID_VAR) or file_values.get(CHAT_ID_VAR),
            env_file=env_file,
        )

    def deliver(self, message: str) -> None:
        if not self.bot_token:
            raise NotificationError(f"{TOKEN_VAR} not set. Create {self.env_file}")
        if not self.chat_id:
            raise NotificationError(f"{CHAT_ID_VAR} not set. Create {self.env_file}")

        url = f"{TELEGRAM_API_BASE_URL}/bot{self.bot_token}/sendMessage"
        data = {"chat_id": self.chat_id, "text": message, "parse_mode": "Markdown"}

        try:
            response = requests.post(url, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            # The exception text embeds the URL, which carries the bot token
            raise NotificationError(f"Telegram API unreachable: {type(e).__name__}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not payload.get("ok"):
            raise NotificationError(f"Telegram API error: {response.text}")

        logger.debug("Telegram notification sent")

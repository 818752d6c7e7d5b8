"""OpenClaw gateway notifier."""

import logging
import subprocess

from ralph_loop.clients.base import BaseNotifier
from ralph_loop.constants import GATEWAY_EXECUTABLE
from ralph_loop.exceptions import NotificationError
from ralph_loop.utils.process import command_exists

logger = logging.getLogger(__name__)


class GatewayNotifier(BaseNotifier):
    """Wakes the operator through ``openclaw gateway wake``.

    Silently skipped when the gateway CLI is not installed.
    """

    name = "gateway"

    def __init__(self, executable: str = GATEWAY_EXECUTABLE):
        self.executable = executable

    def deliver(self, message: str) -> None:
        if not command_exists(self.executable):
            logger.debug(f"{self.executable} not found, skipping notification")
            return

        result = subprocess.run(
            [self.executable, "gateway", "wake", "--text", message, "--mode", "now"],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise NotificationError(
                f"{self.executable} gateway wake exited with code {result.returncode}: "
                f"{result.stderr.strip()}"
            )

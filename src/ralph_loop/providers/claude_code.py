"""Claude Code provider implementation."""

from typing import List

from ralph_loop.models.provider import ProviderType
from ralph_loop.providers.base import BaseProvider


class ClaudeCodeProvider(BaseProvider):
    """Provider for Claude Code CLI tool integration."""

    @property
    def name(self) -> str:
        return ProviderType.CLAUDE.value

    def build_args(self) -> List[str]:
        return ["claude", *self.flags]

"""Codex CLI provider implementation."""

from typing import List

from ralph_loop.models.provider import ProviderType
from ralph_loop.providers.base import BaseProvider


class CodexProvider(BaseProvider):
    """Provider for Codex CLI non-interactive runs (``codex exec``)."""

    @property
    def name(self) -> str:
        return ProviderType.CODEX.value

    def build_args(self) -> List[str]:
        return ["codex", "exec", *self.flags]

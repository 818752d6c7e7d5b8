"""OpenCode provider implementation."""

from typing import List

from ralph_loop.models.provider import ProviderType
from ralph_loop.providers.base import BaseProvider


class OpenCodeProvider(BaseProvider):
    """Provider for ``opencode run``. User flags are not passed through."""

    @property
    def name(self) -> str:
        return ProviderType.OPENCODE.value

    def build_args(self) -> List[str]:
        return ["opencode", "run"]

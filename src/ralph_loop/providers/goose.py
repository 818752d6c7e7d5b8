"""Goose provider implementation."""

from typing import List

from ralph_loop.models.provider import ProviderType
from ralph_loop.providers.base import BaseProvider


class GooseProvider(BaseProvider):
    """Provider for ``goose run``. User flags are not passed through."""

    @property
    def name(self) -> str:
        return ProviderType.GOOSE.value

    def build_args(self) -> List[str]:
        return ["goose", "run"]

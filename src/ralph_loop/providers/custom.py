"""Custom provider for agent CLIs without a built-in preset."""

from typing import List

from ralph_loop.providers.base import BaseProvider


class CustomProvider(BaseProvider):
    """Runs ``<executable> <flags...>`` verbatim."""

    def __init__(self, executable: str, flags: str = ""):
        super().__init__(flags)
        self._executable = executable

    @property
    def name(self) -> str:
        return self._executable

    def build_args(self) -> List[str]:
        return [self._executable, *self.flags]

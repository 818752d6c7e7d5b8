"""Base provider for agent CLIs."""

import shlex
from abc import ABC, abstractmethod
from typing import List

from ralph_loop.models.provider import AgentCommand


class BaseProvider(ABC):
    """Turns a provider selector plus user flags into a concrete argv."""

    def __init__(self, flags: str = ""):
        self._flags = flags

    @property
    @abstractmethod
    def name(self) -> str:
        """Selector this provider answers to."""
        pass

    @property
    def flags(self) -> List[str]:
        """User flags split with shell word rules."""
        return shlex.split(self._flags)

    @abstractmethod
    def build_args(self) -> List[str]:
        """Return the argv prefix; the prompt is appended per iteration."""
        pass

    def command(self) -> AgentCommand:
        return AgentCommand(provider=self.name, args=tuple(self.build_args()))

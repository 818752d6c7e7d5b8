"""Provider models."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class ProviderType(str, Enum):
    """Built-in agent CLI presets."""

    CODEX = "codex"
    CLAUDE = "claude"
    OPENCODE = "opencode"
    GOOSE = "goose"


@dataclass(frozen=True)
class AgentCommand:
    """Agent invocation resolved once at startup.

    ``args`` is the full argv prefix; the prompt text is appended as the
    final argument on every iteration.
    """

    provider: str
    args: Tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.args[0]

    def for_prompt(self, prompt: str) -> List[str]:
        return [*self.args, prompt]

    def display(self) -> str:
        return " ".join(self.args)

"""Loop outcome and notification models."""

from enum import Enum


class LoopOutcome(str, Enum):
    """Terminal states of a driver run."""

    BUILD_COMPLETE = "build_complete"
    PLAN_COMPLETE = "plan_complete"
    EXHAUSTED = "exhausted"
    BOOTSTRAPPED = "bootstrapped"

    @property
    def exit_code(self) -> int:
        return 1 if self is LoopOutcome.EXHAUSTED else 0


class NotificationPrefix(str, Enum):
    """First token of every notification message."""

    DECISION = "DECISION"
    ERROR = "ERROR"
    BLOCKED = "BLOCKED"
    PROGRESS = "PROGRESS"
    DONE = "DONE"
    PLANNING = "PLANNING"
    QUESTION = "QUESTION"


def format_message(prefix: NotificationPrefix, text: str) -> str:
    """Build a ``PREFIX: text`` notification message."""
    return f"{prefix.value}: {text}"

"""Loop configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from ralph_loop.constants import (
    AGENTS_FILE_NAME,
    DEFAULT_CRASH_DELAY,
    DEFAULT_ENV_FILE,
    DEFAULT_ITERATION_DELAY,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_NOTIFY_MODE,
    DEFAULT_PROVIDER,
    DEFAULT_PROVIDER_FLAGS,
    LOG_DIR_NAME,
    LOG_FILE_NAME,
    NOTIFY_MODES,
    NOTIFY_WEBHOOK,
    PLAN_FILE_NAME,
    PROMPT_FILE_NAME,
)
from ralph_loop.exceptions import ConfigError
from ralph_loop.models.provider import AgentCommand
from ralph_loop.providers.manager import resolve_command

logger = logging.getLogger(__name__)


def _get_str_env(environ: Mapping[str, str], name: str, default: str) -> str:
    """Read a string env var; unset or empty falls back to the default."""
    return environ.get(name) or default


def _get_float_env(environ: Mapping[str, str], name: str, default: float) -> float:
    """Parse float env var with safe fallback."""
    try:
        value = float(environ.get(name, str(default)))
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name}={environ.get(name)!r}, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring negative {name}={value}, using {default}")
        return default
    return value


@dataclass(frozen=True)
class LoopConfig:
    """Immutable settings for one driver run."""

    agent: AgentCommand
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    provider_flags: str = DEFAULT_PROVIDER_FLAGS
    test_command: str = ""
    notify_mode: str = DEFAULT_NOTIFY_MODE
    webhook_url: str = ""
    crash_delay: float = DEFAULT_CRASH_DELAY
    iteration_delay: float = DEFAULT_ITERATION_DELAY
    env_file: Path = DEFAULT_ENV_FILE
    work_dir: Path = field(default_factory=Path.cwd)

    @property
    def prompt_file(self) -> Path:
        return self.work_dir / PROMPT_FILE_NAME

    @property
    def plan_file(self) -> Path:
        return self.work_dir / PLAN_FILE_NAME

    @property
    def agents_file(self) -> Path:
        return self.work_dir / AGENTS_FILE_NAME

    @property
    def log_dir(self) -> Path:
        return self.work_dir / LOG_DIR_NAME

    @property
    def log_file(self) -> Path:
        return self.log_dir / LOG_FILE_NAME


def load_config(
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    environ: Optional[Mapping[str, str]] = None,
    work_dir: Optional[Path] = None,
) -> LoopConfig:
    """Build a LoopConfig from RALPH_* environment variables.

    Args:
        max_iterations: Iteration budget from the command line
        environ: Environment mapping (defaults to ``os.environ``)
        work_dir: Project working tree (defaults to the current directory)

    Raises:
        ConfigError: If the budget, agent flags or notification settings are invalid
    """
    if environ is None:
        environ = os.environ

    if max_iterations < 1:
        raise ConfigError(f"max_iterations must be a positive integer, got {max_iterations}")

    provider = _get_str_env(environ, "RALPH_CLI", DEFAULT_PROVIDER)
    flags = _get_str_env(environ, "RALPH_FLAGS", DEFAULT_PROVIDER_FLAGS)
    agent = resolve_command(provider, flags)

    notify_mode = _get_str_env(environ, "RALPH_NOTIFY", DEFAULT_NOTIFY_MODE).strip().lower()
    if notify_mode not in NOTIFY_MODES:
        raise ConfigError(
            f"Invalid RALPH_NOTIFY '{notify_mode}'. Available modes: {', '.join(NOTIFY_MODES)}"
        )

    webhook_url = _get_str_env(environ, "RALPH_WEBHOOK_URL", "").strip()
    if notify_mode == NOTIFY_WEBHOOK and not webhook_url:
        raise ConfigError("RALPH_NOTIFY=webhook requires RALPH_WEBHOOK_URL")

    env_file = environ.get("RALPH_ENV")

    return LoopConfig(
        agent=agent,
        max_iterations=max_iterations,
        provider_flags=flags,
        test_command=_get_str_env(environ, "RALPH_TEST", "").strip(),
        notify_mode=notify_mode,
        webhook_url=webhook_url,
        crash_delay=_get_float_env(environ, "RALPH_CRASH_DELAY", DEFAULT_CRASH_DELAY),
        iteration_delay=_get_float_env(environ, "RALPH_ITERATION_DELAY", DEFAULT_ITERATION_DELAY),
        env_file=Path(env_file).expanduser() if env_file else DEFAULT_ENV_FILE,
        work_dir=Path(work_dir) if work_dir is not None else Path.cwd(),
    )

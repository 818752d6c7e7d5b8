"""Checks and project setup performed before the first iteration."""

import logging

from ralph_loop.config import LoopConfig
from ralph_loop.constants import DEFAULT_PROMPT_TEMPLATE
from ralph_loop.exceptions import PreflightError
from ralph_loop.utils.process import command_exists, is_git_work_tree

logger = logging.getLogger(__name__)


def check_preconditions(config: LoopConfig) -> None:
    """Verify the working tree and agent CLI.

    Raises:
        PreflightError: If not inside a git working tree or the agent CLI is missing
    """
    if not is_git_work_tree(config.work_dir):
        raise PreflightError("Must run inside a git repository")

    if not command_exists(config.agent.executable):
        raise PreflightError(f"CLI not found: {config.agent.executable}")


def bootstrap_prompt(config: LoopConfig) -> bool:
    """Write the default prompt template if PROMPT.md is missing.

    Returns:
        True if the template was created (the caller should stop), False if
        a prompt already exists
    """
    if config.prompt_file.is_file():
        return False

    logger.warning(f"{config.prompt_file.name} not found. Creating template...")
    config.prompt_file.write_text(DEFAULT_PROMPT_TEMPLATE, encoding="utf-8")
    return True


def ensure_project_files(config: LoopConfig) -> None:
    """Create empty AGENTS.md and plan file if absent; existing files are left untouched."""
    for path in (config.agents_file, config.plan_file):
        if path.exists():
            continue
        try:
            path.touch()
        except OSError as e:
            logger.warning(f"Could not create {path.name}: {e}")

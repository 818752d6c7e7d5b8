"""Subprocess helpers."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ralph_loop.constants import OUTPUT_LOGGER_NAME

logger = logging.getLogger(__name__)
output_logger = logging.getLogger(OUTPUT_LOGGER_NAME)


def run_streaming(args: List[str], cwd: Optional[Path] = None) -> int:
    """Run a command to completion, streaming combined output to the output logger.

    No timeout is applied; a hung process blocks the caller.

    Returns:
        The process exit status

    Raises:
        OSError: If the executable cannot be spawned
    """
    process = subprocess.Popen(
        args,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    assert process.stdout is not None
    try:
        with process.stdout:
            for line in process.stdout:
                output_logger.info(line.rstrip("\n"))
    except BaseException:
        # Interrupted while streaming: don't leave the child running
        if process.poll() is None:
            process.kill()
            process.wait()
        raise
    return process.wait()


def command_exists(executable: str) -> bool:
    """Return True if the executable resolves on PATH (or is an executable path)."""
    return shutil.which(executable) is not None


def is_git_work_tree(cwd: Optional[Path] = None) -> bool:
    """Return True if cwd is inside a git working tree."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        logger.debug(f"git not available: {e}")
        return False
    return result.returncode == 0 and result.stdout.strip() == "true"

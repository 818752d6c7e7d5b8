"""Iteration driver: run the agent until the plan file reports completion."""

import logging
import time
from typing import Optional

from ralph_loop.clients.base import BaseNotifier
from ralph_loop.config import LoopConfig
from ralph_loop.constants import (
    BUILDING_DONE_MARKER,
    COMMAND_NOT_FOUND_EXIT_CODE,
    PLANNING_DONE_MARKER,
    VERIFICATION_SHELL,
)
from ralph_loop.models.loop import LoopOutcome, NotificationPrefix, format_message
from ralph_loop.utils.process import run_streaming

logger = logging.getLogger(__name__)


class IterationDriver:
    """Runs up to ``max_iterations`` sequential agent rounds.

    Each round invokes the agent with the current PROMPT.md, optionally runs
    the verification command, then scans the plan file for the build marker
    and then the planning marker. The driver never writes the prompt or plan
    file; only the agent does.
    """

    def __init__(self, config: LoopConfig, notifier: BaseNotifier):
        self.config = config
        self.notifier = notifier

    def run(self) -> LoopOutcome:
        """Run rounds until a marker is found or the budget is exhausted."""
        max_iterations = self.config.max_iterations
        for iteration in range(1, max_iterations + 1):
            outcome = self.run_iteration(iteration)
            if outcome is not None:
                return outcome

        logger.error(f"❌ Max iterations ({max_iterations}) reached")
        self._notify(NotificationPrefix.BLOCKED, "Max iterations reached without completion.")
        return LoopOutcome.EXHAUSTED

    def run_iteration(self, iteration: int) -> Optional[LoopOutcome]:
        """Run a single round; return a terminal outcome or None to continue."""
        logger.info(f"=== Iteration {iteration}/{self.config.max_iterations} ===")

        exit_code = self.invoke_agent()
        if exit_code != 0:
            logger.warning(f"⚠️ Agent exited with code {exit_code}")
            self._notify(
                NotificationPrefix.ERROR,
                f"Agent crashed on iteration {iteration} (exit {exit_code})",
            )
            time.sleep(self.config.crash_delay)
            return None

        if self.config.test_command:
            self.run_verification()

        outcome = self.check_markers()
        if outcome is LoopOutcome.BUILD_COMPLETE:
            logger.info("✅ All tasks complete!")
            self._notify(NotificationPrefix.DONE, "Ralph loop finished successfully.")
            return outcome
        if outcome is LoopOutcome.PLAN_COMPLETE:
            logger.info("📋 Planning phase complete")
            self._notify(NotificationPrefix.PLANNING, "Complete. Ready for BUILDING mode.")
            return outcome

        time.sleep(self.config.iteration_delay)
        return None

    def invoke_agent(self) -> int:
        """Run the agent once with the current prompt; return its exit status."""
        try:
            prompt = self.config.prompt_file.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(
                f"⚠️ Could not read {self.config.prompt_file.name}, sending empty prompt: {e}"
            )
            prompt = ""
        logger.info(f'Running: {self.config.agent.display()} "..."')
        try:
            return run_streaming(self.config.agent.for_prompt(prompt), cwd=self.config.work_dir)
        except OSError as e:
            logger.error(f"Failed to start {self.config.agent.executable}: {e}")
            return COMMAND_NOT_FOUND_EXIT_CODE

    def run_verification(self) -> bool:
        """Run the verification command; the result is advisory only."""
        command = self.config.test_command
        logger.info(f"Running tests: {command}")
        try:
            exit_code = run_streaming([*VERIFICATION_SHELL, command], cwd=self.config.work_dir)
        except OSError as e:
            logger.warning(f"⚠️ Could not run tests: {e}")
            return False

        if exit_code == 0:
            logger.info("✅ Tests passed")
            return True
        logger.warning("⚠️ Tests failed")
        return False

    def check_markers(self) -> Optional[LoopOutcome]:
        """Scan the plan file; the build marker takes priority over the planning marker."""
        try:
            plan = self.config.plan_file.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None

        if BUILDING_DONE_MARKER in plan:
            return LoopOutcome.BUILD_COMPLETE
        if PLANNING_DONE_MARKER in plan:
            return LoopOutcome.PLAN_COMPLETE
        return None

    def _notify(self, prefix: NotificationPrefix, text: str) -> None:
        self.notifier.send(format_message(prefix, text))

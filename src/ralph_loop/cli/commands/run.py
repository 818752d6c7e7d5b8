"""Run command for the Ralph loop CLI."""

import logging

import click

from ralph_loop.config import LoopConfig, load_config
from ralph_loop.constants import DEFAULT_MAX_ITERATIONS, PROVIDERS
from ralph_loop.exceptions import ConfigError, PreflightError
from ralph_loop.models.loop import LoopOutcome
from ralph_loop.services.loop_service import IterationDriver
from ralph_loop.services.notification_service import create_notifier
from ralph_loop.services.preflight_service import (
    bootstrap_prompt,
    check_preconditions,
    ensure_project_files,
)
from ralph_loop.utils.logging import setup_logging

logger = logging.getLogger(__name__)

EPILOG = f"""\b
Environment variables:
  RALPH_CLI             CLI to use ({', '.join(PROVIDERS)} or any executable) [default: codex]
  RALPH_FLAGS           CLI flags [default: --full-auto]
  RALPH_TEST            Test command to run after each iteration [optional]
  RALPH_NOTIFY          Notifier: gateway, webhook, telegram, none [default: gateway]
  RALPH_WEBHOOK_URL     Target URL when RALPH_NOTIFY=webhook
  RALPH_CRASH_DELAY     Seconds to wait after an agent crash [default: 5]
  RALPH_ITERATION_DELAY Seconds to wait between iterations [default: 2]

\b
Examples:
  ralph 20                          # Run 20 iterations with Codex
  RALPH_CLI=claude ralph 10         # Use Claude Code
  RALPH_TEST="pytest" ralph         # Run pytest after each iteration
"""


def _print_banner(config: LoopConfig) -> None:
    click.echo("🐺 Ralph Loop starting")
    click.echo(f"   CLI: {config.agent.provider} {config.provider_flags}")
    click.echo(f"   Max iterations: {config.max_iterations}")
    if config.test_command:
        click.echo(f"   Test command: {config.test_command}")
    click.echo("")


@click.command(context_settings={"help_option_names": []}, epilog=EPILOG)
@click.argument(
    "max_iterations",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_ITERATIONS,
    required=False,
)
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this message and exit.")
@click.pass_context
def run(ctx, max_iterations, show_help):
    """Run the AI agent against PROMPT.md until IMPLEMENTATION_PLAN.md is complete."""
    if show_help:
        click.echo(ctx.get_help())
        ctx.exit(1)

    try:
        config = load_config(max_iterations)
    except ConfigError as e:
        raise click.ClickException(str(e))

    setup_logging(config.log_file)

    try:
        check_preconditions(config)
    except PreflightError as e:
        raise click.ClickException(f"❌ {e}")

    if bootstrap_prompt(config):
        click.echo(f"📝 Created {config.prompt_file.name} template. Edit it and run again.")
        ctx.exit(LoopOutcome.BOOTSTRAPPED.exit_code)

    ensure_project_files(config)
    _print_banner(config)

    driver = IterationDriver(config, create_notifier(config))
    try:
        outcome = driver.run()
    except KeyboardInterrupt:
        logger.warning("Interrupted, stopping loop")
        ctx.exit(130)

    if outcome is LoopOutcome.PLAN_COMPLETE:
        click.echo(f"Switch {config.prompt_file.name} to BUILDING mode and run again.")

    ctx.exit(outcome.exit_code)

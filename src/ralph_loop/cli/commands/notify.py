"""Notify command: send one Telegram message."""

import os
from pathlib import Path

import click

from ralph_loop.clients.telegram import TelegramNotifier
from ralph_loop.constants import DEFAULT_ENV_FILE
from ralph_loop.exceptions import NotificationError


@click.command()
@click.argument("message", required=False, default="")
@click.pass_context
def notify(ctx, message):
    """Send MESSAGE to Telegram using credentials from the environment or ~/.ralph.env."""
    if not message:
        click.echo("Usage: ralph-notify <message>", err=True)
        ctx.exit(1)

    env_file = Path(os.environ.get("RALPH_ENV") or str(DEFAULT_ENV_FILE)).expanduser()
    notifier = TelegramNotifier.from_env(env_file)

    try:
        notifier.deliver(message)
    except NotificationError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)

    click.echo("✅ Notification sent")

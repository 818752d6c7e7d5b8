"""Constants for the Ralph loop driver.

This module defines the file layout, completion markers, defaults and the
bootstrap prompt template used throughout the application.

The driver repeatedly runs an AI coding-agent CLI (Codex, Claude Code,
OpenCode, Goose or any custom command) against PROMPT.md until the agent
records a completion marker in IMPLEMENTATION_PLAN.md.
"""

from pathlib import Path

from ralph_loop.models.provider import ProviderType

# =============================================================================
# Project Files
# =============================================================================
# All paths are relative to the working tree the driver is started in
PROMPT_FILE_NAME = "PROMPT.md"
PLAN_FILE_NAME = "IMPLEMENTATION_PLAN.md"
AGENTS_FILE_NAME = "AGENTS.md"

# Log directory and append-only transcript of every run
LOG_DIR_NAME = ".ralph"
LOG_FILE_NAME = "ralph.log"

# =============================================================================
# Completion Markers
# =============================================================================
# Literal substrings the agent writes into the plan file.
# Checked in this order: the build marker wins if both are present.
BUILDING_DONE_MARKER = "STATUS: COMPLETE"
PLANNING_DONE_MARKER = "STATUS: PLANNING_COMPLETE"

# =============================================================================
# Loop Defaults
# =============================================================================
DEFAULT_MAX_ITERATIONS = 20

# Seconds to wait after a crashed agent run / after a normal round
DEFAULT_CRASH_DELAY = 5.0
DEFAULT_ITERATION_DELAY = 2.0

# Exit status reported when the agent executable cannot be spawned at all
COMMAND_NOT_FOUND_EXIT_CODE = 127

# =============================================================================
# Provider Configuration
# =============================================================================
PROVIDERS = [p.value for p in ProviderType]
DEFAULT_PROVIDER = ProviderType.CODEX.value
DEFAULT_PROVIDER_FLAGS = "--full-auto"

# Verification commands run through a login shell so user PATH setup applies
VERIFICATION_SHELL = ["bash", "-lc"]

# =============================================================================
# Notification Configuration
# =============================================================================
NOTIFY_GATEWAY = "gateway"
NOTIFY_WEBHOOK = "webhook"
NOTIFY_TELEGRAM = "telegram"
NOTIFY_NONE = "none"
NOTIFY_MODES = [NOTIFY_GATEWAY, NOTIFY_WEBHOOK, NOTIFY_TELEGRAM, NOTIFY_NONE]
DEFAULT_NOTIFY_MODE = NOTIFY_GATEWAY

# OpenClaw gateway CLI used for wake-up notifications
GATEWAY_EXECUTABLE = "openclaw"

TELEGRAM_API_BASE_URL = "https://api.telegram.org"
DEFAULT_ENV_FILE = Path.home() / ".ralph.env"

# HTTP timeout for webhook and Telegram calls (seconds)
NOTIFY_HTTP_TIMEOUT = 10.0

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
# Raw agent/verification output is written through this logger unformatted
OUTPUT_LOGGER_NAME = "ralph_loop.output"

# =============================================================================
# Bootstrap Template
# =============================================================================
DEFAULT_PROMPT_TEMPLATE = """\
# Ralph Loop

## Goal
[Describe what you want to build]

## Context
- Read: specs/*.md, IMPLEMENTATION_PLAN.md, AGENTS.md

## Notifications
When you need input or complete a milestone:
```bash
openclaw gateway wake --text "<PREFIX>: <message>" --mode now
```
Prefixes: DECISION, ERROR, BLOCKED, PROGRESS, DONE

## Completion
When finished, add to IMPLEMENTATION_PLAN.md: STATUS: COMPLETE
"""

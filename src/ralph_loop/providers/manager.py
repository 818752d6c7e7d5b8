"""Provider resolution."""

import logging
from typing import Dict, Type

from ralph_loop.exceptions import ConfigError
from ralph_loop.models.provider import AgentCommand, ProviderType
from ralph_loop.providers.base import BaseProvider
from ralph_loop.providers.claude_code import ClaudeCodeProvider
from ralph_loop.providers.codex import CodexProvider
from ralph_loop.providers.custom import CustomProvider
from ralph_loop.providers.goose import GooseProvider
from ralph_loop.providers.opencode import OpenCodeProvider

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: Dict[ProviderType, Type[BaseProvider]] = {
    ProviderType.CODEX: CodexProvider,
    ProviderType.CLAUDE: ClaudeCodeProvider,
    ProviderType.OPENCODE: OpenCodeProvider,
    ProviderType.GOOSE: GooseProvider,
}


def create_provider(selector: str, flags: str = "") -> BaseProvider:
    """Create the provider for a selector; unknown selectors become custom."""
    selector = selector.strip()
    if not selector:
        raise ConfigError("Agent CLI selector must not be empty")

    try:
        provider_type = ProviderType(selector)
    except ValueError:
        logger.debug(f"No preset for '{selector}', using it as a custom command")
        return CustomProvider(selector, flags)

    return PROVIDER_CLASSES[provider_type](flags)


def resolve_command(selector: str, flags: str = "") -> AgentCommand:
    """Resolve a selector and flag string into a concrete agent command."""
    provider = create_provider(selector, flags)
    try:
        return provider.command()
    except ValueError as e:
        # shlex raises ValueError on unbalanced quotes
        raise ConfigError(f"Invalid agent flags '{flags}': {e}") from e

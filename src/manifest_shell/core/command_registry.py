# src/manifest_shell/core/command_registry.py
import logging
from typing import Any, Callable, Dict

from manifest_shell.core.discovery import discover_handlers

logger = logging.getLogger(__name__)

# The central registries, populated dynamically.
CommandRegistry: Dict[str, Callable[..., int]] = {}
COMMAND_HIERARCHY: Dict[str, Any] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}


def register_command(name: str, handler: Callable[..., int]) -> None:
    """Adds a command and its handler function to the registry."""
    CommandRegistry[name] = handler
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """
    Discovers all handlers, hierarchies, and help texts, then registers them.
    """
    handlers, hierarchies, help_texts = discover_handlers()

    for name, handler in handlers.items():
        if name not in CommandRegistry:
            register_command(name, handler)

    COMMAND_HIERARCHY.update(hierarchies)
    COMMAND_HELP_TEXTS.update(help_texts)

    # Commands without subcommands still need an entry for the completer
    for name in CommandRegistry:
        COMMAND_HIERARCHY.setdefault(name, None)

    logger.debug("Registered %d handlers.", len(CommandRegistry))

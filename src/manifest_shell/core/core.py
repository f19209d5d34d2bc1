# src/manifest_shell/core/core.py
from __future__ import annotations

import logging

from manifest_shell.core.command_registry import CommandRegistry
from manifest_shell.core.parser import parse_command_line
from manifest_shell.core.xngine import ExecuteEngine

logger = logging.getLogger(__name__)

# Registration itself happens in app.py to avoid circular imports.
XNGINE = ExecuteEngine(command_registry=CommandRegistry, logger=logger)

execute_sequence = XNGINE.execute_sequence


def run_line(line: str, ctx) -> int:
    """Parses and executes one command line."""
    commands = parse_command_line(line)
    if not commands:
        return 0
    return execute_sequence(commands, ctx)


__all__ = ["execute_sequence", "parse_command_line", "run_line"]

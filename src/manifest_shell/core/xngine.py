# src/manifest_shell/core/xngine.py
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.parser import CommandSegment

QUIT_CODE = 130
NOT_FOUND_CODE = 127


class ExecuteEngine:
    """
    Core engine responsible for running parsed command sequences and
    honouring the chaining operators between them.
    """

    def __init__(
            self,
            *,
            command_registry: Dict[str, Callable[..., int]],
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._commands = command_registry
        self._log = logger or logging.getLogger(__name__)

    def execute_sequence(self, commands: List[CommandSegment], context: Optional[StudioContext] = None) -> int:
        """
        Executes a sequence of commands.

        '&&' runs the next command only after success, '||' only after a
        failure, ';' always. A quit code stops the sequence immediately.

        Returns:
            int: The exit code of the last command that ran.
        """
        ctx = context or StudioContext()
        last_exit = 0

        for name, args, op in commands:
            if op == "&&" and last_exit != 0:
                continue
            if op == "||" and last_exit == 0:
                continue

            last_exit = self._call_handler(name, args, ctx)
            if last_exit == QUIT_CODE:
                return QUIT_CODE

        return last_exit

    def _call_handler(self, name: str, args: List[str], ctx: StudioContext) -> int:
        handler = self._commands.get(name)
        if handler is None:
            print(f"command not found: {name}")
            return NOT_FOUND_CODE
        try:
            return int(handler(args, ctx))
        except Exception as e:
            self._log.error("Command '%s' failed: %s", name, e, exc_info=True)
            print(f"❌ Error in '{name}': {e}")
            return 1

from __future__ import annotations

import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import FileHistory

from manifest_shell.core.command_registry import COMMAND_HIERARCHY, register_all_commands
from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.core import run_line
from manifest_shell.core.managers.config_manager import config_manager
from manifest_shell.core.utils.configure_logging import configure_logger
from manifest_shell.core.utils.path_utils import PathUtils
from manifest_shell.core.xngine import QUIT_CODE

# Initialize logging based on configuration
configure_logger(
    config_manager.get_nested("debug.level", "WARNING"),
    config_manager.get_nested("debug.modules", {}),
)
logger = logging.getLogger(__name__)


# --- Shell Application ---


def start_shell(ctx: StudioContext) -> None:
    """Starts the interactive REPL (Read-Eval-Print Loop) for the studio shell."""
    print("Welcome to Manifest Studio Shell 1.0 (type 'help' for commands)")

    history_path = PathUtils.get_shell_history_file()
    session = PromptSession(
        history=FileHistory(str(history_path)),
        completer=NestedCompleter.from_nested_dict(COMMAND_HIERARCHY),
        complete_while_typing=True,
    )
    ctx.prompt_session = session
    logger.info("Shell startup; history file at: %s", history_path)

    try:
        while True:
            try:
                line = session.prompt("Manifest>> ").strip()
            except (EOFError, KeyboardInterrupt):
                break

            if line and run_line(line, ctx) == QUIT_CODE:
                break
    finally:
        print("Bye!")


def main(argv: list[str] | None = None) -> int:
    """
    Entrypoint for the 'manifest-shell' command.

    With arguments, runs them as a single command line and exits with its
    code (e.g. `manifest-shell convert run page.html`); without, starts the REPL.
    """
    argv = sys.argv[1:] if argv is None else argv
    register_all_commands()
    ctx = StudioContext()

    if argv:
        code = run_line(shlex.join(argv), ctx)
        return 0 if code == QUIT_CODE else code

    start_shell(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())

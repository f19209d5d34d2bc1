# src/manifest_shell/core/handlers/core/quit_handler.py
from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.xngine import QUIT_CODE


def handle_quit(_args, _ctx: StudioContext) -> int:
    """Signals the shell to stop."""
    return QUIT_CODE

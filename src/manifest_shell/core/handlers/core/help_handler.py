# src/manifest_shell/core/handlers/core/help_handler.py
from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.utils.helptext import get_help_text


def handle_help(_args, _ctx: StudioContext) -> int:
    print(get_help_text())
    return 0

# src/manifest_shell/core/handlers/theme_handler.py
import logging
from typing import List

from pydantic import ValidationError

from manifest_shell.core.context.studio_context import StudioContext
from transpiler.model import ThemeParams

logger = logging.getLogger(__name__)

COMMAND_HIERARCHY = {"show": None, "set": None, "reset": None}

theme_help_text = """
  theme show                 Show the accent theme used for conversions.
  theme set <h> <s> <l>      Set hue (0-360), saturation and lightness (0-100) for this session.
  theme reset                Restore the theme from settings.json.
""".strip("\n")


def handle_theme(args: List[str], ctx: StudioContext) -> int:
    """Handles the 'theme' command (session accent colour for generated components)."""
    command = args[0] if args else "show"

    if command == "show":
        t = ctx.theme
        print(f"hue={t.hue} saturation={t.saturation}% lightness={t.lightness}%")
        return 0

    if command == "set":
        if len(args) != 4:
            print("Usage: theme set <hue> <saturation> <lightness>")
            return 1
        try:
            ctx.theme = ThemeParams(hue=args[1], saturation=args[2], lightness=args[3])
        except ValidationError as e:
            print(f"❌ Invalid theme: {e.errors()[0]['msg']}")
            return 1
        print(f"✅ Theme set to hsl({ctx.theme.hue}, {ctx.theme.saturation}%, {ctx.theme.lightness}%).")
        return 0

    if command == "reset":
        ctx.reset_theme()
        print("✅ Theme restored from settings.json.")
        return 0

    print(f"Unknown command: 'theme {command}'.")
    return 1

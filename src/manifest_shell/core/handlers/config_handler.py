# src/manifest_shell/core/handlers/config_handler.py
import json
import logging
from typing import Any, Dict, List, Optional

from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

COMMAND_HIERARCHY: Dict[str, Optional[Dict[str, Any]]] = {
    "list": None,
    "set": None,
    "reset": None,
}

config_help_text = """
  config list                Show the current configuration as JSON.
  config set <key> <value>   Set a config value for the session (e.g., transpiler.script_mode inline).
  config reset               Reload the configuration from settings.json.
""".strip("\n")


def handle_config(args: List[str], ctx: StudioContext) -> int:
    """Handles the 'config' command for viewing and modifying session configuration."""
    if not args:
        print(config_help_text)
        return 1

    command = args[0]

    if command == "list":
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0

    if command == "set":
        if len(args) < 3:
            print("Usage: config set <key> <value>")
            return 1
        key_path, value = args[1], " ".join(args[2:])

        if not config_manager.set_nested(key_path, value):
            print(f"❌ Error: Failed to set config value for key '{key_path}'.")
            return 1

        new_value = config_manager.get_nested(key_path)
        if key_path.startswith("theme."):
            ctx.reset_theme()
        print(f"✅ Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
        return 0

    if command == "reset":
        config_manager.reset()
        ctx.reset_theme()
        print("✅ Configuration has been reset to the values from settings.json.")
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1

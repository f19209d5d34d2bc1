# src/manifest_shell/core/discovery.py
import importlib
import logging
from typing import Any, Dict, Tuple

from manifest_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "manifest_shell.core.handlers"


def discover_handlers() -> Tuple[Dict[str, Any], Dict[str, Any], Dict[str, str]]:
    """
    Scans the handlers directory, imports every '*_handler.py' module and returns:
    1. A map of command names to their handler function (from 'handle_<name>').
    2. A map of command names to their COMMAND_HIERARCHY definition.
    3. A map of command names to their help text (from '<name>_help_text').
    """
    handlers: Dict[str, Any] = {}
    hierarchies: Dict[str, Any] = {}
    help_texts: Dict[str, str] = {}

    handlers_dir = PathUtils.get_handlers_dir()
    if not handlers_dir.is_dir():
        logger.warning("Handlers directory not found: %s", handlers_dir)
        return handlers, hierarchies, help_texts

    for file_path in sorted(handlers_dir.glob("**/*_handler.py")):
        relative = file_path.relative_to(handlers_dir).with_suffix("")
        module_name = ".".join((HANDLERS_PACKAGE, *relative.parts))
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.error("Failed to load handler module %s: %s", file_path.name, e, exc_info=True)
            continue

        hierarchy = getattr(module, "COMMAND_HIERARCHY", None)
        for attr_name in dir(module):
            value = getattr(module, attr_name)
            if attr_name.startswith("handle_") and callable(value):
                command_name = attr_name[len("handle_"):]
                handlers[command_name] = value
                if hierarchy is not None:
                    hierarchies[command_name] = hierarchy
                logger.debug("Discovered command '%s'", command_name)
            elif attr_name.endswith("_help_text") and isinstance(value, str):
                help_texts[attr_name[:-len("_help_text")]] = value

    return handlers, hierarchies, help_texts

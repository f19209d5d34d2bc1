# src/manifest_shell/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from manifest_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def _cast_like(original: Any, value: Any, key_path: str) -> Any:
    """Casts a (string) value to the type of the value it replaces."""
    if original is None or isinstance(value, type(original)):
        return value
    if isinstance(original, bool):
        lowered = str(value).strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        logger.warning("Could not cast '%s' for '%s' to bool. Storing as string.", value, key_path)
        return value
    try:
        return type(original)(value)
    except (ValueError, TypeError):
        logger.warning(
            "Could not cast new value for '%s' to type %s. Storing as string.",
            key_path, type(original).__name__
        )
        return value


class ConfigManager:
    """
    A singleton class to manage the application's configuration.
    It loads settings.json and allows for in-memory (session) modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
            logger.debug("ConfigManager initialized.")
        return cls._instance

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'transpiler.script_mode'.
        """
        value: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'theme.hue', '120'
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a section.", key)
                return False

        d[keys[-1]] = _cast_like(d.get(keys[-1]), value, key_path)
        logger.info("Configuration updated: %s = %s", key_path, d[keys[-1]])
        return True

    def reset(self) -> None:
        """Resets the in-memory configuration from the settings.json file."""
        config_path = PathUtils.get_settings_file()
        try:
            if not config_path.exists():
                logger.warning("settings.json not found at %s. Using empty config.", config_path)
                self._config = {}
                return
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.info("Configuration has been (re)loaded from settings.json.")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()

# src/manifest_shell/core/context/studio_context.py
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from manifest_shell.core.managers.config_manager import config_manager
from manifest_shell.model import ConversionRecord
from transpiler.model import ConversionResult, ThemeParams

logger = logging.getLogger(__name__)


def theme_from_config() -> ThemeParams:
    """Builds the default theme from the 'theme' section of the configuration."""
    section = config_manager.get_nested("theme", {}) or {}
    try:
        return ThemeParams.model_validate(section)
    except ValidationError as e:
        logger.warning("Invalid theme in settings.json, using defaults: %s", e)
        return ThemeParams()


class StudioContext:
    """
    Manages session variables and the state of the studio shell:
    the active theme and the conversions performed so far.
    """

    def __init__(self):
        self._vars = {}
        self.theme: ThemeParams = theme_from_config()
        self.history: List[ConversionRecord] = []
        self.last_result: Optional[ConversionResult] = None
        self.prompt_session: Optional[Any] = None

    def record_conversion(self, record: ConversionRecord, result: ConversionResult) -> None:
        """Stores a finished conversion and exports its key facts as variables."""
        self.history.append(record)
        self.last_result = result
        self.set("last.component", record.component_name)
        self.set("last.output", record.output_path or "")

    def reset_theme(self) -> None:
        self.theme = theme_from_config()

    def set(self, key: str, value: str) -> None:
        """Sets a context variable."""
        self._vars[key] = value

    def get(self, key: str) -> Optional[str]:
        """Retrieves a context variable. Returns None if key does not exist."""
        return self._vars.get(key)

    def __repr__(self) -> str:
        return f"<StudioContext conversions={len(self.history)} vars_count={len(self._vars)}>"

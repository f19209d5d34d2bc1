# src/manifest_shell/core/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

LevelLike = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    A logging handler that writes through `tqdm.write()`, so log lines
    emitted during a batch conversion do not tear the progress bar.
    """

    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: LevelLike, default: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), default)
    return level


def configure_logger(
        general_level: LevelLike = "WARNING",
        module_specific_levels: Optional[Dict[str, LevelLike]] = None,
) -> None:
    """
    Configures the root logger with a tqdm-aware handler.

    Args:
        general_level: Level for the root logger (name or number).
        module_specific_levels: Optional per-logger overrides, e.g. {"transpiler": "DEBUG"}.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

# src/manifest_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_shell_package_root() -> Path:
        """Returns the directory of the manifest_shell package (where settings.json lives)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_handlers_dir() -> Path:
        return PathUtils.get_shell_package_root() / "core" / "handlers"

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_shell_history_file() -> Path:
        """
        Returns the path to the shell history file in the user's home directory.
        (e.g., ~/.manifest_shell_history)
        """
        return Path.home() / ".manifest_shell_history"

    # --- Helper methods ---

    @staticmethod
    def resolve_output_dir(out_dir: str, source: Path) -> Path:
        """
        Returns the directory an exported component is written to.
        Defaults to the directory of the source document; creates it if needed.
        """
        path = Path(out_dir).expanduser() if out_dir else source.resolve().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

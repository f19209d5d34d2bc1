# src/manifest_shell/core/services/export_service.py
import logging
from pathlib import Path
from typing import Optional

from manifest_shell.core.utils.path_utils import PathUtils
from transpiler.model import ConversionResult

logger = logging.getLogger(__name__)


def export_component(
        result: ConversionResult,
        source: Path,
        out_dir: Optional[str] = None,
        extension: str = ".tsx",
        overwrite: bool = True,
) -> Path:
    """
    Writes a generated component to '<ComponentName><extension>'.

    Args:
        result (ConversionResult): The finished conversion.
        source (Path): The markup document it came from (default output location).
        out_dir (Optional[str]): Target directory; defaults to the source's directory.
        extension (str): File extension, with or without the leading dot.
        overwrite (bool): Replace an existing file instead of failing.

    Returns:
        Path: The written file.

    Raises:
        FileExistsError: If the target exists and overwrite is disabled.
    """
    suffix = extension if extension.startswith(".") else f".{extension}"
    target = PathUtils.resolve_output_dir(out_dir or "", source) / f"{result.component_name}{suffix}"

    if target.exists() and not overwrite:
        raise FileExistsError(f"{target} already exists (export.overwrite is off).")

    target.write_text(result.source, encoding="utf-8")
    logger.info("Exported %s (%d bytes) to %s", result.component_name, len(result.source), target)
    return target

# ============================================
# file: src/manifest_shell/core/handlers/convert_handler.py
# ============================================
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tqdm.auto import tqdm

from manifest_shell.core.context.studio_context import StudioContext
from manifest_shell.core.managers.config_manager import config_manager
from manifest_shell.core.services.export_service import export_component
from manifest_shell.model import ConversionRecord
from transpiler.controllers.convert_controller import ConvertController
from transpiler.exceptions import InvalidInput
from transpiler.model import ThemeParams, TranspilerSettings

logger = logging.getLogger(__name__)

convert_help_text = """
  convert run <file...> [--name <Name>] [--css <file>] [--theme <h,s,l>] [--out <dir>] [--stdout]
      Converts markup documents into stateful component modules.
      Each result is written to '<ComponentName>.tsx' next to its source (or into --out).
  convert last
      Shows the units and state fields of the last conversion.
""".strip("\n")
COMMAND_HIERARCHY = {"run": None, "last": None}


def _build_settings() -> TranspilerSettings:
    """Translates the 'transpiler' config section into explicit settings."""
    return TranspilerSettings(
        parser_backend=config_manager.get_nested("transpiler.parser_backend", "html.parser"),
        default_name=config_manager.get_nested("transpiler.default_name", "ManifestedApp"),
        script_mode=config_manager.get_nested("transpiler.script_mode", "comment"),
    )


def _parse_theme(raw: str) -> ThemeParams:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 3:
        raise ValueError("expected three comma-separated values: <hue>,<saturation>,<lightness>")
    hue, saturation, lightness = (int(p) for p in parts)
    return ThemeParams(hue=hue, saturation=saturation, lightness=lightness)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="convert", description="Convert markup artifacts into components.")
    subs = parser.add_subparsers(dest="subcommand", help="Sub-command help")

    p_run = subs.add_parser("run", help="Convert one or more markup documents.")
    p_run.add_argument("files", metavar="FILE", nargs="+", help="Markup document(s) to convert.")
    p_run.add_argument("--name", type=str, default=None,
                       help="Component name (single file only; defaults to the file name).")
    p_run.add_argument("--css", type=str, default=None, help="Style file that replaces the document's own styles.")
    p_run.add_argument("--theme", type=str, default=None, help="Accent theme as 'hue,saturation,lightness'.")
    p_run.add_argument("--out", type=str, default=None, help="Output directory (default: next to the source).")
    p_run.add_argument("--stdout", action="store_true", help="Print the component instead of writing a file.")

    subs.add_parser("last", help="Show the last conversion.")
    return parser


def _show_last(ctx: StudioContext) -> int:
    result = ctx.last_result
    if result is None:
        print("No conversion has been run in this session.")
        return 1

    print(f"Component: {ctx.get('last.component') or result.component_name}")
    print(f"Output: {ctx.get('last.output') or '<stdout>'}")
    print(f"Units ({len(result.units)}):")
    for unit in result.units:
        flags = []
        if unit.stateful:
            flags.append("stateful")
        if not unit.mounted:
            flags.append("nested")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        print(f"  - {unit.name}{suffix}")
    print(f"State fields ({len(result.state_fields)}):")
    for field in result.state_fields:
        print(f"  - {field.key} ({field.kind.value}) = {field.initial!r}")
    return 0


def handle_convert(args: List[str], ctx: StudioContext) -> int:
    """Handles the 'convert' command."""
    parser = _build_parser()
    if not args:
        parser.print_help()
        return 0

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    if pargs.subcommand == "last":
        return _show_last(ctx)
    if pargs.subcommand != "run":
        print(f"Unknown command: {pargs.subcommand}")
        parser.print_help()
        return 1

    if pargs.name and len(pargs.files) > 1:
        print("❌ Error: --name can only be used with a single file.")
        return 1

    try:
        theme = _parse_theme(pargs.theme) if pargs.theme else ctx.theme
    except ValueError as e:
        print(f"❌ Invalid --theme: {e}")
        return 1

    style_override = ""
    if pargs.css:
        try:
            style_override = Path(pargs.css).read_text(encoding="utf-8")
        except OSError as e:
            print(f"❌ Could not read style file: {e}")
            return 1

    controller = ConvertController(_build_settings())
    extension = config_manager.get_nested("export.extension", ".tsx")
    overwrite = bool(config_manager.get_nested("export.overwrite", True))

    files = [Path(f) for f in pargs.files]
    iterator = files if len(files) == 1 else tqdm(files, desc="Converting", unit="file", leave=False)
    failures = 0

    for source in iterator:
        try:
            markup = source.read_text(encoding="utf-8", errors="replace")
            result = controller.convert(markup, pargs.name or source.stem, style_override, theme)
            if pargs.stdout:
                print(result.source)
                output_path = None
            else:
                output_path = export_component(result, source, pargs.out, extension, overwrite)
        except (OSError, InvalidInput) as e:
            logger.error("Conversion of %s failed: %s", source, e, exc_info=True)
            print(f"❌ {source}: {e}")
            failures += 1
            continue

        record = ConversionRecord(
            source_path=str(source),
            component_name=result.component_name,
            output_path=str(output_path) if output_path else None,
            unit_count=len(result.units),
            state_field_count=len(result.state_fields),
        )
        ctx.record_conversion(record, result)
        if not pargs.stdout:
            print(f"✅ {record.summary()}")

    return 1 if failures else 0

# src/transpiler/controllers/convert_controller.py
from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional

from transpiler.dom.tags import DROPPED_TAGS
from transpiler.dom.tree_builder import ParseTree
from transpiler.exceptions import InvalidInput
from transpiler.model import (
    DEFAULT_COMPONENT_NAME,
    ComponentUnit,
    ConversionResult,
    MarkupDocument,
    NodeKind,
    ScriptMode,
    StateField,
    ThemeInput,
    TranspilerSettings,
    coerce_theme,
)
from transpiler.services.decomposition_service import RESERVED_NAMES, DecompositionService
from transpiler.services.state_inference_service import StateInferenceService
from transpiler.services.style_bundle_service import build_style_bundle, escape_template_literal
from transpiler.services.unit_emit_service import UnitEmitService, unit_reference
from transpiler.utils.naming import safe_component_name

logger = logging.getLogger(__name__)

GENERATOR_VERSION = "2.1"

_ROOT_TEMPLATE = """export default function {name}() {{
  const [state, setState] = useState(INITIAL_STATE);
  const [isMounted, setIsMounted] = useState(false);

  const update = useCallback((key, value) => {{
    setState((prev) => ({{ ...prev, [key]: value }}));
  }}, []);

  useEffect(() => {{
    setIsMounted(true);
{logic}
  }}, []);

  return (
    <div className="manifest-root min-h-screen bg-white">
      {{/* Dynamic Style Injection */}}
      <style dangerouslySetInnerHTML={{{{ __html: GLOBAL_STYLES }}}} />

      {{/* Transmuted UI Architecture */}}
      <div className="manifest-content antialiased text-manifest-main bg-manifest-primary">
{slots}
      </div>

      {{/* Mounting Overlay */}}
      {{!isMounted && (
        <div className="fixed inset-0 bg-white flex items-center justify-center z-[9999]">
          <div className="animate-spin rounded-full h-12 w-12 border-b-2 border-manifest-accent"></div>
        </div>
      )}}
    </div>
  );
}}"""


class ConvertController:
    """
    Orchestrates one markup-to-component conversion.

    Parses the document, infers state, decomposes the body into units, emits
    every unit and assembles the final module text. Holds only settings, so a
    single controller can be reused for any number of independent calls.
    """

    def __init__(self, settings: Optional[TranspilerSettings] = None) -> None:
        self.settings = settings or TranspilerSettings()
        self.tree_builder = ParseTree(self.settings.parser_backend)
        self.state_service = StateInferenceService()
        self.decomposition_service = DecompositionService()

    def convert(
            self,
            markup,
            artifact_name: Optional[str] = DEFAULT_COMPONENT_NAME,
            style_override: Optional[str] = "",
            theme: ThemeInput = None,
    ) -> ConversionResult:
        """
        Converts a markup document into a stateful component module.

        Args:
            markup (str | bytes): The full artifact document.
            artifact_name (Optional[str]): Used to derive the root component name.
            style_override (Optional[str]): Replaces the document's own <style> text when non-empty.
            theme (ThemeInput): Accent hue/saturation/lightness for the theme variables.

        Returns:
            ConversionResult: The generated source plus the units and state fields behind it.

        Raises:
            InvalidInput: If an argument is of the wrong type.
        """
        text = self._coerce_markup(markup)
        if artifact_name is not None and not isinstance(artifact_name, str):
            raise InvalidInput(f"artifact_name must be a string, got {type(artifact_name).__name__}.")
        if style_override is not None and not isinstance(style_override, str):
            raise InvalidInput(f"style_override must be a string, got {type(style_override).__name__}.")
        theme_params = coerce_theme(theme)

        component_name = safe_component_name(
            artifact_name, self.settings.default_name or DEFAULT_COMPONENT_NAME, reserved=RESERVED_NAMES
        )
        document = self.tree_builder.parse(text)

        state_fields = self.state_service.infer(document.root)
        decomposed = self.decomposition_service.decompose(document.body, reserved=[component_name])
        unit_refs = {unit.root_uid: unit.name for unit, _ in decomposed}
        emitter = UnitEmitService(state_fields, unit_refs)

        units: List[ComponentUnit] = []
        for unit, node in decomposed:
            body = emitter.emit(node)
            stateful = any(
                uid in state_fields for uid in self._subtree_uids(node, unit_refs)
            )
            units.append(unit.model_copy(update={"body": body, "stateful": stateful}))

        bundle = build_style_bundle(document.styles, style_override or "", theme_params)
        source = self.assemble(component_name, document, units, list(state_fields.values()), bundle, emitter)

        logger.debug(
            "Converted '%s': %d units, %d state fields, %d chars.",
            component_name, len(units), len(state_fields), len(source),
        )
        return ConversionResult(
            component_name=component_name,
            source=source,
            units=units,
            state_fields=list(state_fields.values()),
        )

    @staticmethod
    def _coerce_markup(markup) -> str:
        if isinstance(markup, str):
            return markup
        if isinstance(markup, (bytes, bytearray)):
            return bytes(markup).decode("utf-8", errors="replace")
        raise InvalidInput(f"markup must be a string, got {type(markup).__name__}.")

    @staticmethod
    def _subtree_uids(root, unit_refs: Dict[int, str]) -> List[int]:
        """Uids owned by the unit rooted at root (nested units excluded)."""
        uids = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.uid != root.uid and node.uid in unit_refs:
                continue
            uids.append(node.uid)
            stack.extend(node.children)
        return uids

    # --- Assembly ---

    def assemble(
            self,
            component_name: str,
            document: MarkupDocument,
            units: List[ComponentUnit],
            state_fields: List[StateField],
            style_bundle: str,
            emitter: UnitEmitService,
    ) -> str:
        """Combines the style bundle, initial state, unit declarations and root entry point."""
        parts = [
            "import React, { useCallback, useEffect, useState } from 'react';",
            self._render_header(component_name),
            "/* Core Design System Tokens & Custom Styles */\n"
            f"const GLOBAL_STYLES = `\n{escape_template_literal(style_bundle)}\n`;",
            self._render_initial_state(state_fields),
        ]
        parts.extend(self._render_unit(unit) for unit in units)
        parts.append(self._render_root(component_name, document, units, emitter))
        return "\n\n".join(parts) + "\n"

    @staticmethod
    def _render_header(component_name: str) -> str:
        return (
            "/**\n"
            f" * {component_name} Component\n"
            " * ---------------------------------------------------------\n"
            f" * Generated by Manifest Engine v{GENERATOR_VERSION}\n"
            " * Includes automatic component structural inference and\n"
            " * interactive element state scaffolding.\n"
            " */"
        )

    @staticmethod
    def _render_initial_state(state_fields: List[StateField]) -> str:
        if not state_fields:
            return "const INITIAL_STATE = {};"
        lines = [f"  {field.key}: {_js_literal(field.initial)}," for field in state_fields]
        return "const INITIAL_STATE = {\n" + "\n".join(lines) + "\n};"

    @staticmethod
    def _render_unit(unit: ComponentUnit) -> str:
        note = (
            "Detected interactive elements - bound to shared state."
            if unit.stateful else "Static content block."
        )
        return (
            "/**\n"
            f" * {unit.name} Sub-component\n"
            f" * {note}\n"
            " */\n"
            f"const {unit.name} = ({{ state, update }}) => (\n"
            f"  {unit.body}\n"
            ");"
        )

    def _render_root(
            self,
            component_name: str,
            document: MarkupDocument,
            units: List[ComponentUnit],
            emitter: UnitEmitService,
    ) -> str:
        mounted = {unit.root_uid: unit.name for unit in units if unit.mounted}
        slots: List[str] = []
        for child in document.body.children:
            if child.uid in mounted:
                slots.append(unit_reference(mounted[child.uid]))
            elif child.kind != NodeKind.ELEMENT:
                # Loose top-level text and comments are rendered in place
                slots.extend(emitter.emit_inline([child]))
            elif child.tag not in DROPPED_TAGS:
                logger.debug("Top-level <%s> (uid %d) was not claimed by any unit.", child.tag, child.uid)

        return _ROOT_TEMPLATE.format(
            name=component_name,
            logic=self._render_logic(component_name, document.scripts),
            slots="\n".join(f"        {slot}" for slot in slots),
        )

    def _render_logic(self, component_name: str, scripts: List[str]) -> str:
        indent = "    "
        mode = self.settings.script_mode
        if mode == ScriptMode.DROP:
            return ""
        if not scripts:
            return f"{indent}// No complex logic detected in artifact source."

        lines = "\n".join(scripts).strip().splitlines()
        if mode == ScriptMode.INLINE:
            body = "\n".join(f"{indent}  {line}" for line in lines)
            return (
                f"{indent}/*\n"
                f"{indent} * Transmuted Logic Engine\n"
                f"{indent} * Logic extracted from the original artifact. Consider refactoring\n"
                f"{indent} * it into effects or event handlers.\n"
                f"{indent} */\n"
                f"{indent}try {{\n{body}\n"
                f"{indent}}} catch (error) {{\n"
                f'{indent}  console.error("[{component_name}] Lifecycle Logic Error:", error);\n'
                f"{indent}}}"
            )

        body = "\n".join(f"{indent} *   {line.replace('*/', '* /')}".rstrip() for line in lines)
        return (
            f"{indent}/*\n"
            f"{indent} * Transmuted Logic Engine (inert)\n"
            f"{indent} * Logic extracted from the original artifact; it is kept for reference\n"
            f"{indent} * and does not run. Port it into effects or event handlers.\n"
            f"{indent} *\n"
            f"{body}\n"
            f"{indent} */"
        )


def _js_literal(value) -> str:
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, ensure_ascii=False)


def convert_document(
        markup,
        artifact_name: Optional[str] = DEFAULT_COMPONENT_NAME,
        style_override: Optional[str] = "",
        theme: ThemeInput = None,
        settings: Optional[TranspilerSettings] = None,
) -> ConversionResult:
    """Runs one conversion and returns the source together with its metadata."""
    return ConvertController(settings).convert(markup, artifact_name, style_override, theme)


def convert(
        markup,
        artifact_name: Optional[str] = DEFAULT_COMPONENT_NAME,
        style_override: Optional[str] = "",
        theme: ThemeInput = None,
        settings: Optional[TranspilerSettings] = None,
) -> str:
    """
    Converts a markup document into component source text.

    Identical arguments always produce identical output.
    """
    return convert_document(markup, artifact_name, style_override, theme, settings).source

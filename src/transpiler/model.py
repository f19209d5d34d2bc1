# src/transpiler/model.py (Transpiler Layer)
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from transpiler.exceptions import InvalidInput

DEFAULT_COMPONENT_NAME = "ManifestedApp"


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


class MarkupNode(BaseModel):
    """
    One node of the parsed markup tree.

    The uid is the document-order index of the node and acts as its identity
    for the whole conversion (state bindings and unit claims are keyed on it).
    """
    uid: int
    kind: NodeKind
    tag: Optional[str] = None
    attrs: List[Tuple[str, str]] = Field(default_factory=list)
    text: str = ""
    children: List['MarkupNode'] = Field(default_factory=list)

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    def get_attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Returns the first value for an attribute name, or the default."""
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def has_attr(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)


class MarkupDocument(BaseModel):
    """
    Root container for one parsed markup document.

    Besides the tree itself it keeps the document-level extracts the
    assembler needs: the text of the style and inline script blocks.
    """
    root: MarkupNode
    body: MarkupNode
    title: str = ""
    styles: List[str] = Field(default_factory=list)
    scripts: List[str] = Field(default_factory=list)
    node_count: int = 0


class StateKind(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"


class StateField(BaseModel):
    name: str
    key: str
    kind: StateKind
    initial: Union[bool, int, float, str]
    node_uid: int


class ComponentUnit(BaseModel):
    name: str
    root_uid: int
    body: str = ""
    mounted: bool = True
    stateful: bool = False


class ThemeParams(BaseModel):
    """Accent colour channels substituted into the theme-variable block."""
    hue: int = Field(default=217, ge=0, le=360)
    saturation: int = Field(default=91, ge=0, le=100)
    lightness: int = Field(default=60, ge=0, le=100)


class ScriptMode(str, Enum):
    COMMENT = "comment"
    INLINE = "inline"
    DROP = "drop"


class TranspilerSettings(BaseModel):
    parser_backend: str = "html.parser"
    default_name: str = DEFAULT_COMPONENT_NAME
    script_mode: ScriptMode = ScriptMode.COMMENT


class ConversionResult(BaseModel):
    component_name: str
    source: str
    units: List[ComponentUnit] = Field(default_factory=list)
    state_fields: List[StateField] = Field(default_factory=list)

    @property
    def stateful_unit_count(self) -> int:
        return sum(1 for unit in self.units if unit.stateful)


ThemeInput = Union[ThemeParams, dict, tuple, list, None]


def coerce_theme(theme: ThemeInput) -> Optional[ThemeParams]:
    """
    Normalizes the accepted theme shapes into ThemeParams.

    Accepts ThemeParams, a mapping with hue/saturation/lightness keys, or a
    (hue, saturation, lightness) sequence. Anything else is a caller error.
    """
    if theme is None or isinstance(theme, ThemeParams):
        return theme
    try:
        if isinstance(theme, dict):
            return ThemeParams.model_validate(theme)
        if isinstance(theme, (tuple, list)) and len(theme) == 3:
            hue, saturation, lightness = theme
            return ThemeParams(hue=hue, saturation=saturation, lightness=lightness)
    except ValueError as e:
        raise InvalidInput(f"Invalid theme parameters: {e}") from e
    raise InvalidInput(f"Theme must be ThemeParams, a mapping or a 3-tuple, got {type(theme).__name__}.")

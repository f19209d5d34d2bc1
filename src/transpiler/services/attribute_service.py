# src/transpiler/services/attribute_service.py
import re
from types import MappingProxyType
from typing import List

from transpiler.services.style_parse_service import parse_style, style_to_object_literal
from transpiler.utils.naming import to_camel_case

ATTRIBUTE_MAP = MappingProxyType({
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "accesskey": "accessKey",
    "autocomplete": "autoComplete",
    "autofocus": "autoFocus",
    "autoplay": "autoPlay",
    "colspan": "colSpan",
    "rowspan": "rowSpan",
    "contenteditable": "contentEditable",
    "crossorigin": "crossOrigin",
    "datetime": "dateTime",
    "enctype": "encType",
    "formaction": "formAction",
    "frameborder": "frameBorder",
    "http-equiv": "httpEquiv",
    "inputmode": "inputMode",
    "maxlength": "maxLength",
    "minlength": "minLength",
    "novalidate": "noValidate",
    "playsinline": "playsInline",
    "readonly": "readOnly",
    "referrerpolicy": "referrerPolicy",
    "spellcheck": "spellCheck",
    "srcset": "srcSet",
    "usemap": "useMap",
    # SVG attributes whose camel humps are lost by the HTML parser
    "viewbox": "viewBox",
    "preserveaspectratio": "preserveAspectRatio",
    "gradientunits": "gradientUnits",
    "gradienttransform": "gradientTransform",
    "patternunits": "patternUnits",
    "patterntransform": "patternTransform",
    "clippathunits": "clipPathUnits",
    "markerwidth": "markerWidth",
    "markerheight": "markerHeight",
    "refx": "refX",
    "refy": "refY",
    "stddeviation": "stdDeviation",
    "textlength": "textLength",
    "lengthadjust": "lengthAdjust",
    "pathlength": "pathLength",
    "spreadmethod": "spreadMethod",
})

# Events whose React name has more than one hump
EVENT_MAP = MappingProxyType({
    "ondblclick": "onDoubleClick",
    "onmousedown": "onMouseDown",
    "onmouseup": "onMouseUp",
    "onmouseover": "onMouseOver",
    "onmouseout": "onMouseOut",
    "onmouseenter": "onMouseEnter",
    "onmouseleave": "onMouseLeave",
    "onmousemove": "onMouseMove",
    "onkeydown": "onKeyDown",
    "onkeyup": "onKeyUp",
    "onkeypress": "onKeyPress",
    "ontouchstart": "onTouchStart",
    "ontouchend": "onTouchEnd",
    "ontouchmove": "onTouchMove",
    "oncontextmenu": "onContextMenu",
    "ondragstart": "onDragStart",
    "ondragend": "onDragEnd",
    "ondragover": "onDragOver",
    "onanimationend": "onAnimationEnd",
    "ontransitionend": "onTransitionEnd",
})

BOOLEAN_ATTRIBUTES = frozenset({
    "disabled", "checked", "required", "readOnly", "hidden", "autoFocus",
    "multiple", "selected", "autoPlay", "controls", "loop", "muted",
    "noValidate", "open", "playsInline",
})

NUMERIC_ATTRIBUTES = frozenset({
    "tabIndex", "maxLength", "minLength", "rows", "cols", "colSpan",
    "rowSpan", "size", "span", "start",
})

# Supplied by the controlled binding instead
CONTROLLED_ATTRIBUTES = frozenset({"value", "checked", "onChange"})

_INTEGER = re.compile(r"^-?\d+$")
# Framework directives such as @click or :class have no prop equivalent
_VALID_NAME = re.compile(r"^[A-Za-z_][\w.:-]*$")
_NAME_SEPARATOR = re.compile(r"[-:]([a-zA-Z])")


def normalize_name(name: str) -> str:
    """Maps a source attribute name onto its target prop name."""
    lowered = name.lower()
    if lowered in ATTRIBUTE_MAP:
        return ATTRIBUTE_MAP[lowered]
    if is_event_name(lowered):
        return event_prop_name(lowered)
    if lowered.startswith(("aria-", "data-")):
        return lowered
    # SVG presentation attributes and namespaced names: stroke-width, xlink:href
    return _NAME_SEPARATOR.sub(lambda m: m.group(1).upper(), to_camel_case(lowered))


def is_event_name(name: str) -> bool:
    return len(name) > 2 and name.lower().startswith("on")


def event_prop_name(name: str) -> str:
    lowered = name.lower()
    if lowered in EVENT_MAP:
        return EVENT_MAP[lowered]
    return "on" + lowered[2].upper() + lowered[3:]


def is_truthy_flag(source_name: str, value: str) -> bool:
    """Empty value, 'true' or the attribute's own name all switch a boolean attribute on."""
    lowered = (value or "").strip().lower()
    return lowered in ("", "true") or lowered == source_name.lower()


def escape_attribute_value(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def normalize_attribute(name: str, value: str, is_state_bound: bool = False, tag: str = "") -> List[str]:
    """
    Converts one source attribute into zero or more target prop fragments.

    Args:
        name (str): The attribute name as parsed.
        value (str): The raw attribute value.
        is_state_bound (bool): True when the owning control is driven by state.
        tag (str): The owning element's tag name.

    Returns:
        List[str]: Fragments such as 'className="a b"' or 'disabled={true}'.
    """
    if not _VALID_NAME.match(name or ""):
        return []
    prop = normalize_name(name)
    value = "" if value is None else value

    if is_state_bound and prop in CONTROLLED_ATTRIBUTES:
        return []
    # Every <select> is state-bound, so <option selected> would fight its value
    if tag == "option" and prop == "selected":
        return []

    if prop == "style":
        styles = parse_style(value)
        return [f"style={{{style_to_object_literal(styles)}}}"] if styles else []

    if is_event_name(prop):
        return [f'{prop}={{() => console.log("{prop} triggered")}}']

    if prop in BOOLEAN_ATTRIBUTES:
        return [f"{prop}={{true}}"] if is_truthy_flag(name, value) else []

    if not value:
        return []

    if prop in NUMERIC_ATTRIBUTES and _INTEGER.match(value.strip()):
        return [f"{prop}={{{int(value.strip())}}}"]

    return [f'{prop}="{escape_attribute_value(value)}"']

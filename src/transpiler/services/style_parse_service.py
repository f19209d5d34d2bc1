# src/transpiler/services/style_parse_service.py
import json
from typing import Dict

from transpiler.utils.naming import to_camel_case


def _property_name(raw_key: str) -> str:
    key = raw_key.strip()
    # Custom properties are case-sensitive and keep their name
    if key.startswith("--"):
        return key
    key = key.lower()
    # Vendor prefixes: -webkit-x -> WebkitX, but -ms-x -> msX
    if key.startswith("-ms-"):
        return to_camel_case(key[1:])
    return to_camel_case(key)


def parse_style(style_string: str) -> Dict[str, str]:
    """
    Parses an inline style declaration into an ordered property map.

    Segments without a colon, with an empty key or with an empty value are
    skipped. Only the first colon separates key from value, so values like
    url(https://...) stay intact.

    Args:
        style_string (str): e.g. "background-color: red; margin:0"

    Returns:
        Dict[str, str]: e.g. {"backgroundColor": "red", "margin": "0"}
    """
    styles: Dict[str, str] = {}
    if not style_string:
        return styles

    for segment in style_string.split(";"):
        key, sep, value = segment.partition(":")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        if not key or not value:
            continue
        styles[_property_name(key)] = value
    return styles


def style_to_object_literal(styles: Dict[str, str]) -> str:
    """Serializes a parsed style map as an object literal for a style={{...}} prop."""
    return json.dumps(styles, ensure_ascii=False)

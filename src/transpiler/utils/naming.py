# src/transpiler/utils/naming.py
import re
from typing import Iterable, Optional, Set

_HYPHEN_LETTER = re.compile(r"-([a-z])")
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_camel_case(value: str) -> str:
    """Converts a hyphenated name to camelCase (e.g. 'background-color' -> 'backgroundColor')."""
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), value)


def _words(value: str) -> list:
    # Keep existing camel humps as word boundaries ('userEmail' -> ['user', 'Email'])
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", value or "")
    return [w for w in _WORD_SPLIT.split(spaced) if w]


def to_pascal_case(value: str) -> str:
    """'main navigation' / 'main-nav' / 'main_nav' -> 'MainNavigation' / 'MainNav'."""
    return "".join(w[0].upper() + w[1:] for w in _words(value))


def to_identifier_camel(value: str) -> str:
    """
    Converts an arbitrary control name into a camelCase JS identifier.

    Returns an empty string when nothing usable is left; callers decide on a fallback.
    """
    words = _words(value)
    if not words:
        return ""
    first, rest = words[0], words[1:]
    ident = first[0].lower() + first[1:] + "".join(w[0].upper() + w[1:] for w in rest)
    if ident[0].isdigit():
        ident = "field" + ident
    return ident


def safe_component_name(value: Optional[str], default: str, reserved: Iterable[str] = ()) -> str:
    """PascalCases the artifact name; falls back to the default when it is unusable or reserved."""
    name = to_pascal_case(value or "")
    if not name or not name[0].isalpha() or name in reserved:
        return default
    return name


def unique_name(base: str, seen: Set[str], separator: str = "") -> str:
    """
    Returns base, or base + separator + n with the smallest n >= 2 that is free.

    The chosen name is added to the seen set.
    """
    candidate = base
    counter = 2
    while candidate in seen:
        candidate = f"{base}{separator}{counter}"
        counter += 1
    seen.add(candidate)
    return candidate

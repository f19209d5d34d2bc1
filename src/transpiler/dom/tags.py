# src/transpiler/dom/tags.py
from types import MappingProxyType

# Handled globally by the assembler (or meaningless inside a component)
DROPPED_TAGS = frozenset({"script", "style", "title", "meta", "link", "head", "base", "noscript"})

VOID_TAGS = frozenset({
    "img", "input", "br", "hr", "meta", "link", "area", "base", "col",
    "embed", "param", "source", "track", "wbr",
})

LANDMARK_TAGS = frozenset({"header", "nav", "main", "footer", "section", "article", "aside"})
LANDMARK_ROLES = frozenset({"banner", "navigation", "main", "contentinfo", "complementary", "region"})

# The HTML parser lower-cases every tag name; SVG needs its camel humps back
SVG_TAG_CASE = MappingProxyType({
    "altglyph": "altGlyph",
    "animatemotion": "animateMotion",
    "animatetransform": "animateTransform",
    "clippath": "clipPath",
    "feblend": "feBlend",
    "fecolormatrix": "feColorMatrix",
    "fecomposite": "feComposite",
    "fedropshadow": "feDropShadow",
    "feflood": "feFlood",
    "fegaussianblur": "feGaussianBlur",
    "femerge": "feMerge",
    "femergenode": "feMergeNode",
    "feoffset": "feOffset",
    "feturbulence": "feTurbulence",
    "foreignobject": "foreignObject",
    "lineargradient": "linearGradient",
    "radialgradient": "radialGradient",
    "textpath": "textPath",
})

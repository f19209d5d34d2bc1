# src/transpiler/services/unit_emit_service.py
import re
from typing import Dict, List, Optional, Union

from transpiler.dom.tags import DROPPED_TAGS, SVG_TAG_CASE, VOID_TAGS
from transpiler.model import MarkupNode, NodeKind, StateField, StateKind
from transpiler.services.attribute_service import normalize_attribute

_TEXT_ESCAPES = {"{": '{"{"}', "}": '{"}"}', "<": '{"<"}', ">": '{">"}', "&": '{"&"}'}
_TEXT_SPECIAL = re.compile(r"[{}<>&]")


def escape_text(text: str) -> str:
    """Escapes the characters that would otherwise open an expression or a tag."""
    return _TEXT_SPECIAL.sub(lambda m: _TEXT_ESCAPES[m.group(0)], text)


def emit_comment(text: str) -> str:
    content = (text or "").strip().replace("*/", "* /")
    return f"{{/* {content} */}}"


def controlled_binding(field: StateField) -> List[str]:
    """The prop pair that ties a control to its state slot."""
    if field.kind == StateKind.BOOLEAN:
        return [
            f"checked={{state.{field.key}}}",
            f'onChange={{(e) => update("{field.key}", e.target.checked)}}',
        ]
    return [
        f"value={{state.{field.key}}}",
        f'onChange={{(e) => update("{field.key}", e.target.value)}}',
    ]


def unit_reference(name: str) -> str:
    return f"<{name} state={{state}} update={{update}} />"


class UnitEmitService:
    """
    Serializes one unit's subtree into component template text.

    Nodes that belong to another unit (nested landmarks) are emitted as a
    reference to that unit instead of being inlined a second time.
    """

    def __init__(self, state_fields: Dict[int, StateField], unit_refs: Optional[Dict[int, str]] = None):
        self.state_fields = state_fields
        self.unit_refs = unit_refs or {}

    def emit(self, root: MarkupNode) -> str:
        """
        Emits root and its descendants depth-first using an explicit worklist.

        Items on the worklist are either nodes still to open or literal
        closing tags, so output order equals document order without recursion.
        """
        out: List[str] = []
        stack: List[Union[MarkupNode, str]] = [root]

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
                continue

            if item.kind == NodeKind.TEXT:
                text = item.text.strip()
                if text:
                    out.append(escape_text(text))
                continue

            if item.kind == NodeKind.COMMENT:
                out.append(emit_comment(item.text))
                continue

            if item.uid != root.uid and item.uid in self.unit_refs:
                out.append(unit_reference(self.unit_refs[item.uid]))
                continue

            if item.tag in DROPPED_TAGS:
                continue

            out.append(self._open_tag(item))
            if self._is_childless(item):
                continue
            stack.append(f"</{self._tag_name(item)}>")
            stack.extend(reversed(item.children))

        return "".join(out)

    def emit_inline(self, nodes: List[MarkupNode]) -> List[str]:
        """Emits loose top-level nodes (text, comments) for the root entry point."""
        return [emitted for emitted in (self.emit(node) for node in nodes) if emitted]

    @staticmethod
    def _tag_name(node: MarkupNode) -> str:
        return SVG_TAG_CASE.get(node.tag, node.tag)

    def _is_childless(self, node: MarkupNode) -> bool:
        if node.tag in VOID_TAGS:
            return True
        # A controlled textarea takes its text from value, never from children
        return node.tag == "textarea" and node.uid in self.state_fields

    def _open_tag(self, node: MarkupNode) -> str:
        field = self.state_fields.get(node.uid)
        fragments: List[str] = []
        for name, value in node.attrs:
            fragments.extend(normalize_attribute(name, value, is_state_bound=field is not None, tag=node.tag))
        if field is not None:
            fragments.extend(controlled_binding(field))

        tag = self._tag_name(node)
        props = (" " + " ".join(fragments)) if fragments else ""
        if self._is_childless(node):
            return f"<{tag}{props} />"
        return f"<{tag}{props}>"

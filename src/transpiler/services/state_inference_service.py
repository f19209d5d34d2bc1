# src/transpiler/services/state_inference_service.py
import logging
from typing import Dict, Iterator, List, Optional, Set, Union

from transpiler.model import MarkupNode, NodeKind, StateField, StateKind
from transpiler.services.attribute_service import is_truthy_flag
from transpiler.utils.naming import to_identifier_camel, unique_name

logger = logging.getLogger(__name__)

CONTROL_TAGS = frozenset({"input", "textarea", "select"})
BOOLEAN_INPUT_TYPES = frozenset({"checkbox", "radio"})
NUMBER_INPUT_TYPES = frozenset({"number", "range"})
# Inputs without an editable value; binding them would only break them
UNBOUND_INPUT_TYPES = frozenset({"file", "submit", "button", "reset", "image"})


def iter_elements(root: MarkupNode) -> Iterator[MarkupNode]:
    """Yields every element below (and including) root in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind != NodeKind.ELEMENT:
            continue
        yield node
        stack.extend(reversed(node.children))


def _text_content(node: MarkupNode) -> str:
    parts: List[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind == NodeKind.TEXT:
            parts.append(current.text)
        stack.extend(reversed(current.children))
    return "".join(parts)


def _parse_number(raw: Optional[str]) -> Union[int, float]:
    if raw is None:
        return 0
    try:
        number = float(raw.strip())
    except ValueError:
        return 0
    if number != number or number in (float("inf"), float("-inf")):
        return 0
    return int(number) if number.is_integer() else number


class StateInferenceService:
    """
    Derives the reactive state model of a document from its form controls.

    The service is stateless between calls; every infer() allocates its own
    bookkeeping so conversions never share anything.
    """

    def is_control(self, node: MarkupNode) -> bool:
        if node.tag not in CONTROL_TAGS:
            return False
        if node.tag == "input":
            return (node.get_attr("type") or "text").strip().lower() not in UNBOUND_INPUT_TYPES
        return True

    def infer(self, root: MarkupNode) -> Dict[int, StateField]:
        """
        Enumerates all controls in document order and builds their state fields.

        Args:
            root (MarkupNode): The subtree to scan (normally the document root).

        Returns:
            Dict[int, StateField]: Map of control uid to its field, in document order.
        """
        fields: Dict[int, StateField] = {}
        seen_keys: Set[str] = set()

        for ordinal, node in enumerate((n for n in iter_elements(root) if self.is_control(n)), start=1):
            raw_name = (node.get_attr("name") or "").strip() or (node.get_attr("id") or "").strip()
            if not raw_name:
                raw_name = f"field_{ordinal}"

            base_key = to_identifier_camel(raw_name) or to_identifier_camel(f"field_{ordinal}")
            key = unique_name(base_key, seen_keys)
            kind, initial = self._classify(node)

            fields[node.uid] = StateField(
                name=raw_name,
                key=key,
                kind=kind,
                initial=initial,
                node_uid=node.uid,
            )

        logger.debug("Inferred %d state fields.", len(fields))
        return fields

    def _classify(self, node: MarkupNode):
        if node.tag == "input":
            input_type = (node.get_attr("type") or "text").strip().lower()
            if input_type in BOOLEAN_INPUT_TYPES:
                checked = node.has_attr("checked") and is_truthy_flag("checked", node.get_attr("checked", ""))
                return StateKind.BOOLEAN, checked
            if input_type in NUMBER_INPUT_TYPES:
                return StateKind.NUMBER, _parse_number(node.get_attr("value"))
            return StateKind.STRING, node.get_attr("value") or ""

        if node.tag == "textarea":
            value = node.get_attr("value")
            return StateKind.STRING, value if value is not None else _text_content(node)

        return StateKind.STRING, self._select_value(node)

    @staticmethod
    def _select_value(node: MarkupNode) -> str:
        value = node.get_attr("value")
        if value is not None:
            return value

        options = [n for n in iter_elements(node) if n.tag == "option"]
        for option in options:
            if option.has_attr("selected"):
                return _option_value(option)
        return _option_value(options[0]) if options else ""


def _option_value(option: MarkupNode) -> str:
    value = option.get_attr("value")
    return value if value is not None else _text_content(option).strip()

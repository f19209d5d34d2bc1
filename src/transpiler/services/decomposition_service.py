# src/transpiler/services/decomposition_service.py
import logging
from typing import Iterable, List, Set, Tuple

from transpiler.dom.tags import DROPPED_TAGS, LANDMARK_ROLES, LANDMARK_TAGS
from transpiler.model import ComponentUnit, MarkupNode, NodeKind
from transpiler.utils.naming import to_pascal_case, unique_name

logger = logging.getLogger(__name__)

# Names the generated module already uses
RESERVED_NAMES = frozenset({"React", "Fragment", "GLOBAL_STYLES", "INITIAL_STATE"})


def is_landmark(node: MarkupNode) -> bool:
    if node.kind != NodeKind.ELEMENT:
        return False
    if node.tag in LANDMARK_TAGS:
        return True
    return (node.get_attr("role") or "").strip().lower() in LANDMARK_ROLES


def unit_base_name(node: MarkupNode) -> str:
    """Picks the most descriptive label for a unit: id, aria-label, role, then tag."""
    for candidate in (node.get_attr("id"), node.get_attr("aria-label"), node.get_attr("role"), node.tag):
        base = to_pascal_case(candidate or "")
        if base:
            # Component names must start with an upper-case letter
            return base if base[0].isalpha() else f"Unit{base}"
    return "Unit"


class DecompositionService:
    """
    Partitions the body of a document into named component units.

    Pass 1 claims semantic landmarks anywhere in the body (outermost first);
    pass 2 claims the remaining top-level elements. A node is claimed at most
    once, so every subtree ends up in exactly one unit.
    """

    def decompose(
            self, body: MarkupNode, reserved: Iterable[str] = ()
    ) -> List[Tuple[ComponentUnit, MarkupNode]]:
        """
        Args:
            body (MarkupNode): The body region of the parsed document.
            reserved (Iterable[str]): Names that units must not take (e.g. the root component).

        Returns:
            List[Tuple[ComponentUnit, MarkupNode]]: Units (without emitted body) and their
            root nodes, in document order.
        """
        seen: Set[str] = set(RESERVED_NAMES) | set(reserved)
        top_level = {child.uid for child in body.children}
        claimed: List[Tuple[ComponentUnit, MarkupNode]] = []
        claimed_uids: Set[int] = set()

        # --- Pass 1: semantic landmarks ---
        stack = list(reversed(body.children))
        while stack:
            node = stack.pop()
            if node.kind != NodeKind.ELEMENT or node.tag in DROPPED_TAGS:
                continue
            if is_landmark(node):
                self._claim(node, len(claimed) + 1, seen, top_level, claimed, claimed_uids)
                # Nested landmarks stay inside this unit
                continue
            stack.extend(reversed(node.children))

        # --- Pass 2: remaining top-level elements ---
        for child in body.children:
            if child.kind != NodeKind.ELEMENT or child.tag in DROPPED_TAGS or child.uid in claimed_uids:
                continue
            self._claim(child, len(claimed) + 1, seen, top_level, claimed, claimed_uids)

        claimed.sort(key=lambda pair: pair[1].uid)
        logger.debug("Decomposed body into %d units.", len(claimed))
        return claimed

    @staticmethod
    def _claim(
            node: MarkupNode,
            ordinal: int,
            seen: Set[str],
            top_level: Set[int],
            claimed: List[Tuple[ComponentUnit, MarkupNode]],
            claimed_uids: Set[int],
    ) -> None:
        name = unique_name(f"{unit_base_name(node)}{ordinal}", seen, separator="_")
        unit = ComponentUnit(name=name, root_uid=node.uid, mounted=node.uid in top_level)
        claimed.append((unit, node))
        claimed_uids.add(node.uid)

# src/transpiler/dom/tree_builder.py
import logging
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Comment, FeatureNotFound, NavigableString, Tag
from bs4.element import PreformattedString

from transpiler.model import MarkupDocument, MarkupNode, NodeKind

logger = logging.getLogger(__name__)

# Elements whose content is raw text we extract at document level instead of walking
_RAW_TEXT_TAGS = {"script", "style"}
_SCRIPT_TYPES = {"", "text/javascript", "application/javascript", "module"}


class ParseTree:
    """
    Builder responsible for turning raw markup into a MarkupDocument.

    BeautifulSoup does the lenient parsing (unclosed tags, stray end tags,
    missing body); this class only converts its tree into our own node model,
    so the rest of the pipeline never touches bs4 types.
    """

    def __init__(self, backend: str = "html.parser"):
        self.backend = backend

    def _make_soup(self, markup: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(markup, self.backend)
        except FeatureNotFound:
            logger.warning("Parser backend '%s' is not available, using html.parser.", self.backend)
            return BeautifulSoup(markup, "html.parser")

    def parse(self, markup: str) -> MarkupDocument:
        """
        Parses markup into a MarkupDocument.

        The tree is built with an explicit stack, so arbitrarily deep input
        cannot exhaust the interpreter's recursion limit.

        Args:
            markup (str): The raw markup string.

        Returns:
            MarkupDocument: The node tree plus extracted style/script text.
        """
        # Basic cleanup of potentially dirty markup (e.g., BOM)
        soup = self._make_soup(markup.replace("\ufeff", ""))

        root = MarkupNode(uid=0, kind=NodeKind.ELEMENT, tag="#document")
        body: Optional[MarkupNode] = None
        html: Optional[MarkupNode] = None
        title = ""
        styles: List[str] = []
        scripts: List[str] = []
        next_uid = 1

        stack: List[Tuple[Union[Tag, NavigableString], MarkupNode]] = [
            (child, root) for child in reversed(soup.contents)
        ]
        while stack:
            source, parent = stack.pop()
            node = self._convert(source, next_uid)
            if node is None:
                continue
            next_uid += 1
            parent.children.append(node)

            if node.kind != NodeKind.ELEMENT:
                continue

            if node.tag == "body" and body is None:
                body = node
            elif node.tag == "html" and html is None:
                html = node
            elif node.tag == "title" and not title:
                title = source.get_text(strip=True)

            if node.tag in _RAW_TEXT_TAGS:
                self._collect_raw_text(source, styles, scripts)
                continue

            stack.extend((child, node) for child in reversed(source.contents))

        logger.debug("Parsed markup into %d nodes (body found: %s).", next_uid, body is not None)
        return MarkupDocument(
            root=root,
            body=body or html or root,
            title=title,
            styles=styles,
            scripts=scripts,
            node_count=next_uid,
        )

    @staticmethod
    def _convert(source: Union[Tag, NavigableString], uid: int) -> Optional[MarkupNode]:
        """Maps one bs4 node onto a MarkupNode (without children)."""
        if isinstance(source, Tag):
            attrs = []
            for name, value in source.attrs.items():
                # Multi-valued attributes (class, rel, ...) come back as lists
                if isinstance(value, (list, tuple)):
                    value = " ".join(value)
                attrs.append((name.lower(), "" if value is None else str(value)))
            return MarkupNode(uid=uid, kind=NodeKind.ELEMENT, tag=source.name.lower(), attrs=attrs)

        if isinstance(source, Comment):
            return MarkupNode(uid=uid, kind=NodeKind.COMMENT, text=str(source))

        # Doctype, CData, processing instructions, declarations
        if isinstance(source, PreformattedString):
            return None

        if isinstance(source, NavigableString):
            return MarkupNode(uid=uid, kind=NodeKind.TEXT, text=str(source))

        return None

    @staticmethod
    def _collect_raw_text(tag: Tag, styles: List[str], scripts: List[str]) -> None:
        # Raw-text strings (Stylesheet/Script) are not always picked up by get_text()
        text = "".join(str(s) for s in tag.contents if isinstance(s, NavigableString))
        if tag.name == "style":
            styles.append(text)
            return

        script_type = (tag.get("type") or "").strip().lower()
        if tag.get("src") or script_type not in _SCRIPT_TYPES:
            return
        if text.strip():
            scripts.append(text)

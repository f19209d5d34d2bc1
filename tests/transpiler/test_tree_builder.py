# tests/transpiler/test_tree_builder.py
import sys

import pytest

from transpiler.dom.tree_builder import ParseTree
from transpiler.model import NodeKind
from transpiler.services.state_inference_service import iter_elements

FULL_DOCUMENT = """<!DOCTYPE html>
<html>
<head>
  <title> Demo Page </title>
  <style>.card { color: red; }</style>
  <script>console.log("boot");</script>
  <script src="https://cdn.example.com/lib.js"></script>
  <script type="application/ld+json">{"a": 1}</script>
</head>
<body>
  <p class="lead intro">Hi</p>
  <!-- note -->
</body>
</html>"""


@pytest.fixture
def builder():
    return ParseTree()


def test_parse_extracts_document_parts(builder):
    """Test of body, titel, styles en inline scripts correct worden gevonden."""
    doc = builder.parse(FULL_DOCUMENT)

    assert doc.body.tag == "body"
    assert doc.title == "Demo Page"
    assert doc.styles == [".card { color: red; }"]
    # External and non-JS scripts are ignored
    assert doc.scripts == ['console.log("boot");']


def test_parse_keeps_comments_and_joins_class_lists(builder):
    doc = builder.parse(FULL_DOCUMENT)
    significant = [c for c in doc.body.children if c.kind != NodeKind.TEXT or c.text.strip()]

    assert [c.kind for c in significant] == [NodeKind.ELEMENT, NodeKind.COMMENT]
    assert significant[0].get_attr("class") == "lead intro"
    assert significant[1].text.strip() == "note"


def test_uids_follow_document_order(builder):
    doc = builder.parse("<div><p>a</p><span>b</span></div><footer></footer>")
    uids = [node.uid for node in iter_elements(doc.root)]

    assert doc.root.uid == 0
    assert uids == sorted(uids)
    assert len(set(uids)) == len(uids)
    assert doc.node_count > uids[-1]


def test_fragment_without_body_uses_document_root(builder):
    doc = builder.parse("<div>x</div>")
    assert doc.body.uid == doc.root.uid == 0
    assert doc.body.children[0].tag == "div"


def test_unclosed_tags_are_tolerated(builder):
    doc = builder.parse("<div><p>unclosed <span>text</div>")
    tags = [node.tag for node in iter_elements(doc.root)]
    assert tags[1:4] == ["div", "p", "span"]


def test_byte_order_mark_is_removed(builder):
    doc = builder.parse("\ufeff<p>x</p>")
    assert doc.body.children[0].tag == "p"


def test_deeply_nested_markup_does_not_recurse(builder):
    """Diep geneste markup mag geen RecursionError opleveren."""
    depth = sys.getrecursionlimit() + 200
    doc = builder.parse("<div>" * depth + "deep" + "</div>" * depth)

    assert sum(1 for _ in iter_elements(doc.root)) == depth + 1

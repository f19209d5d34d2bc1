# tests/transpiler/test_state_inference.py
import pytest

from transpiler.dom.tree_builder import ParseTree
from transpiler.model import StateKind
from transpiler.services.state_inference_service import StateInferenceService

FORM = """<body><form>
  <input name="email" value="a@b.com">
  <input type="checkbox" checked>
  <input type="number" name="qty" value="3">
  <input type="range" id="vol" value="abc">
  <textarea name="bio">Hello</textarea>
  <select name="color">
    <option value="r">Red</option>
    <option value="g" selected>Green</option>
  </select>
  <input type="submit" value="Go">
</form></body>"""


def infer(markup):
    doc = ParseTree().parse(markup)
    return list(StateInferenceService().infer(doc.root).values())


def test_fields_in_document_order():
    """Test of alle controls (behalve submit) een state-veld krijgen, in volgorde."""
    fields = infer(FORM)
    assert [f.key for f in fields] == ["email", "field2", "qty", "vol", "bio", "color"]


@pytest.mark.parametrize("key, kind, initial", [
    ("email", StateKind.STRING, "a@b.com"),
    ("field2", StateKind.BOOLEAN, True),
    ("qty", StateKind.NUMBER, 3),
    ("vol", StateKind.NUMBER, 0),
    ("bio", StateKind.STRING, "Hello"),
    ("color", StateKind.STRING, "g"),
])
def test_field_kinds_and_initial_values(key, kind, initial):
    fields = {f.key: f for f in infer(FORM)}
    assert fields[key].kind == kind
    assert fields[key].initial == initial


def test_unchecked_checkbox_is_false():
    (field,) = infer('<input type="radio" name="agree">')
    assert field.kind == StateKind.BOOLEAN
    assert field.initial is False


def test_duplicate_names_get_unique_keys():
    fields = infer('<input name="email"><input name="email"><input name="email">')
    assert [f.key for f in fields] == ["email", "email2", "email3"]
    assert {f.name for f in fields} == {"email"}


def test_select_without_selection_uses_first_option():
    (field,) = infer("<select name='size'><option>Small</option><option>Large</option></select>")
    assert field.initial == "Small"


def test_empty_select_is_empty_string():
    (field,) = infer("<select name='size'></select>")
    assert field.initial == ""


def test_names_become_identifiers():
    fields = infer('<input name="first-name"><input name="2fa">')
    assert [f.key for f in fields] == ["firstName", "field2fa"]


def test_unbound_input_types_are_skipped():
    assert infer('<input type="file"><input type="button" value="x"><input type="reset">') == []

# tests/transpiler/test_decomposition.py
import pytest

from transpiler.dom.tree_builder import ParseTree
from transpiler.services.decomposition_service import DecompositionService, unit_base_name


def decompose(markup, reserved=()):
    doc = ParseTree().parse(markup)
    return [unit for unit, _ in DecompositionService().decompose(doc.body, reserved=reserved)]


def test_landmarks_become_units():
    units = decompose("<body><header>H</header><main>M</main><footer>F</footer></body>")
    assert [u.name for u in units] == ["Header1", "Main2", "Footer3"]
    assert all(u.mounted for u in units)


def test_duplicate_ids_get_distinct_names():
    units = decompose('<body><div id="box">a</div><div id="box">b</div></body>')
    names = [u.name for u in units]
    assert names == ["Box1", "Box2"]
    assert len(set(names)) == len(names)


def test_nested_landmark_is_claimed_before_its_container():
    """Een landmark binnen een gewone container wordt een eigen (niet-gemounte) unit."""
    units = decompose(
        '<body><div class="wrap"><nav>n</nav><p>x</p></div>'
        "<main><section>s</section></main></body>"
    )
    assert [u.name for u in units] == ["Div3", "Nav1", "Main2"]
    mounted = {u.name: u.mounted for u in units}
    assert mounted == {"Div3": True, "Nav1": False, "Main2": True}


def test_landmarks_inside_landmarks_are_not_split():
    units = decompose("<body><main><section>a</section><aside>b</aside></main></body>")
    assert [u.name for u in units] == ["Main1"]


def test_reserved_names_are_avoided():
    units = decompose("<body><header>H</header></body>", reserved=["Header1"])
    assert [u.name for u in units] == ["Header1_2"]


def test_text_only_body_has_no_units():
    assert decompose("<body>Just text</body>") == []


@pytest.mark.parametrize("markup, expected", [
    ('<div id="hero-banner"></div>', "HeroBanner"),
    ('<nav aria-label="Primary links"></nav>', "PrimaryLinks"),
    ('<div role="navigation"></div>', "Navigation"),
    ("<section></section>", "Section"),
    ('<div id="123"></div>', "Unit123"),
])
def test_unit_base_name(markup, expected):
    doc = ParseTree().parse(markup)
    assert unit_base_name(doc.body.children[0]) == expected

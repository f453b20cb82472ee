import pytest

from pygdl import KEYWORDS, Placement, ValidationError
from pygdl.graphs import DependencyGraph
from pygdl.keywords import check_keyword_arities, check_keyword_locations, keyword_names, with_placement


def test_keyword_table():
    arities = {k.name: k.arity for k in KEYWORDS}
    assert arities == {
        "role": 1, "terminal": 0, "goal": 2, "legal": 2, "does": 2,
        "init": 1, "true": 1, "next": 1, "base": 1, "input": 2,
    }
    assert [k.name for k in KEYWORDS if k.required] == ["role", "terminal", "goal", "legal"]
    assert with_placement(KEYWORDS, Placement.HEAD_ONLY) == ["init", "next", "base", "input"]
    assert with_placement(KEYWORDS, Placement.ACTION) == ["does"]
    assert "distinct" not in keyword_names()


def test_required_keywords_are_checked_in_table_order():
    with pytest.raises(ValidationError) as info:
        check_keyword_arities({}, {})
    assert info.value.subject == "role"
    assert "No role relations" in str(info.value)


def test_terminal_missing_message():
    with pytest.raises(ValidationError) as info:
        check_keyword_arities({"role": 1}, {})
    assert str(info.value) == "No terminal proposition found in the game description"


def test_goal_arity_message():
    with pytest.raises(ValidationError) as info:
        check_keyword_arities({"role": 1, "terminal": 0, "goal": 3}, {})
    assert "arity 2" in str(info.value)


def test_locations_on_clean_graph():
    g = DependencyGraph()
    g.add("legal", "true")
    g.add("next", "does")
    g.add("goal", "true")
    check_keyword_locations(g, {"legal", "true", "next", "does", "goal", "role"})


def test_terminal_depending_on_does():
    g = DependencyGraph()
    g.add("terminal", "does")
    with pytest.raises(ValidationError) as info:
        check_keyword_locations(g, {"terminal", "does"})
    assert info.value.code == "E174"
    assert "does sentence" in str(info.value)


def test_role_head_is_caught_without_any_edge():
    g = DependencyGraph()
    g.add_head("role")
    with pytest.raises(ValidationError) as info:
        check_keyword_locations(g, {"role"})
    assert info.value.code == "E170"

from pygdl.dependency import build_dependency_graph
from pygdl.graphs import (
    DependencyGraph,
    ancestors_graph,
    closure,
    equal_to,
    matching_and_downstream,
    matching_and_upstream,
    member_of,
)
from pygdl import distinct, not_, or_, prop, relation, rule


def chain():
    # a depends on b, b on c, d on nothing
    g = DependencyGraph()
    g.add("a", "b")
    g.add("b", "c", negative=True)
    return g


def test_closure_follows_adjacency_from_matching_nodes():
    adjacency = {"x": {"y"}, "y": {"z"}, "z": {"x"}}
    assert closure({"x", "y", "z", "w"}, adjacency, equal_to("y")) == {"x", "y", "z"}
    assert closure({"w"}, adjacency, equal_to("w")) == {"w"}
    assert closure({"x"}, adjacency, equal_to("nope")) == frozenset()


def test_upstream_and_downstream():
    g = chain()
    names = {"a", "b", "c", "d"}
    assert matching_and_upstream(names, g, equal_to("a")) == {"a", "b", "c"}
    assert matching_and_upstream(names, g, equal_to("c")) == {"c"}
    assert matching_and_downstream(names, g, equal_to("c")) == {"a", "b", "c"}
    assert matching_and_downstream(names, g, member_of({"a", "d"})) == {"a", "d"}


def test_edges_and_targets():
    g = chain()
    assert set(g.edges()) == {("a", "b"), ("b", "c")}
    assert set(g.negative_edges()) == {("b", "c")}
    assert g.targets() == {"b", "c"}
    assert g.reversed() == {"b": {"a"}, "c": {"b"}}
    assert len(g) == 2


def test_ancestors_graph_includes_self():
    anc = ancestors_graph(chain(), {"a", "b", "c"})
    assert anc["a"] == {"a", "b", "c"}
    assert anc["c"] == {"c"}


def test_dependency_graph_polarity():
    rules = [
        rule(prop("p"), relation("q", "1"), not_(prop("r"))),
        rule(prop("s"), or_(prop("t"), prop("u"))),
    ]
    g = build_dependency_graph(rules)
    assert g.get("p") == {"q", "r"}
    assert g.negative == {"p": {"r"}}
    assert g.get("s") == {"t", "u"}
    assert g.get("missing") == set()


def test_negation_inside_disjunction_is_negative():
    g = build_dependency_graph([rule(prop("s"), or_(prop("t"), not_(prop("u"))))])
    assert g.get("s") == {"t", "u"}
    assert g.negative == {"s": {"u"}}


def test_rule_heads_are_recorded_without_edges():
    g = build_dependency_graph([rule(relation("role", "x"), distinct("a", "b"))])
    assert g.heads == {"role"}
    assert len(g) == 0

from pygdl import Visitor, distinct, func, not_, or_, prop, relation, rule
from pygdl.visitors import functions_in_terms, sentences_in_rule, variables_in_terms


def sample_rule():
    return rule(
        relation("p", "?x", func("f", "?y")),
        relation("q", "?x", "?y"),
        not_(prop("r")),
        or_(relation("s", "a"), prop("t")),
        distinct("?x", func("g", "b")),
    )


def test_visitor_nodes_and_terms():
    kinds = []
    terms = []

    Visitor(lambda n: kinds.append(type(n).__name__)).visit(sample_rule())
    for k in ("Rule", "Relation", "Not", "Or", "Proposition", "Distinct", "Function"):
        assert k in kinds

    Visitor(lambda _: None, term_cb=lambda t: terms.append(type(t).__name__)).visit_all([sample_rule()])
    assert "Variable" in terms and "Constant" in terms and "Function" in terms


def test_sentences_in_rule_descends_through_not_and_or():
    names = [s.name for s in sentences_in_rule(sample_rule())]
    assert names == ["p", "q", "r", "s", "t"]


def test_term_helpers_descend_into_functions():
    terms = (func("f", "?x", func("g", "?y")), "?z")
    terms = tuple(relation("h", *terms).args)
    assert [v.name for v in variables_in_terms(terms)] == ["?x", "?y", "?z"]
    assert [f.name for f in functions_in_terms(terms)] == ["f", "g"]

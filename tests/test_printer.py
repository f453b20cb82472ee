from pygdl import distinct, func, not_, or_, print_description, prop, relation, rule
from pygdl.printer import print_literal, print_term


def test_print_facts_and_rules():
    desc = [
        relation("role", "robot"),
        relation("init", func("cell", "1", "b")),
        rule(relation("next", "?x"), relation("true", "?x"), not_(prop("terminal"))),
        rule(
            relation("legal", "?r", func("mark", "?m")),
            relation("role", "?r"),
            or_(relation("free", "?m"), prop("any")),
            distinct("?r", "nobody"),
        ),
    ]

    out = print_description(desc)
    expected = "\n".join([
        "role(robot) .",
        "init(cell(1, b)) .",
        "next(?x) :- true(?x), not terminal .",
        "legal(?r, mark(?m)) :- role(?r), or(free(?m), any), distinct(?r, nobody) .",
    ])
    assert out == expected


def test_print_zero_arity_forms():
    # Zero-arity relations and functions keep their parentheses
    assert print_literal(relation("foo")) == "foo()"
    assert print_term(func("f")) == "f()"
    assert print_literal(prop("terminal")) == "terminal"

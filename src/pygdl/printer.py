from __future__ import annotations

from typing import Iterable, Union

from .nodes import (
    Constant,
    Description,
    Distinct,
    Function,
    Literal,
    Not,
    Or,
    Proposition,
    Relation,
    Rule,
    Term,
    Variable,
    as_items,
)


def print_description(d: Union[Description, Iterable[object]]) -> str:
    return "\n".join(print_item(item) for item in as_items(d))


def print_item(item: object) -> str:
    match item:
        case Rule():
            return print_rule(item)
        case Relation() | Proposition() | Not() | Or() | Distinct():
            return f"{print_literal(item)} ."
        case Constant() | Variable() | Function():
            return f"{print_term(item)} ."
    return repr(item)


def print_rule(r: Rule) -> str:
    head = print_literal(r.head)
    if not r.body:
        return f"{head} :- ."
    body = ", ".join(print_literal(lit) for lit in r.body)
    return f"{head} :- {body} ."


def print_literal(lit: Literal) -> str:
    match lit:
        case Proposition(name=name):
            return name
        case Relation(name=name, args=args):
            return _applied(name, args)
        case Not(body=body):
            return f"not {print_literal(body)}"
        case Or(disjuncts=disjuncts):
            return f"or({', '.join(print_literal(d) for d in disjuncts)})"
        case Distinct(left=left, right=right):
            return f"distinct({print_term(left)}, {print_term(right)})"
    return print_term(lit)


def print_term(t: Term) -> str:
    match t:
        case Variable():
            return t.name
        case Constant():
            return t.value
        case Function(name=name, args=args):
            return _applied(name, args)
    return repr(t)


def _applied(name: str, args) -> str:
    return f"{name}({', '.join(print_term(a) for a in args)})"

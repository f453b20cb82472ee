from __future__ import annotations

from typing import List, Set

from .diagnostics import fail
from .nodes import Distinct, Literal, Not, Or, Relation, Rule, Variable
from .printer import print_rule
from .visitors import variables_in_terms


def check_rule_safety(r: Rule) -> None:
    """Every variable in the head, a negation or a distinct must be bound
    by some positive relation in the body."""
    unsupported: List[Variable] = []
    if isinstance(r.head, Relation):
        variables_in_terms(r.head.args, unsupported)
    for lit in r.body:
        _unsupported_in_literal(lit, unsupported)

    supported: Set[Variable] = set()
    for lit in r.body:
        supported |= _supported_in_literal(lit)

    for v in unsupported:
        if v not in supported:
            raise fail(
                "E150",
                f"Unsafe rule {print_rule(r)}: Variable {v.name} is not defined "
                "in a positive relation in the rule's body",
                v,
            )


def _unsupported_in_literal(lit: Literal, out: List[Variable]) -> None:
    match lit:
        case Not(body=Relation(args=args)):
            variables_in_terms(args, out)
        case Or(disjuncts=disjuncts):
            for d in disjuncts:
                _unsupported_in_literal(d, out)
        case Distinct(left=left, right=right):
            variables_in_terms((left, right), out)


def _supported_in_literal(lit: Literal) -> Set[Variable]:
    match lit:
        case Relation(args=args):
            return set(variables_in_terms(args))
        case Or(disjuncts=disjuncts) if disjuncts:
            # Only variables bound in every branch can be relied on.
            bound = _supported_in_literal(disjuncts[0])
            for d in disjuncts[1:]:
                bound &= _supported_in_literal(d)
            return bound
    return set()

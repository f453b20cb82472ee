from __future__ import annotations

from typing import FrozenSet, List, Mapping

from .diagnostics import fail
from .nodes import Or, Relation, Rule, Term, is_ground
from .printer import print_rule, print_term


def check_recursion_function_restriction(r: Rule, ancestors: Mapping[str, FrozenSet[str]]) -> None:
    """Arguments of body relations in a cycle with the head must each be
    ground, an argument of the head, or an argument of an acyclic relation.

    This keeps recursion from building ever larger function terms.
    """
    head = r.head.name

    def in_cycle(rel: Relation) -> bool:
        return head in ancestors.get(rel.name, frozenset())

    cyclic: List[Relation] = []
    acyclic: List[Relation] = []
    for lit in r.body:
        match lit:
            case Relation():
                (cyclic if in_cycle(lit) else acyclic).append(lit)
            case Or(disjuncts=disjuncts):
                # One level deep; acyclic disjuncts can't be counted on.
                for d in disjuncts:
                    if isinstance(d, Relation) and in_cycle(d):
                        cyclic.append(d)

    allowed: List[Term] = []
    if isinstance(r.head, Relation):
        allowed.extend(r.head.args)
    for rel in acyclic:
        allowed.extend(rel.args)

    for rel in cyclic:
        for t in rel.args:
            if is_ground(t) or t in allowed:
                continue
            raise fail(
                "E180",
                f"Recursion-function restriction violated in rule {print_rule(r)}, for term {print_term(t)}",
                t,
            )

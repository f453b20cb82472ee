from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .diagnostics import Related, fail
from .graphs import DependencyGraph, equal_to, matching_and_upstream
from .nodes import Literal, Not, Or, Proposition, Relation, Rule

logger = logging.getLogger(__name__)


def build_dependency_graph(rules: Sequence[Rule]) -> DependencyGraph:
    graph = DependencyGraph()
    for r in rules:
        graph.add_head(r.head.name)
        for lit in r.body:
            _add_literal(graph, r.head.name, lit, negative=False)
    return graph


def _add_literal(graph: DependencyGraph, head: str, lit: Literal, negative: bool) -> None:
    match lit:
        case Proposition(name=name) | Relation(name=name):
            graph.add(head, name, negative)
        case Not(body=body):
            _add_literal(graph, head, body, negative=True)
        case Or(disjuncts=disjuncts):
            for d in disjuncts:
                _add_literal(graph, head, d, negative)


def check_stratification(graph: DependencyGraph, names: Iterable[str]) -> None:
    """No negative edge may lie on a cycle of the dependency graph."""
    names = frozenset(names).union(graph.dependencies, graph.targets())
    pending = {tail: set(heads) for tail, heads in graph.negative.items()}
    while pending:
        tail, heads = pending.popitem()
        for head in heads:
            upstream = matching_and_upstream(names, graph, equal_to(head))
            if tail in upstream:
                raise fail(
                    "E160",
                    f"There is a negative edge from {tail} to {head} in a cycle in the dependency graph",
                    (tail, head),
                    Related(f"{head} depends on {tail}, and {tail} depends negatively on {head}"),
                )
    logger.debug("dependency graph is stratified (%d edges)", len(graph))


def build_stratified_graph(rules: Sequence[Rule], names: Iterable[str]) -> DependencyGraph:
    graph = build_dependency_graph(rules)
    check_stratification(graph, names)
    return graph

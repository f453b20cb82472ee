from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Iterable, Iterator, Mapping, Set, Tuple

"""
DependencyGraph maps each rule head name to the sentence names its body
refers to. An edge is negative when the reference sits under a negation.
"""
class DependencyGraph:
    dependencies: Dict[str, Set[str]]
    negative: Dict[str, Set[str]]
    heads: Set[str]

    def __init__(self) -> None:
        self.dependencies = {}
        self.negative = {}
        self.heads = set()

    def add_head(self, head: str) -> None:
        # Rules whose body names no sentence still define their head.
        self.heads.add(head)

    def add(self, head: str, dep: str, negative: bool = False) -> None:
        self.heads.add(head)
        self.dependencies.setdefault(head, set()).add(dep)
        if negative:
            self.negative.setdefault(head, set()).add(dep)

    def get(self, head: str) -> Set[str]:
        return self.dependencies.get(head, set())

    def edges(self) -> Iterator[Tuple[str, str]]:
        for head, deps in self.dependencies.items():
            for dep in deps:
                yield head, dep

    def negative_edges(self) -> Iterator[Tuple[str, str]]:
        for head, deps in self.negative.items():
            for dep in deps:
                yield head, dep

    def targets(self) -> Set[str]:
        out: Set[str] = set()
        for deps in self.dependencies.values():
            out |= deps
        return out

    def reversed(self) -> Dict[str, Set[str]]:
        dependents: Dict[str, Set[str]] = {}
        for head, dep in self.edges():
            dependents.setdefault(dep, set()).add(head)
        return dependents

    def __len__(self) -> int:
        return sum(len(deps) for deps in self.dependencies.values())


def closure(
    nodes: Iterable[str],
    adjacency: Mapping[str, Iterable[str]],
    matches: Callable[[str], bool],
) -> FrozenSet[str]:
    """Nodes satisfying `matches`, plus everything reachable from them."""
    seen: Set[str] = {n for n in nodes if matches(n)}
    stack = list(seen)
    while stack:
        cur = stack.pop()
        for nxt in adjacency.get(cur, ()):
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return frozenset(seen)


def matching_and_upstream(
    nodes: Iterable[str], graph: DependencyGraph, matches: Callable[[str], bool]
) -> FrozenSet[str]:
    # Upstream of a name: everything its definition depends on.
    return closure(nodes, graph.dependencies, matches)


def matching_and_downstream(
    nodes: Iterable[str], graph: DependencyGraph, matches: Callable[[str], bool]
) -> FrozenSet[str]:
    # Downstream of a name: everything whose definition depends on it.
    return closure(nodes, graph.reversed(), matches)


def equal_to(name: str) -> Callable[[str], bool]:
    return lambda n: n == name


def member_of(names: Iterable[str]) -> Callable[[str], bool]:
    names = frozenset(names)
    return lambda n: n in names


def ancestors_graph(graph: DependencyGraph, names: Iterable[str]) -> Dict[str, FrozenSet[str]]:
    names = frozenset(names)
    return {n: matching_and_upstream(names, graph, equal_to(n)) for n in names}

"""Reserved sentence names and the rules about where they may appear."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Mapping, Tuple

from .diagnostics import fail
from .graphs import DependencyGraph, equal_to, matching_and_downstream, member_of

logger = logging.getLogger(__name__)


class Placement(Enum):
    # Defined by ground facts only, never by a rule.
    FACTS_ONLY = auto()
    # Never the head of a rule.
    BODY_ONLY = auto()
    # Never referenced from a rule body.
    HEAD_ONLY = auto()
    # Must not depend on any TURN_MARKER name.
    TURN_INDEPENDENT = auto()
    # Changes from one turn to the next.
    TURN_MARKER = auto()
    # Must not depend on any ACTION name.
    ACTION_INDEPENDENT = auto()
    # The moves chosen in the current turn.
    ACTION = auto()


@dataclass(frozen=True, slots=True)
class Keyword:
    name: str
    arity: int
    required: bool = False
    hint: str = ""
    placement: FrozenSet[Placement] = frozenset()


def _kw(name: str, arity: int, hint: str, *placement: Placement, required: bool = False) -> Keyword:
    return Keyword(name=name, arity=arity, required=required, hint=hint, placement=frozenset(placement))


P = Placement

KEYWORDS: Tuple[Keyword, ...] = (
    _kw("role", 1, "argument: the player name", P.FACTS_ONLY, required=True),
    _kw("terminal", 0, "", P.TURN_MARKER, P.ACTION_INDEPENDENT, required=True),
    _kw("goal", 2, "first argument: the player, second argument: integer from 0 to 100",
        P.TURN_MARKER, P.ACTION_INDEPENDENT, required=True),
    _kw("legal", 2, "first argument: the player, second argument: the move",
        P.TURN_MARKER, P.ACTION_INDEPENDENT, required=True),
    _kw("does", 2, "first argument: the player, second argument: the move",
        P.BODY_ONLY, P.TURN_MARKER, P.ACTION),
    _kw("init", 1, "argument: the base truth", P.HEAD_ONLY, P.TURN_INDEPENDENT),
    _kw("true", 1, "argument: the base truth", P.BODY_ONLY, P.TURN_MARKER),
    _kw("next", 1, "argument: the base truth", P.HEAD_ONLY, P.TURN_MARKER),
    _kw("base", 1, "argument: the base truth", P.HEAD_ONLY, P.TURN_INDEPENDENT),
    _kw("input", 2, "first argument: the player, second argument: the move",
        P.HEAD_ONLY, P.TURN_INDEPENDENT),
)

del P


def keyword_names(keywords: Iterable[Keyword] = KEYWORDS) -> FrozenSet[str]:
    return frozenset(k.name for k in keywords)


def with_placement(keywords: Iterable[Keyword], placement: Placement) -> List[str]:
    return [k.name for k in keywords if placement in k.placement]


def _describe(names: List[str]) -> str:
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + ", or " + names[-1]


def check_keyword_arities(
    sentence_arities: Mapping[str, int],
    function_arities: Mapping[str, int],
    keywords: Iterable[Keyword] = KEYWORDS,
) -> None:
    keywords = tuple(keywords)
    for k in keywords:
        seen = sentence_arities.get(k.name)
        if seen is None:
            if k.required:
                what = "proposition" if k.arity == 0 else "relations"
                raise fail("E140", f"No {k.name} {what} found in the game description", k.name)
            continue
        if seen != k.arity:
            if k.arity == 0:
                message = f"'{k.name}' should be a proposition, not a relation"
            else:
                message = f"The {k.name} relation should have arity {k.arity} ({k.hint})"
            raise fail("E141", message, k.name)

    reserved = keyword_names(keywords)
    for name in function_arities:
        if name in reserved:
            raise fail(
                "E142",
                f"The keyword {name} is being used as a function. "
                "It should only be used as the name of a sentence.",
                name,
            )


def check_keyword_locations(
    graph: DependencyGraph,
    sentence_names: Iterable[str],
    keywords: Iterable[Keyword] = KEYWORDS,
) -> None:
    keywords = tuple(keywords)
    sentence_names = frozenset(sentence_names)

    for name in with_placement(keywords, Placement.FACTS_ONLY):
        if name in graph.heads:
            raise fail(
                "E170",
                f"The {name} relation should be defined by ground statements, not by rules.",
                name,
            )
    for name in with_placement(keywords, Placement.BODY_ONLY):
        if name in graph.heads:
            raise fail("E171", f"The {name} relation should never be in the head of a rule.", name)

    head_only = set(with_placement(keywords, Placement.HEAD_ONLY))
    for name in sorted(graph.targets()):
        if name in head_only:
            raise fail("E172", f"The {name} relation should never be in the body of a rule.", name)

    markers = with_placement(keywords, Placement.TURN_MARKER)
    turn_dependent = matching_and_downstream(sentence_names, graph, member_of(markers))
    logger.debug("turn-dependent sentence names: %s", sorted(turn_dependent))
    for name in with_placement(keywords, Placement.TURN_INDEPENDENT):
        if name in turn_dependent:
            raise fail(
                "E173",
                f"A {name} relation should never have a dependency on a {_describe(markers)} sentence.",
                name,
            )

    actions = with_placement(keywords, Placement.ACTION)
    action_dependent: FrozenSet[str] = frozenset()
    for action in actions:
        action_dependent |= matching_and_downstream(sentence_names, graph, equal_to(action))
    for name in with_placement(keywords, Placement.ACTION_INDEPENDENT):
        if name in action_dependent:
            raise fail(
                "E174",
                f"A {name} relation should never have a dependency on a {_describe(actions)} sentence.",
                name,
            )


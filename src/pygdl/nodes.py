from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True, slots=True)
class Constant:
    value: str


@dataclass(frozen=True, slots=True)
class Variable:
    name: str


@dataclass(frozen=True, slots=True)
class Function:
    name: str
    args: Tuple[Term, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True, slots=True)
class Proposition:
    name: str

    @property
    def arity(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Relation:
    name: str
    args: Tuple[Term, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True, slots=True)
class Not:
    body: Literal


@dataclass(frozen=True, slots=True)
class Or:
    disjuncts: Tuple[Literal, ...] = ()


@dataclass(frozen=True, slots=True)
class Distinct:
    left: Term
    right: Term


@dataclass(frozen=True, slots=True)
class Rule:
    head: Sentence
    body: Tuple[Literal, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.body)


@dataclass(frozen=True, slots=True)
class Description:
    """An ordered sequence of top-level items, as produced by a parser.

    Nothing is checked on construction; see `pygdl.validation.validate`.
    """

    items: Tuple[object, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


Term = Union[Constant, Variable, Function]
Sentence = Union[Proposition, Relation]
Literal = Union[Proposition, Relation, Not, Or, Distinct]
Node = Union[Description, Rule, Proposition, Relation, Not, Or, Distinct, Constant, Variable, Function]


def is_ground(t: Term) -> bool:
    match t:
        case Variable():
            return False
        case Function(args=args):
            return all(is_ground(a) for a in args)
    return True


# Ergonomic factories. Plain strings become constants, or variables when
# they start with '?'.

def term(value: Union[Term, str]) -> Term:
    if isinstance(value, str):
        if value.startswith("?"):
            return Variable(value)
        return Constant(value)
    return value


def const(value: str) -> Constant:
    return Constant(value)


def var(name: str) -> Variable:
    return Variable(name)


def func(name: str, *args: Union[Term, str]) -> Function:
    return Function(name=name, args=tuple(term(a) for a in args))


def prop(name: str) -> Proposition:
    return Proposition(name)


def relation(name: str, *args: Union[Term, str]) -> Relation:
    return Relation(name=name, args=tuple(term(a) for a in args))


def sentence(name: str, *args: Union[Term, str]) -> Sentence:
    if not args:
        return Proposition(name)
    return relation(name, *args)


def not_(body: Literal) -> Not:
    return Not(body)


def or_(*disjuncts: Literal) -> Or:
    return Or(disjuncts=tuple(disjuncts))


def distinct(left: Union[Term, str], right: Union[Term, str]) -> Distinct:
    return Distinct(term(left), term(right))


def rule(head: Sentence, *body: Literal) -> Rule:
    return Rule(head=head, body=tuple(body))


def description(*items: object) -> Description:
    return Description(items=tuple(items))


def as_items(items: Union[Description, Iterable[object]]) -> Tuple[object, ...]:
    if isinstance(items, Description):
        return items.items
    return tuple(items)

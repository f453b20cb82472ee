from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from .nodes import (
    Constant,
    Description,
    Distinct,
    Function,
    Literal,
    Node,
    Not,
    Or,
    Proposition,
    Relation,
    Rule,
    Sentence,
    Term,
    Variable,
)


class Visitor:
    """Composition-based visitor using structural pattern matching.

    - Calls `node_cb` for every node, terms included (pre-order)
    - Optionally calls `term_cb` for each term, including the arguments
      nested inside functions
    """

    def __init__(
        self,
        node_cb: Callable[[Node], None],
        term_cb: Optional[Callable[[Term], None]] = None,
    ) -> None:
        self._node_cb = node_cb
        self._term_cb = term_cb

    def visit_all(self, nodes: Iterable[Node]) -> None:
        for n in nodes:
            self.visit(n)

    def visit(self, node: Node) -> None:
        if isinstance(node, (Constant, Variable, Function)):
            self._visit_term(node)
            return
        self._node_cb(node)
        match node:
            case Description(items=items):
                self.visit_all(items)
            case Rule(head=head, body=body):
                self.visit(head)
                self.visit_all(body)
            case Relation(args=args):
                for t in args:
                    self._visit_term(t)
            case Not(body=body):
                self.visit(body)
            case Or(disjuncts=disjuncts):
                self.visit_all(disjuncts)
            case Distinct(left=left, right=right):
                self._visit_term(left)
                self._visit_term(right)

    def _visit_term(self, t: Term) -> None:
        self._node_cb(t)
        if self._term_cb is not None:
            self._term_cb(t)
        if isinstance(t, Function):
            for a in t.args:
                self._visit_term(a)


def sentences_in_literal(lit: Literal, out: Optional[List[Sentence]] = None) -> List[Sentence]:
    """Sentences inside a literal, descending through negations and disjunctions."""
    if out is None:
        out = []
    match lit:
        case Proposition() | Relation():
            out.append(lit)
        case Not(body=body):
            sentences_in_literal(body, out)
        case Or(disjuncts=disjuncts):
            for d in disjuncts:
                sentences_in_literal(d, out)
    return out


def sentences_in_body(r: Rule) -> List[Sentence]:
    out: List[Sentence] = []
    for lit in r.body:
        sentences_in_literal(lit, out)
    return out


def sentences_in_rule(r: Rule) -> List[Sentence]:
    return [r.head, *sentences_in_body(r)]


def variables_in_terms(terms: Iterable[Term], out: Optional[List[Variable]] = None) -> List[Variable]:
    if out is None:
        out = []
    for t in terms:
        match t:
            case Variable():
                out.append(t)
            case Function(args=args):
                variables_in_terms(args, out)
    return out


def functions_in_terms(terms: Iterable[Term], out: Optional[List[Function]] = None) -> List[Function]:
    if out is None:
        out = []
    for t in terms:
        if isinstance(t, Function):
            out.append(t)
            functions_in_terms(t.args, out)
    return out


def sentence_args(s: Sentence):
    if isinstance(s, Relation):
        return s.args
    return ()

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple, Union

from .arities import build_arity_tables, check_name_overlap
from .dependency import build_stratified_graph
from .diagnostics import Diagnostic, ValidationError, fail, warning
from .graphs import ancestors_graph
from .keywords import KEYWORDS, Keyword, check_keyword_arities, check_keyword_locations
from .nodes import Description, Function, Literal, Node, Not, Or, Proposition, Relation, Rule, as_items
from .printer import print_item, print_literal, print_rule, print_term
from .recursion import check_recursion_function_restriction
from .safety import check_rule_safety
from .visitors import Visitor, sentences_in_body

logger = logging.getLogger(__name__)

# Sentence names supplied by the game itself rather than by the rules.
BUILTIN_SENTENCES = ("true", "does")


def validate(
    description: Union[Description, Iterable[object]],
    keywords: Iterable[Keyword] = KEYWORDS,
) -> List[Diagnostic]:
    """Statically validate a parsed game description.

    Returns the warnings found. Raises `ValidationError` on the first fatal
    problem; checks run in a fixed order and later checks rely on the
    tables and graphs built by earlier ones.
    """
    keywords = tuple(keywords)
    diags: List[Diagnostic] = []
    try:
        relations, rules = partition(description, diags)
        check_zero_arities(relations, rules)

        tables = build_arity_tables(relations, rules)
        diags.extend(check_name_overlap(tables))
        check_keyword_arities(tables.sentences, tables.functions, keywords)
        logger.debug(
            "arity tables: %d sentence names, %d function names",
            len(tables.sentences), len(tables.functions),
        )

        for r in rules:
            for lit in r.body:
                check_negation_shape(lit)
        for r in rules:
            check_rule_safety(r)

        names = tables.sentences.keys()
        graph = build_stratified_graph(rules, names)
        check_keyword_locations(graph, names, keywords)

        ancestors = ancestors_graph(graph, names)
        for r in rules:
            check_recursion_function_restriction(r, ancestors)
    except ValidationError as e:
        logger.warning("description rejected: %s: %s", e.code, e)
        raise

    diags.extend(check_defined_sentences(relations, rules))
    logger.info(
        "description accepted: %d relations, %d rules, %d warnings",
        len(relations), len(rules), len(diags),
    )
    return diags


def partition(
    description: Union[Description, Iterable[object]],
    diags: List[Diagnostic],
) -> Tuple[List[Relation], List[Rule]]:
    relations: List[Relation] = []
    rules: List[Rule] = []
    for item in as_items(description):
        match item:
            case Relation():
                relations.append(item)
            case Rule():
                rules.append(item)
            case Proposition():
                diags.append(warning(
                    "W100",
                    f"The rules contain the proposition {item.name}, which may not be intended.",
                    item.name,
                ))
            case _:
                raise fail(
                    "E100",
                    f"The rules include an object of type {type(item).__name__}. "
                    f"Only relations and rules are expected. The object is: {print_item(item)}",
                    item,
                )
    return relations, rules


def check_zero_arities(relations: Sequence[Relation], rules: Sequence[Rule]) -> None:
    def on_node(node: Node) -> None:
        match node:
            case Function(arity=0):
                raise fail(
                    "E110",
                    f"{print_term(node)} is written as a zero-arity function; "
                    "it should be written as a constant instead. (Try dropping the parentheses.)",
                    node,
                )
            case Relation(arity=0):
                raise fail(
                    "E111",
                    f"{print_literal(node)} is written as a zero-arity relation; "
                    "it should be written as a proposition instead. (Try dropping the parentheses.)",
                    node,
                )
            case Rule(arity=0):
                raise fail(
                    "E112",
                    f"{print_rule(node)} is written as a zero-arity rule; "
                    "if it's always supposed to be true, it should be written as a relation instead. "
                    "Otherwise, check your parentheses.",
                    node,
                )

    visitor = Visitor(on_node)
    visitor.visit_all(relations)
    visitor.visit_all(rules)


def check_negation_shape(lit: Literal) -> None:
    match lit:
        case Not(body=Proposition() | Relation()):
            return
        case Not(body=body):
            raise fail(
                "E120",
                f"The negation {print_literal(lit)} contains a literal {print_literal(body)} "
                "that is not a sentence. Only a single sentence is allowed inside a negation.",
                lit,
            )
        case Or(disjuncts=disjuncts):
            for d in disjuncts:
                check_negation_shape(d)


def check_defined_sentences(relations: Sequence[Relation], rules: Sequence[Rule]) -> List[Diagnostic]:
    defined = set(BUILTIN_SENTENCES)
    defined.update(rel.name for rel in relations)
    defined.update(r.head.name for r in rules)

    referenced = set()
    for r in rules:
        referenced.update(s.name for s in sentences_in_body(r))

    return [
        warning(
            "W190",
            f"A rule references the sentence name {name}, but no sentence with that name is defined",
            name,
        )
        for name in sorted(referenced - defined)
    ]

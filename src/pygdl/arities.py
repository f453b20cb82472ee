from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .diagnostics import Diagnostic, fail, warning
from .nodes import Relation, Rule, Sentence
from .printer import print_literal
from .visitors import functions_in_terms, sentence_args, sentences_in_rule


@dataclass
class ArityTables:
    """Fixed arities of sentence names and of function names.

    The two live in separate namespaces; a name in both is only suspicious.
    """

    sentences: Dict[str, int] = field(default_factory=dict)
    functions: Dict[str, int] = field(default_factory=dict)

    def add_sentence(self, s: Sentence) -> None:
        prev = self.sentences.get(s.name)
        if prev is None:
            self.sentences[s.name] = s.arity
        elif prev != s.arity:
            raise fail(
                "E130",
                f"The sentence with the name {s.name} appears with two different arities, "
                f"{s.arity} and {prev}: {print_literal(s)}",
                s.name,
            )

    def add_functions(self, s: Sentence) -> None:
        for fn in functions_in_terms(sentence_args(s)):
            prev = self.functions.get(fn.name)
            if prev is None:
                self.functions[fn.name] = fn.arity
            elif prev != fn.arity:
                raise fail(
                    "E131",
                    f"The function with the name {fn.name} appears with two different arities, "
                    f"{fn.arity} and {prev}",
                    fn.name,
                )

    def add(self, s: Sentence) -> None:
        self.add_sentence(s)
        self.add_functions(s)


def build_arity_tables(relations: Sequence[Relation], rules: Sequence[Rule]) -> ArityTables:
    tables = ArityTables()
    for rel in relations:
        tables.add(rel)
    for r in rules:
        for s in sentences_in_rule(r):
            tables.add(s)
    return tables


def check_name_overlap(tables: ArityTables) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for name in tables.sentences:
        if name in tables.functions:
            diags.append(warning(
                "W130",
                f"The constant {name} is used as both a sentence name and as a function name. "
                "This is probably unintended. Are you using 'true' correctly?",
                name,
            ))
    return diags

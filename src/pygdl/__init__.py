"""pygdl: static validation of game description logic programs."""

from .nodes import (
    Description,
    Rule,
    Proposition,
    Relation,
    Not,
    Or,
    Distinct,
    Term,
    Variable,
    Constant,
    Function,
    const,
    var,
    func,
    prop,
    relation,
    sentence,
    not_,
    or_,
    distinct,
    rule,
    description,
)
from .diagnostics import Diagnostic, Severity, ValidationError, format_diagnostic
from .keywords import KEYWORDS, Keyword, Placement
from .printer import print_description
from .validation import validate
from .parens import check_validity, match_parentheses
from .visitors import Visitor
__all__ = [
    "Description",
    "Rule",
    "Proposition",
    "Relation",
    "Not",
    "Or",
    "Distinct",
    "Term",
    "Variable",
    "Constant",
    "Function",
    "const",
    "var",
    "func",
    "prop",
    "relation",
    "sentence",
    "not_",
    "or_",
    "distinct",
    "rule",
    "description",
    "Diagnostic",
    "Severity",
    "ValidationError",
    "format_diagnostic",
    "KEYWORDS",
    "Keyword",
    "Placement",
    "print_description",
    "validate",
    "check_validity",
    "match_parentheses",
    "Visitor",
]

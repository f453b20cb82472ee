"""Text-level checks run on a rulesheet before it is parsed."""

from __future__ import annotations

import re
from typing import Iterable, List, Union

from .diagnostics import Diagnostic, fail
from .keywords import KEYWORDS, Keyword
from .nodes import Description
from .validation import validate


def match_parentheses(lines: Iterable[str]) -> None:
    """Raise `ValidationError` naming the line of an unmatched parenthesis.

    Lines are numbered from 1. Anything after ';' is a comment.
    """
    opened: List[int] = []
    for line_number, line in enumerate(lines, start=1):
        for c in line:
            if c == "(":
                opened.append(line_number)
            elif c == ")":
                if not opened:
                    raise fail(
                        "E010",
                        f"Extra close parens encountered at line {line_number}\nLine: {line}",
                        line_number,
                    )
                opened.pop()
            elif c == ";":
                break
    if opened:
        raise fail("E011", f"Extra open parens encountered, starting at line {opened[-1]}", opened[-1])


def check_validity(
    rulesheet: str,
    description: Union[Description, Iterable[object]],
    keywords: Iterable[Keyword] = KEYWORDS,
) -> List[Diagnostic]:
    match_parentheses(re.split(r"[\r\n]", rulesheet))
    return validate(description, keywords)

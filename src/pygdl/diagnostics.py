from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class Severity(Enum):
    ERROR = auto()
    WARNING = auto()


@dataclass(frozen=True, slots=True)
class Related:
    message: str
    subject: Optional[object] = None


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single finding about a description.

    `subject` is the offending construct: a sentence or function name, a
    term, a literal or a rule, whichever the check is about.
    """

    code: str
    message: str
    severity: Severity = Severity.ERROR
    subject: Optional[object] = None
    related: Tuple[Related, ...] = ()

    def with_related(self, *rels: Related) -> "Diagnostic":
        return Diagnostic(
            code=self.code,
            message=self.message,
            severity=self.severity,
            subject=self.subject,
            related=tuple(list(self.related) + list(rels)),
        )

    def __str__(self) -> str:
        return self.message


def warning(code: str, message: str, subject: Optional[object] = None) -> Diagnostic:
    return Diagnostic(code=code, message=message, severity=Severity.WARNING, subject=subject)


class ValidationError(Exception):
    """Raised on the first fatal problem found in a description."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def subject(self) -> Optional[object]:
        return self.diagnostic.subject


def fail(code: str, message: str, subject: Optional[object] = None, *related: Related) -> ValidationError:
    return ValidationError(Diagnostic(code=code, message=message, subject=subject).with_related(*related))


def format_diagnostic(d: Diagnostic) -> str:
    lines = [f"{d.severity.name}: {d.code}: {d.message}"]
    for r in d.related:
        lines.append(f"  note: {r.message}")
    return "\n".join(lines)

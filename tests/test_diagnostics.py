from pygdl import Diagnostic, Severity, ValidationError, format_diagnostic
from pygdl.diagnostics import Related, fail, warning


def test_format_with_notes():
    d = Diagnostic(code="E160", message="negative cycle").with_related(Related("p depends on q"))
    assert format_diagnostic(d) == "ERROR: E160: negative cycle\n  note: p depends on q"


def test_warning_helper():
    d = warning("W190", "undefined", "switch")
    assert d.severity is Severity.WARNING
    assert d.subject == "switch"
    assert str(d) == "undefined"


def test_fail_builds_a_raisable_error():
    err = fail("E150", "unsafe", "?x", Related("bound nowhere"))
    assert isinstance(err, ValidationError)
    assert err.code == "E150"
    assert err.subject == "?x"
    assert err.diagnostic.related == (Related("bound nowhere"),)
    assert str(err) == "unsafe"

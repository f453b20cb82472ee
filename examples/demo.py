import sys, os
import logging

# Adjust python path to include src
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pygdl import (
    ValidationError,
    check_validity,
    distinct,
    format_diagnostic,
    func,
    not_,
    print_description,
    prop,
    relation,
    rule,
)

RULESHEET = """
(role white) (role black)
(init (control white))
(<= (legal ?p noop) (role ?p) (not (true (control ?p))))
(<= (legal ?p push) (true (control ?p)))
(<= (next (control ?q)) (true (control ?p)) (role ?q) (distinct ?p ?q))
(<= (goal ?p 100) (true (control ?p)))
(<= (goal ?p 0) (role ?p) (not (true (control ?p))))
(<= terminal (does ?p push) (true (pushed)))  ; never reached
"""


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # The parsed form of RULESHEET, minus the terminal rule, which depends on does
    game = [
        relation("role", "white"),
        relation("role", "black"),
        relation("init", func("control", "white")),
        rule(relation("legal", "?p", "noop"), relation("role", "?p"), not_(relation("true", func("control", "?p")))),
        rule(relation("legal", "?p", "push"), relation("true", func("control", "?p"))),
        rule(
            relation("next", func("control", "?q")),
            relation("true", func("control", "?p")),
            relation("role", "?q"),
            distinct("?p", "?q"),
        ),
        rule(relation("goal", "?p", "100"), relation("true", func("control", "?p"))),
        rule(relation("goal", "?p", "0"), relation("role", "?p"), not_(relation("true", func("control", "?p")))),
        rule(prop("terminal"), relation("true", "pushed")),
        relation("control", "white"),
    ]

    print("--- Game Description ---")
    print(print_description(game))

    print("\n--- Validation ---")
    for d in check_validity(RULESHEET, game):
        print(format_diagnostic(d))

    bad = game + [rule(relation("legal", "?p", "wait"), relation("does", "?p", "push"))]
    try:
        check_validity(RULESHEET, bad)
    except ValidationError as e:
        print(format_diagnostic(e.diagnostic))


if __name__ == "__main__":
    main()

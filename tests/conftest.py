import pytest

from pygdl import prop, relation, rule


def button_game():
    # One player presses a button once; the game ends when the light is on.
    return [
        relation("role", "robot"),
        relation("init", "off"),
        rule(relation("legal", "robot", "press"), relation("true", "off")),
        rule(relation("next", "on"), relation("does", "robot", "press")),
        rule(relation("goal", "robot", "100"), relation("true", "on")),
        rule(prop("terminal"), relation("true", "on")),
    ]


@pytest.fixture
def game():
    return button_game()

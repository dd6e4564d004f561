"""Unit tests for key bindings."""

from __future__ import annotations

import curses

import pytest

from invaders.app.keys import Command, command_for_key

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("key,expected", [
    ("q", Command.QUIT),
    (3, Command.QUIT),
    ("a", Command.MOVE_LEFT),
    (curses.KEY_LEFT, Command.MOVE_LEFT),
    ("d", Command.MOVE_RIGHT),
    (curses.KEY_RIGHT, Command.MOVE_RIGHT),
    (" ", Command.SHOOT),
    ("\n", Command.SHOOT),
    (curses.KEY_ENTER, Command.SHOOT),
    ("r", Command.RESTART),
])
def test_bound_keys(key, expected):
    assert command_for_key(key) is expected


def test_int_and_char_agree():
    assert command_for_key(ord("d")) is command_for_key("d")


@pytest.mark.parametrize("key", ["x", "Q", "", "ab", -1, curses.KEY_UP])
def test_unbound_keys(key):
    assert command_for_key(key) is None

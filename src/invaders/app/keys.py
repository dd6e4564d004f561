"""Key bindings - raw curses key codes to player commands."""

from __future__ import annotations

import curses
from enum import Enum


class Command(Enum):
    """Everything the player can ask for."""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SHOOT = "shoot"
    RESTART = "restart"
    QUIT = "quit"


_CTRL_C = 3

KEY_BINDINGS: dict[int, Command] = {
    ord("q"): Command.QUIT,
    _CTRL_C: Command.QUIT,
    ord("a"): Command.MOVE_LEFT,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    ord("d"): Command.MOVE_RIGHT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord(" "): Command.SHOOT,
    ord("\n"): Command.SHOOT,
    ord("\r"): Command.SHOOT,
    curses.KEY_ENTER: Command.SHOOT,
    ord("r"): Command.RESTART,
}


def command_for_key(key: int | str) -> Command | None:
    """Map a key (curses int code or single character) to a Command."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return KEY_BINDINGS.get(key)

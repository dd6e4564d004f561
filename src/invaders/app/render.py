"""Terminal renderer - per-frame projection of a Snapshot onto curses.

The play area is rebuilt from the snapshot every frame as a numpy array of
single characters; nothing here is kept between frames.  Layers are painted
in order enemies, bullets, player, so the player wins a shared cell.

Screen layout (same coordinates as the simulation):

  row 0           status line (score, enemies, level, controls)
  rows 1..h-2     play area
  row h-1         progress gauge

A terminal session gets a centred box with the result and restart hint.
"""

from __future__ import annotations

import curses

import numpy as np

from invaders.simulation.state import Snapshot

ENEMY_CHAR = "#"
BULLET_CHAR = "|"
PLAYER_CHAR = "^"
EMPTY_CHAR = " "

# curses color pair ids
PAIR_ENEMY = 1
PAIR_BULLET = 2
PAIR_PLAYER = 3
PAIR_HUD = 4

_CHAR_PAIRS = {
    ENEMY_CHAR: PAIR_ENEMY,
    BULLET_CHAR: PAIR_BULLET,
    PLAYER_CHAR: PAIR_PLAYER,
}

CONTROLS_HINT = "(q: quit, space: shoot, a/d or ←/→: move)"

_OVERLAY_WIDTH = 40


def project_grid(snapshot: Snapshot) -> np.ndarray:
    """Character grid of shape (height, width) for the current frame."""
    height = max(0, snapshot.height)
    width = max(0, snapshot.width)
    grid = np.full((height, width), EMPTY_CHAR, dtype="<U1")

    layers = (
        (snapshot.enemies, ENEMY_CHAR),
        (snapshot.bullets, BULLET_CHAR),
        ((snapshot.player,), PLAYER_CHAR),
    )
    for positions, char in layers:
        for p in positions:
            if 0 <= p.x < width and 0 <= p.y < height:
                grid[p.y, p.x] = char
    return grid


def status_line(snapshot: Snapshot, banner: str | None = None) -> str:
    parts = [
        f" Score: {snapshot.score}",
        f"Enemies: {snapshot.enemies_remaining}",
        f"Level: {snapshot.level}",
    ]
    if banner:
        parts.append(f"** {banner} **")
    parts.append(CONTROLS_HINT)
    return "  ".join(parts)


def gauge(ratio: float, width: int) -> str:
    """Text progress bar such as ``[#####-----]  50%`` fitted to *width*."""
    ratio = max(0.0, min(1.0, ratio))
    label = f" {int(ratio * 100):3d}%"
    bar_width = max(0, width - len(label) - 2)
    filled = int(round(bar_width * ratio))
    return "[" + "#" * filled + "-" * (bar_width - filled) + "]" + label


def overlay_lines(snapshot: Snapshot) -> list[str]:
    """Result box text for a terminal session, empty otherwise."""
    if not snapshot.is_terminal:
        return []
    title = "YOU WIN!" if snapshot.victory else "GAME OVER"
    return [
        title,
        f"Final score: {snapshot.score}",
        "Press 'r' to restart or 'q' to quit.",
    ]


def init_colors() -> None:
    """Register the color pairs used by ``draw``.  Needs an active screen."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_ENEMY, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_BULLET, curses.COLOR_YELLOW, -1)
    curses.init_pair(PAIR_PLAYER, curses.COLOR_CYAN, -1)
    curses.init_pair(PAIR_HUD, curses.COLOR_GREEN, -1)


def draw(stdscr, snapshot: Snapshot, banner: str | None = None) -> None:
    """Paint one frame."""
    stdscr.erase()
    rows, cols = stdscr.getmaxyx()
    grid = project_grid(snapshot)

    for y in range(min(rows, grid.shape[0])):
        for x in np.flatnonzero(grid[y] != EMPTY_CHAR):
            if x >= cols:
                break
            char = str(grid[y, x])
            attr = curses.color_pair(_CHAR_PAIRS[char]) | curses.A_BOLD
            _put(stdscr, y, int(x), char, attr)

    _put(stdscr, 0, 0, status_line(snapshot, banner)[:cols], curses.color_pair(PAIR_HUD))
    if rows > 1:
        _put(stdscr, rows - 1, 0, gauge(snapshot.progress, cols - 1), curses.color_pair(PAIR_HUD))

    lines = overlay_lines(snapshot)
    if lines:
        _draw_overlay(stdscr, rows, cols, lines)

    stdscr.refresh()


def _draw_overlay(stdscr, rows: int, cols: int, lines: list[str]) -> None:
    box_w = min(cols, _OVERLAY_WIDTH)
    box_h = len(lines) + 2
    top = max(0, rows // 2 - box_h // 2)
    left = max(0, cols // 2 - box_w // 2)
    inner = max(0, box_w - 2)

    attr = curses.A_BOLD
    _put(stdscr, top, left, "+" + "-" * inner + "+", attr)
    for i, text in enumerate(lines):
        _put(stdscr, top + 1 + i, left, "|" + text[:inner].center(inner) + "|", attr)
    _put(stdscr, top + box_h - 1, left, "+" + "-" * inner + "+", attr)


def _put(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell or past a shrunk edge; skip the cell
        pass

"""Formation - enemy grid layout and lockstep movement.

Layout
------
A wave is a ``rows x cols`` grid hung from the top of the play area:

  - 2-column margin on the left and right edges
  - horizontal spacing = usable_width // (cols + 1), minimum 1
  - first row at y=2, one blank row between rows

Cells that would land outside ``[margin, width-1) x [0, height-2)`` are
dropped, not clamped, so a small terminal can produce fewer enemies than
``rows * cols`` (or none at all).

Movement
--------
The formation moves as one rigid body.  A step either shifts every enemy one
column in the current direction, or, when any enemy would touch the side
walls, drops every enemy one row and reverses direction.  A lateral shift and
a descent never happen in the same step.
"""

from __future__ import annotations

from typing import Iterable

from .position import Position

SIDE_MARGIN = 2
TOP_ROW = 2
ROW_SPACING = 2


def spawn_formation(width: int, height: int, rows: int, cols: int) -> list[Position]:
    """Return the enemy positions of a fresh wave, in row-major order."""
    usable_w = max(0, width - 2 * SIDE_MARGIN)
    spacing_x = max(1, usable_w // (cols + 1))

    enemies: list[Position] = []
    for row in range(rows):
        for col in range(cols):
            x = SIDE_MARGIN + spacing_x * (col + 1)
            y = TOP_ROW + row * ROW_SPACING
            if x < width - 1 and y < height - 2:
                enemies.append(Position(x, y))
    return enemies


def hits_side(enemies: Iterable[Position], direction: int, width: int) -> bool:
    """True if shifting by *direction* would put any enemy on a wall column."""
    return any(
        e.x + direction <= 1 or e.x + direction >= width - 2
        for e in enemies
    )


def step_formation(
    enemies: list[Position], direction: int, width: int,
) -> tuple[list[Position], int, bool]:
    """Advance the formation one step.

    Returns ``(new_enemies, new_direction, descended)``.
    """
    if hits_side(enemies, direction, width):
        return [e.shifted(dy=1) for e in enemies], -direction, True
    return [e.shifted(dx=direction) for e in enemies], direction, False

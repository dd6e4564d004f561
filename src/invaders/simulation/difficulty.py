"""Difficulty - wave growth, cadence shrink, and the progress estimate.

Two independent rules make the formation faster over a session:

  - per level: every cleared wave shrinks the cadence by one tick
    (``shrink_cadence``), applied inside the engine's tick
  - per kill count: whenever the kill total sits on a multiple of the
    speedup threshold (``speedup_due``), the driver shrinks the cadence by
    one tick after the tick returns

Both floor at 1 tick and are kept separate on purpose; they compound.

Wave size alternates growth: even levels add a row, odd levels add a column,
each capped.
"""

from __future__ import annotations

MAX_ROWS = 6
MAX_COLS = 12
MIN_CADENCE = 1

# Extra kills budgeted per level in the progress denominator
_PROGRESS_PER_LEVEL = 2


def next_formation_size(level: int, rows: int, cols: int) -> tuple[int, int]:
    """Formation size for a wave that starts at *level*."""
    if level % 2 == 0:
        return min(rows + 1, MAX_ROWS), cols
    return rows, min(cols + 1, MAX_COLS)


def shrink_cadence(cadence: int) -> int:
    return max(MIN_CADENCE, cadence - 1)


def speedup_due(kills: int, every_kills: int) -> bool:
    """True when the kill-count speedup rule fires for this kill total."""
    return kills > 0 and every_kills > 0 and kills % every_kills == 0


def progress_ratio(kills: int, rows: int, cols: int, level: int) -> float:
    """Rough completion ratio for the HUD gauge, clamped to [0, 1].

    The denominator is an estimate (current formation size plus a small
    per-level allowance), not the true number of enemies spawned so far.
    """
    expected = max(1, rows * cols + (level - 1) * _PROGRESS_PER_LEVEL)
    return max(0.0, min(1.0, kills / expected))

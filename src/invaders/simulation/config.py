"""GameConfig - immutable per-session tuning for the simulation.

A session keeps the same GameConfig from creation until restart, when it is
replaced wholesale.  Every field is an integer count or interval, and a zero
or negative value has no meaningful interpretation (a cadence of 0 ticks, a
speedup every 0 kills), so values are clamped to a minimum of 1 at
construction instead of being rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# Defaults for a standard terminal session
DEFAULT_TICK_MS = 100
DEFAULT_ENEMY_ROWS = 3
DEFAULT_ENEMY_COLS = 6
DEFAULT_MOVE_EVERY_TICKS = 6
DEFAULT_SPEEDUP_EVERY_KILLS = 5


@dataclass(frozen=True)
class GameConfig:
    """Tick interval, starting formation size and the two speed knobs."""

    tick_ms: int = DEFAULT_TICK_MS
    initial_enemy_rows: int = DEFAULT_ENEMY_ROWS
    initial_enemy_cols: int = DEFAULT_ENEMY_COLS
    enemy_move_every_ticks: int = DEFAULT_MOVE_EVERY_TICKS
    enemy_speedup_every_kills: int = DEFAULT_SPEEDUP_EVERY_KILLS

    def __post_init__(self) -> None:
        for f in fields(self):
            value = int(getattr(self, f.name))
            object.__setattr__(self, f.name, max(1, value))

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

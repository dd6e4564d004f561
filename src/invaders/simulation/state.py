"""GameState (mutable session state) and Snapshot (read-only view)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import GameConfig
from .position import Position


def player_start(width: int, height: int) -> Position:
    return Position(width // 2, max(0, height - 3))


@dataclass
class GameState:
    """Everything that changes during a session.

    Owned by exactly one SimulationEngine; only the engine mutates it.
    """

    width: int
    height: int
    player: Position
    bullets: list[Position] = field(default_factory=list)
    enemies: list[Position] = field(default_factory=list)
    score: int = 0
    kills: int = 0
    tick_count: int = 0
    enemy_tick_acc: int = 0
    enemy_move_every_ticks: int = 1
    enemy_direction: int = 1
    spawn_rows: int = 1
    spawn_cols: int = 1
    level: int = 1
    game_over: bool = False
    victory: bool = False

    @classmethod
    def fresh(cls, width: int, height: int, config: GameConfig) -> GameState:
        """State for a brand-new session (no enemies spawned yet)."""
        return cls(
            width=width,
            height=height,
            player=player_start(width, height),
            enemy_move_every_ticks=config.enemy_move_every_ticks,
            spawn_rows=config.initial_enemy_rows,
            spawn_cols=config.initial_enemy_cols,
        )

    @property
    def is_terminal(self) -> bool:
        return self.game_over or self.victory


@dataclass(frozen=True)
class Snapshot:
    """Immutable per-frame copy of the state a renderer needs."""

    width: int
    height: int
    player: Position
    bullets: tuple[Position, ...]
    enemies: tuple[Position, ...]
    score: int
    kills: int
    level: int
    game_over: bool
    victory: bool
    progress: float

    @property
    def enemies_remaining(self) -> int:
        return len(self.enemies)

    @property
    def is_terminal(self) -> bool:
        return self.game_over or self.victory

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "player": self.player.to_dict(),
            "bullets": [b.to_dict() for b in self.bullets],
            "enemies": [e.to_dict() for e in self.enemies],
            "enemies_remaining": self.enemies_remaining,
            "score": self.score,
            "kills": self.kills,
            "level": self.level,
            "game_over": self.game_over,
            "victory": self.victory,
            "progress": self.progress,
        }

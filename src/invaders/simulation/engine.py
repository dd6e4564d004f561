"""SimulationEngine - fixed-step tick, player commands, and wave lifecycle.

Architecture
------------
The engine is the single owner of a GameState.  Nothing else mutates it:
the driver calls commands and ``tick()``, the renderer reads ``snapshot()``.

Tick order (each step depends on the previous one):

  1. counters     - tick_count and the formation accumulator advance
  2. bullets      - climb one row, leave through the top edge
  3. collisions   - bullets kill enemies on the same cell (combat.py)
  4. wave clear   - empty formation -> level up, grow, speed up, respawn
  5. formation    - lockstep shift or descend once the cadence is reached
  6. loss         - any enemy on or below the player's row ends the game

A terminal session (game over or victory) ignores ``tick()`` entirely until
``reset()``.

Two rules live outside ``tick()`` because the driver applies them after each
tick returns: the kill-count speedup (``speed_up()``) and the empty-set
victory (``declare_victory()``).  They are exposed here so the state stays
encapsulated.

Events published on the optional EventBus:
  - ``shot_fired``: bullet appended
  - ``enemy_destroyed``: one per killed enemy
  - ``wave_complete``: formation cleared, next wave spawned
  - ``formation_descended``: formation hit a wall and dropped a row
  - ``game_over``: result is "defeat" or "victory"
  - ``game_reset``: session reinitialised
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from .combat import advance_bullets, can_fire, muzzle_position, resolve_hits
from .config import GameConfig
from .difficulty import next_formation_size, progress_ratio, shrink_cadence
from .formation import spawn_formation, step_formation
from .position import Position
from .state import GameState, Snapshot, player_start

if TYPE_CHECKING:
    from invaders.comms.event_bus import EventBus


class SimulationEngine:
    """Owns one session's GameState and advances it one tick at a time."""

    def __init__(
        self,
        width: int,
        height: int,
        config: GameConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._event_bus = event_bus
        self.state = GameState.fresh(width, height, self._config)
        self.spawn_enemies()
        logger.info(
            f"Session created: {width}x{height}, "
            f"{len(self.state.enemies)} enemies in wave 1"
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    # -- Lifecycle ----------------------------------------------------------

    def reset(self, config: GameConfig | None = None) -> None:
        """Reinitialise every mutable field and spawn the first wave.

        Keeps the current play-area size.  With no argument the session's
        existing configuration is reused.
        """
        if config is not None:
            self._config = config
        s = self.state
        self.state = GameState.fresh(s.width, s.height, self._config)
        self.spawn_enemies()
        logger.info("Session reset")
        self._publish("game_reset", {"enemies": len(self.state.enemies)})

    def spawn_enemies(self) -> None:
        """Replace the enemy set with a fresh formation for the current size."""
        s = self.state
        s.enemies = spawn_formation(s.width, s.height, s.spawn_rows, s.spawn_cols)
        logger.debug(
            f"Spawned {len(s.enemies)} enemies "
            f"({s.spawn_rows}x{s.spawn_cols}) for level {s.level}"
        )

    def resize(self, width: int, height: int) -> None:
        """Adopt a new play-area size.

        Only the player is moved (back onto its row and inside the side
        walls); enemies and bullets keep their old coordinates.
        """
        s = self.state
        s.width = width
        s.height = height
        start = player_start(width, height)
        x = min(max(1, s.player.x), max(1, width - 2))
        s.player = Position(x, start.y)

    # -- Tick ---------------------------------------------------------------

    def tick(self) -> None:
        """Advance the simulation by one step.  No-op in a terminal state."""
        s = self.state
        if s.is_terminal:
            return

        s.tick_count += 1
        s.enemy_tick_acc += 1

        s.bullets = advance_bullets(s.bullets)

        report = resolve_hits(s.bullets, s.enemies)
        if report.kills:
            s.enemies = report.survivors
            s.score += report.points
            s.kills += report.kills
            for pos in report.destroyed:
                self._publish("enemy_destroyed", {
                    "position": pos.to_dict(),
                    "score": s.score,
                    "kills": s.kills,
                })

        if not s.enemies:
            self._on_wave_complete()

        if s.enemy_tick_acc >= s.enemy_move_every_ticks:
            s.enemy_tick_acc = 0
            s.enemies, s.enemy_direction, descended = step_formation(
                s.enemies, s.enemy_direction, s.width,
            )
            if descended:
                logger.debug(f"Formation descended at tick {s.tick_count}")
                self._publish("formation_descended", {
                    "direction": s.enemy_direction,
                    "lowest_row": max((e.y for e in s.enemies), default=0),
                })

        if any(e.y >= s.player.y for e in s.enemies):
            s.game_over = True
            logger.info(f"Game over at level {s.level}, score {s.score}")
            self._publish_game_over("defeat")

    def _on_wave_complete(self) -> None:
        s = self.state
        s.level += 1
        s.spawn_rows, s.spawn_cols = next_formation_size(
            s.level, s.spawn_rows, s.spawn_cols,
        )
        s.enemy_move_every_ticks = shrink_cadence(s.enemy_move_every_ticks)
        self.spawn_enemies()
        logger.info(
            f"Wave cleared: level {s.level}, formation "
            f"{s.spawn_rows}x{s.spawn_cols}, cadence {s.enemy_move_every_ticks}"
        )
        self._publish("wave_complete", {
            "level": s.level,
            "rows": s.spawn_rows,
            "cols": s.spawn_cols,
            "cadence": s.enemy_move_every_ticks,
            "enemies": len(s.enemies),
        })

    # -- Post-tick rules (applied by the driver) -----------------------------

    def speed_up(self) -> None:
        """Shrink the formation cadence by one tick (floor 1)."""
        self.state.enemy_move_every_ticks = shrink_cadence(
            self.state.enemy_move_every_ticks
        )

    def declare_victory(self) -> None:
        s = self.state
        if s.victory:
            return
        s.victory = True
        logger.info(f"Victory at level {s.level}, score {s.score}")
        self._publish_game_over("victory")

    # -- Player commands ----------------------------------------------------

    def shoot(self) -> bool:
        """Fire from the player's column.  Returns True if a bullet was added."""
        s = self.state
        if s.is_terminal or not can_fire(s.bullets):
            return False
        bullet = muzzle_position(s.player)
        s.bullets.append(bullet)
        self._publish("shot_fired", {"position": bullet.to_dict()})
        return True

    def move_left(self) -> None:
        s = self.state
        if s.player.x > 1:
            s.player = s.player.shifted(dx=-1)

    def move_right(self) -> None:
        s = self.state
        if s.player.x < max(0, s.width - 2):
            s.player = s.player.shifted(dx=1)

    # -- Queries ------------------------------------------------------------

    def enemies_remaining(self) -> int:
        return len(self.state.enemies)

    def progress(self) -> float:
        s = self.state
        return progress_ratio(s.kills, s.spawn_rows, s.spawn_cols, s.level)

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            width=s.width,
            height=s.height,
            player=s.player,
            bullets=tuple(s.bullets),
            enemies=tuple(s.enemies),
            score=s.score,
            kills=s.kills,
            level=s.level,
            game_over=s.game_over,
            victory=s.victory,
            progress=self.progress(),
        )

    def get_state(self) -> dict:
        """Return serializable game state."""
        return self.snapshot().to_dict()

    # -- Event publishing ---------------------------------------------------

    def _publish_game_over(self, result: str) -> None:
        s = self.state
        self._publish("game_over", {
            "result": result,
            "final_score": s.score,
            "level": s.level,
            "kills": s.kills,
        })

    def _publish(self, event_type: str, data: dict) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, data)

"""DriverLoop - fixed-cadence ticking, command gating, and post-tick rules.

The driver sits between the terminal and the SimulationEngine:

  - ``timeout()`` tells the input wait how long it may block before the next
    tick is due
  - ``handle()`` applies a player command, refusing everything except
    restart and quit while the session is terminal (and restart while it
    is not)
  - ``advance()`` runs ``engine.tick()`` once the tick interval has elapsed
    and then applies the two post-tick rules: the kill-count speedup and
    the empty-formation victory

The clock is injectable so tests can step time by hand.
"""

from __future__ import annotations

import time
from typing import Callable

from loguru import logger

from invaders.comms.event_bus import EventBus
from invaders.simulation.config import GameConfig
from invaders.simulation.difficulty import speedup_due
from invaders.simulation.engine import SimulationEngine

from .keys import Command

# Ticks a wave banner stays on screen
_BANNER_TICKS = 15

_BANNER_EVENTS = ("wave_complete", "game_reset")


class DriverLoop:
    """Owns the engine and decides when it ticks."""

    def __init__(
        self,
        width: int,
        height: int,
        config: GameConfig,
        clock: Callable[[], float] = time.monotonic,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self._clock = clock
        self.event_bus = event_bus or EventBus()
        self._banner_sub = self.event_bus.subscribe(_BANNER_EVENTS)
        self.engine = SimulationEngine(width, height, config, event_bus=self.event_bus)
        self.last_tick = clock()
        self.banner: str | None = None
        self._banner_ticks = 0

    @property
    def tick_interval(self) -> float:
        return self.config.tick_seconds

    def timeout(self) -> float:
        """Seconds until the next tick is due, never negative."""
        elapsed = self._clock() - self.last_tick
        return max(0.0, self.tick_interval - elapsed)

    def handle(self, command: Command | None) -> bool:
        """Apply *command*.  Returns False when the player asked to quit."""
        if command is None:
            return True
        if command is Command.QUIT:
            logger.info("Quit requested")
            return False

        terminal = self.engine.is_terminal
        if command is Command.RESTART:
            if terminal:
                logger.info("Restarting session")
                self.engine.reset(self.config)
            return True
        if terminal:
            return True

        if command is Command.MOVE_LEFT:
            self.engine.move_left()
        elif command is Command.MOVE_RIGHT:
            self.engine.move_right()
        elif command is Command.SHOOT:
            self.engine.shoot()
        return True

    def advance(self) -> bool:
        """Tick if the interval has elapsed.  Returns True if a tick ran."""
        now = self._clock()
        if now - self.last_tick < self.tick_interval:
            return False
        self.step()
        self.last_tick = now
        return True

    def step(self) -> None:
        """One tick plus the post-tick rules, regardless of wall time."""
        engine = self.engine
        if engine.is_terminal:
            return
        engine.tick()

        state = engine.state
        if speedup_due(state.kills, self.config.enemy_speedup_every_kills):
            engine.speed_up()
        if not state.enemies:
            engine.declare_victory()

        self._update_banner()

    def resize(self, width: int, height: int) -> None:
        logger.debug(f"Resize to {width}x{height}")
        self.engine.resize(width, height)

    def _update_banner(self) -> None:
        for msg in EventBus.drain(self._banner_sub):
            if msg["type"] == "wave_complete":
                self.banner = f"WAVE {msg['data']['level']}"
                self._banner_ticks = _BANNER_TICKS
            elif msg["type"] == "game_reset":
                self.banner = None
                self._banner_ticks = 0
        if self._banner_ticks > 0:
            self._banner_ticks -= 1
            if self._banner_ticks == 0:
                self.banner = None

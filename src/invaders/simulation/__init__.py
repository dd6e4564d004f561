"""Invaders simulation - deterministic tick engine for the formation shooter.

Package layout:
  position.py   - Position value type (column, row)
  config.py     - GameConfig (per-session tuning, normalised to >= 1)
  state.py      - GameState (mutable session) and Snapshot (read-only view)
  formation.py  - wave layout and lockstep formation movement
  combat.py     - bullet flight and hit resolution
  difficulty.py - wave growth, cadence shrink, progress estimate
  engine.py     - SimulationEngine (tick order, commands, lifecycle)
"""

from .config import GameConfig
from .engine import SimulationEngine
from .position import Position
from .state import GameState, Snapshot

__all__ = ["GameConfig", "GameState", "Position", "SimulationEngine", "Snapshot"]

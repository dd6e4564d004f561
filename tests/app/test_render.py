"""Unit tests for the per-frame projection and HUD text."""

from __future__ import annotations

import pytest

from invaders.app.render import (
    BULLET_CHAR,
    CONTROLS_HINT,
    ENEMY_CHAR,
    PLAYER_CHAR,
    gauge,
    overlay_lines,
    project_grid,
    status_line,
)
from invaders.simulation.engine import SimulationEngine
from invaders.simulation.position import Position
from invaders.simulation.state import Snapshot

pytestmark = pytest.mark.unit


def make_snapshot(**overrides) -> Snapshot:
    values = dict(
        width=10, height=6, player=Position(5, 3),
        bullets=(), enemies=(), score=0, kills=0, level=1,
        game_over=False, victory=False, progress=0.0,
    )
    values.update(overrides)
    return Snapshot(**values)


class TestProjectGrid:
    def test_shape_matches_area(self):
        grid = project_grid(make_snapshot())
        assert grid.shape == (6, 10)

    def test_entities_placed(self):
        grid = project_grid(make_snapshot(
            enemies=(Position(2, 1),), bullets=(Position(5, 2),),
        ))
        assert grid[1, 2] == ENEMY_CHAR
        assert grid[2, 5] == BULLET_CHAR
        assert grid[3, 5] == PLAYER_CHAR
        assert (grid != " ").sum() == 3

    def test_player_drawn_over_bullet(self):
        grid = project_grid(make_snapshot(bullets=(Position(5, 3),)))
        assert grid[3, 5] == PLAYER_CHAR

    def test_bullet_drawn_over_enemy(self):
        grid = project_grid(make_snapshot(
            enemies=(Position(4, 1),), bullets=(Position(4, 1),),
        ))
        assert grid[1, 4] == BULLET_CHAR

    def test_out_of_bounds_skipped(self):
        grid = project_grid(make_snapshot(enemies=(Position(50, 1), Position(2, 40))))
        assert (grid == ENEMY_CHAR).sum() == 0

    def test_projection_from_engine(self):
        engine = SimulationEngine(40, 20)
        grid = project_grid(engine.snapshot())
        assert (grid == ENEMY_CHAR).sum() == 18
        assert grid[17, 20] == PLAYER_CHAR


class TestHud:
    def test_status_line_fields(self):
        line = status_line(make_snapshot(score=30, level=2, enemies=(Position(1, 1),)))
        assert "Score: 30" in line
        assert "Enemies: 1" in line
        assert "Level: 2" in line
        assert line.endswith(CONTROLS_HINT)

    def test_status_line_banner(self):
        assert "** WAVE 3 **" in status_line(make_snapshot(), banner="WAVE 3")

    def test_gauge_half(self):
        assert gauge(0.5, 14) == "[####---]  50%"

    def test_gauge_clamps(self):
        assert gauge(1.5, 10) == "[###] 100%"
        assert gauge(-1.0, 10) == "[---]   0%"

    def test_gauge_fits_width(self):
        assert len(gauge(0.3, 30)) == 30


class TestOverlay:
    def test_none_while_playing(self):
        assert overlay_lines(make_snapshot()) == []

    def test_game_over(self):
        lines = overlay_lines(make_snapshot(game_over=True, score=70))
        assert lines[0] == "GAME OVER"
        assert "Final score: 70" in lines

    def test_victory(self):
        assert overlay_lines(make_snapshot(victory=True))[0] == "YOU WIN!"

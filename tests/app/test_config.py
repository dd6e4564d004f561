"""Unit tests for Settings, CLI overrides and logging setup."""

from __future__ import annotations

import pytest
from loguru import logger

from invaders.app.config import Settings
from invaders.app.main import build_parser, configure_logging, resolve_settings

pytestmark = pytest.mark.unit


def bare_settings(**values) -> Settings:
    """Settings that ignore any .env file in the working directory."""
    return Settings(_env_file=None, **values)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("TICK_MS", "INITIAL_ENEMY_ROWS", "LOG_FILE"):
            monkeypatch.delenv(f"INVADERS_{name}", raising=False)
        cfg = bare_settings()
        assert cfg.tick_ms == 100
        assert cfg.initial_enemy_rows == 3
        assert cfg.log_file == ""

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("INVADERS_TICK_MS", "50")
        monkeypatch.setenv("INVADERS_INITIAL_ENEMY_COLS", "4")
        cfg = bare_settings()
        assert cfg.tick_ms == 50
        assert cfg.initial_enemy_cols == 4

    def test_game_config_normalises(self):
        game = bare_settings(enemy_move_every_ticks=0, tick_ms=40).game_config()
        assert game.enemy_move_every_ticks == 1
        assert game.tick_ms == 40


class TestCommandLine:
    def test_flags_override_settings(self):
        args = build_parser().parse_args(["--rows", "2", "--tick-ms", "40"])
        cfg = resolve_settings(args, bare_settings())
        assert cfg.initial_enemy_rows == 2
        assert cfg.tick_ms == 40
        assert cfg.initial_enemy_cols == 6

    def test_no_flags_keep_settings(self):
        base = bare_settings(enemy_speedup_every_kills=9)
        cfg = resolve_settings(build_parser().parse_args([]), base)
        assert cfg.enemy_speedup_every_kills == 9

    def test_log_flags(self):
        args = build_parser().parse_args(["--log-file", "x.log", "--log-level", "debug"])
        cfg = resolve_settings(args, bare_settings())
        assert cfg.log_file == "x.log"
        assert cfg.log_level == "debug"


class TestLogging:
    def test_file_sink(self, tmp_path):
        path = tmp_path / "invaders.log"
        try:
            configure_logging(bare_settings(log_file=str(path), log_level="info"))
            logger.info("wave cleared")
            logger.debug("not at this level")
        finally:
            logger.remove()
        text = path.read_text()
        assert "wave cleared" in text
        assert "not at this level" not in text

    def test_no_file_configured(self, tmp_path):
        try:
            configure_logging(bare_settings())
            logger.info("dropped")
        finally:
            logger.remove()
        assert list(tmp_path.iterdir()) == []

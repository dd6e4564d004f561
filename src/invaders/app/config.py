"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from invaders.simulation.config import (
    DEFAULT_ENEMY_COLS,
    DEFAULT_ENEMY_ROWS,
    DEFAULT_MOVE_EVERY_TICKS,
    DEFAULT_SPEEDUP_EVERY_KILLS,
    DEFAULT_TICK_MS,
    GameConfig,
)


class Settings(BaseSettings):
    """Settings loaded from INVADERS_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="INVADERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Simulation
    tick_ms: int = DEFAULT_TICK_MS
    initial_enemy_rows: int = DEFAULT_ENEMY_ROWS
    initial_enemy_cols: int = DEFAULT_ENEMY_COLS
    enemy_move_every_ticks: int = DEFAULT_MOVE_EVERY_TICKS
    enemy_speedup_every_kills: int = DEFAULT_SPEEDUP_EVERY_KILLS

    # Logging (curses owns the terminal, so logs only go to a file)
    log_level: str = "INFO"
    log_file: str = ""

    def game_config(self) -> GameConfig:
        return GameConfig(
            tick_ms=self.tick_ms,
            initial_enemy_rows=self.initial_enemy_rows,
            initial_enemy_cols=self.initial_enemy_cols,
            enemy_move_every_ticks=self.enemy_move_every_ticks,
            enemy_speedup_every_kills=self.enemy_speedup_every_kills,
        )


settings = Settings()

"""Grid Invaders - terminal entry point.

Wires settings, logging, the DriverLoop and the curses renderer together.
The only wait in the loop is ``getch()`` with a timeout equal to the time
left before the next tick, so input handling and simulation never overlap.
"""

from __future__ import annotations

import argparse
import curses
import sys

from loguru import logger

from .config import Settings, settings
from .driver import DriverLoop
from .keys import command_for_key
from .render import draw, init_colors

# Smallest terminal the formation and HUD fit into
MIN_WIDTH = 20
MIN_HEIGHT = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invaders",
        description="Terminal arcade shooter: clear the descending formation.",
    )
    parser.add_argument("--tick-ms", type=int, help="Simulation tick interval in milliseconds")
    parser.add_argument("--rows", type=int, dest="initial_enemy_rows", help="Initial formation rows")
    parser.add_argument("--cols", type=int, dest="initial_enemy_cols", help="Initial formation columns")
    parser.add_argument("--move-every", type=int, dest="enemy_move_every_ticks",
                        help="Ticks between formation steps")
    parser.add_argument("--speedup-every", type=int, dest="enemy_speedup_every_kills",
                        help="Kills between extra formation speedups")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--log-level", help="Log level for the log file")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings = settings) -> Settings:
    """Overlay command-line values onto the environment settings."""
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return base.model_copy(update=overrides)


def configure_logging(cfg: Settings) -> None:
    """Route loguru to a file only; stderr belongs to curses while playing."""
    logger.remove()
    if cfg.log_file:
        logger.add(cfg.log_file, level=cfg.log_level.upper(), rotation="1 MB")


def run(stdscr, cfg: Settings) -> int:
    """Play until the player quits.  Returns the final score."""
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.raw()
    init_colors()

    rows, cols = stdscr.getmaxyx()
    if cols < MIN_WIDTH or rows < MIN_HEIGHT:
        logger.warning(f"Terminal is {cols}x{rows}; the formation may not fit")

    driver = DriverLoop(cols, rows, cfg.game_config())
    logger.info(f"Game started on a {cols}x{rows} terminal")

    while True:
        draw(stdscr, driver.engine.snapshot(), driver.banner)

        stdscr.timeout(int(driver.timeout() * 1000))
        key = stdscr.getch()
        if key == curses.KEY_RESIZE:
            rows, cols = stdscr.getmaxyx()
            driver.resize(cols, rows)
        elif key != -1 and not driver.handle(command_for_key(key)):
            break

        driver.advance()

    return driver.engine.state.score


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_settings(args)
    configure_logging(cfg)

    score = 0
    try:
        score = curses.wrapper(run, cfg)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    print(f"Thanks for playing! Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

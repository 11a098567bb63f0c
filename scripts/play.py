#!/usr/bin/env python3
"""Play Snake Arcade in the terminal."""

import argparse
import curses
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables from .env
from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

import yaml  # type: ignore[import-untyped]  # noqa: E402

from snakegame.engine import SnakeGame  # noqa: E402
from snakegame.render import Cell, board_cells, render_board, render_sidebar, render_summary  # noqa: E402
from snakegame.state import Direction, GameState, GameStatus  # noqa: E402

DEFAULT_CONFIG = project_root / "configs" / "play.yaml"

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    ord("w"): Direction.UP,
    ord("W"): Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord("d"): Direction.RIGHT,
    ord("D"): Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    ord("s"): Direction.DOWN,
    ord("S"): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord("a"): Direction.LEFT,
    ord("A"): Direction.LEFT,
}
QUIT_KEYS = {ord("q"), ord("Q")}

# Color pair ids and their foregrounds, all on black
SNAKE_PAIR = 1
INFO_PAIR = 4
PAIR_COLORS = {
    SNAKE_PAIR: curses.COLOR_GREEN,
    2: curses.COLOR_RED,
    3: curses.COLOR_YELLOW,
    INFO_PAIR: curses.COLOR_CYAN,
    5: curses.COLOR_GREEN,
    6: curses.COLOR_YELLOW,
    7: curses.COLOR_BLUE,
    8: curses.COLOR_MAGENTA,
}
CELL_PAIRS = {
    Cell.HEAD: SNAKE_PAIR,
    Cell.BODY: SNAKE_PAIR,
    Cell.FOOD_REGULAR: 2,
    Cell.BORDER: 3,
    Cell.FOOD_GREEN: 5,
    Cell.FOOD_GOLD: 6,
    Cell.FOOD_BLUE: 7,
    Cell.OBSTACLE: 8,
}

WELCOME_LINES = [
    "SNAKE ARCADE",
    "",
    "GOAL: grow long enough to WIN!",
    "",
    "CONTROLS:",
    "  Arrow Keys / WASD - Move",
    "  Q - Quit",
    "",
    "Press ANY KEY to start...",
]


def load_config(config_path: str) -> dict[str, Any]:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


def init_colors() -> bool:
    """Set up the color pairs; returns False on a monochrome terminal."""
    if not curses.has_colors():
        return False
    curses.start_color()
    for pair, color in PAIR_COLORS.items():
        curses.init_pair(pair, color, curses.COLOR_BLACK)
    return True


def draw_lines(stdscr, lines: list[str], top: int = 0, left: int = 0, attr: int = 0) -> None:
    max_y, max_x = stdscr.getmaxyx()
    for i, line in enumerate(lines):
        y = top + i
        if y >= max_y or left >= max_x:
            break
        # curses raises when writing the bottom-right cell
        stdscr.addnstr(y, left, line, max(0, max_x - left - 1), attr)


def draw_board(stdscr, state: GameState, use_color: bool) -> int:
    """Draw the board glyph by glyph, colored by cell kind. Returns its width."""
    max_y, max_x = stdscr.getmaxyx()
    rows = render_board(state)
    for y, (row, cells) in enumerate(zip(rows, board_cells(state))):
        if y >= max_y:
            break
        for x, (glyph, cell) in enumerate(zip(row, cells)):
            if x >= max_x - 1:
                break
            attr = curses.A_NORMAL
            if use_color and cell in CELL_PAIRS:
                attr = curses.color_pair(CELL_PAIRS[cell]) | curses.A_BOLD
            stdscr.addstr(y, x, glyph, attr)
    return len(rows[0])


def wait_for_key(stdscr) -> int:
    stdscr.nodelay(False)
    key = stdscr.getch()
    stdscr.nodelay(True)
    return key


def run(stdscr, game: SnakeGame, show_welcome: bool) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.nodelay(True)
    use_color = init_colors()
    info_attr = curses.color_pair(INFO_PAIR) if use_color else curses.A_NORMAL

    if show_welcome:
        stdscr.clear()
        draw_lines(stdscr, WELCOME_LINES, top=2, left=4, attr=info_attr)
        stdscr.refresh()
        wait_for_key(stdscr)

    while game.status is GameStatus.RUNNING:
        key = stdscr.getch()
        if key in QUIT_KEYS:
            game.quit()
            break
        if key in KEY_DIRECTIONS:
            game.change_direction(KEY_DIRECTIONS[key])

        game.step()

        stdscr.erase()
        width = draw_board(stdscr, game.state, use_color)
        sidebar = render_sidebar(game.state, game.boost_active)
        draw_lines(stdscr, sidebar, left=width + 3, attr=info_attr)
        stdscr.refresh()

        time.sleep(game.tick_delay())

    if game.status in (GameStatus.OVER, GameStatus.WON):
        stdscr.erase()
        summary = render_summary(game.state) + ["", "Press any key to exit..."]
        draw_lines(stdscr, summary, top=2, left=4, attr=info_attr)
        stdscr.refresh()
        wait_for_key(stdscr)


def main():
    parser = argparse.ArgumentParser(description="Play Snake Arcade in the terminal")
    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG) if DEFAULT_CONFIG.exists() else None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=int(os.environ["SNAKE_SEED"]) if os.environ.get("SNAKE_SEED") else None,
        help="Random seed for food and obstacle placement (default: $SNAKE_SEED)",
    )
    parser.add_argument(
        "--no-welcome",
        action="store_true",
        help="Skip the welcome screen",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write engine debug logs to this file",
    )

    args = parser.parse_args()

    config = load_config(args.config) if args.config else {}

    # Override with command line args
    if args.seed is not None:
        config["seed"] = args.seed
    if args.no_welcome:
        config["show_welcome"] = False

    log_file = args.log_file or config.get("log_file")
    if log_file:
        logging.basicConfig(filename=log_file, level=logging.DEBUG)

    game = SnakeGame(seed=config.get("seed"))
    curses.wrapper(run, game, config.get("show_welcome", True))

    state = game.state
    print(f"Final score: {state.score} (length {state.snake.length}, status {state.status.value})")


if __name__ == "__main__":
    main()

"""Plain-text frames for terminal front ends."""

from __future__ import annotations

from enum import Enum

from snakegame import config
from snakegame.state import FOOD_EFFECTS, FoodType, GameState, GameStatus


class Cell(Enum):
    """What occupies a board cell, for front ends that color by kind."""

    EMPTY = "empty"
    BORDER = "border"
    OBSTACLE = "obstacle"
    FOOD_REGULAR = "food_regular"
    FOOD_GREEN = "food_green"
    FOOD_GOLD = "food_gold"
    FOOD_BLUE = "food_blue"
    BODY = "body"
    HEAD = "head"


FOOD_CELLS: dict[FoodType, Cell] = {
    FoodType.REGULAR: Cell.FOOD_REGULAR,
    FoodType.GREEN: Cell.FOOD_GREEN,
    FoodType.GOLD: Cell.FOOD_GOLD,
    FoodType.BLUE: Cell.FOOD_BLUE,
}

FOOD_GLYPHS: dict[FoodType, str] = {
    FoodType.REGULAR: "*",
    FoodType.GREEN: "$",
    FoodType.GOLD: "%",
    FoodType.BLUE: "#",
}

HEAD_GLYPH = "@"
BODY_GLYPH = "o"
OBSTACLE_GLYPH = "X"
PROGRESS_WIDTH = 20

CELL_GLYPHS: dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.OBSTACLE: OBSTACLE_GLYPH,
    Cell.BODY: BODY_GLYPH,
    Cell.HEAD: HEAD_GLYPH,
    **{FOOD_CELLS[food_type]: glyph for food_type, glyph in FOOD_GLYPHS.items()},
}


def board_cells(state: GameState) -> list[list[Cell]]:
    """Classify every board cell, indexed ``[y][x]`` in grid coordinates.

    The walls sit at 0 and WIDTH+1 / HEIGHT+1. Later layers win: obstacles,
    then food, then the body, then the head.
    """
    grid = [[Cell.EMPTY] * (config.WIDTH + 2) for _ in range(config.HEIGHT + 2)]

    for x in range(config.WIDTH + 2):
        grid[0][x] = Cell.BORDER
        grid[config.HEIGHT + 1][x] = Cell.BORDER
    for y in range(1, config.HEIGHT + 1):
        grid[y][0] = Cell.BORDER
        grid[y][config.WIDTH + 1] = Cell.BORDER

    def put(x: int, y: int, cell: Cell) -> None:
        # A dead snake's head may sit on the wall ring or outside it
        if 0 <= x <= config.WIDTH + 1 and 0 <= y <= config.HEIGHT + 1:
            grid[y][x] = cell

    for obstacle in state.obstacles:
        put(obstacle.x, obstacle.y, Cell.OBSTACLE)

    if state.food.active:
        put(state.food.position.x, state.food.position.y, FOOD_CELLS[state.food.food_type])

    segments = state.snake.segments
    for segment in reversed(segments[1:]):
        put(segment.x, segment.y, Cell.BODY)
    put(segments[0].x, segments[0].y, Cell.HEAD)

    return grid


def border_glyph(x: int, y: int) -> str:
    on_side = x in (0, config.WIDTH + 1)
    on_edge = y in (0, config.HEIGHT + 1)
    if on_side and on_edge:
        return "+"
    return "=" if on_edge else "|"


def render_board(state: GameState) -> list[str]:
    """Draw the bordered board, one string per row.

    Row and column indexes equal grid coordinates.
    """
    return [
        "".join(
            border_glyph(x, y) if cell is Cell.BORDER else CELL_GLYPHS[cell]
            for x, cell in enumerate(row)
        )
        for y, row in enumerate(board_cells(state))
    ]


def progress_bar(length: int) -> str:
    filled = min(PROGRESS_WIDTH, (length * PROGRESS_WIDTH) // config.WIN_LENGTH)
    return "=" * filled + "-" * (PROGRESS_WIDTH - filled)


def render_sidebar(state: GameState, boost_active: bool) -> list[str]:
    """Stats and legend shown next to the board."""
    lines = [
        "[ SNAKE GAME ]",
        "",
        f"SCORE: {state.score}",
        f"LENGTH: {state.snake.length}/{config.WIN_LENGTH}",
        f"APPLES: {state.apples_eaten}",
        f"WIN: {progress_bar(state.snake.length)}",
        "",
        ">>> SPEED x2 <<<" if boost_active else "",
        "",
        "--- APPLES ---",
    ]
    for food_type in FoodType:
        effect = FOOD_EFFECTS[food_type]
        extra = ""
        if effect.speed_boost:
            extra = " speed x2"
        elif effect.adds_obstacle:
            extra = " +wall"
        lines.append(
            f"{FOOD_GLYPHS[food_type]} {food_type.name.capitalize()}: "
            f"+{effect.growth} +{effect.score}pts{extra}"
        )
    return lines


def render_summary(state: GameState) -> list[str]:
    """End-of-episode report."""
    headlines = {
        GameStatus.WON: f"CONGRATULATIONS! You reached {config.WIN_LENGTH} length!",
        GameStatus.OVER: "GAME OVER!",
        GameStatus.QUIT: "Game abandoned.",
        GameStatus.RUNNING: "Game in progress.",
    }
    lines = [
        headlines[state.status],
        "",
        f"FINAL SCORE: {state.score}",
        f"FINAL LENGTH: {state.snake.length}/{config.WIN_LENGTH}",
        f"APPLES EATEN: {state.apples_eaten}",
        f"OBSTACLES CREATED: {state.obstacles.count}",
        "",
        "Apple breakdown:",
    ]
    for food_type in FoodType:
        lines.append(f"  {food_type.name.capitalize()}: {state.eaten_by_type[food_type]}")
    return lines

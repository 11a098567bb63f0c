"""Tests for the text renderer."""

from __future__ import annotations

from snakegame import config
from snakegame.render import (
    Cell,
    board_cells,
    progress_bar,
    render_board,
    render_sidebar,
    render_summary,
)
from snakegame.state import Food, FoodType, GameState, GameStatus, Obstacles, Position


def test_board_has_border(state: GameState) -> None:
    board = render_board(state)

    assert len(board) == config.HEIGHT + 2
    assert all(len(row) == config.WIDTH + 2 for row in board)
    assert board[0][0] == board[0][-1] == board[-1][0] == board[-1][-1] == "+"
    assert set(board[0][1:-1]) == {"="}
    assert board[5][0] == board[5][-1] == "|"


def test_board_draws_snake_food_and_obstacles(state: GameState) -> None:
    state.food = Food(Position(3, 4), active=True, food_type=FoodType.GREEN)
    state.obstacles = Obstacles([Position(7, 2)])

    board = render_board(state)

    assert board[10][20] == "@"
    assert board[10][19] == "o"
    assert board[10][18] == "o"
    assert board[4][3] == "$"
    assert board[2][7] == "X"


def test_gold_food_is_distinct_from_head(state: GameState) -> None:
    state.food = Food(Position(3, 4), active=True, food_type=FoodType.GOLD)

    board = render_board(state)

    assert board[10][20] == "@"
    assert board[4][3] == "%"
    assert board[4][3] != board[10][20]


def test_board_cells_classify_kinds(state: GameState) -> None:
    state.food = Food(Position(3, 4), active=True, food_type=FoodType.GOLD)
    state.obstacles = Obstacles([Position(7, 2)])

    cells = board_cells(state)

    assert cells[10][20] is Cell.HEAD
    assert cells[10][19] is Cell.BODY
    assert cells[4][3] is Cell.FOOD_GOLD
    assert cells[2][7] is Cell.OBSTACLE
    assert cells[0][0] is Cell.BORDER
    assert cells[5][5] is Cell.EMPTY


def test_inactive_food_is_not_drawn(state: GameState) -> None:
    state.food = Food(Position(3, 4), active=False, food_type=FoodType.BLUE)
    assert render_board(state)[4][3] == " "


def test_head_outside_board_is_clipped(state: GameState) -> None:
    state.snake.body[0] = Position(config.WIDTH + 3, 10)
    board = render_board(state)
    assert len(board[10]) == config.WIDTH + 2


def test_progress_bar() -> None:
    assert progress_bar(0) == "-" * 20
    assert progress_bar(config.WIN_LENGTH) == "=" * 20
    assert progress_bar(config.WIN_LENGTH // 2) == "=" * 10 + "-" * 10


def test_sidebar_shows_boost_only_when_active(state: GameState) -> None:
    assert ">>> SPEED x2 <<<" in render_sidebar(state, boost_active=True)
    assert ">>> SPEED x2 <<<" not in render_sidebar(state, boost_active=False)
    assert f"LENGTH: 3/{config.WIN_LENGTH}" in render_sidebar(state, boost_active=False)


def test_summary_lists_breakdown(state: GameState) -> None:
    state.status = GameStatus.WON
    state.score = 85
    state.apples_eaten = 3
    state.eaten_by_type[FoodType.GOLD] = 1

    lines = render_summary(state)

    assert lines[0].startswith("CONGRATULATIONS")
    assert "FINAL SCORE: 85" in lines
    assert "APPLES EATEN: 3" in lines
    assert "  Gold: 1" in lines


def test_summary_for_game_over(state: GameState) -> None:
    state.status = GameStatus.OVER
    assert render_summary(state)[0] == "GAME OVER!"

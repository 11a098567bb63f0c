"""Tests for the game state model."""

from __future__ import annotations

import pytest

from snakegame import config
from snakegame.state import (
    FOOD_EFFECTS,
    Direction,
    FoodType,
    GameState,
    GameStatus,
    Obstacles,
    Position,
    Snake,
)


class TestInitialState:
    def test_snake_starts_centred_heading_right(self, state: GameState) -> None:
        assert state.snake.length == 3
        assert state.snake.direction is Direction.RIGHT
        assert state.snake.segments == [
            Position(config.WIDTH // 2, config.HEIGHT // 2),
            Position(config.WIDTH // 2 - 1, config.HEIGHT // 2),
            Position(config.WIDTH // 2 - 2, config.HEIGHT // 2),
        ]

    def test_counters_and_flags_start_empty(self, state: GameState) -> None:
        assert state.score == 0
        assert state.status is GameStatus.RUNNING
        assert state.food.active is False
        assert state.obstacles.count == 0
        assert state.speed_boost.active is False
        assert state.apples_eaten == 0
        assert state.eaten_by_type == {t: 0 for t in FoodType}


class TestSnake:
    def test_empty_snake_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_over_capacity_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            Snake([Position(1, 1)] * 4, capacity=3)

    def test_buffer_is_preallocated(self) -> None:
        snake = Snake([Position(5, 5), Position(4, 5)])
        assert len(snake.body) == config.MAX_SNAKE_LENGTH
        assert len(snake) == 2
        assert list(snake) == [Position(5, 5), Position(4, 5)]
        assert snake.tail == Position(4, 5)

    def test_occupies_only_checks_live_segments(self) -> None:
        snake = Snake([Position(5, 5), Position(4, 5)])
        snake.body[5] = Position(9, 9)
        assert snake.occupies(Position(4, 5))
        assert not snake.occupies(Position(9, 9))

    def test_copy_is_independent(self) -> None:
        snake = Snake([Position(5, 5), Position(4, 5)])
        clone = snake.copy()
        clone.body[0] = Position(6, 5)
        clone.direction = Direction.UP
        assert snake.head == Position(5, 5)
        assert snake.direction is Direction.RIGHT


def test_direction_opposites() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.DOWN.opposite is Direction.UP
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.opposite is Direction.LEFT


def test_food_table() -> None:
    assert FOOD_EFFECTS[FoodType.REGULAR].score == 10
    assert FOOD_EFFECTS[FoodType.GREEN].growth == 2
    assert FOOD_EFFECTS[FoodType.GOLD].speed_boost is True
    assert FOOD_EFFECTS[FoodType.BLUE].adds_obstacle is True


def test_obstacles_enforce_cap() -> None:
    obstacles = Obstacles(max_count=1)
    obstacles.add(Position(3, 3))
    assert obstacles.is_full
    with pytest.raises(ValueError):
        obstacles.add(Position(4, 4))


def test_to_dict_hides_inactive_food(state: GameState) -> None:
    data = state.to_dict()
    assert data["food"] is None
    assert data["direction"] == "right"
    assert data["status"] == "running"
    assert data["snake"][0] == {"x": 20, "y": 10}
    assert data["eaten_by_type"] == {"regular": 0, "green": 0, "gold": 0, "blue": 0}
    assert data["width"] == config.WIDTH


def test_state_copy_is_deep(state: GameState) -> None:
    clone = state.copy()
    clone.score = 99
    clone.obstacles.add(Position(1, 1))
    clone.eaten_by_type[FoodType.GOLD] += 1
    clone.food.active = True

    assert state.score == 0
    assert state.obstacles.count == 0
    assert state.eaten_by_type[FoodType.GOLD] == 0
    assert state.food.active is False

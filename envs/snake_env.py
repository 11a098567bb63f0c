"""Snake Arcade environment wrapping the game engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import numpy as np

from snakegame import config
from snakegame.clock import Clock
from snakegame.engine import SnakeGame, is_valid_direction_change
from snakegame.state import Direction, FoodType, GameStatus


@dataclass
class EnvMetadata:
    """Static description of the environment."""

    name: str
    action_space_size: int
    action_names: list[str]
    observation_shape: tuple[int, ...]
    max_episode_steps: int


class SnakeArcadeEnv:
    """Gymnasium-style Snake Arcade environment.

    Actions are ``Direction`` values (0=up, 1=right, 2=down, 3=left). A
    reversing or unknown action is ignored and the snake keeps its heading.
    The reward for a step is the score gained on it.
    """

    ACTION_NAMES = [d.name.lower() for d in Direction]
    ACTION_MAP = {int(d): d for d in Direction}

    # Observation channels
    BODY = 0
    HEAD = 1
    FOOD_CHANNELS = {
        FoodType.REGULAR: 2,
        FoodType.GREEN: 3,
        FoodType.GOLD: 4,
        FoodType.BLUE: 5,
    }
    OBSTACLES = 6
    NUM_CHANNELS = 7

    def __init__(self, max_steps: int | None = None, clock: Clock | None = None):
        """Initialize the environment.

        Args:
            max_steps: Step limit before truncation (defaults to 10 per cell)
            clock: Clock for the speed boost window (wall clock if None)
        """
        self._max_steps = max_steps or config.WIDTH * config.HEIGHT * 10
        self._game = SnakeGame(clock=clock)
        self._step_count = 0

        self.metadata = EnvMetadata(
            name="snake_arcade",
            action_space_size=len(Direction),
            action_names=self.ACTION_NAMES,
            observation_shape=(self.NUM_CHANNELS, config.HEIGHT, config.WIDTH),
            max_episode_steps=self._max_steps,
        )

    @property
    def game(self) -> SnakeGame:
        return self._game

    @property
    def action_space_size(self) -> int:
        return self.metadata.action_space_size

    @property
    def observation_shape(self) -> tuple[int, ...]:
        return self.metadata.observation_shape

    def reset(self, seed: int | None = None) -> tuple[np.ndarray, dict[str, Any]]:
        """Reset the game."""
        self._game.reset(seed)
        self._step_count = 0
        return self._get_observation(), self._info()

    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Execute one tick."""
        if self._game.status is not GameStatus.RUNNING:
            return self._get_observation(), 0.0, True, False, self._info()

        score_before = self._game.state.score
        status = self._game.step(self.ACTION_MAP.get(action))

        self._step_count += 1
        terminated = status.is_terminal
        truncated = not terminated and self._step_count >= self._max_steps

        reward = float(self._game.state.score - score_before)
        return self._get_observation(), reward, terminated, truncated, self._info()

    def get_valid_actions(self) -> list[int]:
        """Every direction except a reversal of the current heading."""
        current = self._game.state.snake.direction
        return [int(d) for d in Direction if is_valid_direction_change(current, d)]

    def clone(self) -> SnakeArcadeEnv:
        """Create an independent copy, including random and clock state."""
        new_env = SnakeArcadeEnv(max_steps=self._max_steps, clock=copy.deepcopy(self._game.clock))
        new_env._game.rng.setstate(self._game.rng.getstate())
        new_env._game.state = self._game.state.copy()
        new_env._step_count = self._step_count
        return new_env

    def render_state(self) -> dict[str, Any]:
        """Return state for WebSocket rendering."""
        return self._game.state.to_dict()

    def get_observation(self) -> np.ndarray:
        return self._get_observation()

    def _info(self) -> dict[str, Any]:
        state = self._game.state
        return {
            "score": state.score,
            "length": state.snake.length,
            "status": state.status.value,
            "apples_eaten": state.apples_eaten,
            "steps": self._step_count,
        }

    def _get_observation(self) -> np.ndarray:
        """Convert game state to a channel grid.

        Returns 7-channel grid indexed ``[channel, y - 1, x - 1]``:
        - Channel 0: Snake body
        - Channel 1: Snake head
        - Channels 2-5: Food, one channel per type
        - Channel 6: Obstacles
        """
        obs = np.zeros(self.observation_shape, dtype=np.float32)
        state = self._game.state

        def mark(channel: int, x: int, y: int) -> None:
            if 1 <= x <= config.WIDTH and 1 <= y <= config.HEIGHT:
                obs[channel, y - 1, x - 1] = 1.0

        segments = state.snake.segments
        for segment in segments[1:]:
            mark(self.BODY, segment.x, segment.y)
        mark(self.HEAD, segments[0].x, segments[0].y)

        if state.food.active:
            food = state.food
            mark(self.FOOD_CHANNELS[food.food_type], food.position.x, food.position.y)

        for obstacle in state.obstacles:
            mark(self.OBSTACLES, obstacle.x, obstacle.y)

        return obs


"""Snake Arcade game core: state model and transition engine."""

import logging

from snakegame.clock import Clock, ManualClock, MonotonicClock
from snakegame.engine import (
    SnakeGame,
    advance_tick,
    is_speed_boost_active,
    is_valid_direction_change,
)
from snakegame.state import (
    Direction,
    Food,
    FoodType,
    GameState,
    GameStatus,
    Obstacles,
    Position,
    Snake,
    SpeedBoost,
)

# Silent unless the application configures logging; curses clients own stderr
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Clock",
    "Direction",
    "Food",
    "FoodType",
    "GameState",
    "GameStatus",
    "ManualClock",
    "MonotonicClock",
    "Obstacles",
    "Position",
    "Snake",
    "SnakeGame",
    "SpeedBoost",
    "advance_tick",
    "is_speed_boost_active",
    "is_valid_direction_change",
]

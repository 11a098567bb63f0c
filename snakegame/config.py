"""Fixed game constants."""

from __future__ import annotations

# Playable cells are 1..WIDTH and 1..HEIGHT; 0 and WIDTH+1 / HEIGHT+1 are walls
WIDTH = 40
HEIGHT = 20

MAX_SNAKE_LENGTH = 51
WIN_LENGTH = 50
INITIAL_SNAKE_LENGTH = 3
MAX_OBSTACLES = 20

# Speed boost window (3 seconds, in microseconds)
SPEED_BOOST_DURATION_US = 3_000_000

# Best-effort placement budgets
FOOD_SPAWN_ATTEMPTS = 1000
OBSTACLE_SPAWN_ATTEMPTS = 100

# Obstacles keep |dx| < 3 and |dy| < 3 clear around active food
OBSTACLE_FOOD_CLEARANCE = 3

# Tick delays; halved while the speed boost is active
MOVE_DELAY_HORIZONTAL_US = 170_000
MOVE_DELAY_VERTICAL_US = 100_000

"""Transition engine: movement, collisions, food, effects and the tick."""

from __future__ import annotations

import logging
import random
from enum import Enum

from snakegame import config
from snakegame.clock import Clock, MonotonicClock
from snakegame.pacing import movement_delay
from snakegame.state import (
    DIRECTION_VECTORS,
    FOOD_EFFECTS,
    FOOD_SPAWN_THRESHOLDS,
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

logger = logging.getLogger(__name__)


class Collision(Enum):
    """Which fatal collision ended the episode."""

    WALL = "wall"
    SELF = "self"
    OBSTACLE = "obstacle"


# --- Movement ---


def advance_position(snake: Snake) -> None:
    """Move the snake one cell in its current direction.

    Every segment takes its predecessor's place, then the head steps by the
    direction's unit vector. Length is unchanged.
    """
    body = snake.body
    for i in range(snake.length - 1, 0, -1):
        body[i] = body[i - 1]

    dx, dy = DIRECTION_VECTORS[snake.direction]
    head = body[0]
    body[0] = Position(head.x + dx, head.y + dy)


def is_valid_direction_change(current: Direction, requested: Direction) -> bool:
    """Reject only an instant 180 degree turn."""
    return requested != current.opposite


# --- Collisions ---


def check_wall_collision(snake: Snake) -> bool:
    head = snake.head
    return head.x <= 0 or head.x >= config.WIDTH + 1 or head.y <= 0 or head.y >= config.HEIGHT + 1


def check_self_collision(snake: Snake) -> bool:
    head = snake.head
    return any(snake.body[i] == head for i in range(1, snake.length))


def check_obstacle_collision(snake: Snake, obstacles: Obstacles) -> bool:
    return snake.head in obstacles


def detect_collision(snake: Snake, obstacles: Obstacles) -> Collision | None:
    """Return the first fatal collision found (wall, self, obstacle), if any."""
    if check_wall_collision(snake):
        return Collision.WALL
    if check_self_collision(snake):
        return Collision.SELF
    if check_obstacle_collision(snake, obstacles):
        return Collision.OBSTACLE
    return None


def check_collision(snake: Snake, obstacles: Obstacles) -> bool:
    return detect_collision(snake, obstacles) is not None


def check_food_collision(snake: Snake, food: Food) -> bool:
    return food.active and snake.head == food.position


# --- Food ---


def roll_food_type(rng: random.Random) -> FoodType:
    roll = rng.randrange(100)
    for upper, food_type in FOOD_SPAWN_THRESHOLDS:
        if roll < upper:
            return food_type
    return FOOD_SPAWN_THRESHOLDS[-1][1]


def random_cell(rng: random.Random) -> Position:
    """Uniformly random playable cell."""
    return Position(rng.randint(1, config.WIDTH), rng.randint(1, config.HEIGHT))


def generate_food(snake: Snake, obstacles: Obstacles, rng: random.Random) -> Food:
    """Spawn a new active food item on a free cell.

    Placement is best-effort: after ``FOOD_SPAWN_ATTEMPTS`` rejected samples
    the last one is used anyway.
    """
    food_type = roll_food_type(rng)

    for _ in range(config.FOOD_SPAWN_ATTEMPTS):
        position = random_cell(rng)
        if not snake.occupies(position) and position not in obstacles:
            break
    else:
        logger.warning(
            f"No free cell for food after {config.FOOD_SPAWN_ATTEMPTS} attempts; "
            f"placing at ({position.x}, {position.y})"
        )

    logger.debug(f"Spawned {food_type.name.lower()} food at ({position.x}, {position.y})")
    return Food(position=position, active=True, food_type=food_type)


def grow_snake(snake: Snake, amount: int) -> None:
    """Lengthen the snake by ``amount``, silently capped at capacity.

    New slots start on the tail cell and peel off as the snake moves.
    """
    if amount < 0:
        raise ValueError(f"Growth amount must be non-negative, got {amount}")

    new_length = min(snake.length + amount, snake.capacity)
    tail = snake.tail
    for i in range(snake.length, new_length):
        snake.body[i] = tail
    snake.length = new_length


def handle_food_eaten(state: GameState, rng: random.Random, clock: Clock) -> None:
    """Apply score, growth and the type's effect, then consume the food."""
    food_type = state.food.food_type
    effect = FOOD_EFFECTS[food_type]

    state.apples_eaten += 1
    state.eaten_by_type[food_type] += 1
    state.score += effect.score
    grow_snake(state.snake, effect.growth)

    if effect.speed_boost:
        activate_speed_boost(state.speed_boost, clock)
    if effect.adds_obstacle:
        add_obstacle(state, rng)

    state.food.active = False
    logger.debug(f"Ate {food_type.name.lower()} food: score={state.score} length={state.snake.length}")


# --- Obstacles & speed boost ---


def _near_food(position: Position, food: Food) -> bool:
    clearance = config.OBSTACLE_FOOD_CLEARANCE
    return (
        food.active
        and abs(position.x - food.position.x) < clearance
        and abs(position.y - food.position.y) < clearance
    )


def add_obstacle(state: GameState, rng: random.Random) -> bool:
    """Place one obstacle away from the snake, other obstacles and the food.

    Returns False when the cap is reached or no cell was found within
    ``OBSTACLE_SPAWN_ATTEMPTS``.
    """
    if state.obstacles.is_full:
        return False

    for _ in range(config.OBSTACLE_SPAWN_ATTEMPTS):
        candidate = random_cell(rng)
        if state.snake.occupies(candidate):
            continue
        if candidate in state.obstacles:
            continue
        if _near_food(candidate, state.food):
            continue

        state.obstacles.add(candidate)
        logger.debug(f"Placed obstacle at ({candidate.x}, {candidate.y})")
        return True

    logger.debug("No room for a new obstacle; skipping")
    return False


def activate_speed_boost(boost: SpeedBoost, clock: Clock) -> None:
    boost.active = True
    boost.started_at_us = clock.now_us()


def is_speed_boost_active(boost: SpeedBoost, clock: Clock) -> bool:
    if not boost.active:
        return False
    return clock.now_us() - boost.started_at_us < config.SPEED_BOOST_DURATION_US


# --- Tick ---


def advance_tick(state: GameState, rng: random.Random, clock: Clock) -> GameStatus:
    """Advance the episode by one tick and return the resulting status.

    Collision is checked before the win condition, and both before any food
    is eaten on this tick.
    """
    if state.status is not GameStatus.RUNNING:
        raise RuntimeError(f"Cannot advance a finished game (status: {state.status.value})")

    advance_position(state.snake)

    collision = detect_collision(state.snake, state.obstacles)
    if collision is not None:
        state.status = GameStatus.OVER
        logger.info(f"Game over: {collision.value} collision at {state.snake.head}, score {state.score}")
        return state.status

    if state.snake.length >= config.WIN_LENGTH:
        state.status = GameStatus.WON
        logger.info(f"Game won with length {state.snake.length}, score {state.score}")
        return state.status

    if check_food_collision(state.snake, state.food):
        handle_food_eaten(state, rng, clock)

    if not state.food.active:
        state.food = generate_food(state.snake, state.obstacles, rng)

    if state.speed_boost.active and not is_speed_boost_active(state.speed_boost, clock):
        state.speed_boost.active = False

    return GameStatus.RUNNING


class SnakeGame:
    """Snake Arcade session: one GameState plus its random source and clock."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        clock: Clock | None = None,
    ):
        """Initialize a new session.

        Args:
            seed: Seed for a private random generator (ignored if rng is given)
            rng: Random source used for spawning food and obstacles
            clock: Clock used for the speed boost window
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.clock: Clock = clock if clock is not None else MonotonicClock()
        self.state = GameState.create()

    def reset(self, seed: int | None = None) -> GameState:
        """Start a new episode, optionally reseeding the random source."""
        if seed is not None:
            self.rng.seed(seed)
        self.state = GameState.create()
        return self.state

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def boost_active(self) -> bool:
        return is_speed_boost_active(self.state.speed_boost, self.clock)

    def change_direction(self, direction: Direction) -> bool:
        """Apply a direction change if it is not a reversal."""
        if not is_valid_direction_change(self.state.snake.direction, direction):
            return False
        self.state.snake.direction = direction
        return True

    def step(self, direction: Direction | None = None) -> GameStatus:
        """Process one tick, turning first if a direction is given."""
        if direction is not None:
            self.change_direction(direction)
        return advance_tick(self.state, self.rng, self.clock)

    def quit(self) -> None:
        if self.state.status is GameStatus.RUNNING:
            self.state.status = GameStatus.QUIT

    def tick_delay(self) -> float:
        """Seconds to wait before the next tick."""
        return movement_delay(self.state.snake.direction, self.boost_active)

"""Game state model for Snake Arcade."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from snakegame import config


class Direction(IntEnum):
    """Movement directions."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


# Direction vectors: (dx, dy)
DIRECTION_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class FoodType(IntEnum):
    """Apple types with different rewards and effects."""

    REGULAR = 0  # red, +10 points, grow by 1
    GREEN = 1  # +20 points, grow by 2
    GOLD = 2  # +50 points, grow by 1, speed boost
    BLUE = 3  # +15 points, grow by 1, adds an obstacle


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"
    QUIT = "quit"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.RUNNING


@dataclass(frozen=True)
class FoodEffect:
    """Reward and side effect of eating one food type."""

    score: int
    growth: int
    speed_boost: bool = False
    adds_obstacle: bool = False


FOOD_EFFECTS: dict[FoodType, FoodEffect] = {
    FoodType.REGULAR: FoodEffect(score=10, growth=1),
    FoodType.GREEN: FoodEffect(score=20, growth=2),
    FoodType.GOLD: FoodEffect(score=50, growth=1, speed_boost=True),
    FoodType.BLUE: FoodEffect(score=15, growth=1, adds_obstacle=True),
}

# Upper bounds (exclusive) on a roll in [0, 100): 60/15/10/15 percent
FOOD_SPAWN_THRESHOLDS: list[tuple[int, FoodType]] = [
    (60, FoodType.REGULAR),
    (75, FoodType.GREEN),
    (85, FoodType.GOLD),
    (100, FoodType.BLUE),
]


@dataclass(frozen=True)
class Position:
    """A cell on the grid."""

    x: int
    y: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


class Snake:
    """Fixed-capacity snake body.

    Segments live in a preallocated buffer of ``capacity`` slots; only the
    first ``length`` of them are part of the snake. The head is slot 0.
    """

    def __init__(
        self,
        segments: Iterable[Position],
        direction: Direction = Direction.RIGHT,
        capacity: int = config.MAX_SNAKE_LENGTH,
    ):
        live = list(segments)
        if not live:
            raise ValueError("Snake needs at least one segment")
        if len(live) > capacity:
            raise ValueError(f"Snake of {len(live)} segments exceeds capacity {capacity}")

        self.capacity = capacity
        self.body: list[Position] = live + [live[-1]] * (capacity - len(live))
        self.length = len(live)
        self.direction = direction

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[self.length - 1]

    @property
    def segments(self) -> list[Position]:
        """Live segments, head first."""
        return self.body[: self.length]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.segments)

    def __len__(self) -> int:
        return self.length

    def occupies(self, position: Position) -> bool:
        return position in self.segments

    def copy(self) -> Snake:
        new_snake = Snake(self.segments, self.direction, self.capacity)
        new_snake.body = list(self.body)
        return new_snake


@dataclass
class Food:
    """The single food item on the board."""

    position: Position = Position(0, 0)
    active: bool = False
    food_type: FoodType = FoodType.REGULAR

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "type": self.food_type.name.lower(),
            "active": self.active,
        }


@dataclass
class Obstacles:
    """Static obstacles, kept in placement order."""

    positions: list[Position] = field(default_factory=list)
    max_count: int = config.MAX_OBSTACLES

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def is_full(self) -> bool:
        return self.count >= self.max_count

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def add(self, position: Position) -> None:
        if self.is_full:
            raise ValueError(f"Obstacle limit {self.max_count} reached")
        self.positions.append(position)


@dataclass
class SpeedBoost:
    active: bool = False
    started_at_us: int = 0


@dataclass
class GameState:
    """Represents the current state of a Snake Arcade episode."""

    snake: Snake
    food: Food = field(default_factory=Food)
    obstacles: Obstacles = field(default_factory=Obstacles)
    speed_boost: SpeedBoost = field(default_factory=SpeedBoost)
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    apples_eaten: int = 0
    eaten_by_type: dict[FoodType, int] = field(
        default_factory=lambda: {food_type: 0 for food_type in FoodType}
    )

    @classmethod
    def create(cls) -> GameState:
        """Create a fresh episode: snake centred, three segments heading right."""
        center_x = config.WIDTH // 2
        center_y = config.HEIGHT // 2
        snake = Snake(
            [Position(center_x - i, center_y) for i in range(config.INITIAL_SNAKE_LENGTH)],
            direction=Direction.RIGHT,
        )
        return cls(snake=snake)

    def copy(self) -> GameState:
        """Create a deep copy of this state."""
        return GameState(
            snake=self.snake.copy(),
            food=Food(self.food.position, self.food.active, self.food.food_type),
            obstacles=Obstacles(list(self.obstacles.positions), self.obstacles.max_count),
            speed_boost=SpeedBoost(self.speed_boost.active, self.speed_boost.started_at_us),
            score=self.score,
            status=self.status,
            apples_eaten=self.apples_eaten,
            eaten_by_type=dict(self.eaten_by_type),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert GameState to a dictionary for JSON serialization."""
        return {
            "snake": [p.to_dict() for p in self.snake.segments],
            "direction": self.snake.direction.name.lower(),
            "length": self.snake.length,
            "food": self.food.to_dict() if self.food.active else None,
            "obstacles": [p.to_dict() for p in self.obstacles],
            "speed_boost": self.speed_boost.active,
            "score": self.score,
            "status": self.status.value,
            "apples_eaten": self.apples_eaten,
            "eaten_by_type": {t.name.lower(): n for t, n in self.eaten_by_type.items()},
            "width": config.WIDTH,
            "height": config.HEIGHT,
            "win_length": config.WIN_LENGTH,
        }

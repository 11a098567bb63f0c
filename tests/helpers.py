from __future__ import annotations

from collections.abc import Iterable

from snakegame.state import Direction, GameState, Position, Snake


class ScriptedRandom:
    """Stand-in for ``random.Random`` that replays fixed values.

    ``randint`` pops from ``ints`` and ``randrange`` pops from ``rolls``; once
    a list runs out its last value repeats.
    """

    def __init__(self, ints: Iterable[int] = (1,), rolls: Iterable[int] = (0,)):
        self.ints = list(ints)
        self.rolls = list(rolls)
        self.randint_calls = 0

    def randint(self, a: int, b: int) -> int:
        self.randint_calls += 1
        value = self.ints.pop(0) if len(self.ints) > 1 else self.ints[0]
        assert a <= value <= b
        return value

    def randrange(self, stop: int) -> int:
        value = self.rolls.pop(0) if len(self.rolls) > 1 else self.rolls[0]
        assert 0 <= value < stop
        return value


def cells(*xy: tuple[int, int]) -> list[int]:
    """Flatten (x, y) pairs into the randint call order used for cells."""
    return [v for pair in xy for v in pair]


def make_state(segments: list[tuple[int, int]], direction: Direction = Direction.RIGHT) -> GameState:
    state = GameState.create()
    state.snake = Snake([Position(x, y) for x, y in segments], direction)
    return state

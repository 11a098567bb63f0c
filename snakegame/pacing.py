"""Tick pacing for real-time drivers."""

from __future__ import annotations

from snakegame import config
from snakegame.state import Direction


def movement_delay_us(direction: Direction, boosted: bool) -> int:
    """Delay before the next tick, in microseconds.

    Vertical and horizontal moves use different delays to even out the
    non-square character cells of a terminal. A speed boost halves it.
    """
    if direction.is_horizontal:
        base_delay = config.MOVE_DELAY_HORIZONTAL_US
    else:
        base_delay = config.MOVE_DELAY_VERTICAL_US

    if boosted:
        return base_delay // 2
    return base_delay


def movement_delay(direction: Direction, boosted: bool) -> float:
    """Same as :func:`movement_delay_us`, in seconds for ``sleep`` calls."""
    return movement_delay_us(direction, boosted) / 1_000_000

"""Clocks used for timed effects."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report a monotonic reading in microseconds."""

    def now_us(self) -> int: ...


class MonotonicClock:
    """Wall clock backed by ``time.monotonic_ns``."""

    def now_us(self) -> int:
        return time.monotonic_ns() // 1000


class ManualClock:
    """Clock that only moves when told to.

    Lets tests and simulations step through the boost window without
    sleeping.
    """

    def __init__(self, start_us: int = 0):
        self._now_us = start_us

    def now_us(self) -> int:
        return self._now_us

    def advance(self, microseconds: int) -> None:
        if microseconds < 0:
            raise ValueError("ManualClock cannot run backwards")
        self._now_us += microseconds

    def advance_seconds(self, seconds: float) -> None:
        self.advance(int(seconds * 1_000_000))

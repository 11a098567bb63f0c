from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock():
    from snakegame.clock import ManualClock

    return ManualClock(start_us=10_000_000)


@pytest.fixture
def state():
    from snakegame.state import GameState

    return GameState.create()

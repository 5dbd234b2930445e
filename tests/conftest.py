"""Shared fixtures: a controllable clock and small hand-made grids."""

from __future__ import annotations

import pytest

from cutthetree.api import LevelMode
from cutthetree.engine import InteractionEngine
from cutthetree.levels import grid_from_rows
from cutthetree.player import MOVE_DURATION_MS


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


ARENA = [
    "BBBBBB",
    "B....B",
    "B..F.B",
    "BBBBBB",
]


def arena_generator(mode, level_number):
    return grid_from_rows(ARENA)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_engine(clock):
    def _make(rows, mode=LevelMode.Normal, level_generator=arena_generator):
        return InteractionEngine(
            grid_from_rows(rows), mode, 1, clock=clock, level_generator=level_generator,
        )
    return _make


@pytest.fixture
def step(clock):
    """Walk once and let the move animation finish."""
    def _step(engine, direction):
        outcome = engine.walk(direction)
        clock.advance(MOVE_DURATION_MS)
        engine.tick()
        return outcome
    return _step

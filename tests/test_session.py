"""Tests for cutthetree.session – the command surface used by the game loop."""

from __future__ import annotations

import pytest

from cutthetree.api import Direction, GameState, LevelMode
from cutthetree.engine import CUT_DURATION_MS
from cutthetree.player import MOVE_DURATION_MS
from cutthetree.session import GameSession


def hold(session, clock, direction, steps=1):
    """Hold a direction key for exactly *steps* moves, then release it."""
    session.submit_direction(direction)
    for _ in range(steps):
        session.tick()
        clock.advance(MOVE_DURATION_MS)
        session.tick()
    session.submit_direction(None)


@pytest.fixture
def session(clock):
    return GameSession(clock=clock)


# ---------------------------------------------------------------------------
# new_game
# ---------------------------------------------------------------------------

class TestNewGame:
    def test_no_engine_before_new_game(self, session):
        assert session.state is None
        assert session.tick() is None
        assert session.snapshot() is None
        assert session.drain_effects() == []
        assert session.submit_cut() == "ignored"
        assert session.pause() is False

    def test_new_game_builds_engine(self, session):
        engine = session.new_game(LevelMode.Normal, 2)
        assert session.engine is engine
        assert engine.level_number == 2
        assert session.state == GameState.Running
        assert (engine.player.x, engine.player.y) == (1, 1)

    def test_tutorial_shows_hint(self, session):
        session.new_game(LevelMode.Tutorial, 1)
        assert session.snapshot().player.message == "Use the arrow keys to walk to the flag"

    def test_normal_level_has_no_hint(self, session):
        session.new_game(LevelMode.Normal, 1)
        assert session.snapshot().player.message == ""

    def test_unknown_level_raises(self, session):
        with pytest.raises(ValueError):
            session.new_game(LevelMode.Normal, 99)

    def test_new_game_releases_held_direction(self, session):
        session.new_game(LevelMode.Normal, 1)
        session.submit_direction(Direction.Right)
        session.new_game(LevelMode.Normal, 1)
        assert session.walking is None


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class TestInput:
    def test_key_press_clears_message(self, session):
        session.new_game(LevelMode.Tutorial, 1)
        session.key_pressed()
        assert session.engine.player.message == ""

    def test_held_direction_walks_every_tick(self, session, clock):
        session.new_game(LevelMode.Tutorial, 1)
        hold(session, clock, Direction.Right, steps=2)
        assert (session.engine.player.x, session.engine.player.y) == (3, 1)

    def test_released_direction_stops(self, session, clock):
        session.new_game(LevelMode.Tutorial, 1)
        hold(session, clock, Direction.Right)
        clock.advance(1_000)
        session.tick()
        session.tick()
        assert session.engine.player.x == 2

    def test_paused_session_ignores_actions(self, session, clock):
        session.new_game(LevelMode.Tutorial, 2)
        assert session.pause() is True
        hold(session, clock, Direction.Right)
        assert session.engine.player.x == 1
        assert session.submit_cut() == "ignored"
        assert session.resume() is True
        hold(session, clock, Direction.Right)
        assert session.engine.player.x == 2

    def test_toggle_pause(self, session):
        session.new_game(LevelMode.Normal, 1)
        session.toggle_pause()
        assert session.state == GameState.Paused
        session.toggle_pause()
        assert session.state == GameState.Running


# ---------------------------------------------------------------------------
# Playing through tutorials
# ---------------------------------------------------------------------------

class TestPlaythrough:
    def test_walking_tutorial(self, session, clock):
        session.new_game(LevelMode.Tutorial, 1)
        hold(session, clock, Direction.Right, steps=4)
        assert session.state == GameState.Finished
        assert "win" in session.drain_effects()

    def test_chopping_tutorial(self, session, clock):
        session.new_game(LevelMode.Tutorial, 2)
        hold(session, clock, Direction.Right, steps=2)
        assert session.submit_cut() == "chopping"
        clock.advance(CUT_DURATION_MS)
        session.tick()
        hold(session, clock, Direction.Right, steps=2)
        assert session.state == GameState.Finished
        assert session.drain_effects() == ["pickup", "chopping", "win"]

    def test_next_level(self, session, clock):
        session.new_game(LevelMode.Tutorial, 1)
        assert session.next_level() is False
        hold(session, clock, Direction.Right, steps=4)
        assert session.has_next_level()
        assert session.next_level() is True
        assert session.engine.level_number == 2
        assert session.state == GameState.Running

    def test_no_next_level_after_last(self, session, clock):
        session.new_game(LevelMode.Tutorial, 2)
        assert not session.has_next_level()
        hold(session, clock, Direction.Right, steps=2)
        session.submit_cut()
        clock.advance(CUT_DURATION_MS)
        session.tick()
        hold(session, clock, Direction.Right, steps=2)
        assert session.next_level() is False
        assert session.engine.level_number == 2

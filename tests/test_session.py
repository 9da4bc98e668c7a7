"""
Tests for src/neon_snake/session.py - engine, input and scheduler wired together.
"""

import pygame
import pytest

from src.neon_snake.config import Config, DOWN, LEFT, RIGHT
from src.neon_snake.game import SessionState, TickOutcome
from src.neon_snake.session import GameSession


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def session():
    return GameSession(Config(seed=4, tick_ms=150))


def started(session, now=0):
    assert session.start(now) is True
    session.engine.state.food = (0, 0)   # keep food out of the way
    return session


class TestGameSession:
    """Tests for GameSession."""

    def test_starts_idle(self, session):
        """Nothing moves before the player starts."""
        assert session.engine.state.session is SessionState.IDLE
        assert session.can_start
        assert session.update(1000) is False

    def test_start_arms_scheduler(self, session):
        """start() resets the engine and begins ticking."""
        started(session)
        assert session.engine.is_running
        assert session.scheduler.armed
        assert session.games_played == 1

    def test_start_refused_while_running(self, session):
        """The start control is disabled during a game."""
        started(session)
        assert session.can_start is False
        assert session.start(10) is False
        assert session.games_played == 1

    def test_tick_moves_snake(self, session):
        """One period later the snake has advanced one cell."""
        started(session)
        assert session.update(149) is False
        assert session.update(150) is True
        assert session.engine.state.snake[0] == (11, 10)
        assert session.last_outcome is TickOutcome.MOVED

    def test_input_applied_on_next_tick(self, session):
        """Pending input is consumed by the next tick, not before."""
        started(session)
        session.handle_event(key(pygame.K_DOWN), 10)
        assert session.engine.state.direction == RIGHT
        session.update(150)
        assert session.engine.state.direction == DOWN
        assert session.engine.state.snake[0] == (10, 11)
        assert session.input.pending is None

    def test_reversal_request_ignored(self, session):
        """A reversed key press does not turn the snake around."""
        started(session)
        session.handle_event(key(pygame.K_LEFT), 10)
        session.update(150)
        assert session.engine.state.direction == RIGHT

    def test_game_over_stops_ticks(self, session):
        """Losing disarms the scheduler and re-enables the start control."""
        started(session)
        state = session.engine.state
        state.snake = [(5, 5), (6, 5), (6, 6), (5, 6)]
        state.direction = LEFT
        session.input.push(DOWN)

        session.update(150)
        assert session.last_outcome is TickOutcome.COLLIDED
        assert session.engine.state.session is SessionState.OVER
        assert session.scheduler.armed is False
        assert session.can_start
        assert session.update(300) is False

    def test_restart_after_game_over(self, session):
        """R restarts with a clean board and a single tick stream."""
        started(session)
        session.engine.state.score = 50
        session.engine.end_game()

        assert session.handle_event(key(pygame.K_r), 1000) is True
        assert session.engine.is_running
        assert session.engine.state.score == 0
        assert session.engine.state.snake == [(10, 10)]
        assert session.games_played == 2

        assert session.update(1149) is False
        assert session.update(1150) is True
        assert session.update(1151) is False

    def test_input_ignored_after_game_over(self, session):
        """Arrow keys do nothing once the game has ended."""
        started(session)
        session.engine.end_game()
        assert session.handle_event(key(pygame.K_UP), 0) is False
        assert session.input.pending is None

    def test_click_starts(self, session):
        """A click on the idle screen starts the game."""
        click = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(200, 200), button=1)
        assert session.handle_event(click, 0) is True
        assert session.engine.is_running

    def test_space_while_running_is_not_a_direction(self, session):
        """Control keys pressed mid-game fall through to input and are ignored."""
        started(session)
        assert session.handle_event(key(pygame.K_SPACE), 10) is False
        assert session.games_played == 1

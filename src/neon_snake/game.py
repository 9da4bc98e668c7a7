# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import CFG, Config, DIRECTIONS, RIGHT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ---------- Helpers ----------
def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def as_direction(value) -> Optional[Cell]:
    """Return value as one of the four unit vectors, or None if it is not one."""
    try:
        dx, dy = value
        if (dx, dy) not in DIRECTIONS:
            return None
    except (TypeError, ValueError):
        # unpackable or unhashable items
        return None
    return (int(dx), int(dy))

def wrap(x: int, y: int, grid_count: int) -> Cell:
    # The board has no walls: leaving one edge re-enters the opposite one.
    return (x % grid_count, y % grid_count)

# ---------- State ----------
class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"
    WON = "won"        # snake fills the whole board

class TickOutcome(Enum):
    SKIPPED = "skipped"
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"
    FILLED = "filled"

@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Cell
    food: Optional[Cell]           # None once the board is full
    score: int
    session: SessionState

@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameState handed to renderers."""
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    session: SessionState
    direction: Cell

# ---------- Engine ----------
class Engine:
    """
    Owns the snake, direction, food, score and session state and advances
    them one grid step per tick().

    Nothing outside the engine writes the direction: callers hand a
    pending direction to tick(), which validates it before applying it.
    """

    def __init__(self, config: Config = CFG, rng: Optional[random.Random] = None):
        self.config = config.validate()
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.state = self._new_state(SessionState.IDLE)

    @property
    def grid_count(self) -> int:
        return self.config.grid_count

    @property
    def start_cell(self) -> Cell:
        return (self.grid_count // 2, self.grid_count // 2)

    @property
    def is_running(self) -> bool:
        return self.state.session is SessionState.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.state.session in (SessionState.OVER, SessionState.WON)

    def _new_state(self, session: SessionState) -> GameState:
        self.state = GameState(
            snake=[self.start_cell],
            direction=RIGHT,
            food=None,
            score=0,
            session=session,
        )
        self.spawn_food()
        return self.state

    def reset(self) -> GameState:
        """Start a fresh session: single-cell snake, heading right, score 0."""
        self._new_state(SessionState.RUNNING)
        if self.state.food is None:
            # 1x1 board: the starting cell already fills it
            self.end_game(SessionState.WON)
        logger.info("new session: snake at %s, food at %s", self.start_cell, self.state.food)
        return self.state

    def start(self) -> GameState:
        return self.reset()

    def spawn_food(self) -> Optional[Cell]:
        """
        Place food on a free cell chosen uniformly at random.

        Samples a bounded number of times, then falls back to picking among
        the free cells of an occupancy mask. Returns None (and clears the
        food) when the snake covers the whole board.
        """
        n = self.grid_count
        occupied = set(self.state.snake)

        for _ in range(self.config.food_retries):
            cell = (self.rng.randrange(n), self.rng.randrange(n))
            if cell not in occupied:
                self.state.food = cell
                return cell

        mask = np.zeros((n, n), dtype=bool)   # indexed [y, x]
        for x, y in occupied:
            mask[y, x] = True
        free = np.argwhere(~mask)
        logger.debug("food sampling exhausted; %d free cell(s) left", len(free))
        if len(free) == 0:
            self.state.food = None
            return None

        fy, fx = free[self.rng.randrange(len(free))]
        self.state.food = (int(fx), int(fy))
        return self.state.food

    def tick(self, pending=None) -> TickOutcome:
        """
        Advance the game by one grid step.
        - pending: the latest requested direction, or None for no input.
          Reversals and anything that is not a unit vector are ignored.
        Returns what happened; SKIPPED unless the session is running.
        """
        state = self.state
        if state.session is not SessionState.RUNNING:
            return TickOutcome.SKIPPED

        cand = as_direction(pending)
        if cand is not None and not is_opposite(cand, state.direction):
            state.direction = cand

        hx, hy = state.snake[0]
        dx, dy = state.direction
        new_head = wrap(hx + dx, hy + dy, self.grid_count)

        # Self collision (the tail counts, it has not moved yet)
        if new_head in state.snake:
            self.end_game(SessionState.OVER)
            return TickOutcome.COLLIDED

        state.snake.insert(0, new_head)

        if new_head == state.food:
            state.score += self.config.food_score
            if self.spawn_food() is None:
                self.end_game(SessionState.WON)
                return TickOutcome.FILLED
            return TickOutcome.ATE

        state.snake.pop()
        return TickOutcome.MOVED

    def end_game(self, session: SessionState = SessionState.OVER) -> None:
        """Freeze the session; only reset() leaves a finished state."""
        self.state.session = session
        if session is SessionState.WON:
            logger.info("board full: score %d, length %d", self.state.score, len(self.state.snake))
        else:
            logger.info("game over: score %d, length %d", self.state.score, len(self.state.snake))

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            snake=tuple(state.snake),
            food=state.food,
            score=state.score,
            session=state.session,
            direction=state.direction,
        )

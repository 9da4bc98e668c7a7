# src/autoplay/env.py
from __future__ import annotations
from dataclasses import dataclass, field
import random

import numpy as np  # type: ignore
import pygame       # type: ignore

from src.neon_snake.config import CFG, CELL_SIZE, Config, UP, DOWN, LEFT, RIGHT
from src.neon_snake.game import Engine, GameState, wrap
from src.neon_snake.render import draw_game

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers (screen coordinates, y grows downward)
# -----------------------------------------------------------------------------
def left_of(direction):
    """Turn 90° to the snake's left."""
    dx, dy = direction
    return (dy, -dx)

def right_of(direction):
    """Turn 90° to the snake's right."""
    dx, dy = direction
    return (-dy, dx)

def _would_hit(state: GameState, direction, grid_count: int) -> bool:
    """True if the head moving one cell in 'direction' lands on the body."""
    hx, hy = state.snake[0]
    return wrap(hx + direction[0], hy + direction[1], grid_count) in state.snake

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def _obs(state: GameState, grid_count: int) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1] (head x when there is no food)
      3: fy_n  - food y normalized in [0, 1] (head y when there is no food)
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward is body
      7: danger_left   - 1.0 if the next cell to the left is body
      8: danger_right  - 1.0 if the next cell to the right is body
    """
    hx, hy = state.snake[0]
    fx, fy = state.food if state.food is not None else (hx, hy)
    denom = max(grid_count - 1, 1)
    dx, dy = state.direction

    return np.array(
        [
            hx / denom, hy / denom, fx / denom, fy / denom,
            float(dx), float(dy),
            float(_would_hit(state, state.direction, grid_count)),
            float(_would_hit(state, left_of(state.direction), grid_count)),
            float(_would_hit(state, right_of(state.direction), grid_count)),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Drives the game engine without a display, one tick per step().

    Actions go through the same pending-direction path as player input, so
    a reversal request is ignored by the engine just like a reversed key.
    """
    config: Config = field(default_factory=lambda: CFG)
    seed_value: int | None = CFG.seed
    render_enabled: bool = False
    fps: int = 15

    def __post_init__(self):
        self.config.validate()
        self.np_rng = np.random.default_rng(self.seed_value)
        self.engine: Engine | None = None
        self.screen = None
        self.font = None
        self.clock = None

        if self.render_enabled:
            pygame.init()
            side = self.config.grid_count * CELL_SIZE
            self.screen = pygame.display.set_mode((side, side))
            pygame.display.set_caption("Neon Snake (autoplay)")
            self.font = pygame.font.SysFont(None, 24)
            self.clock = pygame.time.Clock()

    @property
    def grid_count(self) -> int:
        return self.config.grid_count

    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new game and return the first observation."""
        if seed is None:
            seed = self.seed_value
        else:
            self.np_rng = np.random.default_rng(seed)
        self.engine = Engine(self.config, rng=random.Random(seed))
        self.engine.reset()
        return _obs(self.engine.state, self.grid_count)

    def step(self, action: int):
        """
        Apply an action (0..3) and advance exactly one tick. Returns:
          (obs, done, info)
        """
        assert self.engine is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"

        outcome = self.engine.tick(ACTIONS[action])
        state = self.engine.state
        info = {
            "score": state.score,
            "length": len(state.snake),
            "outcome": outcome.value,
            "session": state.session.value,
        }
        return _obs(state, self.grid_count), self.engine.is_finished, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the current frame; does nothing unless render_enabled."""
        if not self.render_enabled or self.engine is None or self.screen is None:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        draw_game(self.screen, self.font, self.engine.snapshot(), self.grid_count)
        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(self.fps)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

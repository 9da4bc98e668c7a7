# input.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import CFG, WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT
from .game import Cell, Engine

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def classify_swipe(dx: float, dy: float, threshold: float) -> Optional[Cell]:
    """
    Turn a touch displacement into a direction.
    The larger axis wins (ties go vertical) and it must move more than
    threshold units; otherwise the gesture is not a swipe.
    """
    if abs(dx) > abs(dy):
        if dx > threshold:
            return RIGHT
        if dx < -threshold:
            return LEFT
    else:
        if dy > threshold:
            return DOWN
        if dy < -threshold:
            return UP
    return None


class InputAdapter:
    """
    Collects directional intents into a single pending slot.

    Later intents overwrite earlier ones until the engine takes the value
    on its next tick. Reversals are passed through untouched; the engine
    decides whether to apply them.
    """

    def __init__(
        self,
        engine: Engine,
        threshold: float = CFG.swipe_threshold,
        surface_size: Tuple[int, int] = (WIDTH, HEIGHT),
    ):
        self.engine = engine
        self.threshold = threshold
        self.surface_size = surface_size
        self.pending: Optional[Cell] = None
        self._touch_start: Optional[Tuple[float, float]] = None

    def push(self, direction: Cell) -> bool:
        if not self.engine.is_running:
            return False
        self.pending = direction
        return True

    def take(self) -> Optional[Cell]:
        pending, self.pending = self.pending, None
        return pending

    def clear(self) -> None:
        self.pending = None
        self._touch_start = None

    def press_key(self, key: int) -> bool:
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.push(direction)

    def touch_start(self, x: float, y: float) -> None:
        self._touch_start = (x, y) if self.engine.is_running else None

    def touch_end(self, x: float, y: float) -> bool:
        start, self._touch_start = self._touch_start, None
        if start is None or not self.engine.is_running:
            return False
        direction = classify_swipe(x - start[0], y - start[1], self.threshold)
        if direction is None:
            return False
        return self.push(direction)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one pygame event. Returns True if it set the pending direction."""
        if event.type == pygame.KEYDOWN:
            return self.press_key(event.key)

        # Finger coordinates are normalized to [0, 1]
        w, h = self.surface_size
        if event.type == pygame.FINGERDOWN:
            self.touch_start(event.x * w, event.y * h)
        elif event.type == pygame.FINGERUP:
            return self.touch_end(event.x * w, event.y * h)
        elif getattr(event, "touch", False):
            return False    # mouse event synthesized from a finger
        # Mouse drags stand in for swipes on desktop
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.touch_start(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self.touch_end(*event.pos)
        return False

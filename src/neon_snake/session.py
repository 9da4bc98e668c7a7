# session.py
import logging
from typing import Optional

import pygame  # type: ignore

from .config import CFG, Config, WIDTH, HEIGHT
from .game import Engine, TickOutcome
from .input import InputAdapter
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)


class GameSession:
    """Wires one engine, one input adapter and one tick scheduler together."""

    def __init__(self, config: Config = CFG, engine: Optional[Engine] = None,
                 surface_size=(WIDTH, HEIGHT)):
        self.config = config.validate()
        self.engine = engine if engine is not None else Engine(config)
        self.input = InputAdapter(self.engine, config.swipe_threshold, surface_size)
        self.scheduler = TickScheduler(config.tick_ms, self._on_tick)
        self.last_outcome: Optional[TickOutcome] = None
        self.games_played = 0

    @property
    def can_start(self) -> bool:
        # The start/restart control is disabled while a game runs
        return not self.engine.is_running

    def start(self, now_ms: int) -> bool:
        if not self.can_start:
            return False
        self.scheduler.stop()
        self.input.clear()
        self.engine.reset()
        self.last_outcome = None
        self.games_played += 1
        if self.engine.is_running:
            self.scheduler.start(now_ms)
        logger.info("game %d started", self.games_played)
        return True

    def restart(self, now_ms: int) -> bool:
        return self.start(now_ms)

    def _on_tick(self) -> None:
        self.last_outcome = self.engine.tick(self.input.take())
        if self.engine.is_finished:
            self.scheduler.stop()

    def update(self, now_ms: int) -> bool:
        return self.scheduler.poll(now_ms)

    def handle_event(self, event: pygame.event.Event, now_ms: int) -> bool:
        """Session controls first, then directional input. Returns True if consumed."""
        if self.can_start:
            if event.type == pygame.KEYDOWN and event.key in START_KEYS:
                return self.start(now_ms)
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                return self.start(now_ms)
            if event.type == pygame.FINGERUP:
                return self.start(now_ms)
        return self.input.handle_event(event)

# scheduler.py
from typing import Callable


class TickScheduler:
    """
    Fires on_tick once every period_ms while armed.

    The frame loop polls it with a millisecond clock (pygame.time.get_ticks()
    in the game), so there is only ever one tick stream: start() cancels the
    current schedule before arming a new one and stop() takes effect before
    it returns.
    """

    def __init__(self, period_ms: int, on_tick: Callable[[], object]):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be > 0, got {period_ms}")
        self.period_ms = period_ms
        self.on_tick = on_tick
        self.ticks = 0
        self._armed = False
        self._ticking = False
        self._next_due = 0

    @property
    def armed(self) -> bool:
        return self._armed

    def start(self, now_ms: int) -> None:
        self.stop()
        self._next_due = now_ms + self.period_ms
        self._armed = True

    def stop(self) -> None:
        self._armed = False

    def poll(self, now_ms: int) -> bool:
        """Run at most one due tick. Returns True if on_tick was called."""
        if not self._armed or self._ticking:
            return False
        if now_ms < self._next_due:
            return False

        self._next_due += self.period_ms
        if now_ms >= self._next_due:
            # Stalled for more than a period: drop the missed ticks
            self._next_due = now_ms + self.period_ms

        self._ticking = True
        try:
            self.ticks += 1
            self.on_tick()
        finally:
            self._ticking = False
        return True

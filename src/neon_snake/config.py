from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
GRID_COUNT = WIDTH // CELL_SIZE
FPS = 60

# ----- Colors -----
BG         = (0, 0, 0)
GRID_LINE  = (255, 0, 0, 13)      # RGBA, very faint
SNAKE_BODY = (255, 0, 0)
SNAKE_HEAD = (255, 85, 85)
FOOD       = (255, 51, 51)
TEXT       = (255, 220, 220)
DIM_TEXT   = (200, 150, 150)
OVERLAY    = (0, 0, 0, 170)

# ----- Directions (dx, dy), y grows downward -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = frozenset((UP, DOWN, LEFT, RIGHT))

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    grid_count: int = GRID_COUNT
    tick_ms: int = 150
    food_score: int = 10
    swipe_threshold: int = 50
    food_retries: int = 256    # random samples before scanning for free cells

    def validate(self) -> "Config":
        if self.grid_count < 1:
            raise ValueError(f"grid_count must be >= 1, got {self.grid_count}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be > 0, got {self.tick_ms}")
        if self.food_score <= 0:
            raise ValueError(f"food_score must be > 0, got {self.food_score}")
        if self.food_retries < 1:
            raise ValueError(f"food_retries must be >= 1, got {self.food_retries}")
        if self.swipe_threshold < 0:
            raise ValueError(f"swipe_threshold must be >= 0, got {self.swipe_threshold}")
        return self

CFG = Config()

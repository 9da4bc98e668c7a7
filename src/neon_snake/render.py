# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import (
    CELL_SIZE, BG, GRID_LINE, SNAKE_BODY, SNAKE_HEAD, FOOD,
    TEXT, DIM_TEXT, OVERLAY,
)
from .game import Snapshot, SessionState


# ---------- Helpers ----------
def _glow(screen: pygame.Surface, center: Tuple[int, int], color, radius: int) -> None:
    """Soft halo: stacked translucent circles, fading outward."""
    size = radius * 2
    halo = pygame.Surface((size, size), pygame.SRCALPHA)
    for r in range(radius, 0, -2):
        alpha = int(60 * (1 - r / radius)) + 6
        pygame.draw.circle(halo, (*color[:3], alpha), (radius, radius), r)
    screen.blit(halo, (center[0] - radius, center[1] - radius))

def draw_grid(screen: pygame.Surface, grid_count: int) -> None:
    layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    w, h = screen.get_size()
    for i in range(grid_count + 1):
        pygame.draw.line(layer, GRID_LINE, (i * CELL_SIZE, 0), (i * CELL_SIZE, h))
        pygame.draw.line(layer, GRID_LINE, (0, i * CELL_SIZE), (w, i * CELL_SIZE))
    screen.blit(layer, (0, 0))

def draw_food(screen: pygame.Surface, food) -> None:
    if food is None:
        return
    cx = food[0] * CELL_SIZE + CELL_SIZE // 2
    cy = food[1] * CELL_SIZE + CELL_SIZE // 2
    _glow(screen, (cx, cy), FOOD, CELL_SIZE)
    pygame.draw.circle(screen, FOOD, (cx, cy), (CELL_SIZE - 4) // 2)

def draw_snake(screen: pygame.Surface, snake) -> None:
    # Tail first so the head ends up on top
    for index in range(len(snake) - 1, -1, -1):
        x, y = snake[index]
        color = SNAKE_HEAD if index == 0 else SNAKE_BODY
        center = (x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)
        _glow(screen, center, color, CELL_SIZE if index == 0 else CELL_SIZE * 3 // 4)
        rect = pygame.Rect(x * CELL_SIZE + 1, y * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
        pygame.draw.rect(screen, color, rect)

def _centered(screen, font, text, color, dy) -> None:
    w, h = screen.get_size()
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=(w // 2, h // 2 + dy)))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    if snap.session is SessionState.RUNNING:
        return
    shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    shade.fill(OVERLAY)
    screen.blit(shade, (0, 0))

    if snap.session is SessionState.IDLE:
        _centered(screen, font, "NEON SNAKE", TEXT, -16)
        _centered(screen, font, "Press SPACE or tap to start", DIM_TEXT, 16)
        return

    title = "BOARD CLEARED" if snap.session is SessionState.WON else "GAME OVER"
    _centered(screen, font, title, TEXT, -16)
    _centered(screen, font, f"Final score: {snap.score}", DIM_TEXT, 16)
    _centered(screen, font, "Press R or tap to restart", DIM_TEXT, 44)


# ---------- Frame ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, grid_count: int) -> None:
    screen.fill(BG)
    draw_grid(screen, grid_count)
    draw_food(screen, snap.food)
    draw_snake(screen, snap.snake)
    hud = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(hud, (8, 6))
    draw_overlay(screen, font, snap)

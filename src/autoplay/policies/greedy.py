# src/autoplay/policies/greedy.py
import numpy as np # type: ignore
from src.autoplay.env import ACTIONS, left_of, right_of
from src.neon_snake.config import UP, DOWN, LEFT, RIGHT


def wrapped_delta(a: int, b: int, grid_count: int) -> int:
    """Signed shortest step count from a to b on a ring of grid_count cells."""
    d = (b - a) % grid_count
    return d - grid_count if d > grid_count // 2 else d


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int, grid_count: int):
    """
    Returns a preference ordering of moves, those that shorten the
    wrapped distance to food first. Does NOT check collisions.
    """
    prefs = []
    dx = wrapped_delta(hx, fx, grid_count)
    dy = wrapped_delta(hy, fy, grid_count)
    if dx < 0:
        prefs.append(LEFT)
    elif dx > 0:
        prefs.append(RIGHT)
    if dy < 0:
        prefs.append(UP)
    elif dy > 0:
        prefs.append(DOWN)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction) -> int:
    """Map (dx, dy) to the env action id."""
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    raise ValueError(f"Not a direction: {direction}")


def decode_obs(obs: np.ndarray, grid_count: int):
    """
    Inverse of env._obs(): grid coordinates, heading and danger flags.
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    scale = max(grid_count - 1, 1)
    head = (int(round(hx_n * scale)), int(round(hy_n * scale)))
    food = (int(round(fx_n * scale)), int(round(fy_n * scale)))
    return head, food, (int(dx), int(dy)), bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env) -> int:
    """
    Greedy on wrapped food distance with simple safety:
    - prefer actions that reduce the distance
    - skip any move flagged dangerous if possible
    - if every move looks dangerous, fall back to random
    """
    (hx, hy), (fx, fy), forward, dan_f, dan_l, dan_r = decode_obs(obs, env.grid_count)

    danger = {
        dir_to_action(forward): dan_f,
        dir_to_action(left_of(forward)): dan_l,
        dir_to_action(right_of(forward)): dan_r,
    }
    # The backwards action is ignored by the engine (it keeps going forward),
    # so it is never a useful choice.
    for a in ACTIONS:
        danger.setdefault(a, True)

    for d in best_move_toward_food(hx, hy, fx, fy, env.grid_count):
        a = dir_to_action(d)
        if not danger[a]:
            return a

    return int(env.np_rng.integers(env.action_space_n))

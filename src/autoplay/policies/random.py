# src/autoplay/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env) -> int:
    """
    Random policy: pick a uniformly random action.
    Reversals it picks are ignored by the engine, so it mostly wanders into itself.
    """
    return int(env.np_rng.integers(env.action_space_n))

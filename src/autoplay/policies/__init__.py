# src/autoplay/policies/__init__.py
"""Built-in policies for headless autoplay."""

from src.autoplay.policies.random import policy_random
from src.autoplay.policies.greedy import policy_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
}


def get_policy(name: str):
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown policy: {name}") from None


__all__ = ["policy_random", "policy_greedy", "POLICIES", "get_policy"]

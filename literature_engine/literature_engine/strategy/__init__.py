"""Strategy module for self-play bots."""

import random

from literature_engine.strategy.base import SeatView, Strategy
from literature_engine.strategy.random_bot import RandomStrategy

STRATEGIES: dict[str, type[Strategy]] = {
    RandomStrategy.name: RandomStrategy,
}


def create_strategy(
    name: str,
    declare_rate: float = 0.05,
    rng: random.Random | None = None,
) -> Strategy:
    """Create a bot strategy by name.

    Raises:
        ValueError: If no strategy has that name.
    """
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}, choose from {sorted(STRATEGIES)}")
    return STRATEGIES[name](declare_rate=declare_rate, rng=rng)


__all__ = ["RandomStrategy", "STRATEGIES", "SeatView", "Strategy", "create_strategy"]

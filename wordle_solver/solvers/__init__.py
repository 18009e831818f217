from __future__ import annotations

import logging
from typing import List

from .base import Strategy, REGISTRY, register, evaluate_pool

from . import entropy  # noqa: F401
from . import minimax  # noqa: F401
from . import hybrid  # noqa: F401
from . import random_consistent  # noqa: F401
from . import adaptive  # noqa: F401

from .adaptive import AdaptiveStrategy, AdaptiveTier
from .entropy import EntropyStrategy, select_best_entropy
from .hybrid import HybridStrategy
from .minimax import MinimaxStrategy, select_best_minimax
from .random_consistent import RandomConsistentStrategy, select_random_candidate
from .selection import (
    select_minimax_first,
    select_with_candidate_preference,
    select_with_expected_tiebreaker,
    select_with_hybrid_scoring,
)
from .solver import Solver, DEFAULT_OPENING

log = logging.getLogger(__name__)

DEFAULT_STRATEGY = "adaptive"


def create_strategy(strategy_id: str, **kwargs) -> Strategy:
    """
    Factory: instantiate a registered strategy by id.

    Unrecognized ids fall back to the adaptive strategy (with a warning).
    Keyword arguments go to the strategy's constructor.
    """
    cls = REGISTRY.get(strategy_id)
    if cls is None:
        log.warning("Unknown strategy id %r; using %r. Available: %s",
                    strategy_id, DEFAULT_STRATEGY, get_strategy_ids())
        cls = REGISTRY[DEFAULT_STRATEGY]
    return cls(**kwargs)


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids and aliases (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "Strategy", "REGISTRY", "register", "evaluate_pool",
    "AdaptiveStrategy", "AdaptiveTier", "EntropyStrategy", "HybridStrategy",
    "MinimaxStrategy", "RandomConsistentStrategy",
    "select_best_entropy", "select_best_minimax", "select_random_candidate",
    "select_minimax_first", "select_with_candidate_preference",
    "select_with_expected_tiebreaker", "select_with_hybrid_scoring",
    "Solver", "DEFAULT_OPENING", "DEFAULT_STRATEGY",
    "create_strategy", "get_strategy_ids",
]

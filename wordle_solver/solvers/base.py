from __future__ import annotations

import logging
import random
from concurrent.futures import Executor, ProcessPoolExecutor
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Type, TypeVar

from wordle_solver.engine import Word

log = logging.getLogger(__name__)

T = TypeVar("T")

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["Strategy"]] = {}

# Pools smaller than this are always scored in-process; the fork/pickle cost
# outweighs the win.
PARALLEL_MIN_POOL = 256


def register(cls: Type["Strategy"]) -> Type["Strategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`
    (and by every name in its `aliases`).
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    for name in (sid, *getattr(cls, "aliases", ())):
        if name in REGISTRY:
            raise ValueError(f"Duplicate strategy id: {name}")
        REGISTRY[name] = cls
    return cls


def evaluate_pool(
        fn: Callable[[Word, Sequence[Word]], T],
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> List[T]:
    """
    Score every guess in `guess_pool` against `candidates` with `fn`.

    Results come back in guess-pool order whether or not worker processes are
    used (Executor.map preserves input order), so any reduction over them is
    as deterministic as a sequential loop.

    Pass a long-lived `executor` (see Strategy.executor) to reuse its worker
    processes; without one a pool is started and shut down for this call.
    """
    if not workers or workers <= 1 or len(guess_pool) < PARALLEL_MIN_POOL:
        return [fn(g, candidates) for g in guess_pool]

    chunksize = max(1, len(guess_pool) // (workers * 4))
    log.debug("scoring %d guesses on %d workers (chunksize=%d)",
              len(guess_pool), workers, chunksize)
    job = partial(fn, candidates=candidates)
    if executor is not None:
        return list(executor.map(job, guess_pool, chunksize=chunksize))
    with ProcessPoolExecutor(max_workers=workers) as one_shot:
        return list(one_shot.map(job, guess_pool, chunksize=chunksize))


# ---- Base class that strategies inherit ----
class Strategy:
    id = "base"
    name = "Base"
    version = "0.0.0"
    aliases: tuple = ()

    def __init__(self, *, workers: int | None = None, seed: int | None = None):
        self.workers = workers
        self.rng = random.Random(seed)
        self._executor: Optional[ProcessPoolExecutor] = None

    def reset(self, seed: int | None = None) -> None:
        """Reseed the RNG so a game can be replayed exactly."""
        self.rng = random.Random(seed)

    @property
    def executor(self) -> Optional[ProcessPoolExecutor]:
        """
        Worker pool shared by every scoring call of this strategy.

        Started on first use and kept until close(); None when scoring runs
        in-process (workers unset or 1).
        """
        if not self.workers or self.workers <= 1:
            return None
        if self._executor is None:
            log.debug("starting worker pool (%d processes)", self.workers)
            self._executor = ProcessPoolExecutor(max_workers=self.workers)
        return self._executor

    def close(self) -> None:
        """Shut down the worker pool, if one was started. Safe to call twice."""
        if self._executor is not None:
            self._executor.shutdown()
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def select_guess(self, guess_pool: Sequence[Word],
                     candidates: Sequence[Word]) -> Optional[Word]:
        """
        Pick the next guess from `guess_pool` given the live `candidates`.

        Returns None only when `guess_pool` is empty.
        """
        raise NotImplementedError("Override in subclass")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(workers={self.workers!r})"

# simulations/run.py

from __future__ import annotations

import random
from typing import Optional

from monty_hall import run_trials

from .common import Timer, TrialResult, TrialSpec


DEFAULT_SEED = 42


def make_rng(seed: Optional[int]) -> random.Random:
    """
    Seeded generator for reproducible runs; a fresh OS-seeded one otherwise.
    """
    if seed is None:
        return random.Random()
    return random.Random(seed)


def run_experiment(num_trials: int, seed: Optional[int] = DEFAULT_SEED) -> TrialResult:
    """
    Run a single simulation and return a TrialResult.

    Parameters
    ----------
    num_trials:
        Number of Monty Hall rounds to play (>= 0).
    seed:
        RNG seed. Pass None for a non-reproducible run.

    Returns
    -------
    TrialResult
    """
    spec = TrialSpec(num_trials=num_trials, seed=seed)
    rng = make_rng(spec.seed)

    with Timer() as t:
        tally = run_trials(spec.num_trials, rng)

    return TrialResult(
        spec=spec,
        tally=tally,
        runtime_s=t.elapsed_s,
        meta={"seeded": spec.seed is not None},
    )

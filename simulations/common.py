# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import time

from monty_hall import Tally


@dataclass(frozen=True)
class TrialSpec:
    """
    Parameters of one simulation run.
    """
    num_trials: int
    seed: Optional[int] = None  # None -> unseeded generator

    def __post_init__(self) -> None:
        if self.num_trials < 0:
            raise ValueError("num_trials must be >= 0")


@dataclass(frozen=True)
class SummaryStats:
    """
    Win percentages for both strategies.
    """
    switch_pct: float
    keep_pct: float


def summarize_tally(tally: Tally, num_trials: int) -> SummaryStats:
    switch_pct, keep_pct = tally.percentages(num_trials)
    return SummaryStats(switch_pct=switch_pct, keep_pct=keep_pct)


@dataclass
class TrialResult:
    """
    Common return type for a simulation run.
    """
    spec: TrialSpec
    tally: Tally

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: every trial is won by exactly one strategy
        expected = self.spec.num_trials
        actual = self.tally.total
        if actual != expected:
            raise ValueError(
                f"tally sum mismatch: expected {expected}, got {actual}"
            )

        self.stats = summarize_tally(self.tally, self.spec.num_trials)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_stats_line(r: TrialResult) -> str:
    """
    Human-friendly one-liner, used as the chart title.
    """
    s = r.stats
    return (
        f"trials={r.spec.num_trials}: switch={s.switch_pct:.2f}%, keep={s.keep_pct:.2f}%"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )

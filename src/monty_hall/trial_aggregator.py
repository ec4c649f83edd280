import random
from dataclasses import dataclass
from typing import Tuple

from .round_simulator import RoundOutcome, iter_rounds


@dataclass(frozen=True)
class Tally:
    """
    Win counts for the two strategies over a run of rounds.

    Immutable: record() returns a new Tally instead of mutating this one,
    so the accumulator is threaded explicitly through the trial loop.
    """
    switch_wins: int = 0
    keep_wins: int = 0

    def __post_init__(self) -> None:
        if self.switch_wins < 0 or self.keep_wins < 0:
            raise ValueError("tally counts must be >= 0")

    @property
    def total(self) -> int:
        return self.switch_wins + self.keep_wins

    def record(self, outcome: RoundOutcome) -> "Tally":
        """
        Fold one round into the tally. Exactly one counter moves.
        """
        if outcome.switched == outcome.prize:
            return Tally(self.switch_wins + 1, self.keep_wins)
        if outcome.chosen == outcome.prize:
            return Tally(self.switch_wins, self.keep_wins + 1)
        raise ValueError(
            f"prize {outcome.prize} is neither the chosen ({outcome.chosen}) "
            f"nor the switched ({outcome.switched}) door"
        )

    def percentages(self, num_trials: int) -> Tuple[float, float]:
        """
        (switch %, keep %) relative to num_trials. Both 0.0 for an empty run.
        """
        if num_trials <= 0:
            return 0.0, 0.0
        return (
            self.switch_wins / num_trials * 100,
            self.keep_wins / num_trials * 100,
        )


def run_trials(num_trials: int, rng: random.Random) -> Tally:
    """
    Simulate num_trials independent rounds and count which strategy won.

    A negative num_trials is treated like zero: no rounds are played and
    an empty Tally is returned.
    """
    tally = Tally()
    for outcome in iter_rounds(num_trials, rng):
        tally = tally.record(outcome)
    return tally

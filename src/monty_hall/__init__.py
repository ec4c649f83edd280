"""
Monty Hall simulation core: one round at a time, folded into a Tally.
"""

from .round_simulator import DOORS, RoundOutcome, draw_position, iter_rounds, simulate_round
from .trial_aggregator import Tally, run_trials

__all__ = [
    "DOORS",
    "RoundOutcome",
    "Tally",
    "draw_position",
    "iter_rounds",
    "run_trials",
    "simulate_round",
]

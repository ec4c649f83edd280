# simulations/cli.py

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from .inputs import DEFAULT_NUM_TRIALS, parse_num_trials, prompt_num_trials
from .report import plot_tally, print_report
from .run import run_experiment


def _resolve_trials(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    """
    Argument wins over the prompt; the prompt wins over the default.
    """
    if args.trials is not None:
        return parse_num_trials(args.trials, console=err_console)
    if args.prompt:
        return prompt_num_trials(console=console, err_console=err_console)
    return DEFAULT_NUM_TRIALS


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate the Monty Hall problem and compare switching vs keeping."
    )
    parser.add_argument(
        "trials",
        nargs="?",
        default=None,
        help=f"number of rounds to play (default {DEFAULT_NUM_TRIALS})",
    )
    parser.add_argument("--prompt", action="store_true", help="ask for the number of rounds")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    parser.add_argument("--plot", action="store_true", help="show a bar chart of the tally")
    parser.add_argument("--plot-out", type=Path, default=None, help="save the bar chart to this file")
    parser.add_argument("--no-color", action="store_true", help="disable coloured output")

    args = parser.parse_args(argv)

    console = Console(no_color=args.no_color)
    err_console = Console(stderr=True, no_color=args.no_color)

    num_trials = _resolve_trials(args, console, err_console)
    result = run_experiment(num_trials, seed=args.seed)

    print_report(result, console)

    if args.plot or args.plot_out is not None:
        plot_tally(result, out=args.plot_out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

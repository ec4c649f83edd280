# simulations/report.py

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from rich.console import Console

from .common import TrialResult, format_stats_line


SWITCH_STYLE = "bold green"
KEEP_STYLE = "bold red"


def report_lines(r: TrialResult) -> List[Tuple[str, Optional[str]]]:
    """
    The text report as (line, rich style) pairs.
    """
    t = r.tally
    s = r.stats
    return [
        (f"Number of trials in this simulation: {r.spec.num_trials}", None),
        (f"Switching doors wins: {t.switch_wins} times", SWITCH_STYLE),
        (f"Keeping initial choice wins: {t.keep_wins} times", KEEP_STYLE),
        (f"Switching doors win percentage: {s.switch_pct:.2f}%", SWITCH_STYLE),
        (f"Keeping initial choice win percentage: {s.keep_pct:.2f}%", KEEP_STYLE),
    ]


def format_report(r: TrialResult) -> str:
    return "\n".join(line for line, _ in report_lines(r))


def print_report(r: TrialResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    for line, style in report_lines(r):
        # highlight=False: keep rich from recolouring the numbers
        console.print(line, style=style, highlight=False)


def plot_tally(r: TrialResult, out: Optional[Path] = None) -> None:
    """
    Bar chart of switch vs keep wins. Saved to `out` if given, shown otherwise.
    """
    t = r.tally

    fig = plt.figure(figsize=(6, 4))
    plt.bar(["switch", "keep"], [t.switch_wins, t.keep_wins], color=["tab:green", "tab:red"])
    plt.ylabel("Wins")
    plt.title(format_stats_line(r))
    plt.tight_layout()

    if out is not None:
        out = Path(out)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out)
        plt.close(fig)
    else:
        plt.show()

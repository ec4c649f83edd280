# simulations/inputs.py

from __future__ import annotations

from typing import Optional

from rich.console import Console


DEFAULT_NUM_TRIALS = 100
PROMPT = "Enter the number of trials: "

_err_console = Console(stderr=True)


def _warn_default(console: Optional[Console]) -> int:
    (console or _err_console).print(
        f"Using default value: {DEFAULT_NUM_TRIALS}", style="yellow", highlight=False
    )
    return DEFAULT_NUM_TRIALS


def parse_num_trials(raw: Optional[str], console: Optional[Console] = None) -> int:
    """
    Turn user-supplied text into a trial count.

    Only a plain positive integer is accepted. Anything else ("0", "-1",
    "1.5", "1,5", words, empty input) falls back to DEFAULT_NUM_TRIALS
    and prints a warning.
    """
    text = (raw or "").strip()
    try:
        n = int(text)
    except ValueError:
        return _warn_default(console)

    if n <= 0:
        return _warn_default(console)
    return n


def prompt_num_trials(
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    """
    Ask for the trial count on the terminal. EOF counts as invalid input.
    """
    console = console or Console()
    try:
        raw = console.input(PROMPT)
    except EOFError:
        raw = None
    return parse_num_trials(raw, console=err_console)

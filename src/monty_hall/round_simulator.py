import random
from dataclasses import dataclass
from typing import Iterator, Sequence


# The three doors. Only equality between positions is ever used.
DOORS = (1, 2, 3)


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of a single Monty Hall round.

        prize     door hiding the car
        chosen    door the player picked first
        switched  door the player ends on if they switch after the reveal

    switched != chosen always holds, and prize is always one of
    chosen / switched (the host never opens the prize door).
    """
    prize: int
    chosen: int
    switched: int


def draw_position(candidates: Sequence[int], rng: random.Random) -> int:
    """
    Pick one element of candidates uniformly at random.

    Consumes exactly one rng.randrange() call. An empty candidate list
    means the caller is broken, not that the input was bad.
    """
    if not candidates:
        raise AssertionError("draw_position called with no candidates")
    return candidates[rng.randrange(len(candidates))]


def simulate_round(rng: random.Random) -> RoundOutcome:
    """
    Play one round:

      1. the prize is placed behind a random door
      2. the player picks a random door (independent of step 1)
      3. the host opens a door that is neither the prize nor the pick;
         when the player picked the prize there are two such doors and
         the host picks one at random
      4. switching lands on the only door left closed besides the pick

    Always three draws from rng, in the order prize, chosen, opened.
    """
    prize = draw_position(DOORS, rng)
    chosen = draw_position(DOORS, rng)

    reveal_candidates = [d for d in DOORS if d != prize and d != chosen]
    opened = draw_position(reveal_candidates, rng)

    switched = next(d for d in DOORS if d != chosen and d != opened)

    return RoundOutcome(prize=prize, chosen=chosen, switched=switched)


def iter_rounds(num_trials: int, rng: random.Random) -> Iterator[RoundOutcome]:
    """
    Lazily yield num_trials consecutive rounds drawn from rng.
    Nothing is yielded for num_trials <= 0.
    """
    for _ in range(max(num_trials, 0)):
        yield simulate_round(rng)

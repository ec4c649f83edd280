from __future__ import annotations

import random
from collections import Counter

import pytest

from monty_hall.round_simulator import DOORS, RoundOutcome, draw_position, iter_rounds, simulate_round


def _opened(outcome: RoundOutcome) -> int:
    (door,) = set(DOORS) - {outcome.chosen, outcome.switched}
    return door


def test_draw_position_returns_a_candidate(rng):
    for _ in range(100):
        assert draw_position(DOORS, rng) in DOORS


def test_draw_position_single_candidate_is_deterministic(rng):
    assert draw_position([2], rng) == 2


def test_draw_position_empty_is_a_contract_violation(rng):
    with pytest.raises(AssertionError):
        draw_position([], rng)


def test_draw_position_is_uniform():
    r = random.Random(2024)
    n = 100_000
    counts = Counter(draw_position(DOORS, r) for _ in range(n))

    assert set(counts) == set(DOORS)
    for door in DOORS:
        assert abs(counts[door] / n - 1 / 3) < 0.01


def test_round_invariants_hold_over_many_rounds(rng):
    for outcome in iter_rounds(5_000, rng):
        assert outcome.switched != outcome.chosen
        assert outcome.prize in (outcome.chosen, outcome.switched)
        opened = _opened(outcome)
        assert opened != outcome.chosen
        assert opened != outcome.prize


def test_round_when_player_picks_the_prize(scripted_rng):
    # prize=1, chosen=1, host picks the second of the two goats (door 3)
    outcome = simulate_round(scripted_rng([0, 0, 1]))
    assert outcome == RoundOutcome(prize=1, chosen=1, switched=2)


def test_round_when_player_misses_the_prize(scripted_rng):
    # prize=1, chosen=2, host has only door 3 left to open
    outcome = simulate_round(scripted_rng([0, 1, 0]))
    assert outcome == RoundOutcome(prize=1, chosen=2, switched=1)


def test_round_uses_exactly_three_draws(counting_rng):
    simulate_round(counting_rng)
    assert counting_rng.calls == 3

    list(iter_rounds(10, counting_rng))
    assert counting_rng.calls == 33


def test_prize_and_choice_are_independent_draws():
    # Both cases of the reveal happen: player on the prize and player off it
    r = random.Random(5)
    rounds = list(iter_rounds(1_000, r))
    assert any(o.chosen == o.prize for o in rounds)
    assert any(o.chosen != o.prize for o in rounds)


def test_same_seed_same_rounds():
    a = list(iter_rounds(200, random.Random(99)))
    b = list(iter_rounds(200, random.Random(99)))
    assert a == b


@pytest.mark.parametrize("n", [0, -1, -50])
def test_iter_rounds_empty_for_non_positive(rng, n):
    assert list(iter_rounds(n, rng)) == []


def test_round_outcome_is_immutable():
    outcome = RoundOutcome(prize=1, chosen=2, switched=1)
    with pytest.raises(AttributeError):
        outcome.prize = 3  # type: ignore[misc]

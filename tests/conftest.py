# tests/conftest.py
from __future__ import annotations

import os
import random

# Headless backend before anything imports pyplot
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest


class CountingRandom(random.Random):
    """random.Random that counts randrange() calls."""

    def __init__(self, seed=None) -> None:
        self.calls = 0
        super().__init__(seed)

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return super().randrange(*args, **kwargs)


class ScriptedRandom:
    """
    Fake generator: randrange(n) returns the next scripted index.
    Lets a test pin down exactly which doors get drawn.
    """

    def __init__(self, indices) -> None:
        self._indices = list(indices)

    def randrange(self, n):
        i = self._indices.pop(0)
        assert 0 <= i < n, f"scripted index {i} out of range for {n} candidates"
        return i


@pytest.fixture()
def rng() -> random.Random:
    """Seeded generator, fresh per test."""
    return random.Random(1234)


@pytest.fixture()
def counting_rng() -> CountingRandom:
    return CountingRandom(7)


@pytest.fixture()
def scripted_rng():
    return ScriptedRandom

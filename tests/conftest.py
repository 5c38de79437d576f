from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRng:
    """Random source replaying fixed draws.

    ``decisions`` feed ``random()`` (spawn rolls) and ``fractions`` feed
    ``uniform(low, high)`` as a position inside the range. Once a script runs
    out the defaults are used: never spawn, mid-range values.
    """

    def __init__(self, decisions=(), fractions=(), default_decision=0.99, default_fraction=0.5) -> None:
        self.decisions = list(decisions)
        self.fractions = list(fractions)
        self.default_decision = default_decision
        self.default_fraction = default_fraction

    def random(self) -> float:
        return self.decisions.pop(0) if self.decisions else self.default_decision

    def uniform(self, low: float, high: float) -> float:
        f = self.fractions.pop(0) if self.fractions else self.default_fraction
        return low + f * (high - low)


@pytest.fixture()
def scripted_rng():
    return ScriptedRng


@pytest.fixture()
def quiet_rng() -> ScriptedRng:
    """Never spawns anything."""
    return ScriptedRng()

"""
Tests for per-search score bookkeeping.
"""

import math

import pytest

from weighted_astar.core.graph_paths.ledger import ScoreLedger
from weighted_astar.core.graph_paths.utils import EPSILON, is_better_cost


@pytest.fixture
def ledger() -> ScoreLedger:
    return ScoreLedger("S", start_weight=1.0)


def test_start_is_seeded(ledger):
    assert ledger.g_score("S") == 0.0
    assert ledger.f_score("S") == 1.0
    assert ledger.predecessor("S") is None
    assert "S" in ledger
    assert len(ledger) == 1


def test_unknown_nodes_are_infinite(ledger):
    assert ledger.g_score("X") == math.inf
    assert ledger.f_score("X") == math.inf
    assert "X" not in ledger


def test_first_offer_is_recorded(ledger):
    assert ledger.offer("A", "S", tentative_g=22.0, weight=4.0, step=22.0)

    assert ledger.g_score("A") == 22.0
    assert ledger.f_score("A") == 26.0
    assert ledger.predecessor("A") == "S"
    assert ledger.step_distance("A") == 22.0


def test_only_strict_improvements_update(ledger):
    ledger.offer("A", "S", tentative_g=5.0, weight=1.0, step=5.0)

    assert not ledger.offer("A", "B", tentative_g=5.0, weight=1.0, step=1.0)
    assert not ledger.offer("A", "B", tentative_g=7.0, weight=1.0, step=1.0)
    assert ledger.predecessor("A") == "S"
    assert ledger.g_score("A") == 5.0

    assert ledger.offer("A", "B", tentative_g=3.0, weight=1.0, step=1.0)
    assert ledger.predecessor("A") == "B"
    assert ledger.g_score("A") == 3.0
    assert ledger.f_score("A") == 4.0
    assert ledger.step_distance("A") == 1.0


def test_improvements_within_tolerance_are_ignored(ledger):
    ledger.offer("A", "S", tentative_g=0.3, weight=0.0, step=0.3)
    assert not ledger.offer("A", "B", tentative_g=0.1 + 0.2, weight=0.0, step=0.2)


def test_start_cannot_be_improved(ledger):
    assert not ledger.offer("S", "A", tentative_g=0.0, weight=1.0, step=0.0)
    assert ledger.predecessor("S") is None


def test_came_from_is_read_only(ledger):
    ledger.offer("A", "S", tentative_g=1.0, weight=0.0, step=1.0)

    assert dict(ledger.came_from) == {"A": "S"}
    with pytest.raises(TypeError):
        ledger.came_from["B"] = "A"  # type: ignore[index]


def test_is_better_cost():
    assert is_better_cost(2.0, 3.0)
    assert not is_better_cost(3.0, 3.0)
    assert not is_better_cost(3.0, 2.0)
    assert not is_better_cost(3.0 - EPSILON / 2, 3.0)
    assert is_better_cost(1.0, math.inf)

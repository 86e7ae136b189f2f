"""
Per-search score bookkeeping.

The ledger holds the best known cumulative distance (g-score) and total score
(f-score = g-score + node weight) for every discovered node, along with the
predecessor that produced each g-score. A node's scores only ever change
through offer(), and only when the offered distance is a strict improvement.
"""

import math
from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional

from ..types import N
from .utils import is_better_cost


class ScoreLedger(Generic[N]):
    """
    g-score, f-score and came-from records for one search.

    Lookups of undiscovered nodes return math.inf.

    Example:
        >>> ledger = ScoreLedger("S", start_weight=1.0)
        >>> ledger.offer("A", "S", tentative_g=2.0, weight=4.0, step=2.0)
        True
        >>> ledger.f_score("A")
        6.0
    """

    def __init__(self, start: N, start_weight: float):
        self.start = start
        self._g_score: Dict[N, float] = {start: 0.0}
        self._f_score: Dict[N, float] = {start: start_weight}
        self._came_from: Dict[N, N] = {}
        self._step: Dict[N, float] = {}

    def __contains__(self, node: object) -> bool:
        return node in self._g_score

    def __len__(self) -> int:
        return len(self._g_score)

    def g_score(self, node: N) -> float:
        return self._g_score.get(node, math.inf)

    def f_score(self, node: N) -> float:
        return self._f_score.get(node, math.inf)

    def predecessor(self, node: N) -> Optional[N]:
        return self._came_from.get(node)

    def step_distance(self, node: N) -> float:
        """Distance of the edge that produced node's current g-score."""
        return self._step.get(node, 0.0)

    @property
    def came_from(self) -> Mapping[N, N]:
        """Read-only view of the predecessor map."""
        return MappingProxyType(self._came_from)

    def offer(self, node: N, predecessor: N, tentative_g: float, weight: float, step: float) -> bool:
        """
        Offer a tentative g-score for node reached from predecessor.

        Args:
            node: Node being reached
            predecessor: Node the edge leaves from
            tentative_g: g-score of predecessor plus the edge distance
            weight: Heuristic weight of node
            step: Distance of the edge itself

        Returns:
            True if the scores were updated, False if the offer was discarded
        """
        if node in self._g_score and not is_better_cost(tentative_g, self._g_score[node]):
            return False

        self._g_score[node] = tentative_g
        self._f_score[node] = tentative_g + weight
        self._came_from[node] = predecessor
        self._step[node] = step
        return True

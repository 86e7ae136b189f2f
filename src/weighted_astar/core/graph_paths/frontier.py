"""
Open set for the weighted A* search.

A binary heap of (f_score, counter, node) entries. Refreshing a node pushes a
new entry instead of updating in place; the superseded entry stays in the heap
and is skipped when it surfaces because its f-score no longer matches the
ledger. The counter breaks f-score ties in insertion order, so among equal
scores the first-discovered node is expanded first.
"""

import logging
from heapq import heappop, heappush
from typing import Dict, Generic, List, Optional, Set, Tuple

from ..exceptions import GraphOperationError
from ..types import N
from .ledger import ScoreLedger
from .utils import MAX_QUEUE_SIZE

logger = logging.getLogger(__name__)


class Frontier(Generic[N]):
    """Min-priority open set with lazy deletion of stale entries."""

    def __init__(self, ledger: ScoreLedger[N], maxsize: int = MAX_QUEUE_SIZE):
        self._ledger = ledger
        self._queue: List[Tuple[float, int, N]] = []
        self._live: Dict[N, float] = {}
        self._expanded: Set[N] = set()
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize
        self.stale_skipped = 0

    def push(self, node: N, f_score: float) -> None:
        """Insert node, or refresh it with a new f-score.

        Nodes that were already expanded are never queued again.
        """
        if node in self._expanded:
            return
        if node not in self._live and len(self._live) >= self._maxsize:
            raise GraphOperationError(f"Frontier size limit {self._maxsize} exceeded")

        self._live[node] = f_score
        heappush(self._queue, (f_score, self._counter, node))
        self._counter += 1

    def pop(self) -> Optional[N]:
        """Remove and return the node with the lowest f-score.

        Returns None once no live entries remain.
        """
        while self._queue:
            f_score, _, node = heappop(self._queue)
            if node in self._expanded or f_score != self._ledger.f_score(node):
                self.stale_skipped += 1
                continue
            del self._live[node]
            self._expanded.add(node)
            return node
        return None

    def empty(self) -> bool:
        """Return True if no unexpanded node is queued."""
        return not self._live

    @property
    def expanded_count(self) -> int:
        return len(self._expanded)

    def __len__(self) -> int:
        """Return the number of live (unexpanded) nodes."""
        return len(self._live)

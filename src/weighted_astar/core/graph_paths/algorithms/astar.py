"""
Weighted A* search over a caller-supplied graph mapping.

Each node carries an intrinsic weight that is added to its cumulative distance
to form the f-score driving expansion order. The weight is a per-node bias, not
an estimate of the remaining distance to the goal, so the returned path is only
guaranteed to be distance-optimal when all node weights are equal.
"""

import logging
from time import time
from typing import Any, Hashable, Optional

from ...exceptions import NodeNotFoundError
from ..base import PathFinder
from ..frontier import Frontier
from ..ledger import ScoreLedger
from ..models import PathResult, PerformanceMetrics
from ..reconstruction import reconstruct_path
from ..utils import DEFAULT_MAX_MEMORY_MB, MAX_QUEUE_SIZE, MemoryManager

logger = logging.getLogger(__name__)


class WeightedAStarFinder(PathFinder[PathResult]):
    """Best-first search ordered by g-score plus node weight."""

    def find_path(
        self,
        start_node: Hashable,
        end_node: Hashable,
        **kwargs: Any,
    ) -> Optional[PathResult]:
        """
        Find the lowest-score path from start_node to end_node.

        Args:
            start_node: Node to start from
            end_node: Node to reach
            **kwargs: Search options:
                validate (bool): Check every distance and weight before searching
                    (default False; values are always checked when read)
                max_memory_mb (float): Abort with MemoryError past this much
                    extra process memory (default None, unlimited)
                max_queue_size (int): Maximum number of queued nodes

        Returns:
            PathResult, or None if end_node is unreachable or either endpoint
            is missing from the graph

        Raises:
            InvalidWeightError: If a distance or weight read during the search
                is negative, NaN, infinite or non-numeric
        """
        validate = kwargs.get("validate", False)
        max_memory_mb = kwargs.get("max_memory_mb", DEFAULT_MAX_MEMORY_MB)
        max_queue_size = kwargs.get("max_queue_size", MAX_QUEUE_SIZE)

        try:
            self.validate_nodes(start_node, end_node)
        except NodeNotFoundError as e:
            logger.debug(f"No path from {start_node} to {end_node}: {e}")
            return None

        if validate:
            self.graph.validate().raise_for_errors()

        metrics = PerformanceMetrics(operation="weighted_astar", start_time=time())
        memory_manager = MemoryManager(max_memory_mb)
        try:
            return self._search(start_node, end_node, metrics, memory_manager, max_queue_size)
        except NodeNotFoundError as e:
            logger.warning(f"Search from {start_node} to {end_node} aborted: {e}")
            return None
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = memory_manager.peak_memory_bytes

    def _search(
        self,
        start_node: Hashable,
        end_node: Hashable,
        metrics: PerformanceMetrics,
        memory_manager: MemoryManager,
        max_queue_size: int,
    ) -> Optional[PathResult]:
        logger.debug(f"Starting weighted A* from {start_node} to {end_node}")

        ledger = ScoreLedger(start_node, self.graph.get_weight(start_node))
        frontier = Frontier(ledger, maxsize=max_queue_size)
        frontier.push(start_node, ledger.f_score(start_node))

        while not frontier.empty():
            memory_manager.check_memory()

            current = frontier.pop()
            metrics.nodes_explored = frontier.expanded_count
            current_g = ledger.g_score(current)
            logger.debug(
                f"Visiting node {current} with g={current_g} f={ledger.f_score(current)}"
            )

            if current == end_node:
                path = reconstruct_path(ledger.came_from, start_node, end_node)
                metrics.path_length = len(path) - 1
                metrics.nodes_discovered = len(ledger)
                metrics.stale_entries_skipped = frontier.stale_skipped
                total_distance = sum(ledger.step_distance(node) for node in path[1:])
                logger.debug(f"Found path {path} with distance {total_distance}")
                return PathResult(
                    nodes=path,
                    total_distance=total_distance,
                    total_score=total_distance + self.graph.get_weight(end_node),
                    metrics=metrics,
                )

            for neighbor, distance in self.graph.get_neighbors(current):
                tentative_g = current_g + distance
                weight = self.graph.get_weight(neighbor)
                if ledger.offer(neighbor, current, tentative_g, weight, distance):
                    logger.debug(f"  Updating {neighbor}: g={tentative_g} f={tentative_g + weight}")
                    frontier.push(neighbor, ledger.f_score(neighbor))

        metrics.nodes_discovered = len(ledger)
        metrics.stale_entries_skipped = frontier.stale_skipped
        logger.debug(
            f"No path from {start_node} to {end_node} after exploring "
            f"{metrics.nodes_explored} nodes"
        )
        return None

"""Graph path finding functionality."""

from typing import Any, Hashable, List, Optional

from ..exceptions import NoPathError
from ..graph import GraphModel
from ..types import GraphMapping
from .algorithms.astar import WeightedAStarFinder
from .base import PathFinder
from .frontier import Frontier
from .ledger import ScoreLedger
from .models import PathResult, PerformanceMetrics
from .reconstruction import reconstruct_path
from .utils import EPSILON, MAX_QUEUE_SIZE, is_better_cost

__all__ = [
    "EPSILON",
    "Frontier",
    "MAX_QUEUE_SIZE",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PerformanceMetrics",
    "ScoreLedger",
    "WeightedAStarFinder",
    "astar_path",
    "is_better_cost",
    "reconstruct_path",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def find_path(
        graph: GraphMapping | GraphModel,
        start_node: Hashable,
        end_node: Hashable,
        **kwargs: Any,
    ) -> Optional[PathResult]:
        """Find the weighted A* path between nodes, or None if there is none."""
        return WeightedAStarFinder(graph).find_path(start_node, end_node, **kwargs)

    @classmethod
    def shortest_path(
        cls,
        graph: GraphMapping | GraphModel,
        start_node: Hashable,
        end_node: Hashable,
        **kwargs: Any,
    ) -> PathResult:
        """Find the weighted A* path between nodes.

        Raises:
            NoPathError: If no path exists or an endpoint is not in the graph
        """
        result = cls.find_path(graph, start_node, end_node, **kwargs)
        if result is None:
            raise NoPathError(f"No path exists between {start_node} and {end_node}")
        return result


def astar_path(start: Hashable, end: Hashable, graph: GraphMapping, **kwargs: Any) -> Optional[List]:
    """
    Find a route from start to end through a weighted graph.

    Args:
        start: Node to start from
        end: Node to reach
        graph: Mapping of node -> (iterable of (neighbor, distance), weight)
        **kwargs: Search options accepted by WeightedAStarFinder.find_path

    Returns:
        Nodes from start to end inclusive, or None if no path exists or an
        endpoint is missing from the graph

    Example:
        >>> graph = {
        ...     "S": ([("O1", 22.0), ("O2", 5.0)], 1.0),
        ...     "O1": ([("E", 4.0)], 4.0),
        ...     "O2": ([("E", 20.0)], 1.0),
        ...     "E": ([], 2.0),
        ... }
        >>> astar_path("S", "E", graph)
        ['S', 'O2', 'E']
    """
    result = PathFinding.find_path(graph, start, end, **kwargs)
    return result.nodes if result is not None else None

"""
weighted-astar - Weighted A* Path Finding over Caller-Supplied Graphs

The caller describes the graph as a mapping of each node to its neighbor list
(with per-edge distances) and a heuristic weight. The search expands nodes in
order of distance travelled plus node weight and returns the node sequence of
the route found, or None when there is none.

Example:
    >>> from weighted_astar import astar_path
    >>> astar_path("A", "B", {"A": ([("B", 1.0)], 0.0), "B": ([], 0.0)})
    ['A', 'B']
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("weighted-astar requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import GraphOperationError, InvalidWeightError, NoPathError
from .core.graph import GraphModel, build_graph
from .core.graph_paths import PathFinding, PathResult, WeightedAStarFinder, astar_path

__all__ = [
    "GraphModel",
    "GraphOperationError",
    "InvalidWeightError",
    "NoPathError",
    "PathFinding",
    "PathResult",
    "WeightedAStarFinder",
    "astar_path",
    "build_graph",
]

"""Path finding algorithm implementations."""

from weighted_astar.core.graph_paths.algorithms.astar import WeightedAStarFinder

__all__ = [
    "WeightedAStarFinder",
]

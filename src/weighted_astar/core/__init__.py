"""Core graph model and search functionality."""

from .exceptions import (
    GraphOperationError,
    InvalidWeightError,
    NodeNotFoundError,
    NoPathError,
    PathReconstructionError,
    ResourceNotFoundError,
    ValidationError,
)
from .graph import GraphModel, build_graph
from .types import EdgeTriple, GraphMapping, NodeEntry
from .validation import ValidationResult
from .graph_paths import PathFinding, PathResult, WeightedAStarFinder, astar_path

__all__ = [
    "EdgeTriple",
    "GraphMapping",
    "GraphModel",
    "GraphOperationError",
    "InvalidWeightError",
    "NodeEntry",
    "NodeNotFoundError",
    "NoPathError",
    "PathFinding",
    "PathReconstructionError",
    "PathResult",
    "ResourceNotFoundError",
    "ValidationError",
    "ValidationResult",
    "WeightedAStarFinder",
    "astar_path",
    "build_graph",
]

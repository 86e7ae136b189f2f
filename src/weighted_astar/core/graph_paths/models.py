"""
Data models for graph path finding.

This module provides the data structures returned by the path finding package:
- PathResult: Container for a found path and its costs
- PerformanceMetrics: Container for search performance metrics

Example:
    >>> result = PathResult(nodes=["S", "O2", "E"], total_distance=25.0, total_score=27.0)
    >>> result.length
    2
    >>> list(result)
    ['S', 'O2', 'E']
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Optional, Union

from ..types import N


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of edges in the found path (if any)
        nodes_explored: Number of nodes expanded during search
        nodes_discovered: Number of nodes that received a g-score
        stale_entries_skipped: Superseded frontier entries discarded on extraction
        max_memory_used: Peak memory usage during operation (bytes), when tracked

    Example:
        >>> metrics = PerformanceMetrics(operation="weighted_astar", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    nodes_discovered: int = 0
    stale_entries_skipped: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds, 0.0 if not completed
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "nodes_discovered": self.nodes_discovered,
            "stale_entries_skipped": self.stale_entries_skipped,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class PathResult(Generic[N]):
    """
    Container for a found path.

    Attributes:
        nodes: Node sequence from start to end inclusive
        total_distance: Sum of the edge distances along the path (weights excluded)
        total_score: total_distance plus the weight of the end node
        metrics: Search metrics, if collected
    """

    nodes: List[N]
    total_distance: float
    total_score: float
    metrics: Optional[PerformanceMetrics] = None

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, list):
            raise TypeError("nodes must be a list")

        if not self.nodes:
            raise ValueError("nodes must contain at least the start node")

        if not isinstance(self.total_distance, (int, float)):
            raise TypeError("total_distance must be a numeric value")

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.nodes) - 1

    @property
    def start(self) -> N:
        return self.nodes[0]

    @property
    def end(self) -> N:
        return self.nodes[-1]

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __getitem__(self, index: int) -> N:
        return self.nodes[index]

    def __iter__(self) -> Iterator[N]:
        return iter(self.nodes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "total_distance": self.total_distance,
            "total_score": self.total_score,
            "metrics": self.metrics.to_dict() if self.metrics else None,
        }

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, Optional

from weighted_astar.core.exceptions import NodeNotFoundError
from weighted_astar.core.graph import GraphModel
from weighted_astar.core.types import GraphMapping


class PathFinder[T](ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphMapping | GraphModel):
        """Initialize finder with a graph mapping or an existing model."""
        self.graph = graph if isinstance(graph, GraphModel) else GraphModel(graph)

    @abstractmethod
    def find_path(self, start_node: Hashable, end_node: Hashable, **kwargs: Any) -> Optional[T]:
        """Find path between nodes, or None if there is none."""
        pass

    def find_paths(self, start_node: Hashable, end_node: Hashable, **kwargs: Any) -> Iterator[T]:
        """Find multiple paths between nodes.

        Default implementation yields single path from find_path.
        """
        path = self.find_path(start_node, end_node, **kwargs)
        if path is not None:
            yield path

    def validate_nodes(self, start_node: Hashable, end_node: Hashable) -> None:
        """Validate that nodes exist in graph."""
        if not self.graph.has_node(start_node):
            raise NodeNotFoundError(f"Start node '{start_node}' not found")
        if not self.graph.has_node(end_node):
            raise NodeNotFoundError(f"End node '{end_node}' not found")

"""
Read-only graph model over a caller-supplied mapping.

The caller owns the graph: a mapping from each node to a pair of its neighbor
list (with per-edge distances) and its heuristic weight. This module never
derives adjacency; it only looks values up, checks them and hands them to the
search. Nothing here mutates the mapping, so one mapping can be shared by
searches running on separate threads.

Example:
    >>> graph = build_graph([("S", "A", 2.0), ("A", "E", 3.0)], {"S": 1, "A": 1, "E": 0})
    >>> model = GraphModel(graph)
    >>> model.get_neighbors("S")
    [('A', 2.0)]
"""

from collections import defaultdict
from typing import Dict, Generic, Iterable, List, Mapping, Tuple

from .exceptions import NodeNotFoundError
from .types import N, EdgeTriple, GraphMapping
from .validation import ValidationResult, check_value, ensure_value


class GraphModel(Generic[N]):
    """
    Lookup surface over a graph mapping.

    Every distance and weight is checked when read, so malformed values raise
    InvalidWeightError at the point the search would have used them.

    Attributes:
        graph (GraphMapping): The wrapped caller mapping
    """

    def __init__(self, graph: GraphMapping):
        """
        Wrap a graph mapping.

        Args:
            graph: Mapping of node -> (iterable of (neighbor, distance), weight).
                Neighbor collections must be re-iterable.
        """
        self.graph = graph

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return len(self.graph)

    def has_node(self, node: object) -> bool:
        """Check if node is a key of the mapping."""
        return node in self.graph

    def _entry(self, node: N) -> Tuple[Iterable, float]:
        try:
            neighbors, weight = self.graph[node]
        except KeyError:
            raise NodeNotFoundError(f"Node '{node}' not found") from None
        return neighbors, weight

    def get_neighbors(self, node: N) -> List[Tuple[N, float]]:
        """
        Get the outgoing neighbors of a node with their distances.

        Args:
            node: Node to look up

        Returns:
            List of (neighbor, distance) pairs in the caller's order

        Raises:
            NodeNotFoundError: If node is not in the graph
            InvalidWeightError: If any distance is not a finite, non-negative number
        """
        neighbors, _ = self._entry(node)
        return [
            (neighbor, ensure_value(distance, f"Distance from '{node}' to '{neighbor}'"))
            for neighbor, distance in neighbors
        ]

    def get_weight(self, node: N) -> float:
        """
        Get the heuristic weight of a node.

        Raises:
            NodeNotFoundError: If node is not in the graph
            InvalidWeightError: If the weight is not a finite, non-negative number
        """
        _, weight = self._entry(node)
        return ensure_value(weight, f"Weight of node '{node}'")

    def validate(self) -> ValidationResult:
        """
        Check every distance and weight in the mapping.

        Dangling neighbors (ids listed as neighbors but missing as keys) are
        reported as warnings: they only matter if a search reaches them.

        Returns:
            ValidationResult with one error per malformed value
        """
        errors: List[str] = []
        warnings: List[str] = []
        edge_count = 0

        for node, (neighbors, weight) in self.graph.items():
            error = check_value(weight, f"Weight of node '{node}'")
            if error:
                errors.append(error)
            for neighbor, distance in neighbors:
                edge_count += 1
                error = check_value(distance, f"Distance from '{node}' to '{neighbor}'")
                if error:
                    errors.append(error)
                if neighbor not in self.graph:
                    warnings.append(f"Neighbor '{neighbor}' of node '{node}' is not in the graph")

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            context={"node_count": len(self.graph), "edge_count": edge_count},
        )


def build_graph(
    edges: Iterable[EdgeTriple],
    weights: Mapping[N, float],
    directed: bool = True,
) -> Dict[N, Tuple[List[Tuple[N, float]], float]]:
    """
    Assemble a graph mapping from edge triples and node weights.

    Args:
        edges: (from, to, distance) triples, kept in the given order
        weights: Heuristic weight of every node
        directed: If False, each edge is also added in the reverse direction

    Returns:
        Mapping of node -> (list of (neighbor, distance), weight). Nodes with a
        weight but no edges get an empty neighbor list.

    Raises:
        NodeNotFoundError: If an edge endpoint has no weight
    """
    adjacency: Dict[N, List[Tuple[N, float]]] = defaultdict(list)
    for from_node, to_node, distance in edges:
        for endpoint in (from_node, to_node):
            if endpoint not in weights:
                raise NodeNotFoundError(f"Node '{endpoint}' has no weight")
        adjacency[from_node].append((to_node, distance))
        if not directed:
            adjacency[to_node].append((from_node, distance))

    return {node: (adjacency.get(node, []), weight) for node, weight in weights.items()}

"""
Core type definitions and protocols.

This module provides type definitions used across the search components to
describe the caller-supplied graph mapping.
"""

from typing import Hashable, Iterable, Mapping, Tuple, TypeVar

# Any hashable value can label a node
N = TypeVar("N", bound=Hashable)

# (neighbor, distance to neighbor)
Neighbor = Tuple[N, float]

# (neighbors with distances, node weight)
NodeEntry = Tuple[Iterable[Neighbor], float]

# node -> (neighbors with distances, node weight)
GraphMapping = Mapping[N, NodeEntry]

# (from node, to node, distance)
EdgeTriple = Tuple[N, N, float]

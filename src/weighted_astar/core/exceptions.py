"""
Custom exceptions for the weighted A* path finding system.

This module defines the hierarchy of custom exceptions used throughout the package
to handle error conditions in a structured way. Search outcomes are binary (a path
is found or it is not); the exceptions here cover malformed input, lookup failures
and internal invariant violations.
"""


class ValidationError(Exception):
    """
    Raised when graph data validation fails.

    This exception is raised when caller-supplied graph data fails to meet the
    required criteria, such as numeric type checks or range checks.

    Examples:
        * Negative edge distances
        * NaN or infinite node weights
        * Non-numeric values in a neighbor list
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidWeightError(ValidationError, ValueError):
    """
    Raised when a distance or node weight is not a finite, non-negative number.

    Subclasses ValueError so callers treating bad numeric input generically
    still catch it.
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when a search over the graph cannot complete
    normally.

    Examples:
        * No route between the requested nodes
        * Frontier size limit exceeded
        * Broken predecessor chain during path reconstruction
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NoPathError(GraphOperationError):
    """
    Raised when no path exists between two nodes.

    Covers an unreachable end node as well as a start or end node missing
    from the graph. Only the raising interfaces use it; the plain search
    functions return None instead.
    """


class PathReconstructionError(GraphOperationError):
    """
    Raised when the predecessor chain of a finished search is malformed.

    The search never produces such a chain, so this signals a bug rather
    than a property of the input graph.
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    This exception is a specialized version of ResourceNotFoundError specifically
    for node lookups against the caller's graph mapping.

    Examples:
        * Neighbor list lookup for a node that is not a key
        * Weight lookup for a dangling neighbor
        * Edge endpoint without a weight while building a graph
    """

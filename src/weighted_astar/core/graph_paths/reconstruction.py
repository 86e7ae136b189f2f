"""Path reconstruction from a predecessor map."""

from typing import List, Mapping

from ..exceptions import PathReconstructionError
from ..types import N


def reconstruct_path(came_from: Mapping[N, N], start: N, end: N) -> List[N]:
    """
    Walk predecessors from end back to start and return the start->end sequence.

    Args:
        came_from: Predecessor of every reached node except start
        start: Node the search began from
        end: Node the search reached

    Returns:
        Nodes from start to end inclusive

    Raises:
        PathReconstructionError: If the chain loops or stops before start
    """
    path = [end]
    seen = {end}
    current = end
    while current != start:
        if current not in came_from:
            raise PathReconstructionError(
                f"Predecessor chain from {end} breaks at {current} before reaching {start}"
            )
        current = came_from[current]
        if current in seen:
            raise PathReconstructionError(f"Predecessor chain from {end} loops at {current}")
        seen.add(current)
        path.append(current)

    path.reverse()
    return path

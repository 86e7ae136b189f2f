"""
Tests for path reconstruction.
"""

import pytest

from weighted_astar.core.exceptions import GraphOperationError, PathReconstructionError
from weighted_astar.core.graph_paths.reconstruction import reconstruct_path


def test_reconstruct_path():
    came_from = {"B": "A", "C": "B", "D": "C", "X": "A"}
    assert reconstruct_path(came_from, "A", "D") == ["A", "B", "C", "D"]


def test_single_node_path():
    assert reconstruct_path({}, "A", "A") == ["A"]


def test_broken_chain():
    with pytest.raises(PathReconstructionError, match="breaks at C"):
        reconstruct_path({"D": "C"}, "A", "D")


def test_cyclic_chain():
    with pytest.raises(PathReconstructionError, match="loops"):
        reconstruct_path({"D": "C", "C": "B", "B": "D"}, "A", "D")


def test_reconstruction_error_is_graph_operation_error():
    with pytest.raises(GraphOperationError):
        reconstruct_path({}, "A", "B")

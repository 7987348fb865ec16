"""Shared typing constructs for ridematch.

This package defines the type aliases, enums and immutable records passed
between the distance functions, the solvers and their callers. It contains no
algorithmic logic.
"""

from ridematch.types.base import Cost, DistanceMetric, NodeID
from ridematch.types.dto import (
    AnalysisReport,
    AssignedPair,
    Assignment,
    AssignmentResult,
    CostMatrixResult,
    DijkstraResult,
    Edge,
    MSTResult,
    Neighbor,
    Node,
    Pair,
)

__all__ = [
    # Enums
    "DistanceMetric",
    # Type aliases
    "Cost",
    "NodeID",
    # DTOs
    "Node",
    "Pair",
    "Assignment",
    "AssignedPair",
    "Edge",
    "Neighbor",
    "CostMatrixResult",
    "AssignmentResult",
    "MSTResult",
    "DijkstraResult",
    "AnalysisReport",
]

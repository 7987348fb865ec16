"""ridematch: optimal driver/passenger matching and spanning-backbone analysis.

ridematch computes a minimum-cost assignment between two sets of geolocated
nodes with the Hungarian algorithm, compares it with a naive index-order
pairing, and connects every node with a minimum spanning tree.

Primary API:
    analyze() - Run the full matching analysis and return an AnalysisReport
    build_cost_matrix(), hungarian_assign(), kruskal_mst(), dijkstra()
    Scenario - YAML-defined analysis run

Example:
    from ridematch import Node, analyze

    drivers = [Node("d0", 0.0, 0.0), Node("d1", 5.0, 5.0)]
    passengers = [Node("p0", 5.0, 4.0), Node("p1", 0.0, 1.0)]
    report = analyze(drivers, passengers)
    report.total_assigned_cost <= report.total_naive_cost
"""

from __future__ import annotations

from ridematch import cli, logging
from ridematch._version import __version__
from ridematch.algorithms import (
    UnionFind,
    build_cost_matrix,
    dijkstra,
    hungarian_assign,
    kruskal_mst,
    naive_assignment_cost,
    reconstruct_path,
)
from ridematch.analysis import analyze
from ridematch.config import DEFAULT_CONFIG, MatchingConfig
from ridematch.generate import Bounds, generate_drivers_and_passengers
from ridematch.geo import euclidean_distance, haversine_distance
from ridematch.scenario import Scenario
from ridematch.types import (
    AnalysisReport,
    AssignedPair,
    Assignment,
    AssignmentResult,
    CostMatrixResult,
    DijkstraResult,
    DistanceMetric,
    Edge,
    MSTResult,
    Neighbor,
    Node,
    Pair,
)

__all__ = [
    # Version
    "__version__",
    # Distance
    "DistanceMetric",
    "euclidean_distance",
    "haversine_distance",
    # Solvers
    "build_cost_matrix",
    "naive_assignment_cost",
    "hungarian_assign",
    "kruskal_mst",
    "UnionFind",
    "dijkstra",
    "reconstruct_path",
    # Analysis
    "analyze",
    "Scenario",
    "MatchingConfig",
    "DEFAULT_CONFIG",
    "Bounds",
    "generate_drivers_and_passengers",
    # Records
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
    # Utilities
    "cli",
    "logging",
]

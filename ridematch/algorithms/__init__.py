"""Graph and assignment solvers.

Each solver is a pure function of its input: it allocates its own working
state per call and returns an immutable result record.
"""

from ridematch.algorithms.cost_matrix import (
    build_cost_matrix,
    complete_edges,
    naive_assignment_cost,
    naive_assignments,
)
from ridematch.algorithms.dijkstra import dijkstra, reconstruct_path
from ridematch.algorithms.hungarian import HungarianState, assign_nodes, hungarian_assign
from ridematch.algorithms.kruskal import kruskal_mst
from ridematch.algorithms.union_find import UnionFind

__all__ = [
    "build_cost_matrix",
    "complete_edges",
    "naive_assignment_cost",
    "naive_assignments",
    "hungarian_assign",
    "assign_nodes",
    "HungarianState",
    "kruskal_mst",
    "UnionFind",
    "dijkstra",
    "reconstruct_path",
]

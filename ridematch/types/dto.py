"""Immutable records exchanged between the solvers and their callers.

Every solver call builds these fresh and returns them; nothing here holds
cross-call state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ridematch.types.base import Cost, NodeID


@dataclass(frozen=True)
class Node:
    """A geolocated entity (driver or passenger).

    Attributes:
        id: Identifier, unique within its role set.
        lat: Latitude in degrees (or planar y for synthetic maps).
        lng: Longitude in degrees (or planar x for synthetic maps).
    """

    id: NodeID
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        return cls(id=str(data["id"]), lat=float(data["lat"]), lng=float(data["lng"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Pair:
    """One cell of a cost matrix, denormalized with node ids."""

    source_id: NodeID
    target_id: NodeID
    cost: Cost


@dataclass(frozen=True)
class Assignment:
    """Index-level match between a cost matrix row and column."""

    source_index: int
    target_index: int


@dataclass(frozen=True)
class AssignedPair:
    """Id-level match between a source and a target, with its original cost."""

    source_id: NodeID
    target_id: NodeID
    cost: Cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_id": self.source_id,
            "target_id": self.target_id,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two node ids."""

    u: NodeID
    v: NodeID
    weight: Cost

    def to_dict(self) -> Dict[str, Any]:
        return {"u": self.u, "v": self.v, "weight": self.weight}


@dataclass(frozen=True)
class Neighbor:
    """Directed adjacency entry used by the shortest-path solver."""

    neighbor_id: NodeID
    weight: Cost


@dataclass(frozen=True)
class CostMatrixResult:
    """Dense cost matrix plus its row-major flattened pair list.

    Attributes:
        matrix: ``rows x cols`` costs, ``rows`` = number of sources.
        pairs: One Pair per matrix cell in row-major order.
    """

    matrix: List[List[float]]
    pairs: Tuple[Pair, ...]

    @property
    def shape(self) -> Tuple[int, int]:
        rows = len(self.matrix)
        cols = len(self.matrix[0]) if rows else 0
        return rows, cols


@dataclass(frozen=True)
class AssignmentResult:
    """Minimum-cost assignment and its total (computed on unreduced costs)."""

    assignments: Tuple[Assignment, ...]
    total_cost: float


@dataclass(frozen=True)
class MSTResult:
    """Accepted spanning-forest edges in acceptance order and their total weight."""

    mst_edges: Tuple[Edge, ...]
    total_weight: float


@dataclass(frozen=True)
class DijkstraResult:
    """Shortest distances and predecessors from a single source.

    Unreachable nodes have distance ``math.inf`` and predecessor ``None``.
    """

    distances: Dict[NodeID, float]
    predecessors: Dict[NodeID, Optional[NodeID]]

    def is_reachable(self, node_id: NodeID) -> bool:
        return not math.isinf(self.distances.get(node_id, math.inf))


@dataclass(frozen=True)
class AnalysisReport:
    """Combined result of matching drivers to passengers and spanning all nodes.

    Attributes:
        metric: Name of the distance metric used.
        cost_per_unit_distance: Scalar applied to every distance.
        cost_matrix: Driver x passenger cost matrix.
        assignments: Optimal driver/passenger pairs.
        total_assigned_cost: Sum of optimal pair costs.
        total_naive_cost: Sum of i-th driver to i-th passenger costs.
        mst_edges: Spanning tree (or forest) over drivers and passengers.
        total_mst_weight: Sum of MST edge weights.
    """

    metric: str
    cost_per_unit_distance: float
    cost_matrix: List[List[float]] = field(default_factory=list)
    assignments: Tuple[AssignedPair, ...] = ()
    total_assigned_cost: float = 0.0
    total_naive_cost: float = 0.0
    mst_edges: Tuple[Edge, ...] = ()
    total_mst_weight: float = 0.0

    @property
    def savings(self) -> float:
        """Cost saved by the optimal assignment relative to the naive one."""
        return self.total_naive_cost - self.total_assigned_cost

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "metric": self.metric,
            "cost_per_unit_distance": self.cost_per_unit_distance,
            "cost_matrix": [list(row) for row in self.cost_matrix],
            "assignments": [a.to_dict() for a in self.assignments],
            "total_assigned_cost": self.total_assigned_cost,
            "total_naive_cost": self.total_naive_cost,
            "savings": self.savings,
            "mst_edges": [e.to_dict() for e in self.mst_edges],
            "total_mst_weight": self.total_mst_weight,
        }

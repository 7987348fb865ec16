"""Cost matrices, naive baseline and all-pairs edges from node coordinates.

Cost is modeled linearly as ``distance * cost_per_unit_distance``. Whether the
result reads as time or money is up to the caller.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from ridematch.geo import get_distance_func
from ridematch.types.base import DistanceMetric
from ridematch.types.dto import Assignment, CostMatrixResult, Edge, Node, Pair

MetricLike = Union[DistanceMetric, str]

#: Default multiplier from distance to cost (e.g. minutes per kilometer).
DEFAULT_COST_PER_UNIT_DISTANCE = 2.0


def build_cost_matrix(
    sources: Sequence[Node],
    targets: Sequence[Node],
    metric: MetricLike = DistanceMetric.EUCLIDEAN,
    cost_per_unit_distance: float = DEFAULT_COST_PER_UNIT_DISTANCE,
) -> CostMatrixResult:
    """Build the ``len(sources) x len(targets)`` cost matrix.

    Args:
        sources: Row nodes, in row order.
        targets: Column nodes, in column order.
        metric: Distance metric (enum member or name).
        cost_per_unit_distance: Multiplier applied to every distance.

    Returns:
        CostMatrixResult with ``matrix[i][j]`` the cost of pairing source ``i``
        with target ``j`` and the same costs flattened row-major into pairs.
        Empty sources or targets yield an empty matrix.
    """
    distance = get_distance_func(metric)

    if not sources or not targets:
        return CostMatrixResult(matrix=[], pairs=())

    matrix: List[List[float]] = []
    pairs: List[Pair] = []
    for src in sources:
        row: List[float] = []
        for dst in targets:
            cost = distance(src.lat, src.lng, dst.lat, dst.lng) * cost_per_unit_distance
            row.append(cost)
            pairs.append(Pair(source_id=src.id, target_id=dst.id, cost=cost))
        matrix.append(row)

    return CostMatrixResult(matrix=matrix, pairs=tuple(pairs))


def naive_assignments(sources: Sequence[Node], targets: Sequence[Node]) -> List[Assignment]:
    """Pair the i-th source with the i-th target up to the shorter sequence."""
    return [Assignment(i, i) for i in range(min(len(sources), len(targets)))]


def naive_assignment_cost(
    sources: Sequence[Node],
    targets: Sequence[Node],
    metric: MetricLike = DistanceMetric.EUCLIDEAN,
    cost_per_unit_distance: float = DEFAULT_COST_PER_UNIT_DISTANCE,
) -> float:
    """Total cost of the index-order pairing used as the comparison baseline."""
    distance = get_distance_func(metric)
    total = 0.0
    for a in naive_assignments(sources, targets):
        src = sources[a.source_index]
        dst = targets[a.target_index]
        total += distance(src.lat, src.lng, dst.lat, dst.lng) * cost_per_unit_distance
    return total


def complete_edges(
    nodes: Sequence[Node],
    metric: MetricLike = DistanceMetric.EUCLIDEAN,
    cost_per_unit_distance: float = DEFAULT_COST_PER_UNIT_DISTANCE,
) -> List[Edge]:
    """Return one weighted edge per unordered node pair ``(i < j)``."""
    distance = get_distance_func(metric)
    edges: List[Edge] = []
    for i, u in enumerate(nodes):
        for v in nodes[i + 1 :]:
            weight = distance(u.lat, u.lng, v.lat, v.lng) * cost_per_unit_distance
            edges.append(Edge(u=u.id, v=v.id, weight=weight))
    return edges

"""Kruskal's minimum spanning tree (forest) over a weighted edge list."""

from __future__ import annotations

from typing import Iterable, List

from ridematch.algorithms.union_find import UnionFind
from ridematch.logging import get_logger
from ridematch.types.base import NodeID
from ridematch.types.dto import Edge, MSTResult

logger = get_logger(__name__)


def kruskal_mst(node_ids: Iterable[NodeID], edges: Iterable[Edge]) -> MSTResult:
    """Compute a minimum spanning forest.

    Edges are processed in ascending weight order (stable for ties) and an
    edge is accepted only when it joins two different components. All edges
    are examined, so a disconnected graph yields one tree per component
    instead of an error.

    Args:
        node_ids: Nodes to span. Ids that appear only in ``edges`` are added
            as they are encountered.
        edges: Undirected weighted edges; need not be complete.

    Returns:
        MSTResult with accepted edges in acceptance order and their total weight.
        The edge count equals the number of nodes minus the number of
        connected components.
    """
    components = UnionFind(node_ids)
    sorted_edges = sorted(edges, key=lambda e: e.weight)

    mst_edges: List[Edge] = []
    total_weight = 0.0
    for edge in sorted_edges:
        if components.union(edge.u, edge.v):
            mst_edges.append(edge)
            total_weight += edge.weight

    logger.debug(
        f"Kruskal accepted {len(mst_edges)} of {len(sorted_edges)} edges over "
        f"{len(components)} nodes ({components.component_count} component(s)), "
        f"total weight {total_weight:.6g}"
    )
    return MSTResult(mst_edges=tuple(mst_edges), total_weight=total_weight)

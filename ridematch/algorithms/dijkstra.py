"""Single-source shortest paths over an adjacency-list graph.

Label-setting Dijkstra with a binary heap. Improved tentative distances are
pushed again instead of decreased in place; stale heap entries are skipped via
the visited set. Weights must be non-negative; negative weights are not
detected.
"""

from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

from ridematch.logging import get_logger
from ridematch.types.base import Cost, NodeID
from ridematch.types.dto import DijkstraResult, Neighbor

logger = get_logger(__name__)

#: Adjacency entry: a Neighbor record or a plain ``(neighbor_id, weight)`` tuple.
AdjacencyEntry = Union[Neighbor, Tuple[NodeID, Cost]]

#: Directed adjacency-list graph. Undirected graphs list each edge both ways.
AdjacencyGraph = Mapping[NodeID, Sequence[AdjacencyEntry]]


def _unpack(entry: AdjacencyEntry) -> Tuple[NodeID, Cost]:
    if isinstance(entry, Neighbor):
        return entry.neighbor_id, entry.weight
    neighbor_id, weight = entry
    return neighbor_id, weight


def dijkstra(graph: AdjacencyGraph, source_id: NodeID) -> DijkstraResult:
    """Compute shortest distances and predecessors from ``source_id``.

    Args:
        graph: Mapping of node id to its outgoing adjacency entries.
        source_id: Start node. It gets distance 0 even when absent from ``graph``.

    Returns:
        DijkstraResult covering every node that appears in ``graph`` (as a key
        or as a neighbor) plus the source. Unreachable nodes keep distance
        ``math.inf`` and predecessor ``None``.
    """
    distances: Dict[NodeID, float] = {}
    predecessors: Dict[NodeID, Optional[NodeID]] = {}
    for node_id, adjacency in graph.items():
        distances[node_id] = math.inf
        predecessors[node_id] = None
        for entry in adjacency:
            neighbor_id, _ = _unpack(entry)
            distances.setdefault(neighbor_id, math.inf)
            predecessors.setdefault(neighbor_id, None)
    distances[source_id] = 0.0
    predecessors.setdefault(source_id, None)

    visited: Set[NodeID] = set()
    min_pq: List[Tuple[float, int, NodeID]] = [(0.0, 0, source_id)]
    # Insertion counter keeps heap ordering independent of node id comparability
    counter = 1

    while min_pq:
        current_dist, _, node_id = heappop(min_pq)
        if node_id in visited:
            continue
        visited.add(node_id)

        for entry in graph.get(node_id, ()):
            neighbor_id, weight = _unpack(entry)
            new_dist = current_dist + weight
            if new_dist < distances[neighbor_id]:
                distances[neighbor_id] = new_dist
                predecessors[neighbor_id] = node_id
                heappush(min_pq, (new_dist, counter, neighbor_id))
                counter += 1

    logger.debug(
        f"Dijkstra from '{source_id}' settled {len(visited)} of {len(distances)} nodes"
    )
    return DijkstraResult(distances=distances, predecessors=predecessors)


def reconstruct_path(
    predecessors: Mapping[NodeID, Optional[NodeID]],
    source_id: NodeID,
    target_id: NodeID,
) -> List[NodeID]:
    """Walk predecessors back from ``target_id`` to ``source_id``.

    Returns:
        Node ids from source to target inclusive, ``[source_id]`` when source
        and target coincide, or an empty list when the target is unreachable.
    """
    if target_id == source_id:
        return [source_id]

    path = [target_id]
    node = predecessors.get(target_id)
    while node is not None:
        path.append(node)
        if node == source_id:
            path.reverse()
            return path
        node = predecessors.get(node)
    return []

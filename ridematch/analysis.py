"""Driver/passenger matching analysis.

Wires the solvers together the way the interactive map consumed them: one cost
matrix feeds both the naive baseline and the optimal assignment, and a
complete graph over every node feeds the spanning tree.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from ridematch.algorithms.cost_matrix import build_cost_matrix, complete_edges
from ridematch.algorithms.hungarian import assign_nodes, hungarian_assign
from ridematch.algorithms.kruskal import kruskal_mst
from ridematch.config import DEFAULT_CONFIG, MatchingConfig
from ridematch.logging import get_logger
from ridematch.types.dto import AnalysisReport, Node

logger = get_logger(__name__)


def check_unique_ids(nodes: Sequence[Node]) -> None:
    """Raise ValueError naming every id that appears more than once in ``nodes``."""
    duplicates = sorted(i for i, c in Counter(n.id for n in nodes).items() if c > 1)
    if duplicates:
        raise ValueError(f"Duplicate node id(s): {', '.join(duplicates)}")


def analyze(
    drivers: Sequence[Node],
    passengers: Sequence[Node],
    config: Optional[MatchingConfig] = None,
) -> AnalysisReport:
    """Compare naive and optimal driver/passenger assignment and span all nodes.

    Args:
        drivers: Driver nodes (cost matrix rows).
        passengers: Passenger nodes (cost matrix columns).
        config: Metric and cost factor; defaults to ``DEFAULT_CONFIG``
            (haversine kilometers at 2 minutes per km).

    Returns:
        AnalysisReport. When either side is empty the report carries no
        matrix, assignments or tree and all totals are zero.

    Raises:
        ValueError: If a node id repeats across drivers and passengers.
    """
    config = config or DEFAULT_CONFIG
    metric = config.metric
    factor = config.cost_per_unit_distance

    if not drivers or not passengers:
        logger.info("Nothing to analyze: drivers or passengers list is empty")
        return AnalysisReport(metric=config.metric_name, cost_per_unit_distance=factor)

    all_nodes = [*drivers, *passengers]
    check_unique_ids(all_nodes)

    cost = build_cost_matrix(drivers, passengers, metric, factor)
    matrix = cost.matrix

    naive_count = min(len(drivers), len(passengers))
    total_naive = sum(matrix[i][i] for i in range(naive_count))

    result = hungarian_assign(matrix)
    assignments = assign_nodes(drivers, passengers, matrix, result)

    mst = kruskal_mst([n.id for n in all_nodes], complete_edges(all_nodes, metric, factor))

    report = AnalysisReport(
        metric=config.metric_name,
        cost_per_unit_distance=factor,
        cost_matrix=matrix,
        assignments=assignments,
        total_assigned_cost=result.total_cost,
        total_naive_cost=total_naive,
        mst_edges=mst.mst_edges,
        total_mst_weight=mst.total_weight,
    )
    logger.info(
        f"Matched {len(assignments)} of {len(drivers)} drivers to "
        f"{len(passengers)} passengers: optimal {report.total_assigned_cost:.3f} vs "
        f"naive {report.total_naive_cost:.3f} (savings {report.savings:.3f}); "
        f"MST {len(mst.mst_edges)} edges, weight {mst.total_weight:.3f}"
    )
    return report

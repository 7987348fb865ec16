"""Hungarian (Kuhn-Munkres) minimum-cost assignment.

Matrix-reduction / augmenting-path formulation driven by an explicit state
machine:

    COVER_COLUMNS -> DONE | FIND_ZERO
    FIND_ZERO     -> FIND_ZERO | AUGMENT | ADJUST_COSTS
    AUGMENT       -> COVER_COLUMNS
    ADJUST_COSTS  -> FIND_ZERO | DONE

Rectangular ``m x n`` inputs are padded to ``N x N`` with ``N = max(m, n)``.
Padding cells share one constant cost, so every complete matching pays the
same amount for them and the optimum over the original cells is preserved.
Infinite entries supplied by the caller mark forbidden pairs; when no finite
uncovered value remains the solver stops with the partial matching found so
far.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ridematch.logging import get_logger
from ridematch.types.dto import AssignedPair, Assignment, AssignmentResult, Node

logger = get_logger(__name__)

_UNMARKED = 0
_STAR = 1
_PRIME = 2

#: Relative tolerance under which a reduced cost counts as zero.
_ZERO_RTOL = 1e-12


class HungarianState(Enum):
    """States of the Hungarian solver loop."""

    COVER_COLUMNS = "cover_columns"
    FIND_ZERO = "find_zero"
    AUGMENT = "augment"
    ADJUST_COSTS = "adjust_costs"
    DONE = "done"


class _Munkres:
    """Working state for one solver invocation."""

    def __init__(self, cost: np.ndarray) -> None:
        self.n = cost.shape[0]
        self.cost = cost
        self.marks = np.zeros((self.n, self.n), dtype=np.int8)
        self.row_cover = np.zeros(self.n, dtype=bool)
        self.col_cover = np.zeros(self.n, dtype=bool)
        self.path_start: Optional[Tuple[int, int]] = None
        self.iterations = 0

        finite = cost[np.isfinite(cost)]
        scale = float(np.max(np.abs(finite))) if finite.size else 1.0
        self.eps = _ZERO_RTOL * max(scale, 1.0)

    def is_zero(self, values: np.ndarray) -> np.ndarray:
        return np.abs(values) <= self.eps

    def reduce(self) -> None:
        """Subtract finite row minima, then finite column minima."""
        for axis in (1, 0):
            finite = np.isfinite(self.cost)
            masked = np.where(finite, self.cost, np.inf)
            minima = masked.min(axis=axis)
            minima = np.where(np.isfinite(minima), minima, 0.0)
            if axis == 1:
                self.cost = np.where(finite, self.cost - minima[:, None], self.cost)
            else:
                self.cost = np.where(finite, self.cost - minima[None, :], self.cost)

    def star_initial_zeros(self) -> None:
        """Greedily star independent zeros in row-major order."""
        row_used = np.zeros(self.n, dtype=bool)
        col_used = np.zeros(self.n, dtype=bool)
        for i, j in np.argwhere(self.is_zero(self.cost)):
            if not row_used[i] and not col_used[j]:
                self.marks[i, j] = _STAR
                row_used[i] = True
                col_used[j] = True

    def cover_columns(self) -> HungarianState:
        self.col_cover[:] = (self.marks == _STAR).any(axis=0)
        if int(self.col_cover.sum()) == self.n:
            return HungarianState.DONE
        return HungarianState.FIND_ZERO

    def find_zero(self) -> HungarianState:
        zero = self._find_uncovered_zero()
        if zero is None:
            return HungarianState.ADJUST_COSTS

        row, col = zero
        self.marks[row, col] = _PRIME
        star_col = self._find_in_row(row, _STAR)
        if star_col is not None:
            self.row_cover[row] = True
            self.col_cover[star_col] = False
            return HungarianState.FIND_ZERO

        self.path_start = (row, col)
        return HungarianState.AUGMENT

    def augment(self) -> HungarianState:
        assert self.path_start is not None
        path = [self.path_start]
        col = self.path_start[1]
        while True:
            star_row = self._find_in_col(col, _STAR)
            if star_row is None:
                break
            path.append((star_row, col))
            prime_col = self._find_in_row(star_row, _PRIME)
            # Every starred row reached here was covered via a prime in it
            assert prime_col is not None
            path.append((star_row, prime_col))
            col = prime_col

        for row, col in path:
            self.marks[row, col] = _UNMARKED if self.marks[row, col] == _STAR else _STAR

        self.row_cover[:] = False
        self.col_cover[:] = False
        self.marks[self.marks == _PRIME] = _UNMARKED
        self.path_start = None
        return HungarianState.COVER_COLUMNS

    def adjust_costs(self) -> HungarianState:
        uncovered = self.cost[np.ix_(~self.row_cover, ~self.col_cover)]
        min_val = float(uncovered.min()) if uncovered.size else np.inf
        if not np.isfinite(min_val):
            return HungarianState.DONE

        self.cost[self.row_cover, :] += min_val
        self.cost[:, ~self.col_cover] -= min_val
        return HungarianState.FIND_ZERO

    def run(self) -> None:
        handlers = {
            HungarianState.COVER_COLUMNS: self.cover_columns,
            HungarianState.FIND_ZERO: self.find_zero,
            HungarianState.AUGMENT: self.augment,
            HungarianState.ADJUST_COSTS: self.adjust_costs,
        }
        self.reduce()
        self.star_initial_zeros()

        state = HungarianState.COVER_COLUMNS
        while state is not HungarianState.DONE:
            self.iterations += 1
            state = handlers[state]()

    def _find_uncovered_zero(self) -> Optional[Tuple[int, int]]:
        candidates = self.is_zero(self.cost)
        candidates[self.row_cover, :] = False
        candidates[:, self.col_cover] = False
        hits = np.argwhere(candidates)
        if hits.size == 0:
            return None
        return int(hits[0][0]), int(hits[0][1])

    def _find_in_row(self, row: int, mark: int) -> Optional[int]:
        hits = np.flatnonzero(self.marks[row] == mark)
        return int(hits[0]) if hits.size else None

    def _find_in_col(self, col: int, mark: int) -> Optional[int]:
        hits = np.flatnonzero(self.marks[:, col] == mark)
        return int(hits[0]) if hits.size else None


def hungarian_assign(matrix: Sequence[Sequence[float]]) -> AssignmentResult:
    """Compute a minimum-total-cost assignment of rows to columns.

    Every row is matched to at most one column and vice versa, with
    ``min(m, n)`` pairs whenever a complete matching exists.

    Args:
        matrix: Rectangular ``m x n`` matrix of non-negative costs. Rows must
            all have the same length; this is not validated.

    Returns:
        AssignmentResult with assignments ordered by row index and the total of
        the original (unreduced) costs. An empty matrix yields no assignments
        and zero cost.
    """
    m = len(matrix)
    n = len(matrix[0]) if m else 0
    if m == 0 or n == 0:
        return AssignmentResult(assignments=(), total_cost=0.0)

    original = np.asarray(matrix, dtype=float)
    size = max(m, n)
    padded = np.zeros((size, size), dtype=float)
    padded[:m, :n] = original

    solver = _Munkres(padded)
    solver.run()

    assignments: List[Assignment] = []
    total_cost = 0.0
    for i, j in np.argwhere(solver.marks[:m, :n] == _STAR):
        assignments.append(Assignment(source_index=int(i), target_index=int(j)))
        total_cost += float(original[i, j])

    logger.debug(
        f"Hungarian solved {m}x{n} matrix (padded to {size}x{size}) in "
        f"{solver.iterations} state transitions: {len(assignments)} pairs, "
        f"total cost {total_cost:.6g}"
    )
    return AssignmentResult(assignments=tuple(assignments), total_cost=total_cost)


def assign_nodes(
    sources: Sequence[Node],
    targets: Sequence[Node],
    matrix: Sequence[Sequence[float]],
    result: Optional[AssignmentResult] = None,
) -> Tuple[AssignedPair, ...]:
    """Resolve index assignments into id pairs carrying the original cell cost.

    Args:
        sources: Row nodes used to build ``matrix``.
        targets: Column nodes used to build ``matrix``.
        matrix: Cost matrix the assignment was computed on.
        result: Precomputed assignment; solved from ``matrix`` when omitted.
    """
    if result is None:
        result = hungarian_assign(matrix)
    return tuple(
        AssignedPair(
            source_id=sources[a.source_index].id,
            target_id=targets[a.target_index].id,
            cost=matrix[a.source_index][a.target_index],
        )
        for a in result.assignments
    )

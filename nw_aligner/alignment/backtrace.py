"""
Exhaustive traceback over a filled Needleman-Wunsch score matrix.

Starting at the bottom-right cell, every predecessor whose candidate value
equals the cell's own score is a valid move. When several moves are valid the
path forks and each branch is followed independently, so the result holds
every optimal path, not just one.

Core Design:
1. Explicit work-list instead of recursion: each pending state is a cell plus
   a parent link ``(cell, parent)``. Sibling branches share the link chain of
   their common prefix, so nothing is copied at a fork and no branch can
   mutate another's prefix.
2. A path is complete at the first cell with row == 0 or col == 0. The
   remaining run along the boundary has exactly one legal move per step and
   is emitted by the reconstructor.
3. ``count_paths`` counts optimal paths by dynamic programming over the
   predecessor graph, so callers can inspect the size of the result (and a
   ``max_paths`` cap can reject it) before any enumeration happens.

Notes:
- The number of optimal paths can grow exponentially with sequence length
  and tie density (up to 3 branches per cell). ``max_paths`` and
  ``timeout_seconds`` bound the work; both are disabled by default.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple
import logging
import time

from .base import (
    AlignmentError,
    EnumerationTimeoutError,
    Move,
    PathLimitExceededError,
    ScoringScheme,
)
from .matrix import ScoreMatrix


Cell = Tuple[int, int]


@dataclass(frozen=True)
class TracePath:
    """Ordered cells from the bottom-right cell back to a boundary cell"""

    cells: Tuple[Cell, ...]

    def __post_init__(self):
        cells = tuple((int(i), int(j)) for i, j in self.cells)
        if not cells:
            raise ValueError("A traceback path needs at least one cell")
        for cell, previous in zip(cells, cells[1:]):
            Move.between(cell, previous)
        object.__setattr__(self, "cells", cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    @property
    def start(self) -> Cell:
        return self.cells[0]

    @property
    def end(self) -> Cell:
        return self.cells[-1]

    @property
    def is_complete(self) -> bool:
        """Whether the path reaches the boundary row or column"""
        return self.end[0] == 0 or self.end[1] == 0

    @property
    def moves(self) -> List[Move]:
        return [
            Move.between(cell, previous)
            for cell, previous in zip(self.cells, self.cells[1:])
        ]


class BacktraceEnumerator:
    """Enumerates all maximal-score traceback paths of a ScoreMatrix

    Configuration parameters:
    - max_paths: Reject matrices with more optimal paths than this (None = no cap)
    - timeout_seconds: Abort enumeration after this many seconds (None = no limit)
    """

    MAX_PATHS = None
    TIMEOUT_SECONDS = None

    def __init__(
        self,
        max_paths: Optional[int] = MAX_PATHS,
        timeout_seconds: Optional[float] = TIMEOUT_SECONDS,
    ):
        self.max_paths = max_paths
        self.timeout_seconds = timeout_seconds
        self.logger = logging.getLogger(__name__)
        self.last_stats: Dict[str, float] = {}

    def valid_moves(self, matrix: ScoreMatrix, i: int, j: int) -> List[Move]:
        """Moves from (i, j) whose predecessor value reproduces the cell score

        Boundary cells have no moves. Order is TOP, LEFT, DIAGONAL.
        """
        if i == 0 or j == 0:
            return []
        target = matrix.cell(i, j)
        moves = [
            move for move, value in matrix.candidates(i, j).items() if value == target
        ]
        if not moves:
            raise AlignmentError(
                f"Cell ({i}, {j}) has no optimal predecessor; matrix is inconsistent"
            )
        return moves

    def count_paths(self, matrix: ScoreMatrix) -> int:
        """Number of optimal traceback paths, computed without enumerating them"""
        rows, cols = matrix.values.shape
        # Boundary cells terminate exactly one path each
        counts = [[1] * cols for _ in range(rows)]
        for i in range(1, rows):
            for j in range(1, cols):
                total = 0
                for move in self.valid_moves(matrix, i, j):
                    di, dj = move.offset
                    total += counts[i + di][j + dj]
                counts[i][j] = total
        return counts[rows - 1][cols - 1]

    def enumerate(
        self,
        matrix: ScoreMatrix,
        first: Optional[str] = None,
        second: Optional[str] = None,
        scoring: Optional[ScoringScheme] = None,
    ) -> Tuple[TracePath, ...]:
        """Collect every optimal path from the bottom-right cell to the boundary

        Args:
            matrix: Filled score matrix
            first, second, scoring: Optional; when given they must be the
                ones the matrix was built from

        Returns:
            Tuple of distinct TracePath objects, in depth-first order with
            TOP explored before LEFT before DIAGONAL

        Raises:
            MatrixNotFilledError: The matrix has not been filled
            PathLimitExceededError: More optimal paths than max_paths
            EnumerationTimeoutError: Enumeration ran past timeout_seconds
        """
        self._check_arguments(matrix, first, second, scoring)
        rows, cols = matrix.values.shape

        if self.max_paths is not None:
            total = self.count_paths(matrix)
            if total > self.max_paths:
                raise PathLimitExceededError(total, self.max_paths)

        started = time.monotonic()
        paths: List[TracePath] = []
        forks = 0
        stack = [((rows - 1, cols - 1), None)]

        while stack:
            if self.timeout_seconds is not None:
                elapsed = time.monotonic() - started
                if elapsed > self.timeout_seconds:
                    raise EnumerationTimeoutError(
                        elapsed, self.timeout_seconds, len(paths)
                    )

            cell, parent = stack.pop()
            link = (cell, parent)
            i, j = cell

            if i == 0 or j == 0:
                paths.append(self._materialize(link))
                continue

            moves = self.valid_moves(matrix, i, j)
            if len(moves) > 1:
                forks += 1
                self.logger.debug(
                    f"Fork at ({i}, {j}): {', '.join(m.name for m in moves)}"
                )

            # Pushed in reverse so TOP is popped first
            for move in reversed(moves):
                di, dj = move.offset
                stack.append(((i + di, j + dj), link))

        self.last_stats = {
            "paths": len(paths),
            "forks": forks,
            "elapsed_seconds": time.monotonic() - started,
        }
        return tuple(paths)

    @staticmethod
    def _materialize(link) -> TracePath:
        cells = []
        while link is not None:
            cell, link = link
            cells.append(cell)
        cells.reverse()
        return TracePath(tuple(cells))

    @staticmethod
    def _check_arguments(matrix, first, second, scoring):
        if first is not None and first != matrix.first:
            raise ValueError("First sequence does not match the score matrix")
        if second is not None and second != matrix.second:
            raise ValueError("Second sequence does not match the score matrix")
        if scoring is not None and scoring != matrix.scoring:
            raise ValueError("Scoring scheme does not match the score matrix")

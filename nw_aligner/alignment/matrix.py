"""
Needleman-Wunsch score matrix.

Cell (i, j) holds the optimal global alignment score of the prefixes
first[:i] and second[:j]. Row 0 and column 0 are boundary cells holding the
cumulative gap penalty; every interior cell is the maximum of its three
candidate predecessors (top, left, diagonal).

The table is a numpy object array of Python ints, made read-only as soon
as filling completes, so concurrent readers need no locking.
"""

from typing import Dict, List, Tuple
import logging
import numpy as np

from .base import MatrixNotFilledError, Move, ScoringScheme


class ScoreMatrix:
    """Dynamic-programming table for two sequences and a scoring scheme"""

    def __init__(self, first: str, second: str, scoring: ScoringScheme):
        self.first = first
        self.second = second
        self.scoring = scoring
        self.logger = logging.getLogger(__name__)
        self._values = None  # np.ndarray once filled

    @classmethod
    def build(
        cls, first: str, second: str, scoring: ScoringScheme
    ) -> "ScoreMatrix":
        """Create and fill a matrix in one step"""
        matrix = cls(first, second, scoring)
        matrix.fill()
        return matrix

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.first) + 1, len(self.second) + 1

    @property
    def is_filled(self) -> bool:
        return self._values is not None

    def fill(self) -> "ScoreMatrix":
        """Fill the table in row-major order. Calling it again is a no-op."""
        if self._values is not None:
            return self

        rows, cols = self.shape
        gap = self.scoring.gap
        # Python ints in an object array: scores are unbounded integers
        values = np.empty((rows, cols), dtype=object)

        # Boundary row and column hold the cumulative gap penalty
        for i in range(rows):
            values[i, 0] = i * gap
        for j in range(cols):
            values[0, j] = j * gap

        for i in range(1, rows):
            for j in range(1, cols):
                top, left, diagonal = self._candidate_values(values, i, j)
                values[i, j] = max(top, left, diagonal)

        values.flags.writeable = False
        self._values = values

        self.logger.debug(
            f"Filled {rows}x{cols} score matrix, final score {int(values[-1, -1])}"
        )
        return self

    def _candidate_values(self, values: np.ndarray, i: int, j: int):
        top = int(values[i - 1, j]) + self.scoring.gap
        left = int(values[i, j - 1]) + self.scoring.gap
        diagonal = int(values[i - 1, j - 1]) + self.scoring.substitution(
            self.first[i - 1], self.second[j - 1]
        )
        return top, left, diagonal

    @property
    def values(self) -> np.ndarray:
        """Read-only numpy view of the filled table"""
        if self._values is None:
            raise MatrixNotFilledError()
        return self._values

    @property
    def score(self) -> int:
        """Optimal global alignment score (bottom-right cell)"""
        return int(self.values[-1, -1])

    def cell(self, i: int, j: int) -> int:
        return int(self.values[i, j])

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        return self.cell(i, j)

    def candidates(self, i: int, j: int) -> Dict[Move, int]:
        """Candidate predecessor values of interior cell (i, j)

        Returns:
            Mapping of TOP, LEFT, DIAGONAL to the score each move would give
        """
        if i < 1 or j < 1:
            raise IndexError(f"Cell ({i}, {j}) is a boundary cell")
        top, left, diagonal = self._candidate_values(self.values, i, j)
        return {Move.TOP: top, Move.LEFT: left, Move.DIAGONAL: diagonal}

    def to_list(self) -> List[List[int]]:
        return self.values.tolist()

    def __repr__(self):
        rows, cols = self.shape
        state = f"score={self.score}" if self.is_filled else "unfilled"
        return f"ScoreMatrix({rows}x{cols}, {state})"

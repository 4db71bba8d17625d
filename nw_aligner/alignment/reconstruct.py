"""Rebuild aligned sequence pairs from traceback paths"""

from typing import Iterable, List, Tuple

from .base import GAP, AlignedPair, Move
from .backtrace import TracePath


class AlignmentReconstructor:
    """Converts TracePath objects into AlignedPair objects

    The path is walked from its boundary end back to the bottom-right cell:
    - DIAGONAL step emits first[i-1] against second[j-1]
    - TOP step emits first[i-1] against a gap
    - LEFT step emits a gap against second[j-1]

    A path ending at (i, 0) is preceded by first[:i] against gaps, and one
    ending at (0, j) by gaps against second[:j].
    """

    def reconstruct(self, path: TracePath, first: str, second: str) -> AlignedPair:
        end_i, end_j = path.end
        if end_i != 0 and end_j != 0:
            raise ValueError(f"Traceback path ends off the boundary at {path.end}")

        first_columns: List[str] = list(first[:end_i]) + [GAP] * end_j
        second_columns: List[str] = [GAP] * end_i + list(second[:end_j])

        cells = path.cells
        for k in range(len(cells) - 1, 0, -1):
            i, j = cells[k - 1]
            move = Move.between(cells[k - 1], cells[k])
            a, b = self._column(move, i, j, first, second)
            first_columns.append(a)
            second_columns.append(b)

        return AlignedPair("".join(first_columns), "".join(second_columns))

    def reconstruct_all(
        self, paths: Iterable[TracePath], first: str, second: str
    ) -> Tuple[AlignedPair, ...]:
        return tuple(self.reconstruct(path, first, second) for path in paths)

    @staticmethod
    def _column(move: Move, i: int, j: int, first: str, second: str):
        if move is Move.DIAGONAL:
            return first[i - 1], second[j - 1]
        if move is Move.TOP:
            return first[i - 1], GAP
        return GAP, second[j - 1]

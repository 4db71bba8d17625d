"""Base aligner interface

Defines the scoring scheme, the alignment result structures and the unified
interface shared by all aligners.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple
import logging


GAP = "-"


class AlignmentError(Exception):
    """Base exception for alignment failures"""

    pass


class MatrixNotFilledError(AlignmentError):
    """Raised when a score matrix is queried before it has been filled"""

    def __init__(self, message: str = "Score matrix has not been filled"):
        super().__init__(message)


class PathLimitExceededError(AlignmentError):
    """Raised when the number of optimal paths exceeds the configured cap"""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Found {count} optimal traceback paths, more than the limit of {limit}"
        )


class EnumerationTimeoutError(AlignmentError):
    """Raised when traceback enumeration runs past its time limit"""

    def __init__(self, elapsed: float, limit: float, collected: int):
        self.elapsed = elapsed
        self.limit = limit
        self.collected = collected
        super().__init__(
            f"Traceback enumeration stopped after {elapsed:.3f}s "
            f"(limit {limit:.3f}s) with {collected} paths collected"
        )


class Move(Enum):
    """Three legal predecessor moves, as (row, col) offsets"""

    TOP = (-1, 0)  # consumes a symbol of the first sequence
    LEFT = (0, -1)  # consumes a symbol of the second sequence
    DIAGONAL = (-1, -1)  # match or mismatch column

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def between(cls, cell: Tuple[int, int], previous: Tuple[int, int]) -> "Move":
        """Return the move leading from ``cell`` to its predecessor ``previous``"""
        offset = (previous[0] - cell[0], previous[1] - cell[1])
        for move in cls:
            if move.value == offset:
                return move
        raise ValueError(f"Illegal traceback step {cell} -> {previous}")


@dataclass(frozen=True)
class ScoringScheme:
    """Match reward, mismatch penalty and linear gap penalty"""

    match: int = 5
    mismatch: int = -3
    gap: int = -5

    def substitution(self, a: str, b: str) -> int:
        return self.match if a == b else self.mismatch


@dataclass(frozen=True)
class AlignedPair:
    """One optimal global alignment

    Both strings have the same length; ``GAP`` marks a symbol with no
    counterpart in the other sequence.
    """

    first: str
    second: str

    def __post_init__(self):
        if len(self.first) != len(self.second):
            raise ValueError(
                f"Aligned sequences differ in length: "
                f"{len(self.first)} != {len(self.second)}"
            )

    def __repr__(self):
        return f"AlignedPair({self.first!r}, {self.second!r})"

    @property
    def length(self) -> int:
        return len(self.first)

    def columns(self) -> List[Tuple[str, str]]:
        return list(zip(self.first, self.second))

    @property
    def matches(self) -> int:
        return sum(1 for a, b in self.columns() if a == b and a != GAP)

    @property
    def gaps(self) -> int:
        return sum(1 for a, b in self.columns() if GAP in (a, b))

    @property
    def mismatches(self) -> int:
        return self.length - self.matches - self.gaps

    @property
    def identity(self) -> float:
        """Fraction of columns that are matches"""
        return self.matches / self.length if self.length else 0.0

    def score(self, scoring: ScoringScheme) -> int:
        """Recompute the alignment score column by column"""
        total = 0
        for a, b in self.columns():
            if a == GAP or b == GAP:
                total += scoring.gap
            else:
                total += scoring.substitution(a, b)
        return total

    def ungapped(self) -> Tuple[str, str]:
        """Return the two input sequences with gap symbols removed"""
        return self.first.replace(GAP, ""), self.second.replace(GAP, "")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "first": self.first,
            "second": self.second,
            "matches": self.matches,
            "mismatches": self.mismatches,
            "gaps": self.gaps,
            "identity": round(self.identity, 4),
        }


class AlignerBase(ABC):
    """Aligner base class

    All alignment algorithms should inherit from this class and implement the align() method.

    Responsibilities:
    - Define unified alignment interface
    - Hold the scoring scheme and configuration
    - Handle logging
    """

    def __init__(self, scoring: ScoringScheme = None, **config):
        """Initialize aligner

        Args:
            scoring: Scoring scheme, defaults to ScoringScheme()
            **config: Algorithm-related configuration parameters
        """
        self.scoring = scoring if scoring is not None else ScoringScheme()
        self.config = config
        self.logger = logging.getLogger(f"nw_aligner.{self.__class__.__name__}")

    @abstractmethod
    def align(self, first: str, second: str):
        """Perform alignment

        Args:
            first: Row sequence
            second: Column sequence

        Returns:
            Alignment result object
        """
        raise NotImplementedError

"""
Needleman-Wunsch alignment engine.

Wires the three stages together:
1. Fill the score matrix
2. Enumerate every optimal traceback path
3. Reconstruct one aligned pair per path

Data flows strictly forward; each stage hands read-only output to the next.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import time

from .alignment import (
    AlignedPair,
    AlignerBase,
    AlignmentReconstructor,
    BacktraceEnumerator,
    MatrixNotFilledError,
    ScoreMatrix,
    ScoringScheme,
    TracePath,
)


@dataclass(frozen=True)
class AlignmentResult:
    """Everything produced by one global alignment run"""

    first: str
    second: str
    scoring: ScoringScheme
    matrix: ScoreMatrix
    paths: Tuple[TracePath, ...]
    alignments: Tuple[AlignedPair, ...]
    elapsed_seconds: float = 0.0
    stats: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not self.matrix.is_filled:
            raise MatrixNotFilledError("Alignment result built from an unfilled matrix")

    @property
    def score(self) -> int:
        return self.matrix.score

    @property
    def count(self) -> int:
        """Number of optimal alignments"""
        return len(self.alignments)

    def __repr__(self):
        return (
            f"AlignmentResult({self.first!r}, {self.second!r}, "
            f"score={self.score}, count={self.count})"
        )


class AlignmentEngine(AlignerBase):
    """Global aligner returning all optimal alignments

    Configuration parameters:
    - max_paths: Cap on the number of optimal paths (None = unbounded)
    - timeout_seconds: Time limit for the traceback stage (None = unbounded)
    """

    MAX_PATHS = None
    TIMEOUT_SECONDS = None

    def __init__(self, scoring: Optional[ScoringScheme] = None, **config):
        super().__init__(scoring, **config)
        self.max_paths = config.get("max_paths", self.MAX_PATHS)
        self.timeout_seconds = config.get("timeout_seconds", self.TIMEOUT_SECONDS)
        self.enumerator = BacktraceEnumerator(
            max_paths=self.max_paths, timeout_seconds=self.timeout_seconds
        )
        self.reconstructor = AlignmentReconstructor()

    def align(self, first: str, second: str) -> AlignmentResult:
        """Align two sequences end to end

        Args:
            first: Row sequence
            second: Column sequence

        Returns:
            AlignmentResult with the filled matrix, all optimal paths and
            their aligned pairs

        Raises:
            PathLimitExceededError: More optimal paths than max_paths
            EnumerationTimeoutError: Traceback ran past timeout_seconds
        """
        start_time = time.time()
        self.logger.debug(
            f"Aligning {len(first)} x {len(second)} symbols "
            f"(match={self.scoring.match}, mismatch={self.scoring.mismatch}, "
            f"gap={self.scoring.gap})"
        )

        matrix = ScoreMatrix.build(first, second, self.scoring)
        fill_time = time.time()

        paths = self.enumerator.enumerate(matrix)
        trace_time = time.time()

        alignments = self.reconstructor.reconstruct_all(paths, first, second)
        end_time = time.time()

        stats = {
            "fill_time_seconds": fill_time - start_time,
            "traceback_time_seconds": trace_time - fill_time,
            "reconstruct_time_seconds": end_time - trace_time,
            "forks": self.enumerator.last_stats.get("forks", 0),
        }

        self.logger.info(
            f"Score {matrix.score}, {len(alignments)} optimal alignment(s) "
            f"in {end_time - start_time:.4f}s"
        )

        return AlignmentResult(
            first=first,
            second=second,
            scoring=self.scoring,
            matrix=matrix,
            paths=paths,
            alignments=alignments,
            elapsed_seconds=end_time - start_time,
            stats=stats,
        )

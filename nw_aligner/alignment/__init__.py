"""Alignment algorithm module

Score matrix, exhaustive traceback and alignment reconstruction for
Needleman-Wunsch global alignment.
"""

from .base import (
    GAP,
    AlignedPair,
    AlignerBase,
    AlignmentError,
    EnumerationTimeoutError,
    MatrixNotFilledError,
    Move,
    PathLimitExceededError,
    ScoringScheme,
)
from .matrix import ScoreMatrix
from .backtrace import BacktraceEnumerator, TracePath
from .reconstruct import AlignmentReconstructor

__all__ = [
    "GAP",
    "AlignedPair",
    "AlignerBase",
    "AlignmentError",
    "EnumerationTimeoutError",
    "MatrixNotFilledError",
    "Move",
    "PathLimitExceededError",
    "ScoringScheme",
    "ScoreMatrix",
    "BacktraceEnumerator",
    "TracePath",
    "AlignmentReconstructor",
]

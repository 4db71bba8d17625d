"""
NW Aligner: Needleman-Wunsch global alignment enumerating every optimal alignment.
"""

import logging

from .api import align, align_files
from .engine import AlignmentEngine, AlignmentResult
from .sequences import SequenceFileError, load_sequences, read_sequence_file
from .output import OutputFormatter

# Alignment module
from .alignment import (
    GAP,
    AlignedPair,
    AlignerBase,
    AlignmentError,
    AlignmentReconstructor,
    BacktraceEnumerator,
    EnumerationTimeoutError,
    MatrixNotFilledError,
    Move,
    PathLimitExceededError,
    ScoreMatrix,
    ScoringScheme,
    TracePath,
)

__version__ = "0.1.0"
__all__ = [
    "align",
    "align_files",
    "AlignmentEngine",
    "AlignmentResult",
    "SequenceFileError",
    "load_sequences",
    "read_sequence_file",
    "OutputFormatter",
    "GAP",
    "AlignedPair",
    "AlignerBase",
    "AlignmentError",
    "AlignmentReconstructor",
    "BacktraceEnumerator",
    "EnumerationTimeoutError",
    "MatrixNotFilledError",
    "Move",
    "PathLimitExceededError",
    "ScoreMatrix",
    "ScoringScheme",
    "TracePath",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("nw_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)

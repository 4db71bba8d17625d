"""
API module for Needleman-Wunsch global alignment.
Provides high-level interface for easy integration.
"""

from typing import Optional

from .utils import build_scoring
from .engine import AlignmentEngine, AlignmentResult
from .sequences import DEFAULT_FIRST_FILE, DEFAULT_SECOND_FILE, load_sequences


def align(
    first: str,
    second: str,
    match: Optional[int] = None,
    mismatch: Optional[int] = None,
    gap: Optional[int] = None,
    **config,
) -> AlignmentResult:
    """Align two sequences and return every optimal global alignment

    Args:
        first: Row sequence
        second: Column sequence
        match, mismatch, gap: Scoring scheme, ScoringScheme() defaults when None
        **config: Engine configuration (max_paths, timeout_seconds)
    """
    scoring = build_scoring(match, mismatch, gap)
    return AlignmentEngine(scoring, **config).align(first, second)


def align_files(
    first_path: str = DEFAULT_FIRST_FILE,
    second_path: str = DEFAULT_SECOND_FILE,
    match: Optional[int] = None,
    mismatch: Optional[int] = None,
    gap: Optional[int] = None,
    **config,
) -> AlignmentResult:
    """Align the sequences stored in two two-line sequence files"""
    first, second = load_sequences(first_path, second_path)
    return align(first, second, match=match, mismatch=mismatch, gap=gap, **config)

"""
Backtrace enumeration tests: completeness, ties, limits, boundaries
"""

import itertools

import pytest

from nw_aligner.alignment import (
    AlignmentError,
    BacktraceEnumerator,
    EnumerationTimeoutError,
    MatrixNotFilledError,
    Move,
    PathLimitExceededError,
    ScoreMatrix,
    ScoringScheme,
    TracePath,
)
from nw_aligner.alignment import backtrace

from .conftest import GOLDEN_FIRST, GOLDEN_PATHS, GOLDEN_SECOND


def test_golden_paths(golden_matrix):
    paths = BacktraceEnumerator().enumerate(golden_matrix)
    assert {path.cells for path in paths} == GOLDEN_PATHS
    assert len(paths) == 3


def test_top_branch_explored_first(golden_matrix):
    paths = BacktraceEnumerator().enumerate(golden_matrix)
    assert paths[0].cells[1] == (5, 5)


def test_enumerate_accepts_matching_sequences_and_scoring(golden_matrix, scoring):
    paths = BacktraceEnumerator().enumerate(
        golden_matrix, GOLDEN_FIRST, GOLDEN_SECOND, scoring
    )
    assert {path.cells for path in paths} == GOLDEN_PATHS


def test_mismatched_arguments_rejected(golden_matrix):
    enumerator = BacktraceEnumerator()
    with pytest.raises(ValueError):
        enumerator.enumerate(golden_matrix, "ACGT")
    with pytest.raises(ValueError):
        enumerator.enumerate(golden_matrix, scoring=ScoringScheme(1, -1, -1))


def test_valid_moves(golden_matrix):
    enumerator = BacktraceEnumerator()
    assert enumerator.valid_moves(golden_matrix, 6, 5) == [Move.TOP, Move.LEFT]
    assert enumerator.valid_moves(golden_matrix, 4, 2) == [Move.TOP, Move.DIAGONAL]
    assert enumerator.valid_moves(golden_matrix, 5, 5) == [Move.DIAGONAL]
    assert enumerator.valid_moves(golden_matrix, 0, 3) == []


def test_paths_are_complete_and_distinct(unit_scoring):
    matrix = ScoreMatrix.build("AATT", "ATAT", unit_scoring)
    paths = BacktraceEnumerator().enumerate(matrix)
    assert len(paths) > 1
    assert len({path.cells for path in paths}) == len(paths)
    for path in paths:
        assert path.start == (4, 4)
        assert path.is_complete
        # Only the final cell may sit on the boundary
        assert all(i > 0 and j > 0 for i, j in path.cells[:-1])


def test_all_ties_enumerates_every_path():
    """With zero scores every monotone path is optimal: 13 paths for 2 x 2"""
    matrix = ScoreMatrix.build("AB", "CD", ScoringScheme(0, 0, 0))
    enumerator = BacktraceEnumerator()
    paths = enumerator.enumerate(matrix)
    assert enumerator.count_paths(matrix) == 13
    assert len(paths) == 13
    assert len({path.cells for path in paths}) == 13


@pytest.mark.parametrize(
    "first, second",
    [("ACGCTG", "CATGT"), ("AATT", "ATAT"), ("GATTACA", "GCATGCU"), ("", "AB")],
)
def test_count_paths_matches_enumeration(first, second, unit_scoring):
    matrix = ScoreMatrix.build(first, second, unit_scoring)
    enumerator = BacktraceEnumerator()
    assert enumerator.count_paths(matrix) == len(enumerator.enumerate(matrix))


def test_empty_first_sequence_single_boundary_path(scoring):
    matrix = ScoreMatrix.build("", "ABC", scoring)
    paths = BacktraceEnumerator().enumerate(matrix)
    assert paths == (TracePath(((0, 3),)),)


def test_both_empty_single_path(scoring):
    matrix = ScoreMatrix.build("", "", scoring)
    assert BacktraceEnumerator().enumerate(matrix) == (TracePath(((0, 0),)),)


def test_path_limit(golden_matrix):
    with pytest.raises(PathLimitExceededError) as excinfo:
        BacktraceEnumerator(max_paths=2).enumerate(golden_matrix)
    assert excinfo.value.count == 3
    assert excinfo.value.limit == 2


def test_path_limit_not_reached(golden_matrix):
    assert len(BacktraceEnumerator(max_paths=3).enumerate(golden_matrix)) == 3


def test_timeout(golden_matrix, monkeypatch):
    ticks = itertools.count(0, 10)
    monkeypatch.setattr(backtrace.time, "monotonic", lambda: next(ticks))
    with pytest.raises(EnumerationTimeoutError) as excinfo:
        BacktraceEnumerator(timeout_seconds=5).enumerate(golden_matrix)
    assert excinfo.value.limit == 5
    assert excinfo.value.collected == 0


def test_unfilled_matrix_raises(scoring):
    matrix = ScoreMatrix(GOLDEN_FIRST, GOLDEN_SECOND, scoring)
    with pytest.raises(MatrixNotFilledError):
        BacktraceEnumerator().enumerate(matrix)


def test_inconsistent_matrix_raises(golden_matrix, monkeypatch):
    monkeypatch.setattr(
        golden_matrix,
        "candidates",
        lambda i, j: {Move.TOP: 99, Move.LEFT: 99, Move.DIAGONAL: 99},
    )
    with pytest.raises(AlignmentError):
        BacktraceEnumerator().enumerate(golden_matrix)


def test_last_stats(golden_matrix):
    enumerator = BacktraceEnumerator()
    enumerator.enumerate(golden_matrix)
    assert enumerator.last_stats["paths"] == 3
    assert enumerator.last_stats["forks"] == 2


def test_count_paths_requires_filled_matrix(scoring):
    """Even a boundary-only matrix must be filled before counting"""
    matrix = ScoreMatrix("", "ABC", scoring)
    with pytest.raises(MatrixNotFilledError):
        BacktraceEnumerator().count_paths(matrix)

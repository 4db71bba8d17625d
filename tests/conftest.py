"""Pytest configuration and fixtures

Shared fixtures for all tests.
"""

import pytest

from nw_aligner.alignment import ScoringScheme, ScoreMatrix
from nw_aligner.engine import AlignmentEngine


GOLDEN_FIRST = "ACGCTG"
GOLDEN_SECOND = "CATGT"

GOLDEN_MATRIX = [
    [0, -5, -10, -15, -20, -25],
    [-5, -3, 0, -5, -10, -15],
    [-10, 0, -5, -3, -8, -13],
    [-15, -5, -3, -8, 2, -3],
    [-20, -10, -8, -6, -3, -1],
    [-25, -15, -13, -3, -8, 2],
    [-30, -20, -18, -8, 2, -3],
]

GOLDEN_PATHS = {
    ((6, 5), (5, 5), (4, 4), (3, 4), (2, 3), (1, 2), (0, 1)),
    ((6, 5), (6, 4), (5, 3), (4, 2), (3, 2), (2, 1), (1, 0)),
    ((6, 5), (6, 4), (5, 3), (4, 2), (3, 1), (2, 1), (1, 0)),
}

GOLDEN_ALIGNMENTS = {
    ("-ACGCTG", "CATG-T-"),
    ("ACGCTG-", "-CA-TGT"),
    ("ACGCTG-", "-C-ATGT"),
}


@pytest.fixture
def scoring():
    """Scoring used by the golden fixture: match=5, mismatch=-3, gap=-5"""
    return ScoringScheme(match=5, mismatch=-3, gap=-5)


@pytest.fixture
def unit_scoring():
    return ScoringScheme(match=1, mismatch=-1, gap=-1)


@pytest.fixture
def golden_matrix(scoring):
    return ScoreMatrix.build(GOLDEN_FIRST, GOLDEN_SECOND, scoring)


@pytest.fixture
def engine(scoring):
    return AlignmentEngine(scoring)


@pytest.fixture
def golden_result(engine):
    return engine.align(GOLDEN_FIRST, GOLDEN_SECOND)

"""
Utility functions for the Needleman-Wunsch aligner.
"""

from typing import Optional

from .alignment import ScoringScheme


def build_scoring(
    match: Optional[int] = None,
    mismatch: Optional[int] = None,
    gap: Optional[int] = None,
) -> ScoringScheme:
    """Scoring scheme with ScoringScheme() defaults for any value left as None"""
    defaults = ScoringScheme()
    return ScoringScheme(
        match=defaults.match if match is None else match,
        mismatch=defaults.mismatch if mismatch is None else mismatch,
        gap=defaults.gap if gap is None else gap,
    )


def build_config_from_args(args):
    """Build engine config and scoring scheme from argparse Namespace.

    Returns: (config_dict, scoring_scheme)
    """
    scoring = build_scoring(
        getattr(args, "match", None),
        getattr(args, "mismatch", None),
        getattr(args, "gap", None),
    )

    config = {
        "max_paths": getattr(args, "max_paths", None),
        "timeout_seconds": getattr(args, "timeout", None),
    }

    # Remove None values to avoid overriding defaults
    config = {k: v for k, v in config.items() if v is not None}
    return config, scoring

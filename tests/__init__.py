"""
Tests for the Needleman-Wunsch aligner.

Run all tests:
  python -m pytest tests/ -v
"""

"""Output formatting for alignment results."""

from .formatter import OutputFormatter

__all__ = ["OutputFormatter"]

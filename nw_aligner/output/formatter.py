"""Unified output formatting for alignment results and console reports"""

from typing import Any, Dict, List
import json

from ..engine import AlignmentResult


SEPARATOR = "-" * 10


class OutputFormatter:
    """Formats alignment results into plain text and a JSON-ready schema"""

    @staticmethod
    def format_matrix(result: AlignmentResult) -> str:
        """Tab-separated score table

        The second sequence labels the columns and the first labels the rows.
        """
        lines = ["\t\t" + "\t".join(result.second)]
        for i, row in enumerate(result.matrix.to_list()):
            label = result.first[i - 1] if i > 0 else ""
            lines.append(label + "\t" + "\t".join(str(v) for v in row))
        return "\n".join(lines)

    @staticmethod
    def format_alignments(result: AlignmentResult) -> str:
        lines: List[str] = []
        for pair in result.alignments:
            lines.append(SEPARATOR)
            lines.append(pair.first)
            lines.append(pair.second)
        lines.append(SEPARATOR)
        return "\n".join(lines)

    @staticmethod
    def format_report(result: AlignmentResult, show_matrix: bool = True) -> str:
        """Full console report: matrix, score, backtrace count and alignments"""
        sections = []
        if show_matrix:
            matrix = OutputFormatter.format_matrix(result)
            sections.append("Solution matrix:\n" + matrix)
        sections.append(
            f"Obtained score: {result.score}\n"
            f"Number of backtraces: {result.count}"
        )
        sections.append(
            "All possible alignments:\n" + OutputFormatter.format_alignments(result)
        )
        sections.append(
            f"Execution time: {result.elapsed_seconds * 1000:.3f} milliseconds"
        )
        return "\n\n".join(sections)

    @staticmethod
    def build_summary(result: AlignmentResult) -> Dict[str, Any]:
        """Build a plain-data summary of an alignment result

        Returns:
            Dict with sequences, scoring, matrix, score, count, alignments and timing
        """
        return {
            "sequences": {"first": result.first, "second": result.second},
            "scoring": {
                "match": result.scoring.match,
                "mismatch": result.scoring.mismatch,
                "gap": result.scoring.gap,
            },
            "matrix": result.matrix.to_list(),
            "score": result.score,
            "count": result.count,
            "alignments": [pair.to_dict() for pair in result.alignments],
            "timing_seconds": {
                "total": round(result.elapsed_seconds, 6),
                **{
                    k.replace("_time_seconds", ""): round(v, 6)
                    for k, v in result.stats.items()
                    if k.endswith("_time_seconds")
                },
            },
        }

    @staticmethod
    def to_json(result: AlignmentResult, indent: int = 2) -> str:
        return json.dumps(
            OutputFormatter.build_summary(result), ensure_ascii=False, indent=indent
        )

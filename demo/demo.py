#!/usr/bin/env python3
"""
NW Aligner Demo Script

This script demonstrates basic usage of the nw_aligner API.

Usage:
    python demo.py

Requirements:
    - Install the package: pip install -e .
"""

import sys
import logging
from pathlib import Path

from nw_aligner import OutputFormatter, align, align_files


def main():
    """Main demo function"""

    # Set demo logging level to DEBUG
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Disable propagation to avoid duplicate output
    logging.getLogger("nw_aligner").propagate = False

    demo_dir = Path(__file__).parent
    first_file = demo_dir / "seqS.txt"
    second_file = demo_dir / "seqT.txt"

    print("NW Aligner Demo")
    print("=" * 50)
    print(f"Row sequence file: {first_file}")
    print(f"Column sequence file: {second_file}")
    print()

    # Sequences from files, scoring 5 / -3 / -5
    result = align_files(str(first_file), str(second_file))
    print(OutputFormatter.format_report(result))
    print()

    # Literal sequences with a tie-dense scoring scheme
    result = align("AATT", "ATAT", match=1, mismatch=-1, gap=-1, max_paths=1000)
    print(OutputFormatter.format_report(result, show_matrix=False))

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    sys.exit(main())

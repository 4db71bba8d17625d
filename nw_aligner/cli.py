import argparse
import logging

from .alignment import AlignmentError, ScoringScheme
from .engine import AlignmentEngine
from .output import OutputFormatter
from .sequences import (
    DEFAULT_FIRST_FILE,
    DEFAULT_SECOND_FILE,
    SequenceFileError,
    read_sequence_file,
)
from .utils import build_config_from_args


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nw-aligner",
        description="Needleman-Wunsch global alignment listing every optimal alignment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nw-aligner --first ACGCTG --second CATGT
  nw-aligner --first-file seqS.txt --second-file seqT.txt --match 10 --gap -5
  nw-aligner -a AATT -b ATAT --match 1 --mismatch -1 --gap -1 --json
        """,
    )

    parser.add_argument("-a", "--first", help="Row sequence given literally")
    parser.add_argument("-b", "--second", help="Column sequence given literally")
    parser.add_argument(
        "--first-file",
        help=f"Two-line file holding the row sequence on line 2 (default: {DEFAULT_FIRST_FILE})",
    )
    parser.add_argument(
        "--second-file",
        help=f"Two-line file holding the column sequence on line 2 (default: {DEFAULT_SECOND_FILE})",
    )

    defaults = ScoringScheme()
    parser.add_argument(
        "--match", type=int, help=f"Match reward (default: {defaults.match})"
    )
    parser.add_argument(
        "--mismatch",
        type=int,
        help=f"Mismatch penalty (default: {defaults.mismatch})",
    )
    parser.add_argument(
        "--gap", type=int, help=f"Gap penalty (default: {defaults.gap})"
    )

    parser.add_argument(
        "--max-paths",
        type=int,
        default=None,
        help="Fail instead of enumerating more than this many optimal alignments",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Abort the traceback after this many seconds",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print a JSON summary instead of a report"
    )
    parser.add_argument(
        "--no-matrix", action="store_true", help="Do not print the solution matrix"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )
    return parser


def resolve_sequences(args):
    """Pick literal sequences when given, otherwise read the sequence files"""
    first = args.first
    second = args.second
    if first is None:
        first = read_sequence_file(args.first_file or DEFAULT_FIRST_FILE)
    if second is None:
        second = read_sequence_file(args.second_file or DEFAULT_SECOND_FILE)
    return first, second


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    # The package logger has its own handler; stop it repeating via the root
    package_logger = logging.getLogger("nw_aligner")
    package_logger.propagate = False
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)

    if args.first is not None and args.first_file:
        logging.error("Error: use either --first or --first-file, not both")
        return 1
    if args.second is not None and args.second_file:
        logging.error("Error: use either --second or --second-file, not both")
        return 1

    try:
        first, second = resolve_sequences(args)
    except (FileNotFoundError, SequenceFileError) as e:
        logging.error(f"Error: {e}")
        return 1

    config, scoring = build_config_from_args(args)

    try:
        result = AlignmentEngine(scoring, **config).align(first, second)
    except AlignmentError as e:
        logging.error(f"Error during alignment: {e}")
        return 1

    if args.json:
        print(OutputFormatter.to_json(result))
    else:
        print(OutputFormatter.format_report(result, show_matrix=not args.no_matrix))
    return 0


if __name__ == "__main__":
    exit(main())

"""
Sequence file loading.

A sequence file is a two-line text file: the first line is a free-form
header, the second holds the raw sequence characters.
"""

from typing import Tuple
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_FIRST_FILE = "seqS.txt"
DEFAULT_SECOND_FILE = "seqT.txt"


class SequenceFileError(Exception):
    """Exception raised when a sequence file cannot be interpreted"""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def read_sequence_file(file_path: str) -> str:
    """Read the sequence on line 2 of a two-line sequence file

    Raises:
        FileNotFoundError: The file does not exist
        SequenceFileError: The file has fewer than two lines
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Sequence file '{file_path}' does not exist")

    with open(file_path, "r", encoding="utf-8") as f:
        lines = [line.rstrip("\n\r") for line in f]

    if len(lines) < 2:
        raise SequenceFileError(
            file_path, f"expected a header line and a sequence line, got {len(lines)}"
        )

    sequence = "".join(lines[1].split())
    logger.debug(f"Read {len(sequence)} symbols from {file_path}")
    return sequence


def load_sequences(
    first_path: str = DEFAULT_FIRST_FILE, second_path: str = DEFAULT_SECOND_FILE
) -> Tuple[str, str]:
    """Load the row and column sequences from their files"""
    return read_sequence_file(first_path), read_sequence_file(second_path)

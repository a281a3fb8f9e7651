"""
File loading - read one text source into a list of validated lines.

Lines that fail validation are reported on stderr and dropped; the rest of
the file is still read. A source that cannot be opened or read yields no
lines, so one bad file never aborts a run.
"""

import sys
from typing import List, TextIO

from text_sort_tools.ingest.line_validator import is_valid_line


def load_lines(input_file: TextIO, source_name: str) -> List[str]:
    """
    Read every valid line from an open text handle.

    Args:
        input_file: Open text file handle (or any iterable of lines)
        source_name: Source identifier used in diagnostics

    Returns:
        List of valid lines in source order, terminators stripped

    Example:
        >>> with open('words.txt', 'r', encoding='utf-8') as f:
        ...     lines = load_lines(f, 'words.txt')
    """
    lines = []

    for raw_line in input_file:
        line = raw_line.rstrip("\r\n")

        # Empty lines are skipped without a diagnostic
        if not line:
            continue

        if not is_valid_line(line):
            print(
                f"ERROR: special characters or numbers: {line} in file: {source_name}",
                file=sys.stderr,
            )
            print(f"{line} has been removed", file=sys.stderr)
            continue

        lines.append(line)

    return lines


def read_file(path: str, buffer_size: int = 1024 * 1024) -> List[str]:
    """
    Open a source file and load its valid lines.

    Undecodable bytes are replaced rather than raising, which makes the
    affected lines fail validation instead of ending the read.

    Args:
        path: Path to the input text file
        buffer_size: I/O buffer size in bytes (default: 1MB)

    Returns:
        List of valid lines, or an empty list if the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", buffering=buffer_size) as fh:
            return load_lines(fh, path)
    except OSError as e:
        print(f"Unable to open file, please close input files: {path} ({e})", file=sys.stderr)
        return []

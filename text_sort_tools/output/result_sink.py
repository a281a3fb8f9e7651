"""
Result sink - persist a sorted run and report its timing.

Writes one line per element to ``<output_dir>/<output_name>.txt``
(truncating any previous file), or to stdout when ``output_dir`` is '-',
then reports the output name and elapsed time.
"""

import os
import sys
from typing import Sequence


def build_output_path(output_dir: str, output_name: str) -> str:
    """
    Build the destination path for a run.

    Returns '-' when output_dir is '-' (stdout).
    """
    if output_dir == "-":
        return "-"
    return os.path.join(output_dir, f"{output_name}.txt")


def write_sorted_lines(
    lines: Sequence[str], output_path: str, buffer_size: int = 1024 * 1024
) -> int:
    """
    Write lines to a file, or to stdout when output_path is '-'.

    Args:
        lines: Sorted lines (without terminators)
        output_path: Destination file path, or '-' for stdout
        buffer_size: I/O buffer size in bytes (default: 1MB)

    Returns:
        Number of lines written
    """
    if output_path == "-":
        out = sys.stdout
        for line in lines:
            out.write(line + "\n")
        out.flush()
        return len(lines)

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", buffering=buffer_size) as out:
        for line in lines:
            out.write(line + "\n")

    return len(lines)


def write_and_print(
    lines: Sequence[str], output_name: str, elapsed: float, output_dir: str = "OutputText"
) -> str:
    """
    Persist a sorted run and report its timing.

    The timing line goes to stdout, or to stderr when the sorted lines
    themselves are being written to stdout.

    Args:
        lines: Sorted lines
        output_name: Run name, used as the output file's base name
        elapsed: Elapsed time of the run in seconds
        output_dir: Output directory, or '-' for stdout (default: OutputText)

    Returns:
        The path written to ('-' for stdout)
    """
    output_path = build_output_path(output_dir, output_name)
    report = sys.stderr if output_path == "-" else sys.stdout

    print(f"\n{output_name}\t- Time Taken (s): {elapsed:.6f}", file=report)

    write_sorted_lines(lines, output_path)
    return output_path

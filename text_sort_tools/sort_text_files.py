#!/usr/bin/env python3
"""
sort_text_files.py - Sort a Directory of Word Lists, Sequentially and in Parallel
=================================================================================

This tool reads every text file in a directory, keeps the lines made only of
letters, sorts the combined set with one or more ordering policies, and writes
one output file per run together with the time each run took.

Every ordering policy is run twice: once reading the input files one after
another (sequential) and once reading them all at the same time (concurrent).
Both runs must produce the same output; the timing lines show which one was
faster.

COMMAND-LINE USAGE
==================

Basic Examples:

    # Sort everything in ./InputText, write six files to ./OutputText
    sort-text-files

    # Explicit input and output directories
    sort-text-files /data/words -o /data/sorted

    # Only the last-letter ordering, concurrent strategy, 8 threads
    sort-text-files /data/words -s last-letter-asc --strategy concurrent -w 8

    # Print the sorted lines to stdout (timings go to stderr)
    sort-text-files /data/words -o - -s alph-asc --strategy sequential

    # Walk sub-directories and skip temporary files
    sort-text-files /data/words -r --exclude '*.tmp' -v

ORDERING POLICIES
=================

    alph-asc         Character-code order ("Apple" < "apple" < "banana")
    alph-desc        Reverse character-code order
    last-letter-asc  Compare from the last letter backwards
                     ("ace" < "bat" < "cat")

INPUT RULES
===========

- One word per line; empty lines are skipped
- Lines containing digits, spaces, punctuation or non-ASCII characters are
  reported on stderr and removed
- Files that cannot be opened are reported and treated as empty

OUTPUT
======

Default output names:

    AlphabeticalAscendingTextOutput.txt     (sequential, alph-asc)
    AlphabeticalDescendingTextOutput.txt    (sequential, alph-desc)
    LastLetterAscendingTextOutput.txt       (sequential, last-letter-asc)
    MultiAscTextOutput.txt                  (concurrent, alph-asc)
    MultiDescTextOutput.txt                 (concurrent, alph-desc)
    MultiLastLetterTextOutput.txt           (concurrent, last-letter-asc)

Each run prints a timing line:

    MultiAscTextOutput	- Time Taken (s): 0.004211

Exit status is 1 if a sequential and a concurrent run of the same policy
disagree, or if no input files were found.
"""

import argparse
import sys

from text_sort_tools.discovery import get_input_files
from text_sort_tools.ingest.strategies import CONCURRENT, SEQUENTIAL, STRATEGIES
from text_sort_tools.runner import compare_strategies, run_all
from text_sort_tools.sort.ordering import SORT_TYPES
from text_sort_tools.utils import log_progress


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description=(
            "Sort the lines of all text files in a directory with sequential and "
            "concurrent ingestion, and time each run."
        ),
        epilog="Examples:\n"
        "  sort-text-files\n"
        "  sort-text-files /data/words -o /data/sorted -v\n"
        "  sort-text-files /data/words -s alph-desc --strategy concurrent -w 4\n"
        "  sort-text-files /data/words -o - -s alph-asc --strategy sequential | head",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["InputText"],
        help="Input files or directories (default: InputText)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default="OutputText",
        help="Output directory, or '-' for stdout (default: OutputText)",
    )
    parser.add_argument(
        "-s",
        "--sort-type",
        action="append",
        dest="sort_types",
        choices=list(SORT_TYPES),
        metavar="TYPE",
        help="Ordering policy: alph-asc, alph-desc or last-letter-asc. "
        "Can be used multiple times (default: all three)",
    )
    parser.add_argument(
        "--strategy",
        choices=[SEQUENTIAL, CONCURRENT, "both"],
        default="both",
        help="Ingestion strategy to run (default: both)",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Number of reader threads for the concurrent strategy "
        "(default: one per input file)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        dest="exclude_patterns",
        metavar="PATTERN",
        help="Exclude files matching glob pattern (can be used multiple times). "
        "Example: --exclude '*.tmp'",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Also read files in sub-directories",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output to stderr (progress, exclusions, comparisons)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output (overrides --verbose)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the sort-text-files command."""
    args = parse_args(argv)

    # Determine verbosity (quiet overrides verbose)
    verbose = args.verbose and not args.quiet

    if args.workers is not None and args.workers < 1:
        print("Error: --workers must be at least 1", file=sys.stderr)
        sys.exit(1)

    strategies = STRATEGIES if args.strategy == "both" else (args.strategy,)
    sort_types = args.sort_types or list(SORT_TYPES)

    try:
        files = get_input_files(args.paths, args.exclude_patterns, args.recursive, verbose)

        if not files:
            log_progress("[ERROR] No input files found", verbose=True)
            sys.exit(1)

        records = run_all(
            files,
            output_dir=args.output_dir,
            strategies=strategies,
            sort_types=sort_types,
            workers=args.workers,
            verbose=verbose,
        )
    except KeyboardInterrupt:
        print("\n# Interrupted by user", file=sys.stderr)
        sys.exit(130)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    mismatched = []
    for sort_type, result in compare_strategies(records).items():
        status = "identical" if result["identical"] else "DIFFERENT"
        log_progress(
            f"[COMPARE] {sort_type}: {status} "
            f"(sequential {result[SEQUENTIAL]:.6f}s, concurrent {result[CONCURRENT]:.6f}s)",
            verbose,
        )
        if not result["identical"]:
            mismatched.append(sort_type)

    report = sys.stderr if args.output_dir == "-" else sys.stdout
    print("\nDone...", file=report)

    if mismatched:
        log_progress(
            f"[ERROR] Sequential and concurrent outputs differ for: {', '.join(mismatched)}",
            verbose=True,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
Run orchestration - time each (strategy x sort type) run and persist it.

A run ingests every source with one strategy, sorts the collection with one
ordering policy, and hands the result to the result sink. Timing covers
ingestion and sorting, not writing.
"""

import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from text_sort_tools.ingest.strategies import CONCURRENT, SEQUENTIAL, STRATEGIES, ingest
from text_sort_tools.output.result_sink import write_and_print
from text_sort_tools.sort.merge_sort import merge_sort_by_type
from text_sort_tools.sort.ordering import ALPH_ASC, ALPH_DESC, LAST_LETTER_ASC, SORT_TYPES
from text_sort_tools.utils import log_progress

OUTPUT_NAMES = {
    (SEQUENTIAL, ALPH_ASC): "AlphabeticalAscendingTextOutput",
    (SEQUENTIAL, ALPH_DESC): "AlphabeticalDescendingTextOutput",
    (SEQUENTIAL, LAST_LETTER_ASC): "LastLetterAscendingTextOutput",
    (CONCURRENT, ALPH_ASC): "MultiAscTextOutput",
    (CONCURRENT, ALPH_DESC): "MultiDescTextOutput",
    (CONCURRENT, LAST_LETTER_ASC): "MultiLastLetterTextOutput",
}


def default_output_name(strategy: str, sort_type: str) -> str:
    """Return the output base name for a (strategy, sort type) run."""
    return OUTPUT_NAMES.get((strategy, sort_type), f"{strategy}-{sort_type}")


def run_sort(
    files: Sequence[str],
    strategy: str,
    sort_type: str,
    workers: Optional[int] = None,
    verbose: bool = False,
) -> Tuple[List[str], float]:
    """
    Ingest and sort all sources with one strategy and one ordering policy.

    Args:
        files: Source file paths
        strategy: 'sequential' or 'concurrent'
        sort_type: Ordering policy tag
        workers: Thread count for the concurrent strategy
        verbose: Whether to log progress to stderr

    Returns:
        Tuple of (sorted_lines, elapsed_seconds)
    """
    start_time = time.time()

    collection = ingest(files, strategy, workers)
    log_progress(
        f"[INGEST] {strategy}: {len(collection)} lines from {len(files)} files", verbose
    )

    sorted_lines = merge_sort_by_type(collection, sort_type)
    elapsed = time.time() - start_time
    log_progress(f"[SORT] {sort_type}: {len(sorted_lines)} lines in {elapsed:.6f}s", verbose)

    return sorted_lines, elapsed


def run_all(
    files: Sequence[str],
    output_dir: str = "OutputText",
    strategies: Sequence[str] = STRATEGIES,
    sort_types: Sequence[str] = tuple(SORT_TYPES),
    workers: Optional[int] = None,
    verbose: bool = False,
) -> List[Dict[str, Any]]:
    """
    Execute every (strategy x sort type) run and persist each result.

    Runs are ordered strategy first, then sort type, so all sequential runs
    complete before the concurrent ones.

    Args:
        files: Source file paths
        output_dir: Output directory, or '-' for stdout
        strategies: Ingestion strategies to run
        sort_types: Ordering policy tags to run
        workers: Thread count for the concurrent strategy
        verbose: Whether to log progress to stderr

    Returns:
        List of run records (dicts with strategy, sort_type, output,
        elapsed, lines and sorted_lines keys)
    """
    records = []

    for strategy in strategies:
        for sort_type in sort_types:
            sorted_lines, elapsed = run_sort(files, strategy, sort_type, workers, verbose)
            output_name = default_output_name(strategy, sort_type)
            output_path = write_and_print(sorted_lines, output_name, elapsed, output_dir)
            log_progress(f"[WRITE] {len(sorted_lines)} lines to {output_path}", verbose)

            records.append(
                {
                    "strategy": strategy,
                    "sort_type": sort_type,
                    "output": output_path,
                    "elapsed": elapsed,
                    "lines": len(sorted_lines),
                    "sorted_lines": sorted_lines,
                }
            )

    return records


def compare_strategies(records: Sequence[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Compare sequential and concurrent runs of the same sort type.

    Args:
        records: Run records from run_all()

    Returns:
        Dict keyed by sort type, each value holding 'identical' (bool),
        'sequential' and 'concurrent' elapsed seconds. Sort types not run
        by both strategies are left out.
    """
    by_key = {(r["strategy"], r["sort_type"]): r for r in records}
    comparison = {}

    for (strategy, sort_type), record in by_key.items():
        if strategy != SEQUENTIAL:
            continue
        other = by_key.get((CONCURRENT, sort_type))
        if other is None:
            continue
        comparison[sort_type] = {
            "identical": record["sorted_lines"] == other["sorted_lines"],
            SEQUENTIAL: record["elapsed"],
            CONCURRENT: other["elapsed"],
        }

    return comparison

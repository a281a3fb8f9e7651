"""
Ingestion strategies - build the unsorted line collection from many sources.

Two interchangeable strategies are provided:

    sequential  Read sources one after another, in list order
    concurrent  Read every source in its own thread-pool task, wait for all
                of them, then collect results in list order

Each concurrent task owns its result (its Future); tasks share no mutable
state, so no locking is needed. Collection happens only after every task has
finished, so both strategies yield the same collection for the same sources.
"""

import sys
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from text_sort_tools.ingest.file_loader import read_file

SEQUENTIAL = "sequential"
CONCURRENT = "concurrent"

STRATEGIES = (SEQUENTIAL, CONCURRENT)


def sequential_ingest(files: Sequence[str]) -> List[str]:
    """
    Read all sources one at a time.

    Args:
        files: Source file paths

    Returns:
        Every valid line from every source, in source order
    """
    collection = []
    for path in files:
        collection.extend(read_file(path))
    return collection


def read_file_worker(path: str) -> List[str]:
    """
    Worker function to load one source inside the thread pool.
    Returns the source's lines, or an empty list if loading failed.
    """
    try:
        return read_file(path)
    except Exception as e:  # pylint: disable=broad-except
        # Any failure stays inside this task; siblings keep running
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return []


def concurrent_ingest(files: Sequence[str], workers: Optional[int] = None) -> List[str]:
    """
    Read all sources in parallel, one task per source.

    The call blocks until every task has completed, then gathers the
    results in the order of ``files``.

    Args:
        files: Source file paths
        workers: Maximum number of threads (default: one per source)

    Returns:
        Every valid line from every source, grouped by source in list order
    """
    if not files:
        return []

    max_workers = workers if workers and workers > 0 else len(files)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(read_file_worker, path) for path in files]

        # Completion barrier: every task must be done before collection
        wait(futures)

    collection = []
    for future in futures:
        collection.extend(future.result())
    return collection


def ingest(files: Sequence[str], strategy: str, workers: Optional[int] = None) -> List[str]:
    """
    Build the line collection with the named strategy.

    Args:
        files: Source file paths
        strategy: 'sequential' or 'concurrent'
        workers: Thread count for the concurrent strategy

    Returns:
        Unsorted line collection

    Raises:
        ValueError: If the strategy name is unknown
    """
    if strategy == SEQUENTIAL:
        return sequential_ingest(files)
    if strategy == CONCURRENT:
        return concurrent_ingest(files, workers)
    raise ValueError(f"Unknown ingestion strategy: {strategy}")

"""
Text Sort Tools

A Python package for sorting the lines of many text files.
Provides line validation, three ordering policies, a comparator-driven
merge sort, and sequential and concurrent ingestion strategies whose
outputs are compared run by run.

Modules:
    ingest: Line validation, file loading and ingestion strategies
    sort: Ordering policies and merge sort
    output: Result sink for sorted runs
    discovery: Input file discovery
    runner: Timed (strategy x sort type) runs
    utils: Shared utilities
"""

__version__ = "1.0.0"

from .ingest.strategies import concurrent_ingest, sequential_ingest
from .sort.merge_sort import merge_sort, merge_sort_by_type

__all__ = [
    "merge_sort",
    "merge_sort_by_type",
    "sequential_ingest",
    "concurrent_ingest",
    "__version__",
]

"""
Input discovery - collect the text files to sort.

Paths may be files or directories. Directories are scanned one level deep
by default (sub-directories are skipped); pass recursive=True to walk the
whole tree. The result is sorted so runs are reproducible.
"""

import fnmatch
import os
from typing import Iterable, List, Optional, Tuple

from text_sort_tools.utils import log_progress


def should_exclude(filename: str, exclude_patterns: Optional[List[str]]) -> Tuple[bool, Optional[str]]:
    """
    Check if a filename matches any exclusion pattern.

    Args:
        filename: Name of the file to check (only the basename is matched)
        exclude_patterns: List of glob-style patterns to match against

    Returns:
        tuple: (should_exclude: bool, matched_pattern: str or None)
    """
    if not exclude_patterns:
        return False, None

    basename = os.path.basename(filename)
    for pattern in exclude_patterns:
        if fnmatch.fnmatch(basename, pattern):
            return True, pattern
    return False, None


def _scan_directory(path: str, recursive: bool) -> Iterable[str]:
    if recursive:
        for root, _, files in os.walk(path):
            for f in files:
                yield os.path.join(root, f)
        return

    for entry in os.scandir(path):
        if not entry.is_dir():
            yield entry.path


def get_input_files(
    paths: Iterable[str],
    exclude_patterns: Optional[List[str]] = None,
    recursive: bool = False,
    verbose: bool = False,
) -> List[str]:
    """
    Collect input files from the given paths, with optional exclusion.

    Args:
        paths: File paths or directory paths
        exclude_patterns: Glob-style patterns for files to exclude (optional)
        recursive: Walk sub-directories too (default: only the top level)
        verbose: Whether to log progress to stderr (optional)

    Returns:
        Sorted list of unique file paths

    Note:
        Paths that are neither files nor directories are reported and
        skipped.
    """
    files = set()
    total_found = 0
    total_excluded = 0

    for path in paths:
        if os.path.isfile(path):
            candidates = [path]
        elif os.path.isdir(path):
            log_progress(f"[DISCOVER] Scanning directory: {path}", verbose)
            candidates = list(_scan_directory(path, recursive))
        else:
            log_progress(f"[DISCOVER] Skipping missing path: {path}", True)
            continue

        for candidate in candidates:
            total_found += 1
            excluded, pattern = should_exclude(candidate, exclude_patterns)
            if excluded:
                total_excluded += 1
                log_progress(f"[EXCLUDE] {os.path.basename(candidate)} (matches: {pattern})", verbose)
            else:
                log_progress(f"[INCLUDE] {os.path.basename(candidate)}", verbose)
                files.add(candidate)

    sorted_files = sorted(files)

    if total_found > 0:
        log_progress(
            f"[SUMMARY] Total: {total_found} found, {total_excluded} excluded, "
            f"{len(sorted_files)} included",
            verbose,
        )

    return sorted_files

"""
Merge Sort - top-down merge sort driven by an ordering policy

Sorts a list of lines with any ``is_first_above_second(first, second)``
comparer (see ``text_sort_tools.sort.ordering``). The input list is never
modified; a new sorted list is returned.

Algorithm:
    1. A list of 0 or 1 lines is already sorted
    2. Split at the midpoint and sort both halves recursively
    3. Merge the halves by repeatedly taking the head that sorts first

Tie handling:
    The right head is taken only when the comparer reports it strictly
    before the left head, so equal-ranked lines keep their input order.

Performance:
    - Time Complexity: O(n log n) comparisons
    - Space Complexity: O(n) auxiliary per merge level
"""

from typing import List, Sequence

from text_sort_tools.sort.ordering import Comparer, get_comparer


def merge(upper: List[str], lower: List[str], comparer: Comparer) -> List[str]:
    """
    Merge two sorted lists into one sorted list.

    Args:
        upper: Sorted left half
        lower: Sorted right half
        comparer: Ordering policy function

    Returns:
        New list holding every element of both halves in order
    """
    merged = []
    i = 0
    j = 0
    upper_size = len(upper)
    lower_size = len(lower)

    while i < upper_size and j < lower_size:
        if comparer(lower[j], upper[i]):
            merged.append(lower[j])
            j += 1
        else:
            merged.append(upper[i])
            i += 1

    # One half is exhausted, the rest of the other is already in order
    merged.extend(upper[i:])
    merged.extend(lower[j:])
    return merged


def merge_sort(lines: Sequence[str], comparer: Comparer) -> List[str]:
    """
    Sort lines with a top-down merge sort.

    Args:
        lines: Lines to sort (not modified)
        comparer: Ordering policy function

    Returns:
        New list with the same lines in non-decreasing order

    Example:
        >>> from text_sort_tools.sort.ordering import last_letter_asc_is_first_above_second
        >>> merge_sort(["cat", "bat", "ace"], last_letter_asc_is_first_above_second)
        ['ace', 'bat', 'cat']
    """
    if len(lines) <= 1:
        return list(lines)

    mid = len(lines) // 2
    upper = merge_sort(lines[:mid], comparer)
    lower = merge_sort(lines[mid:], comparer)
    return merge(upper, lower, comparer)


def merge_sort_by_type(lines: Sequence[str], sort_type: str) -> List[str]:
    """Sort lines with the ordering policy named by ``sort_type``."""
    return merge_sort(lines, get_comparer(sort_type))

"""
Ordering policies for the merge sorter.

Each policy is a plain function ``is_first_above_second(first, second)`` that
returns True when ``first`` sorts strictly before ``second``. Every policy is
a strict weak ordering, so equal strings never report True in either
direction.

Policies are selected by a string tag:

    alph-asc         Alphabetical ascending by character code
    alph-desc        Alphabetical descending by character code
    last-letter-asc  Ascending, comparing from the last character backwards
"""

import sys
from typing import Callable, Dict

ALPH_ASC = "alph-asc"
ALPH_DESC = "alph-desc"
LAST_LETTER_ASC = "last-letter-asc"

DEFAULT_SORT_TYPE = ALPH_ASC

Comparer = Callable[[str, str], bool]


def alph_asc_is_first_above_second(first: str, second: str) -> bool:
    """
    Alphabetical ascending by character code.

    The first differing character decides; a strict prefix comes before the
    longer string ("ab" before "abc"). Uppercase sorts before lowercase.
    """
    return first < second


def alph_desc_is_first_above_second(first: str, second: str) -> bool:
    """
    Alphabetical descending by character code.

    The greater character wins at the first difference; the longer string
    comes before its strict prefix ("abc" before "ab").
    """
    return first > second


def last_letter_asc_is_first_above_second(first: str, second: str) -> bool:
    """
    Ascending order reading both strings from the end.

    The strings are walked backwards in lock-step and the smaller character
    wins at the first mismatch. If ``first`` runs out strictly before
    ``second`` it comes first ("at" before "cat"); if ``second`` runs out
    first, or both run out together, ``first`` does not come first.
    """
    for first_char, second_char in zip(reversed(first), reversed(second)):
        if first_char != second_char:
            return first_char < second_char
    return len(first) < len(second)


SORT_TYPES: Dict[str, Comparer] = {
    ALPH_ASC: alph_asc_is_first_above_second,
    ALPH_DESC: alph_desc_is_first_above_second,
    LAST_LETTER_ASC: last_letter_asc_is_first_above_second,
}


def get_comparer(sort_type: str) -> Comparer:
    """
    Resolve a sort type tag to its comparison function.

    Args:
        sort_type: One of the tags in SORT_TYPES

    Returns:
        The comparison function. Unknown tags are reported on stderr and
        fall back to alphabetical ascending.
    """
    comparer = SORT_TYPES.get(sort_type)
    if comparer is None:
        print(
            f"ERROR: Unknown sort type '{sort_type}', defaulting to {DEFAULT_SORT_TYPE}",
            file=sys.stderr,
        )
        comparer = SORT_TYPES[DEFAULT_SORT_TYPE]
    return comparer

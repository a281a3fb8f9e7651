"""Sort module - Ordering policies and comparator-driven merge sort."""

from .merge_sort import merge_sort, merge_sort_by_type
from .ordering import SORT_TYPES, get_comparer

__all__ = ["merge_sort", "merge_sort_by_type", "get_comparer", "SORT_TYPES"]

"""
Output module

This module provides the result sink that writes sorted runs and reports their timing.
"""

from .result_sink import write_and_print

__all__ = ["write_and_print"]

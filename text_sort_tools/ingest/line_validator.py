"""
Line validation for text sort inputs.

A valid line is a non-empty run of ASCII letters. Digits, punctuation,
symbols, whitespace and non-ASCII characters all cause rejection.
"""

import re

LINE_PATTERN = re.compile(r"[A-Za-z]+")


def is_valid_line(text: str) -> bool:
    """
    Check whether a line may enter the sort pipeline.

    Args:
        text: Line content without its line terminator

    Returns:
        True if the line is made only of letters A-Z / a-z

    Examples:
        >>> is_valid_line("Hello")
        True
        >>> is_valid_line("abc123")
        False
        >>> is_valid_line("hello world")
        False
        >>> is_valid_line("")
        False
    """
    return LINE_PATTERN.fullmatch(text) is not None

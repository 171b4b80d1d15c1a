"""Signed size differences: characters, newline-delimited segments, words.

A positive result means ``b`` is bigger than ``a``.
"""


def additions(a: str, b: str) -> int:
    """``len(b) - len(a)``."""
    return len(b) - len(a)


def segment_count(text: str) -> int:
    """Number of ``\\n``-delimited segments.

    This is not a logical line count: ``""`` has one segment and a trailing
    newline adds an empty final segment.
    """
    return len(text.split("\n"))


def line_count_diff(a: str, b: str) -> int:
    return segment_count(b) - segment_count(a)


def word_count(text: str) -> int:
    """Number of maximal non-whitespace runs."""
    return len(text.split())


def word_count_diff(a: str, b: str) -> int:
    return word_count(b) - word_count(a)

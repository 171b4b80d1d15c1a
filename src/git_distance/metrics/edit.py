"""Edit-distance family: Levenshtein, Damerau-Levenshtein, Hamming, LCS.

Every metric here is the classic (len(a)+1) x (len(b)+1) dynamic program.
rapidfuzz evaluates them in compiled code (bit-parallel where possible),
which keeps whole source files practical to compare.

Reference: Wagner & Fischer, "The String-to-String Correction Problem",
JACM 1974.
"""

from rapidfuzz.distance import OSA, Hamming, LCSseq, Levenshtein

PAD_CHAR = " "


def levenshtein(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance from ``a`` to ``b``.

    Examples:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("", "abc")
        3
    """
    return Levenshtein.distance(a, b)


def damerau_levenshtein(a: str, b: str) -> int:
    """Levenshtein distance that also allows swapping two adjacent characters.

    This is the restricted (optimal string alignment) variant: when the last
    two characters of both prefixes are crossed, the cell may also be reached
    from two steps back diagonally. A substring is never edited again after
    a transposition.

    Examples:
        >>> damerau_levenshtein("ab", "ba")
        1
        >>> damerau_levenshtein("ca", "abc")
        3
    """
    return OSA.distance(a, b)


def hamming(a: str, b: str) -> int:
    """Count differing positions after right-padding the shorter string with spaces.

    Padding and genuine trailing spaces are indistinguishable, so
    ``hamming("a", "a ")`` is 0.

    Examples:
        >>> hamming("abc", "abd")
        1
        >>> hamming("ab", "abcd")
        2
    """
    width = max(len(a), len(b))
    return Hamming.distance(a.ljust(width, PAD_CHAR), b.ljust(width, PAD_CHAR))


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return LCSseq.similarity(a, b)


def lcs_distance(a: str, b: str) -> int:
    """``max(len(a), len(b)) - lcs_length(a, b)``.

    Examples:
        >>> lcs_distance("ABCDGH", "AEDFHR")
        3
    """
    return LCSseq.distance(a, b)

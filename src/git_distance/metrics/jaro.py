"""Jaro and Jaro-Winkler string similarity.

Reference: Winkler, "String Comparator Metrics and Enhanced Decision Rules
in the Fellegi-Sunter Model of Record Linkage", 1990.

The catalogue exposes the Winkler *distance* (1 - similarity) so that, like
every other distance metric, identical inputs score 0.
"""

from typing import List, Tuple

WINKLER_PREFIX_LIMIT = 4
WINKLER_SCALING = 0.1


def _match_window(a: str, b: str) -> int:
    return max(0, max(len(a), len(b)) // 2 - 1)


def _matches(a: str, b: str) -> Tuple[List[str], List[str]]:
    """Return the matched characters of ``a`` and ``b``, each in original order.

    Every position of ``b`` is consumed at most once; the first unmatched
    equal character inside the window wins.
    """
    window = _match_window(a, b)
    b_taken = [False] * len(b)
    a_flags = [False] * len(a)

    for i, ca in enumerate(a):
        lo = max(0, i - window)
        hi = min(len(b), i + window + 1)
        for j in range(lo, hi):
            if not b_taken[j] and b[j] == ca:
                b_taken[j] = True
                a_flags[i] = True
                break

    a_matched = [ca for ca, flag in zip(a, a_flags) if flag]
    b_matched = [cb for cb, flag in zip(b, b_taken) if flag]
    return a_matched, b_matched


def jaro_similarity(a: str, b: str) -> float:
    """Jaro similarity in [0, 1]; 1.0 means identical."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    a_matched, b_matched = _matches(a, b)
    matches = len(a_matched)
    if matches == 0:
        return 0.0

    out_of_order = sum(1 for ca, cb in zip(a_matched, b_matched) if ca != cb)
    transpositions = out_of_order / 2

    return (
        matches / len(a)
        + matches / len(b)
        + (matches - transpositions) / matches
    ) / 3


def jaro_winkler_similarity(a: str, b: str) -> float:
    """Jaro similarity boosted by a common prefix of up to four characters."""
    jaro = jaro_similarity(a, b)
    if jaro == 0.0 or jaro == 1.0:
        return jaro

    prefix = 0
    for ca, cb in zip(a[:WINKLER_PREFIX_LIMIT], b[:WINKLER_PREFIX_LIMIT]):
        if ca != cb:
            break
        prefix += 1

    return jaro + WINKLER_SCALING * prefix * (1 - jaro)


def jaro_winkler_distance(a: str, b: str) -> float:
    """``1 - jaro_winkler_similarity(a, b)``, in [0, 1].

    Examples:
        >>> round(jaro_winkler_distance("MARTHA", "MARHTA"), 3)
        0.039
        >>> jaro_winkler_distance("", "")
        0.0
        >>> jaro_winkler_distance("x", "")
        1.0
    """
    return 1.0 - jaro_winkler_similarity(a, b)

"""The closed catalogue of distance metrics.

``MetricKind`` names every supported metric; ``METRIC_CATALOGUE`` maps each
kind to its implementing function. The table is built once at import time
and is not extensible at runtime.
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from .counts import additions, line_count_diff, word_count_diff
from .edit import damerau_levenshtein, hamming, lcs_distance, levenshtein
from .jaro import jaro_winkler_distance

Number = Union[int, float]
MetricFunction = Callable[[str, str], Number]


class MetricKind(Enum):
    """Supported metrics. The value is the canonical name."""

    LEVENSHTEIN = "levenshtein"
    HAMMING = "hamming"
    ADDITIONS = "additions"
    DAMERAU_LEVENSHTEIN = "damerau-levenshtein"
    JARO_WINKLER = "jaro-winkler"
    LCS = "lcs"
    LINES = "lines"
    WORDS = "words"

    @property
    def canonical_name(self) -> str:
        return self.value

    @property
    def signed(self) -> bool:
        """True for difference-style metrics whose values may be negative."""
        return self in _SIGNED

    @property
    def fractional(self) -> bool:
        """True when values are floats rather than integers."""
        return self is MetricKind.JARO_WINKLER


DEFAULT_METRIC = MetricKind.LEVENSHTEIN

_SIGNED = frozenset({MetricKind.ADDITIONS, MetricKind.LINES, MetricKind.WORDS})

METRIC_CATALOGUE: Mapping[MetricKind, MetricFunction] = MappingProxyType(
    {
        MetricKind.LEVENSHTEIN: levenshtein,
        MetricKind.HAMMING: hamming,
        MetricKind.ADDITIONS: additions,
        MetricKind.DAMERAU_LEVENSHTEIN: damerau_levenshtein,
        MetricKind.JARO_WINKLER: jaro_winkler_distance,
        MetricKind.LCS: lcs_distance,
        MetricKind.LINES: line_count_diff,
        MetricKind.WORDS: word_count_diff,
    }
)

DESCRIPTIONS: Mapping[MetricKind, str] = MappingProxyType(
    {
        MetricKind.LEVENSHTEIN: "Levenshtein edit distance (default)",
        MetricKind.HAMMING: "Hamming distance, shorter side padded with spaces",
        MetricKind.ADDITIONS: "Character count difference (new - old)",
        MetricKind.DAMERAU_LEVENSHTEIN: "Edit distance allowing adjacent transpositions",
        MetricKind.JARO_WINKLER: "Jaro-Winkler distance in [0, 1]",
        MetricKind.LCS: "Longest-common-subsequence distance",
        MetricKind.LINES: "Line count difference (new - old)",
        MetricKind.WORDS: "Word count difference (new - old)",
    }
)


def metric_function(kind: MetricKind) -> MetricFunction:
    """Return the function implementing ``kind``."""
    return METRIC_CATALOGUE[kind]

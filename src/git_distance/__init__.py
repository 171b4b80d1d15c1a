"""
git-distance - how far apart are two git refs?

Measures every changed file between two refs with one of a fixed set of
string metrics (Levenshtein, Hamming, Damerau-Levenshtein, Jaro-Winkler,
LCS, and signed size differences) and reports per-file values and a total.
"""

__version__ = "0.1.0"

from .api import compare_refs
from .exceptions import AmbiguousMetricError, GitDistanceError, UnknownMetricError
from .metrics import MetricKind, SelectedMetric, select_metric
from .report import ContentPair, MetricResult, Report, build_report, evaluate_pair

__all__ = [
    "compare_refs",  # Git-backed entry point
    "select_metric",
    "build_report",  # Pure engine over ContentPairs
    "evaluate_pair",
    "ContentPair",
    "MetricResult",
    "Report",
    "MetricKind",
    "SelectedMetric",
    "GitDistanceError",
    "AmbiguousMetricError",
    "UnknownMetricError",
]

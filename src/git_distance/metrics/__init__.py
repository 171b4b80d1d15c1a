"""Metric engine: string distance functions and metric selection."""

from .catalogue import (
    DEFAULT_METRIC,
    DESCRIPTIONS,
    METRIC_CATALOGUE,
    MetricFunction,
    MetricKind,
    metric_function,
)
from .counts import additions, line_count_diff, word_count_diff
from .edit import damerau_levenshtein, hamming, lcs_distance, lcs_length, levenshtein
from .jaro import jaro_similarity, jaro_winkler_distance, jaro_winkler_similarity
from .selector import SelectedMetric, available_metrics, resolve_token, select_metric

__all__ = [
    "DEFAULT_METRIC",
    "DESCRIPTIONS",
    "METRIC_CATALOGUE",
    "MetricFunction",
    "MetricKind",
    "SelectedMetric",
    "additions",
    "available_metrics",
    "damerau_levenshtein",
    "hamming",
    "jaro_similarity",
    "jaro_winkler_distance",
    "jaro_winkler_similarity",
    "lcs_distance",
    "lcs_length",
    "levenshtein",
    "line_count_diff",
    "metric_function",
    "resolve_token",
    "select_metric",
    "word_count_diff",
]

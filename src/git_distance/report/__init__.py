"""Report layer: content pairs in, ordered results and a total out."""

from .aggregator import Observer, build_report, evaluate_pair
from .models import ContentPair, MetricResult, Report

__all__ = [
    "ContentPair",
    "MetricResult",
    "Observer",
    "Report",
    "build_report",
    "evaluate_pair",
]

"""Apply one metric to many content pairs.

The aggregator is pure: it reads pairs in order, evaluates each one and
sums the values. Callers that want to watch progress (e.g. verbose CLI
logging) pass an ``observer`` that receives every MetricResult as it is
produced.
"""

from typing import Callable, Iterable, List, Optional, Union

from ..metrics.catalogue import MetricFunction
from ..metrics.selector import SelectedMetric
from .models import ContentPair, MetricResult, Number, Report

Observer = Callable[[MetricResult], None]
MetricLike = Union[SelectedMetric, MetricFunction]


def evaluate_pair(metric: MetricLike, pair: ContentPair) -> MetricResult:
    """Compute ``metric(pair.content_a, pair.content_b)`` for one pair."""
    return MetricResult(identifier=pair.identifier, value=metric(pair.content_a, pair.content_b))


def build_report(
    metric: MetricLike,
    pairs: Iterable[ContentPair],
    observer: Optional[Observer] = None,
) -> Report:
    """Evaluate every pair in order and total the values.

    Args:
        metric: The selected metric (or any ``(str, str) -> number`` callable)
        pairs: Ordered pairs, possibly empty, possibly a lazy generator
        observer: Optional callback invoked with each result

    Returns:
        Report whose rows follow input order and whose total is the plain
        sum of the row values (0 for no pairs)
    """
    rows: List[MetricResult] = []
    total: Number = 0
    for pair in pairs:
        result = evaluate_pair(metric, pair)
        rows.append(result)
        total += result.value
        if observer is not None:
            observer(result)

    name = metric.name if isinstance(metric, SelectedMetric) else getattr(metric, "__name__", "custom")
    return Report(metric=name, rows=tuple(rows), total=total)

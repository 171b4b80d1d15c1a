"""Metric selection errors: ambiguous or unknown metric requests."""

from typing import List, Sequence

from .base import GitDistanceError


class MetricSelectionError(GitDistanceError):
    """Base class for metric selection errors."""

    pass


class AmbiguousMetricError(MetricSelectionError):
    """Raised when more than one distinct metric is requested at once."""

    def __init__(self, requested: Sequence[str]):
        names: List[str] = list(requested)
        super().__init__(
            "Choose only one metric",
            details={"requested": ", ".join(names)},
        )
        self.requested = names


class UnknownMetricError(MetricSelectionError):
    """Raised when a requested metric does not name any catalogue entry."""

    def __init__(self, token: str, available: Sequence[str]):
        super().__init__(
            f"Unknown metric: {token}",
            details={"available": ", ".join(available)},
        )
        self.token = token
        self.available = list(available)

"""Exception hierarchy for git-distance."""

from .base import GitDistanceError
from .config import ConfigurationError, InvalidConfigError
from .metrics import AmbiguousMetricError, MetricSelectionError, UnknownMetricError
from .repository import RepositoryError

__all__ = [
    "GitDistanceError",
    "MetricSelectionError",
    "AmbiguousMetricError",
    "UnknownMetricError",
    "ConfigurationError",
    "InvalidConfigError",
    "RepositoryError",
]

"""Public API for git-distance.

Example:
    >>> from git_distance import compare_refs
    >>>
    >>> report = compare_refs("main", "feature")
    >>> report.total
    1432
    >>> report = compare_refs("main", metric="lines")  # current branch vs main
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from .config import DistanceConfig, load_config
from .git import GitContentProvider
from .logging_config import get_logger
from .metrics import MetricKind, select_metric
from .report import Observer, Report, build_report

logger = get_logger(__name__)

MetricRequest = Union[str, MetricKind, Iterable[Union[str, MetricKind]], None]


def resolve_refs(
    provider: GitContentProvider, ref_a: str, ref_b: Optional[str] = None
) -> tuple[str, str]:
    """Turn one or two refs into an (old, new) pair.

    With a single ref the comparison runs from the current branch to that ref.
    """
    if ref_b is None:
        current = provider.current_branch()
        logger.debug("Comparing current branch (%s) to %s", current, ref_a)
        return current, ref_a
    logger.debug("Comparing %s to %s", ref_a, ref_b)
    return ref_a, ref_b


def compare_refs(
    ref_a: str,
    ref_b: Optional[str] = None,
    metric: MetricRequest = None,
    repo_path: str = ".",
    config: Optional[DistanceConfig] = None,
    files: Optional[Sequence[str]] = None,
    observer: Optional[Observer] = None,
) -> Report:
    """Measure how far two refs are apart, file by file.

    Args:
        ref_a: Old ref, or the target ref when ``ref_b`` is omitted
        ref_b: New ref (default: compare the current branch to ``ref_a``)
        metric: Metric name(s); falls back to ``config.metric``
        repo_path: Path inside the repository
        config: Settings (default: ``load_config()``)
        files: Restrict the comparison to these paths
        observer: Called with each per-file result

    Returns:
        Report with one row per changed file and the total

    Raises:
        AmbiguousMetricError: More than one metric requested
        UnknownMetricError: Metric name not in the catalogue
        RepositoryError: git could not list or compare the refs
    """
    config = config or load_config()
    # selection fails before any git process runs
    selected = select_metric(metric if metric else config.metric)

    provider = GitContentProvider(repo_path, timeout=config.git_timeout_seconds)
    old_ref, new_ref = resolve_refs(provider, ref_a, ref_b)
    return build_report(selected, provider.iter_pairs(old_ref, new_ref, files), observer)

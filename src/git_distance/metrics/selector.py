"""Resolve a metric request to exactly one catalogue entry."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from ..exceptions import AmbiguousMetricError, UnknownMetricError
from .catalogue import DEFAULT_METRIC, METRIC_CATALOGUE, MetricFunction, MetricKind, Number

MetricToken = Union[str, MetricKind]

_ALIASES: Dict[str, MetricKind] = {
    "lev": MetricKind.LEVENSHTEIN,
    "edit": MetricKind.LEVENSHTEIN,
    "add": MetricKind.ADDITIONS,
    "damerau": MetricKind.DAMERAU_LEVENSHTEIN,
    "jaro": MetricKind.JARO_WINKLER,
    "jw": MetricKind.JARO_WINKLER,
    "winkler": MetricKind.JARO_WINKLER,
    "longest-common-subsequence": MetricKind.LCS,
    "line": MetricKind.LINES,
    "word": MetricKind.WORDS,
}


@dataclass(frozen=True)
class SelectedMetric:
    """One resolved metric: its kind, canonical name and function."""

    kind: MetricKind
    name: str
    function: MetricFunction

    def __call__(self, a: str, b: str) -> Number:
        return self.function(a, b)


def available_metrics() -> List[str]:
    """Canonical names of every catalogue entry, in declaration order."""
    return [kind.value for kind in MetricKind]


def resolve_token(token: MetricToken) -> MetricKind:
    """Map one token to a MetricKind.

    Strings are matched case-insensitively; ``_`` and ``-`` are
    interchangeable and a few short aliases are accepted.

    Raises:
        UnknownMetricError: If the token names no catalogue entry
    """
    if isinstance(token, MetricKind):
        return token

    normalized = str(token).strip().lower().replace("_", "-")
    for kind in MetricKind:
        if kind.value == normalized:
            return kind
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    raise UnknownMetricError(str(token), available_metrics())


def select_metric(
    requested: Optional[Union[MetricToken, Iterable[MetricToken]]] = None,
) -> SelectedMetric:
    """Pick the single active metric for a run.

    Args:
        requested: None, one token, or an iterable of tokens. No tokens
            selects the default (Levenshtein).

    Returns:
        The resolved SelectedMetric

    Raises:
        UnknownMetricError: If any token is not a catalogue entry
        AmbiguousMetricError: If the tokens name more than one distinct metric
    """
    if requested is None:
        tokens: List[MetricToken] = []
    elif isinstance(requested, (str, MetricKind)):
        tokens = [requested]
    else:
        tokens = list(requested)

    kinds: List[MetricKind] = []
    for token in tokens:
        kind = resolve_token(token)
        if kind not in kinds:
            kinds.append(kind)

    if len(kinds) > 1:
        raise AmbiguousMetricError([kind.value for kind in kinds])

    kind = kinds[0] if kinds else DEFAULT_METRIC
    return SelectedMetric(kind=kind, name=kind.value, function=METRIC_CATALOGUE[kind])

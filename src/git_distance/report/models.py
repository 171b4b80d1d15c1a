"""Data models for per-file distances and their aggregate."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class ContentPair:
    """Two versions of one artifact.

    ``identifier`` is an opaque label (usually a path) used only for
    reporting. A version that does not exist is an empty string.
    """

    identifier: str
    content_a: str
    content_b: str


@dataclass(frozen=True)
class MetricResult:
    """Distance for a single artifact."""

    identifier: str
    value: Number


@dataclass(frozen=True)
class Report:
    """Ordered per-artifact results and their sum.

    Rows keep input order; duplicates are kept as separate rows.
    """

    metric: str
    rows: Tuple[MetricResult, ...] = field(default_factory=tuple)
    total: Number = 0

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[MetricResult]:
        return iter(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "rows": [{"identifier": r.identifier, "value": r.value} for r in self.rows],
            "total": self.total,
        }

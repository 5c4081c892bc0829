"""Log Analyzer - Aggregation engine"""

from collections import Counter
from typing import Iterable, List, Tuple

from .config import check_positive
from .errors import ConfigurationError
from .models import AggregationResult, LogRecord
from .patterns import DEFAULT_TOP_ADDRESSES, DEFAULT_TOP_K, FIELD_NAMES


def _rank(counts: Counter) -> List[Tuple]:
    # Counter keeps first-seen order and sorted() is stable, so ties stay in input order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


class AggregationEngine:
    """Grouped counts over an immutable record set.

    Every method is a single pass over the records and never mutates them,
    so methods may be called in any order or from several threads at once.
    """

    GROUPABLE = FIELD_NAMES

    def __init__(self, records: Iterable[LogRecord]):
        self._records: Tuple[LogRecord, ...] = tuple(records)

    @property
    def records(self) -> Tuple[LogRecord, ...]:
        return self._records

    def _tally(self, field: str) -> Counter:
        if field not in self.GROUPABLE:
            raise ConfigurationError(f"cannot group by {field!r}")
        return Counter(getattr(r, field) for r in self._records)

    def total_count(self) -> int:
        return len(self._records)

    def unique_count(self, field: str) -> int:
        return len(self._tally(field))

    def status_distribution(self) -> AggregationResult:
        counts = self._tally('status')
        return AggregationResult('status', tuple(sorted(counts.items())))

    def top_pages(self, k: int = DEFAULT_TOP_K) -> AggregationResult:
        check_positive('k', k)
        return AggregationResult('path', tuple(_rank(self._tally('path'))[:k]))

    def top_addresses(self, k: int = DEFAULT_TOP_ADDRESSES) -> AggregationResult:
        check_positive('k', k)
        return AggregationResult('address', tuple(_rank(self._tally('address'))[:k]))

    def traffic_trend(self) -> AggregationResult:
        # Timestamps are zero-padded, so lexicographic order is chronological
        counts = self._tally('timestamp')
        return AggregationResult('timestamp', tuple(sorted(counts.items())))

    def agent_distribution(self) -> AggregationResult:
        return AggregationResult('agent', tuple(_rank(self._tally('agent'))))

"""Log Analyzer - Data models"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from .errors import ParseError


@dataclass(frozen=True)
class LogRecord:
    """Parsed web request"""
    address: str
    timestamp: str
    path: str
    status: int
    agent: str
    line_number: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class SuspiciousAddress:
    """Address whose failed-request count exceeded the threshold"""
    address: str
    failed_count: int


@dataclass(frozen=True)
class AggregationResult(Mapping):
    """Read-only mapping of grouping key to count.

    ``buckets`` keeps the presentation order chosen by the engine
    (ranked or sorted by key); lookups go through an internal dict.
    """
    key_name: str
    buckets: Tuple[Tuple[Hashable, int], ...] = ()
    _index: Dict[Hashable, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, '_index', dict(self.buckets))

    def __getitem__(self, key):
        return self._index[key]

    def __iter__(self) -> Iterator:
        return (key for key, _ in self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    def total(self) -> int:
        return sum(count for _, count in self.buckets)

    def as_dict(self) -> Dict[Hashable, int]:
        return dict(self.buckets)


@dataclass(frozen=True)
class Report:
    """Fixed bundle of analysis results for one run"""
    total_requests: int
    status_distribution: AggregationResult
    top_pages: AggregationResult
    traffic_trend: AggregationResult
    agent_distribution: AggregationResult
    suspicious_addresses: Tuple[SuspiciousAddress, ...]
    top_addresses: AggregationResult
    unique_addresses: int
    unique_paths: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'summary': {
                'total_requests': self.total_requests,
                'unique_addresses': self.unique_addresses,
                'unique_paths': self.unique_paths,
                'suspicious_addresses': len(self.suspicious_addresses),
            },
            'status_distribution': {str(k): v for k, v in self.status_distribution.items()},
            'top_pages': self.top_pages.as_dict(),
            'traffic_trend': self.traffic_trend.as_dict(),
            'agent_distribution': self.agent_distribution.as_dict(),
            'top_addresses': self.top_addresses.as_dict(),
            'suspicious_addresses': [
                {'address': s.address, 'failed_count': s.failed_count}
                for s in self.suspicious_addresses
            ],
        }


@dataclass
class IngestResult:
    """Records accepted by the driver plus the lines it rejected"""
    records: List[LogRecord]
    errors: List[ParseError]
    lines_read: int

    @property
    def rejected(self) -> int:
        return len(self.errors)

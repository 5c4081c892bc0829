"""Log Analyzer - Analysis configuration"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .errors import ConfigurationError
from .patterns import (DEFAULT_FAILURE_STATUSES, DEFAULT_THRESHOLD,
                       DEFAULT_TOP_ADDRESSES, DEFAULT_TOP_K)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_positive(name: str, value) -> int:
    if not _is_int(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return value


def check_threshold(value) -> int:
    if not _is_int(value) or value < 0:
        raise ConfigurationError(f"threshold must be a non-negative integer, got {value!r}")
    return value


def check_statuses(statuses: Iterable) -> FrozenSet[int]:
    if isinstance(statuses, (str, bytes)):
        raise ConfigurationError(f"statuses must be a collection of integers, got {statuses!r}")
    result = frozenset(statuses)
    for status in result:
        if not _is_int(status) or status < 0:
            raise ConfigurationError(f"invalid status code {status!r}")
    return result


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters for one report run"""
    top_k: int = DEFAULT_TOP_K
    top_addresses: int = DEFAULT_TOP_ADDRESSES
    failure_statuses: FrozenSet[int] = DEFAULT_FAILURE_STATUSES
    threshold: int = DEFAULT_THRESHOLD
    parallel: bool = False
    max_workers: Optional[int] = None

    def __post_init__(self):
        check_positive('top_k', self.top_k)
        check_positive('top_addresses', self.top_addresses)
        check_threshold(self.threshold)
        object.__setattr__(self, 'failure_statuses', check_statuses(self.failure_statuses))
        if self.max_workers is not None:
            check_positive('max_workers', self.max_workers)

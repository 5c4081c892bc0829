"""Log Analyzer - Failed-request anomaly detection"""

from collections import Counter
from typing import AbstractSet, Iterable, List

from .config import check_statuses, check_threshold
from .models import LogRecord, SuspiciousAddress
from .patterns import DEFAULT_FAILURE_STATUSES, DEFAULT_THRESHOLD


def failure_counts(records: Iterable[LogRecord],
                   statuses_of_interest: AbstractSet[int] = DEFAULT_FAILURE_STATUSES) -> Counter:
    """Count records per address whose status is in the given set."""
    statuses = check_statuses(statuses_of_interest)
    return Counter(r.address for r in records if r.status in statuses)


def detect_suspicious(records: Iterable[LogRecord],
                      statuses_of_interest: AbstractSet[int] = DEFAULT_FAILURE_STATUSES,
                      threshold: int = DEFAULT_THRESHOLD) -> List[SuspiciousAddress]:
    """Flag addresses with more than ``threshold`` failed requests.

    Ordered by failed count descending, then address ascending.
    """
    check_threshold(threshold)
    counts = failure_counts(records, statuses_of_interest)
    flagged = [(address, count) for address, count in counts.items() if count > threshold]
    flagged.sort(key=lambda item: (-item[1], item[0]))
    return [SuspiciousAddress(address=a, failed_count=c) for a, c in flagged]

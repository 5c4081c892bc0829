"""Log Analyzer - Report assembly"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, Optional

from .config import AnalysisConfig
from .detector import detect_suspicious
from .engine import AggregationEngine
from .errors import AnalysisCancelled
from .models import LogRecord, Report

logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation checked between aggregation steps.

    Fires when ``cancel()`` is called or, if a deadline was given, once
    that many seconds have passed since construction.
    """

    def __init__(self, deadline: Optional[float] = None):
        self._event = threading.Event()
        self._expires = time.monotonic() + deadline if deadline is not None else None

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._expires is not None and time.monotonic() >= self._expires

    def raise_if_cancelled(self):
        if self.cancelled:
            raise AnalysisCancelled("analysis cancelled before completion")


def _operations(engine: AggregationEngine, config: AnalysisConfig) -> Dict[str, Callable]:
    return {
        'total_requests': engine.total_count,
        'status_distribution': engine.status_distribution,
        'top_pages': lambda: engine.top_pages(config.top_k),
        'traffic_trend': engine.traffic_trend,
        'agent_distribution': engine.agent_distribution,
        'suspicious_addresses': lambda: tuple(detect_suspicious(
            engine.records, config.failure_statuses, config.threshold)),
        'top_addresses': lambda: engine.top_addresses(config.top_addresses),
        'unique_addresses': lambda: engine.unique_count('address'),
        'unique_paths': lambda: engine.unique_count('path'),
    }


def _guarded(name: str, op: Callable, token: Optional[CancellationToken]) -> Callable:
    def run():
        if token is not None:
            token.raise_if_cancelled()
        logger.debug("Computing %s", name)
        return op()
    return run


def build_report(records: Iterable[LogRecord],
                 config: Optional[AnalysisConfig] = None,
                 token: Optional[CancellationToken] = None) -> Report:
    """Run every analysis once and bundle the results.

    With ``config.parallel`` the analyses run on a thread pool and the
    bundle is assembled only after all of them finish. A fired token raises
    AnalysisCancelled; partial results are never returned.
    """
    config = config or AnalysisConfig()
    engine = AggregationEngine(records)
    ops = _operations(engine, config)

    if config.parallel:
        logger.debug("Dispatching %d analyses to worker threads", len(ops))
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            futures = {name: pool.submit(_guarded(name, op, token)) for name, op in ops.items()}
            results = {name: future.result() for name, future in futures.items()}
    else:
        results = {name: _guarded(name, op, token)() for name, op in ops.items()}

    if token is not None:
        token.raise_if_cancelled()

    return Report(**results)

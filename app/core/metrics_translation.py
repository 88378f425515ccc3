"""Translation latency instrumentation utilities.

Provides a timing context manager and percentile snapshot for /health.
"""
import threading
import time
from collections import deque
from contextlib import contextmanager

_MAX_SAMPLES = 1000
_translation_timings_ms: deque = deque(maxlen=_MAX_SAMPLES)
_lock = threading.Lock()


@contextmanager
def record_translation_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        with _lock:
            _translation_timings_ms.append(elapsed_ms)


def snapshot_latency_stats() -> dict:
    with _lock:
        sorted_vals = sorted(_translation_timings_ms)
    if not sorted_vals:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    count = len(sorted_vals)

    def _percentile(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return sorted_vals[idx]
    return {
        "count": count,
        "p95_ms": _percentile(0.95),
        "p99_ms": _percentile(0.99),
    }


def reset_latency_stats() -> None:
    with _lock:
        _translation_timings_ms.clear()

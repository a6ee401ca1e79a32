"""
Process-wide request metrics.

The executor counts every call and every classified failure and records
each call's latency. Read them with ``Metrics.get().snapshot()``.
"""

import threading
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TimingStats:
    """Aggregate of latency observations in milliseconds."""

    count: int = 0
    total_ms: float = 0.0
    min_ms: float = float("inf")
    max_ms: float = 0.0

    def record(self, duration_ms: float) -> None:
        self.count += 1
        self.total_ms += duration_ms
        self.min_ms = min(self.min_ms, duration_ms)
        self.max_ms = max(self.max_ms, duration_ms)

    def to_dict(self) -> dict:
        avg_ms = self.total_ms / self.count if self.count else 0.0
        return {
            "count": self.count,
            "avg_ms": round(avg_ms, 2),
            "min_ms": round(self.min_ms, 2) if self.count else 0.0,
            "max_ms": round(self.max_ms, 2),
        }


class Metrics:
    """
    Thread-safe counters and latency stats shared by every client.

    Counter names used by the client:
        requests_total, requests_failed, errors.<kind>
    Timings:
        request_latency_ms
    """

    _instance: ClassVar["Metrics | None"] = None

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Counter[str] = Counter()
        self._timings: defaultdict[str, TimingStats] = defaultdict(TimingStats)

    @classmethod
    def get(cls) -> "Metrics":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counters[name] += value

    def observe(self, name: str, duration_ms: float) -> None:
        with self._lock:
            self._timings[name].record(duration_ms)

    def snapshot(self) -> dict:
        """Return plain dicts of all counters and timings."""
        with self._lock:
            return {
                "counters": dict(self._counters),
                "timings": {name: stats.to_dict() for name, stats in self._timings.items()},
            }


def increment_requests(count: int = 1) -> None:
    Metrics.get().increment("requests_total", count)


def increment_errors(kind: str) -> None:
    """Count a failed request, overall and per error kind."""
    metrics = Metrics.get()
    metrics.increment("requests_failed")
    metrics.increment(f"errors.{kind}")


def observe_request_latency(duration_ms: float) -> None:
    Metrics.get().observe("request_latency_ms", duration_ms)

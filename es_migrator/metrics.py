"""
Prometheus metrics for alias migrations
"""

import os
import time
from contextlib import contextmanager
from typing import Callable

from prometheus_client import Counter, Gauge, Histogram, start_http_server

# Metrics port for pull mode
METRICS_PORT = int(os.getenv("METRICS_PORT", "8000"))

# Lazy initialization flag
_initialized = False
_metrics = {}


def _init_metrics():
    """Register Prometheus metrics on first use"""
    global _initialized

    if _initialized:
        return

    _metrics["migrations"] = Counter(
        "es_migrator_migrations_total",
        "Total migration attempts",
        ["status"]  # success, rejected, error
    )
    _metrics["step_latency"] = Histogram(
        "es_migrator_step_latency_seconds",
        "Latency of mutating migration steps",
        ["step"],  # create_index, reindex, update_aliases
        buckets=[0.1, 0.5, 1.0, 5.0, 30.0, 120.0, 600.0, 3600.0]
    )
    _metrics["current_version"] = Gauge(
        "es_migrator_current_version",
        "Generation currently served by an alias",
        ["alias"]
    )

    _initialized = True


def start_metrics_server(port: int = None):
    """Start Prometheus metrics HTTP server (for pull mode)"""
    _init_metrics()
    port = port or METRICS_PORT
    start_http_server(port)
    print(f"[Metrics] Server started on port {port}")


def inc_migration(status: str = "success"):
    """Increment migration counter (status: success/rejected/error)"""
    _init_metrics()
    _metrics["migrations"].labels(status=status).inc()


def step_latency_observer(step: str) -> Callable[[float], None]:
    """Return an observe function bound to one migration step"""
    _init_metrics()
    return _metrics["step_latency"].labels(step=step).observe


def set_current_version(alias: str, version: int):
    """Set the served generation gauge for an alias"""
    _init_metrics()
    _metrics["current_version"].labels(alias=alias).set(version)


@contextmanager
def track_latency(observe_fn: Callable[[float], None]):
    """Context manager to track operation latency"""
    start = time.time()
    try:
        yield
    finally:
        observe_fn(time.time() - start)

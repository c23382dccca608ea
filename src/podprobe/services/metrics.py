"""Prometheus exposition for the four process/host gauges.

Values are collected on every scrape by a custom collector registered on a
private registry, so the default process/platform collectors of
prometheus_client do not leak into the output.
"""

from __future__ import annotations

from collections.abc import Iterator

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from podprobe.services import system_info
from podprobe.services.clock import ProcessClock

CONTENT_TYPE = "text/plain; version=0.0.4"


class AppCollector(Collector):
    """Collects uptime, memory and CPU gauges at scrape time."""

    def __init__(self, clock: ProcessClock) -> None:
        self.clock = clock

    def collect(self) -> Iterator[GaugeMetricFamily]:
        memory = system_info.get_memory()
        yield GaugeMetricFamily(
            "app_uptime_seconds",
            "Time since application started",
            value=self.clock.uptime_seconds(),
        )
        yield GaugeMetricFamily(
            "app_memory_total_bytes",
            "Total system memory",
            value=memory.total_bytes,
        )
        yield GaugeMetricFamily(
            "app_memory_used_bytes",
            "Used system memory",
            value=memory.used_bytes,
        )
        yield GaugeMetricFamily(
            "app_cpu_count",
            "Number of CPUs available",
            value=system_info.get_cpu_count(),
        )


def build_registry(clock: ProcessClock) -> CollectorRegistry:
    """Create a registry holding only the application collector."""
    registry = CollectorRegistry(auto_describe=False)
    registry.register(AppCollector(clock))
    return registry


def render(registry: CollectorRegistry) -> bytes:
    return generate_latest(registry)

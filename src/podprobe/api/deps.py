"""Shared FastAPI dependencies for objects held on app state."""

from fastapi import Request
from prometheus_client import CollectorRegistry

from podprobe.config import Settings
from podprobe.services.clock import ProcessClock
from podprobe.services.crash import CrashScheduler


def get_clock(request: Request) -> ProcessClock:
    """Return the process clock created by the app factory."""
    return request.app.state.clock


def get_app_settings(request: Request) -> Settings:
    """Return the settings the app was built with.

    Read from app state rather than ``get_settings()`` so tests can build an
    app with their own Settings instance.
    """
    return request.app.state.settings


def get_crash_scheduler(request: Request) -> CrashScheduler:
    return request.app.state.crash_scheduler


def get_metrics_registry(request: Request) -> CollectorRegistry:
    return request.app.state.metrics_registry

"""Container-platform demo service: probes, identity, CPU load, crash and metrics endpoints."""

__version__ = "0.1.0"

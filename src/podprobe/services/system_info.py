"""Container identity and host resource introspection.

Everything here is read at call time: hostname, process UID/GID, a
whitelisted slice of the environment, OS release details and psutil's
CPU/memory figures. Lookups that can legitimately fail inside minimal
images (no /etc/os-release, odd hostname setups) degrade to defaults
instead of failing the request.
"""

from __future__ import annotations

import logging
import os
import platform
import socket
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import psutil

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


@dataclass(frozen=True)
class MemoryStats:
    total_bytes: int
    used_bytes: int

    @property
    def total_mb(self) -> int:
        return self.total_bytes // _MB

    @property
    def used_mb(self) -> int:
        return self.used_bytes // _MB


def get_hostname() -> str:
    """Return the host (pod) name, or ``"unknown"`` if it cannot be read."""
    try:
        name = socket.gethostname()
    except OSError:
        logger.warning("Could not determine hostname", exc_info=True)
        return "unknown"
    return name or "unknown"


def get_user_id() -> int:
    return os.getuid()


def get_group_id() -> int:
    return os.getgid()


def filter_environment(
    environ: Mapping[str, str],
    prefixes: Iterable[str],
    names: Iterable[str],
) -> dict[str, str]:
    """Keep only variables matching a prefix or an exact name.

    OpenShift/K8s inject a lot of service discovery variables worth
    showing; anything else (credentials, tokens) is dropped.
    """
    prefixes = tuple(prefixes)
    names = frozenset(names)
    return {
        key: value
        for key, value in environ.items()
        if key in names or key.startswith(prefixes)
    }


def get_os_release() -> tuple[str, str]:
    """Return ``(os_name, os_version)``.

    Prefers the distribution NAME/VERSION_ID from os-release and falls back
    to the platform name with an empty version.
    """
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        logger.debug("os-release not available, falling back to platform.system()")
        return platform.system(), ""
    return release.get("NAME", platform.system()), release.get("VERSION_ID", "")


def get_kernel_version() -> str:
    return platform.release()


def get_cpu_count() -> int:
    return psutil.cpu_count() or 0


def get_memory() -> MemoryStats:
    """Return total and used system memory in bytes.

    "Used" is total minus available, which counts reclaimable page cache as
    free and so tracks what the kernel can actually hand out.
    """
    vm = psutil.virtual_memory()
    return MemoryStats(total_bytes=vm.total, used_bytes=vm.total - vm.available)

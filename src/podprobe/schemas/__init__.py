from podprobe.schemas.fib import FibResult
from podprobe.schemas.info import ContainerInfo, SystemInfo
from podprobe.schemas.probe import ProbeResponse

__all__ = [
    "ContainerInfo",
    "FibResult",
    "ProbeResponse",
    "SystemInfo",
]

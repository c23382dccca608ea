"""Container identity schemas returned by /info."""

from pydantic import BaseModel


class SystemInfo(BaseModel):
    """Host OS and resource details."""

    os_name: str
    os_version: str
    kernel_version: str
    cpu_count: int
    total_memory_mb: int
    used_memory_mb: int


class ContainerInfo(BaseModel):
    """Who and where the process runs as.

    ``environment`` only ever contains whitelisted variables.
    """

    hostname: str
    user_id: int
    group_id: int
    environment: dict[str, str]
    system: SystemInfo

"""Container identity endpoint."""

import os

from fastapi import APIRouter, Depends

from podprobe.api.deps import get_app_settings
from podprobe.config import Settings
from podprobe.schemas.info import ContainerInfo, SystemInfo
from podprobe.services import system_info

router = APIRouter()


@router.get("/info", response_model=ContainerInfo)
def info(settings: Settings = Depends(get_app_settings)) -> ContainerInfo:
    """Return hostname, UID/GID, whitelisted env vars and host resources.

    Useful for checking what an OpenShift SCC actually assigned (arbitrary
    UID, GID 0) and which downward-API variables made it into the pod.
    """
    os_name, os_version = system_info.get_os_release()
    memory = system_info.get_memory()

    return ContainerInfo(
        hostname=system_info.get_hostname(),
        user_id=system_info.get_user_id(),
        group_id=system_info.get_group_id(),
        environment=system_info.filter_environment(
            os.environ, settings.info_env_prefixes, settings.info_env_names
        ),
        system=SystemInfo(
            os_name=os_name,
            os_version=os_version,
            kernel_version=system_info.get_kernel_version(),
            cpu_count=system_info.get_cpu_count(),
            total_memory_mb=memory.total_mb,
            used_memory_mb=memory.used_mb,
        ),
    )

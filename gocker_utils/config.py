from pathlib import Path

from pydantic import BaseModel

DEFAULT_CGROUP_ROOT = Path("/sys/fs/cgroup")
DEFAULT_NAMESPACE = "gocker"


class CgroupsSettings(BaseModel):
    # where the v1 controller hierarchies are mounted, one directory per controller
    cgroup_root: Path = DEFAULT_CGROUP_ROOT
    # directory under each controller hierarchy that holds the per-container cgroups
    namespace: str = DEFAULT_NAMESPACE
    # find the controller hierarchies in /proc/self/mountinfo instead of assuming cgroup_root/<controller>
    discover_mounts: bool = False

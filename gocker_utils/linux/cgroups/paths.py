#
# Copyright (C) 2023 Intel Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from gocker_utils.config import DEFAULT_CGROUP_ROOT, DEFAULT_NAMESPACE, CgroupsSettings
from gocker_utils.exceptions import CgroupControllerNotMounted, InvalidContainerId
from gocker_utils.linux.cgroups.cgroup import CONTROLLERS, ContainerCgroup, ControllerType
from gocker_utils.linux.mountinfo import find_v1_hierarchies, iter_mountinfo


def validate_container_id(container_id: str) -> str:
    """
    The container id becomes a single path component, so it must not be able to point
    anywhere outside of the controller root.
    """
    if (
        not isinstance(container_id, str)
        or container_id in ("", ".", "..")
        or "/" in container_id
        or "\0" in container_id
    ):
        raise InvalidContainerId(container_id)
    return container_id


class CgroupPathResolver(ABC):
    """
    Maps a controller and a container id to the container's cgroup directory.
    Subclasses only decide where each controller's root is, everything below it is fixed.
    """

    @abstractmethod
    def controller_root(self, controller: ControllerType) -> Path:
        pass

    def container_dir(self, controller: ControllerType, container_id: str) -> Path:
        return self.controller_root(controller) / validate_container_id(container_id)

    def control_file(self, controller: ControllerType, container_id: str, name: str) -> Path:
        return self.container_dir(controller, container_id) / name

    def get_cgroup(self, controller: ControllerType, container_id: str) -> ContainerCgroup:
        return ContainerCgroup(container_id, self.container_dir(controller, container_id))


class StaticPathResolver(CgroupPathResolver):
    """
    The conventional v1 layout: <cgroup_root>/<controller>/<namespace>/<container id>
    """

    def __init__(self, cgroup_root: Path = DEFAULT_CGROUP_ROOT, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.cgroup_root = Path(cgroup_root)
        self.namespace = namespace

    def controller_root(self, controller: ControllerType) -> Path:
        assert controller in CONTROLLERS, f"{controller!r} is not supported"
        return self.cgroup_root / controller / self.namespace


class MountinfoPathResolver(CgroupPathResolver):
    """
    Looks the controller hierarchies up in mountinfo, for hosts that mount them elsewhere
    or co-mount controllers (e.g /sys/fs/cgroup/cpu,cpuacct).
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, pid: Optional[int] = None) -> None:
        self.namespace = namespace
        self.pid = pid
        self._hierarchies: Optional[Dict[str, str]] = None

    def get_hierarchies(self) -> Dict[str, str]:
        if self._hierarchies is None:
            self._hierarchies = find_v1_hierarchies(iter_mountinfo(self.pid), CONTROLLERS)
        return self._hierarchies

    def controller_root(self, controller: ControllerType) -> Path:
        assert controller in CONTROLLERS, f"{controller!r} is not supported"
        hierarchy = self.get_hierarchies().get(controller)
        if hierarchy is None:
            raise CgroupControllerNotMounted(controller_name=controller)
        return Path(hierarchy) / self.namespace


def get_path_resolver(settings: Optional[CgroupsSettings] = None) -> CgroupPathResolver:
    settings = settings or CgroupsSettings()
    if settings.discover_mounts:
        return MountinfoPathResolver(settings.namespace)
    return StaticPathResolver(settings.cgroup_root, settings.namespace)

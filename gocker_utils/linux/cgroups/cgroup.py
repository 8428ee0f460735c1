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

from __future__ import annotations

from pathlib import Path
from typing import Literal, Tuple

from gocker_utils.exceptions import CgroupCreateError, CgroupReadError, CgroupRemoveError, CgroupWriteError

ControllerType = Literal["memory", "cpu", "pids"]
# Order in which per-container directories are created, attached and removed
CONTROLLERS: Tuple[ControllerType, ...] = ("memory", "pids", "cpu")

# Cgroup v1 handles the cgroup assigned processes using cgroup.procs
CGROUP_PROCS_FILE = "cgroup.procs"
NOTIFY_ON_RELEASE_FILE = "notify_on_release"
CGROUP_V1_UNBOUNDED_VALUE = "max"


class ContainerCgroup:
    """
    A single container's cgroup directory under one controller's hierarchy:
    - Creating and removing the directory.
    - Reading from or writing to interface files.
    - Getting processes that belong to the cgroup or assigning processes to the cgroup.
    Every OSError is translated into the matching CgroupError subclass.
    """

    container_id: str
    cgroup_abs_path: Path

    def __init__(self, container_id: str, cgroup_abs_path: Path):
        self.container_id = container_id
        self.cgroup_abs_path = cgroup_abs_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.container_id!r}, {self.cgroup_abs_path.as_posix()!r})"

    def create(self) -> None:
        # the engine directory under each hierarchy is only created along with the first container.
        # an existing directory is fine, it may be left over from a previous run of the same container
        try:
            self.cgroup_abs_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CgroupCreateError(self.container_id, self.cgroup_abs_path) from e

    def remove(self) -> None:
        # the kernel refuses (EBUSY) to remove a cgroup that still has tasks attached
        try:
            self.cgroup_abs_path.rmdir()
        except OSError as e:
            raise CgroupRemoveError(self.container_id, self.cgroup_abs_path) from e

    def read_from_interface_file(self, interface_name: str) -> str:
        interface_path = self.cgroup_abs_path / interface_name
        try:
            return interface_path.read_text().strip()
        except OSError as e:
            raise CgroupReadError(self.container_id, interface_path) from e

    def write_to_interface_file(self, interface_name: str, data: str) -> None:
        interface_path = self.cgroup_abs_path / interface_name
        try:
            interface_path.write_text(data)
        except OSError as e:
            raise CgroupWriteError(self.container_id, interface_path) from e

    def get_pids_in_cgroup(self) -> set[int]:
        return {int(proc) for proc in self.read_from_interface_file(CGROUP_PROCS_FILE).split()}

    def assign_process_to_cgroup(self, pid: int) -> None:
        # cgroup.procs moves the whole thread group, tasks would move a single thread
        self.write_to_interface_file(CGROUP_PROCS_FILE, str(pid))

    def enable_notify_on_release(self) -> None:
        self.write_to_interface_file(NOTIFY_ON_RELEASE_FILE, "1")

    @classmethod
    def convert_outer_value_to_inner(cls, val: int) -> str:
        return str(val)

    @classmethod
    def convert_inner_value_to_outer(cls, val: str) -> int:
        if val == CGROUP_V1_UNBOUNDED_VALUE:
            return -1
        return int(val)

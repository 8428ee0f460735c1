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

from pathlib import Path


class InvalidContainerId(ValueError):
    def __init__(self, container_id: str) -> None:
        super().__init__(f"Container id {container_id!r} can't be used as a cgroup directory name")
        self.container_id = container_id


class CgroupControllerNotMounted(Exception):
    def __init__(self, controller_name: str):
        super(CgroupControllerNotMounted, self).__init__(
            f"Controller {controller_name} is not mounted as a cgroup v1 hierarchy on the system"
        )
        self.controller_name = controller_name


class CgroupError(Exception):
    """
    Base class for failures touching a container's cgroup directories.
    The originating OSError is always available as __cause__.
    """

    action = "access"

    def __init__(self, container_id: str, path: Path) -> None:
        super().__init__(f"Unable to {self.action} {path.as_posix()!r} of container {container_id!r}")
        self.container_id = container_id
        self.path = path


class CgroupCreateError(CgroupError):
    action = "create cgroup directory"


class CgroupWriteError(CgroupError):
    action = "write to cgroup interface file"


class CgroupReadError(CgroupError):
    action = "read from cgroup interface file"


class CgroupRemoveError(CgroupError):
    action = "remove cgroup directory"

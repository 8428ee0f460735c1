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

from typing import Optional, Type, TypeVar

from gocker_utils.linux.cgroups.cgroup import ContainerCgroup, ControllerType
from gocker_utils.linux.cgroups.paths import CgroupPathResolver, get_path_resolver
from gocker_utils.logging import LoggerOrAdapter, get_container_logger

T = TypeVar("T", bound="BaseController")


class BaseController:
    CONTROLLER: ControllerType  # class attribute (should be initialized in inheriting classes)

    def __init__(self, cgroup: ContainerCgroup, logger: Optional[LoggerOrAdapter] = None) -> None:
        self.cgroup = cgroup
        self.logger = get_container_logger(cgroup.container_id, logger)

    @classmethod
    def for_container(
        cls: Type[T],
        container_id: str,
        resolver: Optional[CgroupPathResolver] = None,
        logger: Optional[LoggerOrAdapter] = None,
    ) -> T:
        resolver = resolver or get_path_resolver()
        return cls(resolver.get_cgroup(cls.CONTROLLER, container_id), logger)

    def read_from_interface_file(self, interface_name: str) -> str:
        return self.cgroup.read_from_interface_file(interface_name)

    def write_to_interface_file(self, interface_name: str, data: str) -> None:
        self.cgroup.write_to_interface_file(interface_name, data)

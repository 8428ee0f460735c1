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

from gocker_utils.linux.cgroups.base_controller import BaseController
from gocker_utils.linux.cgroups.cgroup import ControllerType

MIB = 1024 * 1024


def megabytes_to_bytes(value: int) -> int:
    return value * MIB


class MemoryController(BaseController):
    CONTROLLER: ControllerType = "memory"
    MEMORY_LIMIT_FILE = "memory.limit_in_bytes"
    MEMORY_SWAP_LIMIT_FILE = "memory.memsw.limit_in_bytes"
    MEMORY_USAGE_FILE = "memory.usage_in_bytes"

    def set_limit_in_bytes(self, limit: int, memsw_limit: int = -1) -> None:
        """
        Set the memory limit and, if memsw_limit isn't -1, the memory+swap limit.
        :param memsw_limit: total of memory and swap, not swap alone.
        """
        # memsw.limit_in_bytes can't be lower than memory.limit_in_bytes, so the kernel
        # rejects the memsw write unless memory.limit_in_bytes is written first.
        self.write_to_interface_file(self.MEMORY_LIMIT_FILE, self.cgroup.convert_outer_value_to_inner(limit))
        if memsw_limit != -1:
            self.write_to_interface_file(
                self.MEMORY_SWAP_LIMIT_FILE, self.cgroup.convert_outer_value_to_inner(memsw_limit)
            )

    def set_memory_limit(self, limit_mb: int, swap_limit_mb: int = -1) -> None:
        """
        Limit the container to limit_mb MiB of memory. A negative swap_limit_mb leaves swap
        untouched, otherwise the container may use up to swap_limit_mb MiB of swap on top.
        """
        memsw_limit = megabytes_to_bytes(limit_mb + swap_limit_mb) if swap_limit_mb >= 0 else -1
        self.set_limit_in_bytes(megabytes_to_bytes(limit_mb), memsw_limit)

    def get_memory_limit(self) -> int:
        return self.cgroup.convert_inner_value_to_outer(self.read_from_interface_file(self.MEMORY_LIMIT_FILE))

    def get_memsw_limit(self) -> int:
        return self.cgroup.convert_inner_value_to_outer(self.read_from_interface_file(self.MEMORY_SWAP_LIMIT_FILE))

    def get_usage_in_bytes(self) -> int:
        return int(self.read_from_interface_file(self.MEMORY_USAGE_FILE))

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

from dataclasses import dataclass

import psutil

from gocker_utils.linux.cgroups.base_controller import BaseController
from gocker_utils.linux.cgroups.cgroup import ControllerType

CFS_PERIOD_US = 1000000  # 1 second


@dataclass
class CpuLimitParams:
    period: int
    quota: int


class CpuController(BaseController):
    CONTROLLER: ControllerType = "cpu"
    CPU_PERIOD_FILE = "cpu.cfs_period_us"
    CPU_QUOTA_FILE = "cpu.cfs_quota_us"

    def set_cpu_limit_cores(self, cores: float) -> bool:
        """
        Limit the container to `cores` CPUs worth of CFS bandwidth.
        Asking for more CPUs than the host has is ignored rather than treated as an error.
        :return: whether the limit was written.
        """
        host_cpus = psutil.cpu_count(logical=True)
        if host_cpus is not None and cores > host_cpus:
            self.logger.info(
                "Ignoring attempt to set CPU quota to greater than the number of available CPUs",
                extra={"cores": cores, "host_cpus": host_cpus},
            )
            return False
        self.set_cpu_limit(CpuLimitParams(period=CFS_PERIOD_US, quota=int(CFS_PERIOD_US * cores)))
        return True

    def set_cpu_limit(self, params: CpuLimitParams) -> None:
        # period goes first, the quota is only meaningful relative to it
        self.write_to_interface_file(self.CPU_PERIOD_FILE, str(params.period))
        self.write_to_interface_file(self.CPU_QUOTA_FILE, self.cgroup.convert_outer_value_to_inner(params.quota))

    def get_cpu_limit_params(self) -> CpuLimitParams:
        return CpuLimitParams(
            period=int(self.read_from_interface_file(self.CPU_PERIOD_FILE)),
            quota=int(self.read_from_interface_file(self.CPU_QUOTA_FILE)),
        )

    def get_cpu_limit_cores(self) -> float:
        """
        Returns the cores limit: quota / period. If quota is unbounded (-1) will return -1
        """
        cpu_limit_params = self.get_cpu_limit_params()
        return cpu_limit_params.quota / cpu_limit_params.period if cpu_limit_params.quota != -1 else -1.0


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


class PidsController(BaseController):
    CONTROLLER: ControllerType = "pids"
    PIDS_MAX_FILE = "pids.max"
    PIDS_CURRENT_FILE = "pids.current"

    def set_pids_limit(self, limit: int) -> None:
        # fork() and clone() fail with EAGAIN in the cgroup once the limit is reached
        self.write_to_interface_file(self.PIDS_MAX_FILE, self.cgroup.convert_outer_value_to_inner(limit))

    def get_pids_limit(self) -> int:
        """
        Returns the tasks limit. If unbounded ("max"), return -1
        """
        return self.cgroup.convert_inner_value_to_outer(self.read_from_interface_file(self.PIDS_MAX_FILE))

    def get_current_pids(self) -> int:
        return int(self.read_from_interface_file(self.PIDS_CURRENT_FILE))

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

from gocker_utils.linux.cgroups.base_controller import BaseController  # noqa: F401
from gocker_utils.linux.cgroups.cgroup import CONTROLLERS, ContainerCgroup, ControllerType  # noqa: F401
from gocker_utils.linux.cgroups.cpu_controller import CpuController  # noqa: F401
from gocker_utils.linux.cgroups.hierarchy import create_cgroups, get_container_pids, remove_cgroups  # noqa: F401
from gocker_utils.linux.cgroups.limits import (  # noqa: F401
    ResourceLimits,
    configure_cgroups,
    set_cpu_limit,
    set_memory_limit,
    set_pids_limit,
)
from gocker_utils.linux.cgroups.memory_controller import MemoryController  # noqa: F401
from gocker_utils.linux.cgroups.paths import (  # noqa: F401
    CgroupPathResolver,
    MountinfoPathResolver,
    StaticPathResolver,
    get_path_resolver,
)
from gocker_utils.linux.cgroups.pids_controller import PidsController  # noqa: F401

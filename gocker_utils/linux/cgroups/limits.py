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

from typing import Optional

from pydantic import BaseModel

from gocker_utils.linux.cgroups.cpu_controller import CpuController
from gocker_utils.linux.cgroups.memory_controller import MemoryController
from gocker_utils.linux.cgroups.paths import CgroupPathResolver
from gocker_utils.linux.cgroups.pids_controller import PidsController
from gocker_utils.logging import LoggerOrAdapter


class ResourceLimits(BaseModel):
    """
    A container's requested limits. Non-positive values (negative for swap) mean "don't limit".
    """

    memory_mb: int = 0
    # swap on top of memory_mb, only applied together with a memory limit
    swap_mb: int = -1
    pids_max: int = 0
    cpu_cores: float = 0.0


def set_memory_limit(
    container_id: str,
    limit_mb: int,
    swap_limit_mb: int = -1,
    *,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> None:
    MemoryController.for_container(container_id, resolver, logger).set_memory_limit(limit_mb, swap_limit_mb)


def set_cpu_limit(
    container_id: str,
    cores: float,
    *,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> bool:
    return CpuController.for_container(container_id, resolver, logger).set_cpu_limit_cores(cores)


def set_pids_limit(
    container_id: str,
    limit: int,
    *,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> None:
    PidsController.for_container(container_id, resolver, logger).set_pids_limit(limit)


def configure_cgroups(
    container_id: str,
    limits: ResourceLimits,
    *,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> None:
    """
    Apply the requested limits to a container whose cgroups were already created.
    Limits are applied one after the other and nothing is undone if a later one fails.
    """
    if limits.memory_mb > 0:
        set_memory_limit(container_id, limits.memory_mb, limits.swap_mb, resolver=resolver, logger=logger)
    if limits.cpu_cores > 0:
        set_cpu_limit(container_id, limits.cpu_cores, resolver=resolver, logger=logger)
    if limits.pids_max > 0:
        set_pids_limit(container_id, limits.pids_max, resolver=resolver, logger=logger)

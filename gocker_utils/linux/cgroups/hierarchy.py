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

import os
from typing import List, Optional, Set

from gocker_utils.linux.cgroups.cgroup import CONTROLLERS, ContainerCgroup, ControllerType
from gocker_utils.linux.cgroups.paths import CgroupPathResolver, get_path_resolver
from gocker_utils.logging import LoggerOrAdapter, get_container_logger


def get_container_cgroups(container_id: str, resolver: Optional[CgroupPathResolver] = None) -> List[ContainerCgroup]:
    resolver = resolver or get_path_resolver()
    return [resolver.get_cgroup(controller, container_id) for controller in CONTROLLERS]


def create_cgroups(
    container_id: str,
    create_dirs: bool = True,
    *,
    pid: Optional[int] = None,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> None:
    """
    Create the container's memory, pids and cpu cgroups and move a process into all of them.
    Children forked by that process afterwards inherit the membership.

    :param create_dirs: False if the cgroup directories were already created by someone else.
    :param pid: the process to attach, defaults to the current process.
    :raises CgroupCreateError: if a directory couldn't be created.
    :raises CgroupWriteError: if notify_on_release or cgroup.procs couldn't be written.
    """
    logger = get_container_logger(container_id, logger)
    if pid is None:
        pid = os.getpid()
    cgroups = get_container_cgroups(container_id, resolver)

    if create_dirs:
        for cgroup in cgroups:
            cgroup.create()

    for cgroup in cgroups:
        # let the kernel clean up the cgroup once its last task exits
        cgroup.enable_notify_on_release()
        cgroup.assign_process_to_cgroup(pid)

    logger.debug(
        "Attached process to container cgroups",
        extra={"pid": pid, "cgroups": [str(c.cgroup_abs_path) for c in cgroups]},
    )


def remove_cgroups(
    container_id: str,
    *,
    resolver: Optional[CgroupPathResolver] = None,
    logger: Optional[LoggerOrAdapter] = None,
) -> None:
    """
    Remove the container's cgroup directories. All of the container's processes must have
    exited by now, this doesn't wait for them.

    :raises CgroupRemoveError: if a directory couldn't be removed, e.g it still has tasks.
    """
    logger = get_container_logger(container_id, logger)
    for cgroup in get_container_cgroups(container_id, resolver):
        cgroup.remove()
    logger.debug("Removed container cgroups")


def get_container_pids(
    container_id: str, controller: ControllerType = "memory", *, resolver: Optional[CgroupPathResolver] = None
) -> Set[int]:
    resolver = resolver or get_path_resolver()
    return resolver.get_cgroup(controller, container_id).get_pids_in_cgroup()

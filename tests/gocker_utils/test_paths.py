from pathlib import Path
from unittest.mock import patch

import pytest

from gocker_utils.config import CgroupsSettings
from gocker_utils.exceptions import CgroupControllerNotMounted, InvalidContainerId
from gocker_utils.linux.cgroups.paths import (
    CgroupPathResolver,
    MountinfoPathResolver,
    StaticPathResolver,
    get_path_resolver,
    validate_container_id,
)
from gocker_utils.linux.mountinfo import find_v1_hierarchies, parse_mountinfo_line

MOUNTINFO_LINES = [
    "25 30 0:23 / /sys rw,nosuid,nodev,noexec,relatime shared:7 - sysfs sysfs rw",
    "34 25 0:29 / /sys/fs/cgroup ro,nosuid,nodev,noexec shared:9 - tmpfs tmpfs ro,mode=755",
    "38 34 0:33 / /sys/fs/cgroup/memory rw,nosuid,nodev,noexec,relatime shared:15 - cgroup cgroup rw,memory",
    "39 34 0:34 / /sys/fs/cgroup/cpu,cpuacct rw,nosuid,nodev,noexec,relatime shared:16 - cgroup cgroup rw,cpu,cpuacct",
    "40 34 0:35 / /sys/fs/cgroup/pids rw,nosuid,nodev,noexec,relatime shared:17 - cgroup cgroup rw,pids",
]


def test_static_resolver_default_layout():
    resolver = StaticPathResolver()
    assert resolver.controller_root("memory") == Path("/sys/fs/cgroup/memory/gocker")
    assert resolver.controller_root("cpu") == Path("/sys/fs/cgroup/cpu/gocker")
    assert resolver.controller_root("pids") == Path("/sys/fs/cgroup/pids/gocker")
    assert resolver.container_dir("pids", "abc") == Path("/sys/fs/cgroup/pids/gocker/abc")
    assert resolver.control_file("memory", "abc", "memory.limit_in_bytes") == Path(
        "/sys/fs/cgroup/memory/gocker/abc/memory.limit_in_bytes"
    )


def test_static_resolver_custom_root_and_namespace():
    resolver = StaticPathResolver(Path("/cg"), namespace="engine")
    assert resolver.container_dir("cpu", "abc") == Path("/cg/cpu/engine/abc")
    cgroup = resolver.get_cgroup("cpu", "abc")
    assert cgroup.container_id == "abc"
    assert cgroup.cgroup_abs_path == Path("/cg/cpu/engine/abc")


@pytest.mark.parametrize("container_id", ["", ".", "..", "../escape", "a/b", "/abs", "nul\0byte"])
def test_invalid_container_ids_are_rejected(container_id: str):
    with pytest.raises(InvalidContainerId):
        validate_container_id(container_id)
    with pytest.raises(InvalidContainerId):
        StaticPathResolver().container_dir("memory", container_id)


@pytest.mark.parametrize("container_id", ["3f2a9c1b7e4d", "web-1", "db_primary.2", "..hidden"])
def test_valid_container_ids(container_id: str):
    assert validate_container_id(container_id) == container_id


def test_parse_mountinfo_line():
    mount = parse_mountinfo_line(MOUNTINFO_LINES[3])
    assert mount.mount_point == "/sys/fs/cgroup/cpu,cpuacct"
    assert mount.filesystem_type == "cgroup"
    assert mount.optional_fields == ["shared:16"]
    assert mount.super_options == ["rw", "cpu", "cpuacct"]


def test_find_v1_hierarchies():
    mounts = [parse_mountinfo_line(line) for line in MOUNTINFO_LINES]
    assert find_v1_hierarchies(mounts, ["memory", "cpu", "pids"]) == {
        "memory": "/sys/fs/cgroup/memory",
        "cpu": "/sys/fs/cgroup/cpu,cpuacct",
        "pids": "/sys/fs/cgroup/pids",
    }


def test_mountinfo_resolver():
    mounts = [parse_mountinfo_line(line) for line in MOUNTINFO_LINES]
    with patch("gocker_utils.linux.cgroups.paths.iter_mountinfo", return_value=mounts) as iter_mock:
        resolver = MountinfoPathResolver()
        assert resolver.container_dir("cpu", "abc") == Path("/sys/fs/cgroup/cpu,cpuacct/gocker/abc")
        assert resolver.container_dir("memory", "abc") == Path("/sys/fs/cgroup/memory/gocker/abc")
        # hierarchies are looked up once per resolver
        iter_mock.assert_called_once()


def test_mountinfo_resolver_missing_controller():
    mounts = [parse_mountinfo_line(line) for line in MOUNTINFO_LINES if "pids" not in line]
    with patch("gocker_utils.linux.cgroups.paths.iter_mountinfo", return_value=mounts):
        resolver = MountinfoPathResolver()
        with pytest.raises(CgroupControllerNotMounted) as exception:
            resolver.controller_root("pids")
    assert exception.value.controller_name == "pids"


def test_get_path_resolver():
    resolver = get_path_resolver()
    assert isinstance(resolver, StaticPathResolver)
    assert resolver.controller_root("memory") == Path("/sys/fs/cgroup/memory/gocker")

    resolver = get_path_resolver(CgroupsSettings(cgroup_root="/cg", namespace="engine"))
    assert isinstance(resolver, StaticPathResolver)
    assert resolver.controller_root("pids") == Path("/cg/pids/engine")

    resolver = get_path_resolver(CgroupsSettings(discover_mounts=True, namespace="engine"))
    assert isinstance(resolver, MountinfoPathResolver)
    assert resolver.namespace == "engine"


def test_path_resolver_requires_controller_root():
    with pytest.raises(TypeError):
        CgroupPathResolver()  # type: ignore[abstract]

    class NoRoot(CgroupPathResolver):
        pass

    with pytest.raises(TypeError):
        NoRoot()  # type: ignore[abstract]

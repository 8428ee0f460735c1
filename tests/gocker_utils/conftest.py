from pathlib import Path

import pytest
from pytest import TempPathFactory

from gocker_utils.linux.cgroups.cgroup import CONTROLLERS
from gocker_utils.linux.cgroups.paths import StaticPathResolver

CONTAINER_ID = "3f2a9c1b7e4d"


@pytest.fixture
def cgroup_root(tmp_path_factory: TempPathFactory) -> Path:
    """
    Stands in for /sys/fs/cgroup on a host where no container has run yet: the controller
    hierarchies are mounted but the engine's directory doesn't exist under any of them.
    """
    root = Path(tmp_path_factory.mktemp("cgroup"))
    for controller in CONTROLLERS:
        (root / controller).mkdir()
    return root


@pytest.fixture
def resolver(cgroup_root: Path) -> StaticPathResolver:
    return StaticPathResolver(cgroup_root)


@pytest.fixture
def container_id() -> str:
    return CONTAINER_ID

import logging

import pytest

from gocker_utils.logging import LOGGER_NAME, ContainerLoggerAdapter, get_container_logger, get_logger


def test_container_logger_tags_records(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    logger = get_container_logger("3f2a9c1b7e4d")
    assert isinstance(logger, ContainerLoggerAdapter)
    assert logger.logger is get_logger()

    logger.info("Limit applied", extra={"limit": 512})
    (record,) = caplog.records
    assert record.name == LOGGER_NAME
    assert getattr(record, "container_id") == "3f2a9c1b7e4d"
    assert getattr(record, "limit") == 512
    assert getattr(record, "extra") == {"container_id": "3f2a9c1b7e4d", "limit": 512}


def test_container_logger_without_call_extras(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    get_container_logger("abc").debug("Removed container cgroups")
    (record,) = caplog.records
    assert getattr(record, "extra") == {"container_id": "abc"}


def test_container_logger_wraps_callers_adapter(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="engine")
    adapter = logging.LoggerAdapter(logging.getLogger("engine"), {"engine": "gocker"})
    get_container_logger("abc", adapter).warning("Something happened")
    (record,) = caplog.records
    assert record.name == "engine"
    assert getattr(record, "engine") == "gocker"

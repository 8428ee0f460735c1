import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, MutableMapping, Optional, Tuple, Union

LOGGER_NAME = "gocker-cgroups"

if TYPE_CHECKING:
    _LoggerAdapter = logging.LoggerAdapter[logging.Logger]
else:
    _LoggerAdapter = logging.LoggerAdapter

LoggerOrAdapter = Union[logging.Logger, _LoggerAdapter]


class Extra(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "extra"):
            record.extra = {}
        return True


class ContainerLoggerAdapter(_LoggerAdapter):
    """
    Tags every record with the container id it concerns. The call's own extra attributes
    are kept, and all of them are also collected under an "extra" attribute on the record.
    """

    def __init__(self, logger: LoggerOrAdapter, container_id: str) -> None:
        super().__init__(logger, {"container_id": container_id})  # type: ignore[arg-type]

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = {**self.extra, **kwargs.get("extra", {})}
        kwargs["extra"] = {**extra, "extra": extra}
        return msg, kwargs


@lru_cache(maxsize=None)
def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.addFilter(Extra())
    logger.setLevel(logging.DEBUG)
    logger.addHandler(logging.NullHandler())
    return logger


def get_container_logger(container_id: str, logger: Optional[LoggerOrAdapter] = None) -> ContainerLoggerAdapter:
    return ContainerLoggerAdapter(logger or get_logger(), container_id)

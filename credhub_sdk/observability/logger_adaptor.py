"""Loguru-backed logger with the standard .info/.error/.warning/.debug API.

Loggers only bind context; sinks and levels belong to the host application.
"""

from typing import Any, Optional

from loguru import logger as _loguru_logger

from credhub_sdk.constants import SERVICE_NAME

_loggers: dict = {}


class CredHubLogger:
    """Minimal logger that forwards to loguru, bound to a logger name."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name, service_name=SERVICE_NAME)

    @property
    def name(self) -> str:
        return self._name

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.critical(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> CredHubLogger:
    """Get a cached logger for the given module name.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        CredHubLogger: The logger bound to ``name``.
    """
    if name is None:
        name = "credhub_sdk"
    if name not in _loggers:
        _loggers[name] = CredHubLogger(name)
    return _loggers[name]


default_logger = get_logger()

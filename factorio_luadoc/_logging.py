"""
Structured logging for parsing and rendering.

Records follow the OpenTelemetry Logging Data Model when written as JSON, or
a one-line layout for terminals. Every record from this package carries a
``scope`` (``parse``, ``types`` or ``render``) and, where an entity is
involved, the dotted ``path`` of that entity in the document.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("parse")
    log.debug("Dropping unknown operator", extra={"path": "LuaEntity.operators[3]"})

Environment (read once, at import)::

    LUADOC_LOG_LEVEL=trace|debug|info|warn|error|fatal|off (default: info)
    LUADOC_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Any

__all__ = ["logger", "setup_logging", "scoped_logger"]

SERVICE_NAME = "factorio_luadoc"

_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "scope", "taskName"}


def _package_version() -> str:
    try:
        return get_version("factorio-luadoc")
    except PackageNotFoundError:
        return "0.0.0"


def _scope(record: logging.LogRecord) -> str:
    return getattr(record, "scope", None) or record.name.rsplit(".", 1)[-1]


def _source(record: logging.LogRecord) -> str:
    """Source file relative to the package root."""
    marker = SERVICE_NAME + "/"
    path = record.pathname.replace(os.sep, "/")
    if marker in path:
        return path[path.index(marker) + len(marker) :]
    return path


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_FIELDS and not key.startswith("_")
    }


# =============================================================================
# Formatters
# =============================================================================


class JsonFormatter(logging.Formatter):
    """One OpenTelemetry log record per line."""

    def __init__(self) -> None:
        super().__init__()
        self._resource = {"service.name": SERVICE_NAME, "service.version": _package_version()}

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        # RFC3339 with nanosecond precision
        timestamp = created.strftime("%Y-%m-%dT%H:%M:%S") + f".{created.microsecond * 1000:09d}Z"

        attributes: dict[str, Any] = {"scope": _scope(record), **_extras(record)}
        if record.levelno == logging.DEBUG or record.levelno >= logging.ERROR:
            attributes["code.filepath"] = _source(record)
            attributes["code.lineno"] = record.lineno

        return json.dumps(
            {
                "timestamp": timestamp,
                "severityText": _SEVERITY.get(record.levelno, "INFO"),
                "body": record.getMessage(),
                "attributes": attributes,
                "resource": self._resource,
            },
            separators=(",", ":"),
            default=str,
        )


class HumanFormatter(logging.Formatter):
    """
    Terminal layout: ``HH:MM:SS LEVEL [scope] message (path)``.

    DEBUG records also get their source location, dimmed when colored.
    """

    _COLORS = {
        logging.DEBUG: "\x1b[2m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[31m",
    }
    _SCOPE_COLOR = "\x1b[36m"
    _RESET = "\x1b[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _paint(self, text: str, color: str | None) -> str:
        if not self._use_colors or not color:
            return text
        return color + text + self._RESET

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S")
        severity = f"{_SEVERITY.get(record.levelno, 'INFO'):<5}"
        line = (
            f"{clock} {self._paint(severity, self._COLORS.get(record.levelno))} "
            f"{self._paint(f'[{_scope(record)}]', self._SCOPE_COLOR)} {record.getMessage()}"
        )

        path = getattr(record, "path", None)
        if path:
            line += f" ({path})"
        if record.levelno == logging.DEBUG or record.levelno >= logging.ERROR:
            line += self._paint(f" [{_source(record)}:{record.lineno}]", self._COLORS[logging.DEBUG])
        return line


# =============================================================================
# Setup
# =============================================================================


def _get_log_level() -> int:
    name = os.environ.get("LUADOC_LOG_LEVEL", "info")
    return _LEVELS.get(name.lower(), logging.INFO)


def _get_log_format() -> str:
    fmt = os.environ.get("LUADOC_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "human" if sys.stderr.isatty() else "json"


def _create_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))
    return handler


logger = logging.getLogger(SERVICE_NAME)


def setup_logging(level: str | int = "INFO", format: str | None = None) -> None:
    """
    Replace the package's log handler.

    Parameters
    ----------
    level : str or int, default "INFO"
        Level name (``"debug"``, ``"warn"``, ``"off"``...) or a ``logging``
        constant.
    format : str, optional
        ``"json"`` or ``"human"``. Defaults to ``LUADOC_LOG_FORMAT``, then to
        human on a terminal and json otherwise.

    Examples
    --------
    See which operators and fields get dropped or defaulted::

        >>> import factorio_luadoc
        >>> factorio_luadoc.setup_logging("DEBUG", format="human")
        >>> factorio_luadoc.config.debug = True
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_create_handler(format.lower() if format else _get_log_format()))
    logger.setLevel(level)


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Adds the fixed scope to each call's ``extra`` instead of replacing it."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """Logger adapter that tags every record with ``scope``."""
    return _ScopedLoggerAdapter(logger, {"scope": scope})


# Leave handlers configured by the application alone
if not logger.handlers:
    logger.addHandler(_create_handler(_get_log_format()))
    logger.setLevel(_get_log_level())

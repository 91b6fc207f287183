"""Structured logging – structlog-backed :class:`Logger` implementation."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog
from structlog.processors import CallsiteParameter

from ologs.errors import FlushError
from ologs.structured.options import Option, StructuredLoggerConfig, build_config
from ologs.structured.values import Values, merge_values

# Frames from this module are skipped so the reported caller is the facade's caller.
_CALLSITE_IGNORES = [__name__]

_FILTER_LEVELS = (logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)

# Keys written or consumed by structlog and the processor chain. User fields
# with these names are kept under "fields.<key>".
_RESERVED_KEYS = frozenset(
    {
        "self",
        "event",
        "msg",
        "level",
        "time",
        "timestamp",
        "caller",
        "filename",
        "lineno",
        "logger",
        "logger_name",
        "exception",
        "exc_info",
        "stack",
        "stack_info",
    }
)


def _fields(*values: Values) -> dict[str, Any]:
    return {
        (f"fields.{key}" if key in _RESERVED_KEYS else key): value
        for key, value in merge_values(*values).items()
    }


def _filtering_level(level: int) -> int:
    """Clamp *level* to the nearest structlog filtering level at or below it."""
    for candidate in _FILTER_LEVELS:
        if level >= candidate:
            return candidate
    return logging.NOTSET


def _encode_caller(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    filename = event_dict.pop("filename", None)
    lineno = event_dict.pop("lineno", None)
    if filename is not None:
        event_dict["caller"] = f"{filename}:{lineno}"
    return event_dict


def _capitalize_level(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    level = event_dict.get("level")
    if isinstance(level, str):
        event_dict["level"] = level.upper()
    return event_dict


def _processors(config: StructuredLoggerConfig) -> list[Any]:
    shared: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            {CallsiteParameter.FILENAME, CallsiteParameter.LINENO},
            additional_ignores=_CALLSITE_IGNORES,
        ),
        _encode_caller,
    ]
    if config.is_json:
        return shared + [
            structlog.processors.TimeStamper(fmt=None, key="time"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    level_styles = {
        name.upper(): style
        for name, style in structlog.dev.ConsoleRenderer.get_default_level_styles(colors=True).items()
    }
    return shared + [
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        _capitalize_level,
        structlog.dev.ConsoleRenderer(colors=True, level_styles=level_styles),
    ]


class StructlogLogger:
    """:class:`~ologs.structured.protocol.Logger` backed by a structlog bound logger.

    Instances are immutable: :meth:`with_values` returns a child that shares
    the output stream but carries its own fixed fields.
    """

    def __init__(self, bound: Any, output: IO[str]) -> None:
        self._log = bound
        self._output = output

    def debug(self, msg: str, *values: Values) -> None:
        self._log.debug(msg, **_fields(*values))

    def info(self, msg: str, *values: Values) -> None:
        self._log.info(msg, **_fields(*values))

    def warn(self, msg: str, *values: Values) -> None:
        self._log.warning(msg, **_fields(*values))

    # common alias
    warning = warn

    def error(self, msg: str, *values: Values) -> None:
        self._log.error(msg, **_fields(*values))

    def with_values(self, values: Values) -> "StructlogLogger":
        return StructlogLogger(self._log.bind(**_fields(values)), self._output)

    def close(self) -> None:
        """Flush the output stream.

        Raises
        ------
        FlushError
            When the underlying stream cannot be flushed (e.g. it is closed).
        """
        try:
            self._output.flush()
        except (OSError, ValueError) as exc:
            raise FlushError("failed to flush log output", cause=exc) from exc


def new_structured_logger(*options: Option) -> StructlogLogger:
    """Build an independent structured logger.

    Defaults to JSON output at INFO on standard error.  Construction never
    touches the global structlog configuration.

    Example::

        log = new_structured_logger(set_format("console"), set_level("debug"))
        log.info("device registered", {IMEI: "356938035643809"})
    """
    config = build_config(*options)
    output = config.output if config.output is not None else sys.stderr
    bound = structlog.wrap_logger(
        structlog.PrintLogger(file=output),
        processors=_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(_filtering_level(config.level)),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
    return StructlogLogger(bound, output)


__all__ = ["StructlogLogger", "new_structured_logger"]

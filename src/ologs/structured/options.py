"""Structured logging – immutable backend configuration and functional options."""
from __future__ import annotations

import dataclasses
import logging
from typing import IO, Callable

from ologs.errors import InvalidSettingValueError
from ologs.levels import Severity

JSON = "json"
CONSOLE = "console"


@dataclasses.dataclass(frozen=True)
class StructuredLoggerConfig:
    """Construction options for :class:`~ologs.structured.adapter.StructlogLogger`.

    ``output`` of ``None`` means standard error, resolved when the logger is
    built.
    """

    format: str = JSON
    level: int = logging.INFO
    output: IO[str] | None = None

    @property
    def is_json(self) -> bool:
        return self.format == JSON


Option = Callable[[StructuredLoggerConfig], StructuredLoggerConfig]


def set_format(fmt: str) -> Option:
    """Select ``"json"`` or ``"console"`` encoding.

    Unknown names fall back to ``"console"``.
    """
    encoding = JSON if fmt.strip().lower() == JSON else CONSOLE

    def _apply(config: StructuredLoggerConfig) -> StructuredLoggerConfig:
        return dataclasses.replace(config, format=encoding)

    return _apply


def set_level(level: int | str | Severity) -> Option:
    """Set the minimum level; accepts a stdlib int, a :class:`Severity` or its name."""
    threshold = _to_stdlib_level(level)

    def _apply(config: StructuredLoggerConfig) -> StructuredLoggerConfig:
        return dataclasses.replace(config, level=threshold)

    return _apply


def set_output(stream: IO[str]) -> Option:
    """Write rendered entries to *stream* instead of standard error."""

    def _apply(config: StructuredLoggerConfig) -> StructuredLoggerConfig:
        return dataclasses.replace(config, output=stream)

    return _apply


def build_config(*options: Option) -> StructuredLoggerConfig:
    config = StructuredLoggerConfig()
    for option in options:
        config = option(config)
    return config


def _to_stdlib_level(level: int | str | Severity) -> int:
    if isinstance(level, int):
        return level
    try:
        return Severity.parse(level).stdlib_level
    except ValueError:
        raise InvalidSettingValueError("level", level, "unknown level name") from None


__all__ = [
    "CONSOLE",
    "JSON",
    "Option",
    "StructuredLoggerConfig",
    "build_config",
    "set_format",
    "set_level",
    "set_output",
]

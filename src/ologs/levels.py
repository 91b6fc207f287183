"""Severity levels shared by the structured and contextual loggers."""
from __future__ import annotations

import logging
from enum import Enum

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Severity(str, Enum):
    """Ordered log severity: trace < debug < info < warning < error < fatal/panic."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Return the severity named *value* (any case); ``warn`` means WARNING.

        Raises ``ValueError`` for unknown names.
        """
        if isinstance(value, Severity):
            return value
        name = value.strip().lower()
        return cls(_ALIASES.get(name, name))

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]

    @property
    def is_capturable(self) -> bool:
        """Whether entries at this severity are forwarded to the capture sink."""
        return self in (Severity.ERROR, Severity.FATAL, Severity.PANIC)


_ALIASES: dict[str, str] = {"warn": "warning"}

_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.TRACE: TRACE,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.PANIC: logging.CRITICAL,
}

_THRESHOLDS: dict[str, Severity] = {
    "trace": Severity.TRACE,
    "debug": Severity.DEBUG,
    "warning": Severity.WARNING,
    "info": Severity.INFO,
}


def parse_level(name: str | None) -> Severity:
    """Map a case-insensitive level name to a minimum severity.

    Only ``trace``, ``debug``, ``warning`` and ``info`` are recognised as
    thresholds; anything else (including ``None``) falls back to INFO.
    """
    return _THRESHOLDS.get((name or "").strip().lower(), Severity.INFO)


__all__ = ["Severity", "TRACE", "parse_level"]

"""Structured logging – Logger protocol."""
from __future__ import annotations

from typing import Protocol

from ologs.structured.values import Values


class Logger(Protocol):
    """Capability set every structured logging backend must satisfy.

    Level methods accept zero or more :data:`Values` bundles which are merged
    (in key order) into the emitted entry.
    """

    def debug(self, msg: str, *values: Values) -> None: ...
    def info(self, msg: str, *values: Values) -> None: ...
    def warn(self, msg: str, *values: Values) -> None: ...
    def error(self, msg: str, *values: Values) -> None: ...

    def with_values(self, values: Values) -> "Logger":
        """Return a new logger carrying *values* as fixed fields."""
        ...

    def close(self) -> None:
        """Flush any buffered output."""
        ...


__all__ = ["Logger"]

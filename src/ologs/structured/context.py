"""Structured logging – scope-bound logger injection and retrieval.

Two carriers are supported:

* :class:`Scope` – an immutable value threaded explicitly down the call chain.
* :class:`LoggerContext` – a ``ContextVar`` slot for frameworks where the
  request scope is the current asyncio task / thread.

Both fall back to a fresh JSON logger when nothing is bound.
"""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar, Token
from typing import Iterator

from ologs.structured.adapter import new_structured_logger
from ologs.structured.options import set_format
from ologs.structured.protocol import Logger
from ologs.structured.values import Values


@dataclasses.dataclass(frozen=True)
class Scope:
    """Immutable per-operation carrier.

    ``logger`` is the single slot this carrier defines; binding a new logger
    produces a new :class:`Scope` and leaves the original untouched.
    """

    logger: Logger | None = None


def _default_logger() -> Logger:
    return new_structured_logger(set_format("json"))


def _derive(logger: Logger, values: Values | None) -> Logger:
    if values:
        return logger.with_values(values)
    return logger


def with_context(scope: Scope | None, logger: Logger, values: Values | None = None) -> Scope:
    """Return a new scope carrying *logger*.

    When *values* is non-empty a child logger with those fixed fields is
    bound instead of *logger* itself.
    """
    base = scope if scope is not None else Scope()
    return dataclasses.replace(base, logger=_derive(logger, values))


def from_context(scope: Scope | None) -> Logger:
    """Return the logger bound to *scope*, or a new JSON logger when unbound."""
    if scope is None or scope.logger is None:
        return _default_logger()
    return scope.logger


_LOGGER_VAR: ContextVar[Logger | None] = ContextVar("_ologs_logger", default=None)


class LoggerContext:
    """Ambient logger slot stored in a ``ContextVar``."""

    @staticmethod
    def set(logger: Logger, values: Values | None = None) -> Token[Logger | None]:
        return _LOGGER_VAR.set(_derive(logger, values))

    @staticmethod
    def get() -> Logger:
        logger = _LOGGER_VAR.get()
        if logger is None:
            return _default_logger()
        return logger

    @staticmethod
    def reset(token: Token[Logger | None]) -> None:
        _LOGGER_VAR.reset(token)

    @staticmethod
    @contextlib.contextmanager
    def scoped(logger: Logger, values: Values | None = None) -> Iterator[Logger]:
        bound = _derive(logger, values)
        token = _LOGGER_VAR.set(bound)
        try:
            yield bound
        finally:
            _LOGGER_VAR.reset(token)


__all__ = ["LoggerContext", "Scope", "from_context", "with_context"]

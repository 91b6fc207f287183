"""Capture – CaptureSink protocol."""
from __future__ import annotations

from typing import Any, Mapping, Protocol


class CaptureSink(Protocol):
    """Port: forward an error-level log entry to an error-tracking service.

    Implementations report best-effort and must never raise.
    """

    def report(
        self,
        service_name: str,
        fields: Mapping[str, Any],
        caller: str,
        message: str,
        err: BaseException | None = None,
    ) -> None: ...


__all__ = ["CaptureSink"]

"""Sink errors — output flushing, network sinks and the capture service."""

from __future__ import annotations

from typing import Any

from ologs.errors.base import OlogsError


class FlushError(OlogsError):
    """Buffered log output could not be flushed on close."""

    default_code = "flush_error"


class SinkConnectionError(OlogsError):
    """A remote log sink could not be attached."""

    default_code = "sink_connection_error"

    def __init__(
        self,
        address: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{address}'", **kwargs)
        self.address = address


class CaptureInitError(OlogsError):
    """The error-capture service rejected its configuration."""

    default_code = "capture_init_error"


__all__ = ["CaptureInitError", "FlushError", "SinkConnectionError"]

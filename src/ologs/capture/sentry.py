"""Capture – Sentry-backed :class:`~ologs.capture.ports.CaptureSink`."""
from __future__ import annotations

import logging
from typing import Any, Mapping

import sentry_sdk
from sentry_sdk.utils import BadDsn

from ologs.errors import CaptureInitError

logger = logging.getLogger(__name__)

FLUSH_TIMEOUT_SECONDS = 2.0


class SentryCaptureSink:
    """Reports log entries to Sentry.

    Each report runs in a fresh scope so tags and the ``log`` context block
    never leak into unrelated events.
    """

    def __init__(self, flush_timeout: float = FLUSH_TIMEOUT_SECONDS) -> None:
        self._flush_timeout = flush_timeout

    @classmethod
    def init(cls, dsn: str, environment: str = "", debug: bool = False) -> "SentryCaptureSink":
        """Initialise the Sentry client and return a sink that reports to it.

        Raises
        ------
        CaptureInitError
            When the DSN cannot be parsed.
        """
        try:
            sentry_sdk.init(
                dsn=dsn,
                debug=debug,
                environment=environment or None,
                traces_sample_rate=1.0,
                attach_stacktrace=True,
                send_default_pii=True,
            )
        except BadDsn as exc:
            raise CaptureInitError("invalid Sentry DSN", cause=exc) from exc
        return cls()

    def report(
        self,
        service_name: str,
        fields: Mapping[str, Any],
        caller: str,
        message: str,
        err: BaseException | None = None,
    ) -> None:
        try:
            with sentry_sdk.new_scope() as scope:
                scope.set_context("log", dict(fields))
                scope.set_tag("method", caller)
                scope.set_tag("service-name", service_name)
                if err is not None:
                    sentry_sdk.capture_exception(err)
                sentry_sdk.capture_message(message)
            sentry_sdk.flush(timeout=self._flush_timeout)
        except Exception:  # noqa: BLE001
            logger.warning("sentry report failed for %s", caller, exc_info=True)


__all__ = ["FLUSH_TIMEOUT_SECONDS", "SentryCaptureSink"]

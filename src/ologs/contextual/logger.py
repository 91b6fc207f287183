"""Contextual logging – ContextualLogger.

A field-merging and routing shim over a private stdlib :class:`logging.Logger`.
Every entry carries the static context (``application``, ``hostname``) plus a
``method`` field naming the caller; entries at ERROR, FATAL or PANIC are also
forwarded to the configured :class:`~ologs.capture.ports.CaptureSink`.

Configuration (format, level, sinks) is process-wide state of the instance and
is not guarded by a lock: finish reconfiguring before logging concurrently.
"""
from __future__ import annotations

import dataclasses
import io
import logging
import logging.handlers
import socket
import sys
from typing import IO, Any, Mapping

from ologs.capture import CaptureSink, SentryCaptureSink
from ologs.config import LoggerSettings
from ologs.contextual.formats import FIELDS_ATTR, Format, build_formatter
from ologs.contextual.syslog import open_syslog_handler
from ologs.errors import CaptureInitError, FlushError, SinkConnectionError
from ologs.levels import TRACE, Severity, parse_level


@dataclasses.dataclass(frozen=True)
class ContextualLoggerConfig:
    """Snapshot of a logger's configuration; replaced, never mutated."""

    format: Format = Format.TEXT
    level: Severity = Severity.INFO
    timestamps: bool = True
    syslog_address: str | None = None


class ContextualLogger:
    """Logger that decorates entries with static and per-call context.

    Parameters
    ----------
    application:
        Service name, emitted as ``application`` and used as the
        ``service-name`` tag of captured errors.
    log_level:
        Minimum level name (``trace``, ``debug``, ``info``, ``warning``);
        unknown names mean ``info``.
    fmt:
        :class:`Format` or its name; anything but ``JSON`` selects text.
    stream:
        Destination of rendered entries.  Defaults to standard output.
    capture:
        Optional sink receiving error-level entries.  Usually installed
        through :meth:`set_error_capture_dsn`.

    Example::

        log = ContextualLogger("billing", "debug")
        log.log(Severity.WARNING, "Invoices.create", "disk low", {"pct": 90})
    """

    def __init__(
        self,
        application: str,
        log_level: str = "info",
        fmt: Format | str = Format.TEXT,
        *,
        stream: IO[str] | None = None,
        capture: CaptureSink | None = None,
    ) -> None:
        context: dict[str, Any] = {"application": application}
        try:
            context["hostname"] = socket.gethostname()
        except OSError:
            pass
        self._context = context
        self._capture = capture
        self._buffer: io.StringIO | None = None
        self._syslog_handler: logging.handlers.SysLogHandler | None = None

        # Not registered with the logging manager, so instances never share
        # handlers. The threshold is checked in _emit against the config.
        self._logger = logging.Logger(f"ologs.contextual.{application}", level=TRACE)
        self._logger.propagate = False
        self._stream_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        self._logger.addHandler(self._stream_handler)

        self._config = ContextualLoggerConfig()
        self._apply(
            dataclasses.replace(self._config, format=Format.parse(fmt), level=parse_level(log_level))
        )

    @classmethod
    def from_settings(
        cls,
        settings: LoggerSettings,
        *,
        stream: IO[str] | None = None,
        capture: CaptureSink | None = None,
    ) -> "ContextualLogger":
        """Build a logger and attach the sinks *settings* enables."""
        logger = cls(settings.application, settings.level, settings.format, stream=stream, capture=capture)
        if settings.syslog_host:
            logger.add_network_sink(settings.syslog_host, settings.syslog_port)
        if settings.sentry_dsn:
            logger.set_error_capture_dsn(
                settings.sentry_dsn, settings.sentry_environment, settings.sentry_debug
            )
        return logger

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    @property
    def config(self) -> ContextualLoggerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        severity: Severity | str,
        caller: str,
        message: str,
        fields: Mapping[str, Any] | None = None,
        err: BaseException | None = None,
    ) -> None:
        """Emit *message* with the merged context.

        Fields are merged static context → *fields* → ``method`` → ``error``;
        later keys overwrite earlier ones.
        """
        self._log(Severity.parse(severity), caller, message, self._merge(caller, fields, err), err)

    def error(self, severity: Severity | str, caller: str, message: str, err: BaseException | None) -> None:
        self.log(severity, caller, message, None, err)

    def invalid_parameter(
        self,
        severity: Severity | str,
        caller: str,
        parameter: str,
        err: BaseException | None = None,
    ) -> None:
        merged = self._merge(caller, None, err, parameter=parameter)
        self._log(Severity.parse(severity), caller, "invalid parameter", merged, err)

    def invalid_request_body(self, severity: Severity | str, caller: str, err: BaseException | None = None) -> None:
        self.log(severity, caller, "invalid request body", None, err)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_format(self, fmt: Format | str) -> None:
        self._apply(dataclasses.replace(self._config, format=Format.parse(fmt)))

    def set_level(self, level_name: str) -> None:
        self._apply(dataclasses.replace(self._config, level=parse_level(level_name)))

    def add_network_sink(self, host: str, port: int | str) -> None:
        """Attach a UDP syslog sink; failures leave the logger without it."""
        try:
            handler = open_syslog_handler(host, port, self._stream_handler.formatter)
        except SinkConnectionError as exc:
            self._emit(Severity.WARNING, f"Could not hook to syslog, err {exc.cause}", {})
            return
        self._detach_syslog()
        self._syslog_handler = handler
        self._logger.addHandler(handler)
        self._config = dataclasses.replace(self._config, syslog_address=f"{host}:{port}")

    def set_error_capture_dsn(self, dsn: str, environment: str = "", debug: bool = False) -> None:
        """Initialise Sentry and forward error-level entries to it.

        An invalid DSN disables forwarding and is reported as a warning entry.
        """
        try:
            sink = SentryCaptureSink.init(dsn, environment, debug)
        except CaptureInitError as exc:
            self._capture = None
            self._emit(
                Severity.WARNING,
                "ContextualLogger will not send error logs to sentry because DSN failed to connect: "
                f"{exc.cause}",
                {},
            )
            return
        self._capture = sink
        self._emit(Severity.INFO, "ContextualLogger will send error logs to sentry", {})

    def capture_to_buffer(self) -> None:
        """Redirect output to an in-memory buffer, as text without timestamps.

        Meant for asserting on log content in tests; read it with :meth:`output`.
        """
        self._buffer = io.StringIO()
        self._stream_handler.setStream(self._buffer)
        self._apply(dataclasses.replace(self._config, format=Format.TEXT, timestamps=False))

    def output(self) -> str:
        if self._buffer is None:
            return ""
        return self._buffer.getvalue()

    def close(self) -> None:
        """Flush every handler and detach the syslog sink.

        Raises
        ------
        FlushError
            When a handler's stream cannot be flushed.
        """
        try:
            for handler in list(self._logger.handlers):
                handler.flush()
        except (OSError, ValueError) as exc:
            raise FlushError("failed to flush log output", cause=exc) from exc
        finally:
            self._detach_syslog()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _merge(
        self,
        caller: str,
        fields: Mapping[str, Any] | None,
        err: BaseException | None,
        parameter: str | None = None,
    ) -> dict[str, Any]:
        merged = dict(self._context)
        if fields:
            merged.update(fields)
        merged["method"] = caller
        if err is not None:
            merged["error"] = str(err)
        if parameter is not None:
            merged["parameter"] = parameter
        return merged

    def _log(
        self,
        severity: Severity,
        caller: str,
        message: str,
        fields: dict[str, Any],
        err: BaseException | None,
    ) -> None:
        self._emit(severity, message, fields)
        if severity.is_capturable and self._capture is not None:
            self._capture.report(self._context["application"], fields, caller, message, err)

    def _emit(self, severity: Severity, message: str, fields: Mapping[str, Any]) -> None:
        if severity.stdlib_level < self._config.level.stdlib_level:
            return
        self._logger.log(severity.stdlib_level, message, extra={FIELDS_ATTR: dict(fields)})

    def _apply(self, config: ContextualLoggerConfig) -> None:
        formatter = build_formatter(config.format, config.timestamps)
        for handler in self._logger.handlers:
            handler.setFormatter(formatter)
        self._config = config

    def _detach_syslog(self) -> None:
        if self._syslog_handler is None:
            return
        self._logger.removeHandler(self._syslog_handler)
        self._syslog_handler.close()
        self._syslog_handler = None
        self._config = dataclasses.replace(self._config, syslog_address=None)


__all__ = ["ContextualLogger", "ContextualLoggerConfig"]

"""Testing fakes – in-memory doubles for the Logger and CaptureSink ports."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from ologs.structured.values import Values, merge_values


@dataclasses.dataclass(frozen=True)
class RecordedEntry:
    level: str
    message: str
    fields: dict[str, Any]


class RecordingLogger:
    """In-memory :class:`~ologs.structured.protocol.Logger` double.

    Children created with :meth:`with_values` record into their own list, so
    tests can check that fixed fields never leak between siblings.

    Usage::

        log = RecordingLogger()
        log.with_values({"UserID": 7}).info("login")
        assert log.entries == []
    """

    def __init__(self, fixed: Mapping[str, Any] | None = None) -> None:
        self._fixed: dict[str, Any] = dict(fixed or {})
        self.entries: list[RecordedEntry] = []
        self.closed = False

    @property
    def fixed_fields(self) -> dict[str, Any]:
        return dict(self._fixed)

    def _record(self, level: str, msg: str, values: tuple[Values, ...]) -> None:
        self.entries.append(RecordedEntry(level, msg, merge_values(self._fixed, *values)))

    def debug(self, msg: str, *values: Values) -> None:
        self._record("debug", msg, values)

    def info(self, msg: str, *values: Values) -> None:
        self._record("info", msg, values)

    def warn(self, msg: str, *values: Values) -> None:
        self._record("warn", msg, values)

    warning = warn

    def error(self, msg: str, *values: Values) -> None:
        self._record("error", msg, values)

    def with_values(self, values: Values) -> "RecordingLogger":
        return RecordingLogger(merge_values(self._fixed, values))

    def close(self) -> None:
        self.closed = True


@dataclasses.dataclass(frozen=True)
class CapturedReport:
    service_name: str
    fields: dict[str, Any]
    caller: str
    message: str
    err: BaseException | None


class FakeCaptureSink:
    """In-memory :class:`~ologs.capture.ports.CaptureSink` that records reports."""

    def __init__(self) -> None:
        self.reports: list[CapturedReport] = []

    def report(
        self,
        service_name: str,
        fields: Mapping[str, Any],
        caller: str,
        message: str,
        err: BaseException | None = None,
    ) -> None:
        self.reports.append(CapturedReport(service_name, dict(fields), caller, message, err))

    def assert_reported(self, n: int = 1) -> None:
        """Assert that exactly *n* reports were received."""
        assert len(self.reports) == n, (
            f"Capture sink received {len(self.reports)} report(s), expected {n}"
        )

    def assert_not_reported(self) -> None:
        self.assert_reported(0)

    def clear(self) -> None:
        self.reports.clear()


__all__ = ["CapturedReport", "FakeCaptureSink", "RecordedEntry", "RecordingLogger"]

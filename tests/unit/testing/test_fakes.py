"""Unit tests for the in-memory test doubles."""

from __future__ import annotations

import pytest

from ologs.testing import FakeCaptureSink, RecordingLogger


class TestRecordingLogger:
    def test_records_levels_and_fields(self) -> None:
        log = RecordingLogger()
        log.debug("d")
        log.info("i", {"b": 2}, {"a": 1})
        log.warn("w")
        log.warning("w2")
        log.error("e")
        assert [e.level for e in log.entries] == ["debug", "info", "warn", "warn", "error"]
        assert list(log.entries[1].fields) == ["b", "a"]

    def test_with_values_does_not_touch_parent(self) -> None:
        parent = RecordingLogger()
        child = parent.with_values({"UserID": 1})
        child.info("x")
        assert parent.entries == []
        assert parent.fixed_fields == {}
        assert child.entries[0].fields == {"UserID": 1}

    def test_close(self) -> None:
        log = RecordingLogger()
        log.close()
        assert log.closed


class TestFakeCaptureSink:
    def test_records_report(self) -> None:
        sink = FakeCaptureSink()
        err = ValueError("x")
        sink.report("svc", {"a": 1}, "c", "m", err)
        sink.assert_reported(1)
        assert sink.reports[0].err is err

    def test_assert_not_reported_fails_when_reported(self) -> None:
        sink = FakeCaptureSink()
        sink.report("svc", {}, "c", "m")
        with pytest.raises(AssertionError):
            sink.assert_not_reported()

    def test_clear(self) -> None:
        sink = FakeCaptureSink()
        sink.report("svc", {}, "c", "m")
        sink.clear()
        sink.assert_not_reported()

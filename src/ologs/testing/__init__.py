"""Testing – in-memory doubles for logger and capture-sink ports."""
from ologs.testing.fakes import CapturedReport, FakeCaptureSink, RecordedEntry, RecordingLogger

__all__ = ["CapturedReport", "FakeCaptureSink", "RecordedEntry", "RecordingLogger"]

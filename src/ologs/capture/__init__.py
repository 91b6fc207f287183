"""Capture – forwarding error-level entries to an error-tracking service."""
from ologs.capture.ports import CaptureSink
from ologs.capture.sentry import FLUSH_TIMEOUT_SECONDS, SentryCaptureSink

__all__ = ["CaptureSink", "FLUSH_TIMEOUT_SECONDS", "SentryCaptureSink"]

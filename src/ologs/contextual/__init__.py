"""Contextual logging – static-context logger with text/JSON output and sinks."""
from ologs.contextual.formats import Format
from ologs.contextual.logger import ContextualLogger, ContextualLoggerConfig

__all__ = ["ContextualLogger", "ContextualLoggerConfig", "Format"]

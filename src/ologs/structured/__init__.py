"""Structured logging – ordered values, Logger protocol, structlog adapter, scopes."""
from ologs.structured.adapter import StructlogLogger, new_structured_logger
from ologs.structured.context import LoggerContext, Scope, from_context, with_context
from ologs.structured.options import (
    Option,
    StructuredLoggerConfig,
    set_format,
    set_level,
    set_output,
)
from ologs.structured.protocol import Logger
from ologs.structured.values import (
    ALARM_ID,
    EVENT_ID,
    IMEI,
    LATENCY,
    LAYOUT_ID,
    METHOD,
    PATH,
    ROLE,
    TRACKING_ID,
    USER_ID,
    Values,
    merge_values,
    to_ordered_pairs,
)

__all__ = [
    "ALARM_ID",
    "EVENT_ID",
    "IMEI",
    "LATENCY",
    "LAYOUT_ID",
    "METHOD",
    "PATH",
    "ROLE",
    "TRACKING_ID",
    "USER_ID",
    "Logger",
    "LoggerContext",
    "Option",
    "Scope",
    "StructlogLogger",
    "StructuredLoggerConfig",
    "Values",
    "from_context",
    "merge_values",
    "new_structured_logger",
    "set_format",
    "set_level",
    "set_output",
    "to_ordered_pairs",
    "with_context",
]

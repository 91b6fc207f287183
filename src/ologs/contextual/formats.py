"""Contextual logging – text/JSON rendering through ProcessorFormatter."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

import structlog

# LogRecord attribute carrying the merged field set of an entry
FIELDS_ATTR = "ologs_fields"

# Set by the formatter itself; clashing fields are kept under "fields.<key>"
_RESERVED_KEYS = frozenset({"event", "msg", "level", "time", "_record", "_from_structlog"})


class Format(str, Enum):
    """Output format of a :class:`~ologs.contextual.logger.ContextualLogger`."""

    TEXT = "TEXT"
    JSON = "JSON"

    @classmethod
    def parse(cls, value: "Format | str") -> "Format":
        """``JSON`` (any case) selects JSON; everything else selects text."""
        if isinstance(value, Format):
            return value
        return cls.JSON if value.strip().upper() == cls.JSON.value else cls.TEXT


def _merge_record_fields(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    record = event_dict.get("_record")
    fields = getattr(record, FIELDS_ATTR, None)
    if fields:
        for key, value in fields.items():
            event_dict[f"fields.{key}" if key in _RESERVED_KEYS else key] = value
    return event_dict


def _local_millis_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    event_dict["time"] = datetime.now().isoformat(timespec="milliseconds")
    return event_dict


def build_formatter(fmt: Format, timestamps: bool = True) -> structlog.stdlib.ProcessorFormatter:
    """Return a stdlib formatter rendering records as logfmt text or JSON.

    Keys other than ``time``, ``level`` and ``msg`` are emitted in sorted
    order in both formats.
    """
    pre_chain: list[Any] = [structlog.stdlib.add_log_level, _merge_record_fields]
    renderer: Any
    if fmt is Format.JSON:
        if timestamps:
            pre_chain.append(structlog.processors.TimeStamper(fmt="iso", utc=False, key="time"))
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        if timestamps:
            pre_chain.append(_local_millis_timestamp)
        renderer = structlog.processors.LogfmtRenderer(
            sort_keys=True,
            key_order=["time", "level", "msg"],
            drop_missing=True,
            bool_as_flag=False,
        )
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("msg"),
            renderer,
        ],
        foreign_pre_chain=pre_chain,
    )


__all__ = ["FIELDS_ATTR", "Format", "build_formatter"]

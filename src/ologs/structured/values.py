"""Structured values – deterministic key/value flattening.

Two calls with the same field set always produce the same pair sequence, so
rendered log lines can be diffed or compared against golden files.
"""
from __future__ import annotations

from typing import Any, Mapping

Values = Mapping[str, Any]

# Well-known field keys
TRACKING_ID = "TrackingID"
USER_ID = "UserID"
LAYOUT_ID = "LayoutID"
ROLE = "Role"
EVENT_ID = "EventID"
ALARM_ID = "AlarmID"
LATENCY = "LatencyMS"
METHOD = "Method"
PATH = "Path"
IMEI = "Imei"


def to_ordered_pairs(values: Values) -> list[Any]:
    """Flatten *values* into ``[k1, v1, k2, v2, ...]`` with keys sorted ascending."""
    pairs: list[Any] = []
    for key in sorted(values):
        pairs.append(key)
        pairs.append(values[key])
    return pairs


def merge_values(*bundles: Values) -> dict[str, Any]:
    """Merge *bundles* into one dict; later bundles win on duplicate keys.

    Each bundle is flattened through :func:`to_ordered_pairs`, so the keys
    of every bundle are inserted in sorted order.
    """
    merged: dict[str, Any] = {}
    for bundle in bundles:
        pairs = to_ordered_pairs(bundle)
        for key, value in zip(pairs[::2], pairs[1::2]):
            merged[key] = value
    return merged


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
    "Values",
    "merge_values",
    "to_ordered_pairs",
]

"""Contextual logging – remote syslog sink over UDP."""
from __future__ import annotations

import logging
import logging.handlers
import socket

from ologs.errors import SinkConnectionError
from ologs.levels import TRACE


def open_syslog_handler(host: str, port: int | str, formatter: logging.Formatter) -> logging.handlers.SysLogHandler:
    """Create a UDP syslog handler accepting every level; TRACE goes out at debug priority.

    Raises
    ------
    SinkConnectionError
        When *port* is not numeric or *host* cannot be resolved.
    """
    address = f"{host}:{port}"
    try:
        handler = logging.handlers.SysLogHandler(
            address=(host, int(port)),
            socktype=socket.SOCK_DGRAM,
        )
    except (OSError, ValueError) as exc:
        raise SinkConnectionError(address, cause=exc) from exc
    # instance copy; the class-level map is shared
    handler.priority_map = {**handler.priority_map, logging.getLevelName(TRACE): "debug"}
    handler.setLevel(TRACE)
    handler.setFormatter(formatter)
    return handler


__all__ = ["open_syslog_handler"]

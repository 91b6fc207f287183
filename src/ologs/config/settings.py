"""Config – LoggerSettings."""
from __future__ import annotations

import dataclasses

from ologs.config.base import Settings
from ologs.errors import InvalidSettingValueError

_FORMATS = frozenset({"text", "json", "console"})


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Logger configuration read from ``OLOGS_*`` environment variables.

    ``syslog_host`` and ``sentry_dsn`` are optional; leaving them empty
    disables the corresponding sink.
    """

    _prefix: dataclasses.ClassVar[str] = "OLOGS"

    application: str = "app"
    level: str = "info"
    format: str = "text"
    syslog_host: str = ""
    syslog_port: int = 514
    sentry_dsn: str = ""
    sentry_environment: str = ""
    sentry_debug: bool = False

    def _validate(self) -> None:
        if self.format.lower() not in _FORMATS:
            raise InvalidSettingValueError(
                "format", self.format, f"expected one of {sorted(_FORMATS)}"
            )
        if not 0 < self.syslog_port < 65536:
            raise InvalidSettingValueError("syslog_port", self.syslog_port, "out of range")


__all__ = ["LoggerSettings"]

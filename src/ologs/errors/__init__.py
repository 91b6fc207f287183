"""Error hierarchy — public re-export surface.

Hierarchy::

    OlogsError
    ├── ConfigError              (config.py)
    │   ├── MissingRequiredSettingError
    │   └── InvalidSettingValueError
    ├── FlushError               (sinks.py)
    ├── SinkConnectionError
    └── CaptureInitError
"""

from ologs.errors.base import OlogsError
from ologs.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from ologs.errors.sinks import CaptureInitError, FlushError, SinkConnectionError

__all__ = [
    "CaptureInitError",
    "ConfigError",
    "FlushError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OlogsError",
    "SinkConnectionError",
]

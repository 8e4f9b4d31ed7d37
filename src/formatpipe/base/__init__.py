from formatpipe.base.components import (
    ALL_NONMETA_COMPONENTS,
    ComponentKind,
    LogComponent,
)
from formatpipe.base.events import LogEvent
from formatpipe.base.levels import LogLevel
from formatpipe.base.timestamps import DEFAULT_TIMESTAMP_PATTERN, TimestampRule

__all__ = [
    "ALL_NONMETA_COMPONENTS",
    "ComponentKind",
    "LogComponent",
    "LogEvent",
    "LogLevel",
    "DEFAULT_TIMESTAMP_PATTERN",
    "TimestampRule",
]

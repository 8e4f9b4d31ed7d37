"""Component-based log line formatting and output pipes."""

from formatpipe.base import (
    ALL_NONMETA_COMPONENTS,
    DEFAULT_TIMESTAMP_PATTERN,
    ComponentKind,
    LogComponent,
    LogEvent,
    LogLevel,
    TimestampRule,
)
from formatpipe.core import (
    DEFAULT_PRESET_SEPARATOR,
    BasicFormatter,
    FormatAndPipeHandler,
    Formatter,
    FormatterConfig,
    LogHandler,
    standard_debug_formatter,
    standard_info_formatter,
)
from formatpipe.pipes import LoggerPipe, MemorySink, Pipe, TextSink, TextStreamPipe

__all__ = [
    # Data model
    "ALL_NONMETA_COMPONENTS",
    "ComponentKind",
    "LogComponent",
    "LogEvent",
    "LogLevel",
    "DEFAULT_TIMESTAMP_PATTERN",
    "TimestampRule",
    # Formatting
    "FormatterConfig",
    "Formatter",
    "BasicFormatter",
    "DEFAULT_PRESET_SEPARATOR",
    "standard_debug_formatter",
    "standard_info_formatter",
    # Pipes
    "Pipe",
    "TextSink",
    "TextStreamPipe",
    "LoggerPipe",
    "MemorySink",
    # Composition
    "LogHandler",
    "FormatAndPipeHandler",
]

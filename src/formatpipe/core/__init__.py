from formatpipe.core.config import FormatterConfig
from formatpipe.core.formatter import (
    DEFAULT_PRESET_SEPARATOR,
    BasicFormatter,
    Formatter,
    standard_debug_formatter,
    standard_info_formatter,
)
from formatpipe.core.handler import LogHandler
from formatpipe.core.stdlib import FormatAndPipeHandler

__all__ = [
    # Configuration
    "FormatterConfig",
    # Formatters
    "Formatter",
    "BasicFormatter",
    "DEFAULT_PRESET_SEPARATOR",
    "standard_debug_formatter",
    "standard_info_formatter",
    # Composition
    "LogHandler",
    "FormatAndPipeHandler",
]

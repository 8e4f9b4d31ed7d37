"""Formatter + pipe composition."""

from typing import Any, Optional, Union

from formatpipe.base.events import LogEvent
from formatpipe.base.levels import LogLevel
from formatpipe.core.formatter import BasicFormatter, Formatter
from formatpipe.pipes.stream import Pipe, TextStreamPipe


class LogHandler:
    """Formats each log call and hands the line to a pipe.

    Every call formats and writes exactly one line, synchronously.

    Args:
        formatter: Line formatter. Uses ``BasicFormatter()`` if not provided.
        pipe: Destination pipe. Uses standard output if not provided.

    Example:
        >>> handler = LogHandler(BasicFormatter.standard_info(context_name="[SDK]"))
        >>> handler.log("info", "ready")  # doctest: +SKIP
    """

    def __init__(self, formatter: Optional[Formatter] = None, pipe: Optional[Pipe] = None) -> None:
        self.formatter = formatter or BasicFormatter()
        self.pipe = pipe or TextStreamPipe.standard_output()

    @classmethod
    def standard_output(cls, formatter: Optional[Formatter] = None) -> "LogHandler":
        return cls(formatter, TextStreamPipe.standard_output())

    @classmethod
    def standard_error(cls, formatter: Optional[Formatter] = None) -> "LogHandler":
        return cls(formatter, TextStreamPipe.standard_error())

    def log(
        self,
        level: Union[LogLevel, str],
        message: Any,
        pretty_metadata: Optional[str] = None,
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        line_text = self.formatter.process_log(level, message, pretty_metadata, file, function, line)
        self.pipe.handle(line_text)

    def emit(self, event: LogEvent) -> None:
        self.log(
            event.level,
            event.message,
            event.pretty_metadata,
            event.file,
            event.function,
            event.line,
        )

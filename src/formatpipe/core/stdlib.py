"""Bridge from the standard ``logging`` module.

Attach ``FormatAndPipeHandler`` to any stdlib logger to have its records
formatted and piped by a LogHandler:

    logging.getLogger("app").addHandler(
        FormatAndPipeHandler(LogHandler(BasicFormatter.standard_debug()))
    )

Metadata is not prettified here. Pass an already rendered string with
``extra={"pretty_metadata": "..."}`` to fill the metadata component.
"""

import logging
from typing import Optional

from formatpipe.base.events import LogEvent
from formatpipe.base.levels import LogLevel
from formatpipe.core.handler import LogHandler

PRETTY_METADATA_ATTR = "pretty_metadata"


class FormatAndPipeHandler(logging.Handler):
    """``logging.Handler`` that forwards records to a LogHandler.

    Args:
        handler: Formatter/pipe pair records are delivered to. Uses
            ``LogHandler()`` if not provided.
        level: stdlib handler level.
    """

    def __init__(self, handler: Optional[LogHandler] = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.handler = handler or LogHandler()

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """Translate a stdlib record into a LogEvent."""
        pretty_metadata = getattr(record, PRETTY_METADATA_ATTR, None)
        return LogEvent(
            level=LogLevel.from_logging(record.levelno),
            message=record.getMessage(),
            pretty_metadata=str(pretty_metadata) if pretty_metadata is not None else None,
            file=record.pathname or "",
            function=record.funcName or "",
            line=max(record.lineno or 0, 0),
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.handler.emit(self.to_event(record))
        except Exception:
            self.handleError(record)

"""Log event payload handed to formatters by the logging facade."""

from dataclasses import dataclass
from typing import Optional

from formatpipe.base.levels import LogLevel


@dataclass(frozen=True)
class LogEvent:
    """One structured log call.

    Attributes:
        level: Severity of the event.
        message: Message text.
        pretty_metadata: Metadata already rendered to a string by the caller,
            or None when the call carried no metadata.
        file: Originating source file.
        function: Originating function.
        line: Originating line number.
    """

    level: LogLevel
    message: str
    pretty_metadata: Optional[str] = None
    file: str = ""
    function: str = ""
    line: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))
        if self.line < 0:
            raise ValueError(f"line must be non-negative, got {self.line}")

"""Pipes that deliver formatted lines to text streams."""

import sys
from typing import Protocol


class TextSink(Protocol):
    """Anything that text can be appended to (``sys.stdout``, files, StringIO)."""

    def write(self, text: str) -> object:
        ...


class Pipe(Protocol):
    """Protocol for delivering formatted log lines.

    Pipes receive a fully formatted line and hand it to a destination.
    """

    def handle(self, formatted_line: str) -> None:
        """Deliver one formatted line.

        Args:
            formatted_line: The line to deliver, without a trailing newline.
        """
        ...


class TextStreamPipe:
    """Pipe that appends each line and a newline to a text stream.

    Each call is exactly one ``write`` of ``line + "\\n"``. Nothing is
    buffered or flushed here and errors raised by the stream propagate.

    Args:
        stream: Destination implementing ``write(str)``.
    """

    def __init__(self, stream: TextSink) -> None:
        self.stream = stream

    def handle(self, formatted_line: str) -> None:
        self.stream.write(f"{formatted_line}\n")

    write = handle

    @classmethod
    def standard_output(cls) -> "TextStreamPipe":
        """Pipe to the process's current standard output."""
        return cls(sys.stdout)

    @classmethod
    def standard_error(cls) -> "TextStreamPipe":
        """Pipe to the process's current standard error."""
        return cls(sys.stderr)

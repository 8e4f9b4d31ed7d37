import io
import logging

import pytest

from formatpipe.pipes.logger import LoggerPipe
from formatpipe.pipes.memory import MemorySink
from formatpipe.pipes.stream import TextStreamPipe


class ClosedStream:
    def write(self, text: str) -> int:
        raise ValueError("I/O operation on closed file.")


def test_handle_appends_newline_in_single_write():
    """Verify one handle call is exactly one write of line + newline."""
    sink = MemorySink()
    TextStreamPipe(sink).handle("abc")

    assert sink.writes == ["abc\n"]


def test_write_is_an_alias_of_handle():
    """Verify write(line) behaves exactly like handle(line)."""
    sink = MemorySink()
    TextStreamPipe(sink).write("abc")

    assert sink.writes == ["abc\n"]


def test_handle_does_not_strip_or_merge_lines():
    """Verify lines are forwarded verbatim, one write per call."""
    sink = MemorySink()
    pipe = TextStreamPipe(sink)

    pipe.handle("")
    pipe.handle("  padded  ")

    assert sink.writes == ["\n", "  padded  \n"]
    assert sink.getvalue() == "\n  padded  \n"


def test_any_text_stream_can_be_bound():
    """Verify StringIO works as a sink."""
    stream = io.StringIO()
    TextStreamPipe(stream).handle("line")
    assert stream.getvalue() == "line\n"


def test_standard_output_and_error(capsys):
    """Verify the built-in bindings target stdout and stderr."""
    TextStreamPipe.standard_output().handle("to out")
    TextStreamPipe.standard_error().handle("to err")

    captured = capsys.readouterr()
    assert captured.out == "to out\n"
    assert captured.err == "to err\n"


def test_sink_errors_propagate():
    """Verify write failures are not caught by the pipe."""
    with pytest.raises(ValueError):
        TextStreamPipe(ClosedStream()).handle("lost")


def test_memory_sink_lines_and_clear():
    """Verify MemorySink splits writes into lines and can be reset."""
    sink = MemorySink()
    sink.write("a\nb\n")
    assert sink.lines() == ["a", "b"]
    sink.clear()
    assert sink.writes == []


def test_logger_pipe_forwards_to_logging(caplog):
    """Verify LoggerPipe logs each formatted line at the configured level."""
    pipe = LoggerPipe("formatpipe.tests.pipe", level=logging.WARNING)

    with caplog.at_level(logging.DEBUG, logger="formatpipe.tests.pipe"):
        pipe.handle("info ▶ ready")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("formatpipe.tests.pipe", logging.WARNING, "info ▶ ready")
    ]


def test_logger_pipe_accepts_logger_instance():
    """Verify LoggerPipe keeps a passed Logger as is."""
    logger = logging.getLogger("formatpipe.tests.instance")
    assert LoggerPipe(logger).logger is logger

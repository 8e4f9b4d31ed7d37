from formatpipe.pipes.logger import LoggerPipe
from formatpipe.pipes.memory import MemorySink
from formatpipe.pipes.stream import Pipe, TextSink, TextStreamPipe

__all__ = ["LoggerPipe", "MemorySink", "Pipe", "TextSink", "TextStreamPipe"]

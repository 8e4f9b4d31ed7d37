"""Log severity levels.

Levels are ordered from least to most severe so they can be compared
directly (``LogLevel.info < LogLevel.error``).
"""

import logging
from enum import IntEnum
from typing import Union


class LogLevel(IntEnum):
    """Ordered log severity.

    The textual form of a level is its lowercase name, which is what the
    formatter writes for the ``level`` component.
    """

    trace = 0
    debug = 1
    info = 2
    notice = 3
    warning = 4
    error = 5
    critical = 6

    @property
    def label(self) -> str:
        """Lowercase name used in formatted output."""
        return self.name

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """Coerce a level or a case-insensitive level name into a LogLevel.

        Args:
            value: An existing LogLevel or a name such as ``"INFO"``.

        Returns:
            The matching LogLevel.

        Raises:
            ValueError: If the name is not a known level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().lower())
            if member is not None:
                return member
        raise ValueError(f"Unknown log level: {value!r}")

    @classmethod
    def from_logging(cls, levelno: int) -> "LogLevel":
        """Map a stdlib ``logging`` level number onto a LogLevel.

        Numbers between two stdlib levels round down. Anything above INFO
        but below WARNING is reported as ``notice``.
        """
        if levelno >= logging.CRITICAL:
            return cls.critical
        if levelno >= logging.ERROR:
            return cls.error
        if levelno >= logging.WARNING:
            return cls.warning
        if levelno > logging.INFO:
            return cls.notice
        if levelno >= logging.INFO:
            return cls.info
        if levelno >= logging.DEBUG:
            return cls.debug
        return cls.trace

"""Building blocks of a formatted log line.

A format is an ordered sequence of LogComponent values. Most components
pull one field out of the log call; ``text`` inserts a literal and ``group``
glues several components together with no separator between them.

Example:
    >>> fmt = [
    ...     LogComponent.level(),
    ...     LogComponent.group([LogComponent.file(), LogComponent.text(":"), LogComponent.line()]),
    ...     LogComponent.message(),
    ... ]
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class ComponentKind(str, Enum):
    """Discriminator for LogComponent."""

    TIMESTAMP = "timestamp"
    LEVEL = "level"
    MESSAGE = "message"
    METADATA = "metadata"
    FILE = "file"
    FUNCTION = "function"
    LINE = "line"
    TEXT = "text"
    GROUP = "group"


@dataclass(frozen=True)
class LogComponent:
    """One renderable unit of a log line.

    Use the classmethod constructors rather than building instances by hand.

    Attributes:
        kind: Which part of the log call this component renders.
        text_value: Literal text, only set for ``text`` components.
        children: Nested components, only set for ``group`` components.
    """

    kind: ComponentKind
    text_value: Optional[str] = None
    children: Tuple["LogComponent", ...] = ()

    @classmethod
    def timestamp(cls) -> "LogComponent":
        return TIMESTAMP

    @classmethod
    def level(cls) -> "LogComponent":
        return LEVEL

    @classmethod
    def message(cls) -> "LogComponent":
        return MESSAGE

    @classmethod
    def metadata(cls) -> "LogComponent":
        return METADATA

    @classmethod
    def file(cls) -> "LogComponent":
        return FILE

    @classmethod
    def function(cls) -> "LogComponent":
        return FUNCTION

    @classmethod
    def line(cls) -> "LogComponent":
        return LINE

    @classmethod
    def text(cls, value: str) -> "LogComponent":
        """Literal text, rendered verbatim."""
        if not isinstance(value, str):
            raise TypeError(f"text component requires a str, got {type(value).__name__}")
        return cls(ComponentKind.TEXT, text_value=value)

    @classmethod
    def group(cls, children: Iterable["LogComponent"]) -> "LogComponent":
        """Components rendered back to back, with no separator between them."""
        items = tuple(children)
        for child in items:
            if not isinstance(child, LogComponent):
                raise TypeError(
                    f"group children must be LogComponent, got {type(child).__name__}"
                )
        return cls(ComponentKind.GROUP, children=items)

    def __repr__(self) -> str:
        if self.kind is ComponentKind.TEXT:
            return f"LogComponent.text({self.text_value!r})"
        if self.kind is ComponentKind.GROUP:
            return f"LogComponent.group({list(self.children)!r})"
        return f"LogComponent.{self.kind.value}()"


TIMESTAMP = LogComponent(ComponentKind.TIMESTAMP)
LEVEL = LogComponent(ComponentKind.LEVEL)
MESSAGE = LogComponent(ComponentKind.MESSAGE)
METADATA = LogComponent(ComponentKind.METADATA)
FILE = LogComponent(ComponentKind.FILE)
FUNCTION = LogComponent(ComponentKind.FUNCTION)
LINE = LogComponent(ComponentKind.LINE)

# Every component that reads a field of the log call; excludes text and group.
ALL_NONMETA_COMPONENTS: Tuple[LogComponent, ...] = (
    TIMESTAMP,
    LEVEL,
    MESSAGE,
    METADATA,
    FILE,
    FUNCTION,
    LINE,
)

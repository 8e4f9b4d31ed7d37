"""Component-sequence log formatter.

This module turns one log call into one line of text by rendering each
configured LogComponent in order, dropping the ones that come out empty and
joining the rest with the configured separator.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Protocol, Union

from formatpipe.base.components import (
    ALL_NONMETA_COMPONENTS,
    FILE,
    FUNCTION,
    LEVEL,
    LINE,
    MESSAGE,
    METADATA,
    TIMESTAMP,
    ComponentKind,
    LogComponent,
)
from formatpipe.base.events import LogEvent
from formatpipe.base.levels import LogLevel
from formatpipe.base.timestamps import TimestampRule
from formatpipe.core.config import FormatterConfig

DEFAULT_PRESET_SEPARATOR = " ▶ "


class Formatter(Protocol):
    """Protocol for turning a log call into a single formatted line."""

    def process_log(
        self,
        level: Union[LogLevel, str],
        message: Any,
        pretty_metadata: Optional[str],
        file: str,
        function: str,
        line: int,
    ) -> str:
        """Format one log call.

        Args:
            level: Severity of the call.
            message: Message text.
            pretty_metadata: Metadata already rendered by the caller, or None.
            file: Originating source file.
            function: Originating function.
            line: Originating line number.

        Returns:
            The formatted line, without a trailing newline.
        """
        ...


class BasicFormatter:
    """Configurable formatter driven by an ordered list of components.

    With no arguments every non-literal component is included, separated by
    a single space. Pass a component list to control order and content.

    Args:
        format: Components to render, in order.
        separator: Text between non-empty components. None means no separator.
        timestamp: Rule for the timestamp component.

    Example:
        >>> formatter = BasicFormatter([LogComponent.level(), LogComponent.message()])
        >>> formatter.process_log("info", "hello", None, "main.py", "main", 1)
        'info hello'
    """

    def __init__(
        self,
        format: Iterable[LogComponent] = ALL_NONMETA_COMPONENTS,
        separator: Optional[str] = " ",
        timestamp: Optional[TimestampRule] = None,
    ) -> None:
        self.config = FormatterConfig(
            format=tuple(format),
            separator=separator,
            timestamp=timestamp or TimestampRule(),
        )

    @classmethod
    def from_config(cls, config: FormatterConfig) -> "BasicFormatter":
        """Build a formatter around an existing configuration."""
        formatter = cls.__new__(cls)
        formatter.config = config
        return formatter

    @property
    def format(self) -> tuple:
        return self.config.format

    @property
    def separator(self) -> Optional[str]:
        return self.config.separator

    @property
    def timestamp(self) -> TimestampRule:
        return self.config.timestamp

    def process_log(
        self,
        level: Union[LogLevel, str],
        message: Any,
        pretty_metadata: Optional[str],
        file: str,
        function: str,
        line: int,
        *,
        now: Optional[datetime] = None,
    ) -> str:
        """Render one log call into a line.

        The clock is read once per call so every timestamp in the line refers
        to the same instant. Empty components are dropped before joining, so
        an absent metadata string leaves no dangling separator.

        Args:
            level: Severity, as a LogLevel or a level name.
            message: Message; converted with ``str()``.
            pretty_metadata: Caller-rendered metadata, or None.
            file: Originating source file.
            function: Originating function.
            line: Originating line number.
            now: Instant to render timestamps with. Defaults to the current
                UTC time.

        Returns:
            The formatted line.
        """
        event = LogEvent(
            level=LogLevel.parse(level),
            message=str(message),
            pretty_metadata=pretty_metadata,
            file=file,
            function=function,
            line=line,
        )
        return self.render(event, now=now)

    def render(self, event: LogEvent, *, now: Optional[datetime] = None) -> str:
        """Render a LogEvent; same result as ``process_log`` with its fields."""
        instant = now or datetime.now(timezone.utc)
        parts = [
            self._render_component(component, event, instant)
            for component in self.config.format
        ]
        return (self.config.separator or "").join(part for part in parts if part)

    def _render_component(
        self, component: LogComponent, event: LogEvent, instant: datetime
    ) -> str:
        kind = component.kind
        if kind is ComponentKind.TIMESTAMP:
            return self.config.timestamp.render(instant)
        if kind is ComponentKind.LEVEL:
            return event.level.label
        if kind is ComponentKind.MESSAGE:
            return event.message
        if kind is ComponentKind.METADATA:
            return event.pretty_metadata or ""
        if kind is ComponentKind.FILE:
            return event.file or ""
        if kind is ComponentKind.FUNCTION:
            return event.function or ""
        if kind is ComponentKind.LINE:
            return str(event.line)
        if kind is ComponentKind.TEXT:
            return component.text_value or ""
        if kind is ComponentKind.GROUP:
            return "".join(
                self._render_component(child, event, instant) for child in component.children
            )
        return ""

    @classmethod
    def standard_debug(
        cls,
        version: Optional[str] = None,
        context_name: Optional[str] = None,
        separator: str = DEFAULT_PRESET_SEPARATOR,
        timestamp: Optional[TimestampRule] = None,
    ) -> "BasicFormatter":
        """Detailed preset including call-site information.

        ``{timestamp} ▶ {context_name} ▶ {version} ▶ {level} ▶ {file}:{line} ▶ {function} ▶ {message} ▶ {metadata}``

        Example output:
            ``2020-03-30T12:29:27+0800 ▶ [Sample SDK] ▶ v0.2.0 ▶ info ▶ Sources/main.py:98 ▶ init ▶ SDK successfully initialised.``
        """
        components: List[LogComponent] = _preset_head(version, context_name)
        components.extend([
            LEVEL,
            LogComponent.group([FILE, LogComponent.text(":"), LINE]),
            FUNCTION,
            MESSAGE,
            METADATA,
        ])
        return cls(components, separator=separator, timestamp=timestamp)

    @classmethod
    def standard_info(
        cls,
        version: Optional[str] = None,
        context_name: Optional[str] = None,
        separator: str = DEFAULT_PRESET_SEPARATOR,
        timestamp: Optional[TimestampRule] = None,
    ) -> "BasicFormatter":
        """Compact preset.

        ``{timestamp} ▶ {context_name} ▶ {version} ▶ {level} ▶ {message}``
        """
        components: List[LogComponent] = _preset_head(version, context_name)
        components.extend([LEVEL, MESSAGE])
        return cls(components, separator=separator, timestamp=timestamp)


def standard_debug_formatter(
    version: Optional[str] = None,
    context_name: Optional[str] = None,
    separator: str = DEFAULT_PRESET_SEPARATOR,
    timestamp: Optional[TimestampRule] = None,
) -> BasicFormatter:
    return BasicFormatter.standard_debug(version, context_name, separator, timestamp)


def standard_info_formatter(
    version: Optional[str] = None,
    context_name: Optional[str] = None,
    separator: str = DEFAULT_PRESET_SEPARATOR,
    timestamp: Optional[TimestampRule] = None,
) -> BasicFormatter:
    return BasicFormatter.standard_info(version, context_name, separator, timestamp)


def _preset_head(version: Optional[str], context_name: Optional[str]) -> List[LogComponent]:
    components = [TIMESTAMP]
    if context_name is not None:
        components.append(LogComponent.text(context_name))
    if version is not None:
        components.append(LogComponent.text(version))
    return components

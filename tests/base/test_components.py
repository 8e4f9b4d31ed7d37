import dataclasses

import pytest

from formatpipe.base.components import (
    ALL_NONMETA_COMPONENTS,
    ComponentKind,
    LogComponent,
)
from formatpipe.base.events import LogEvent
from formatpipe.base.levels import LogLevel


def test_constructors_tag_components():
    """Verify each constructor produces the matching kind."""
    assert LogComponent.timestamp().kind is ComponentKind.TIMESTAMP
    assert LogComponent.level().kind is ComponentKind.LEVEL
    assert LogComponent.message().kind is ComponentKind.MESSAGE
    assert LogComponent.metadata().kind is ComponentKind.METADATA
    assert LogComponent.file().kind is ComponentKind.FILE
    assert LogComponent.function().kind is ComponentKind.FUNCTION
    assert LogComponent.line().kind is ComponentKind.LINE


def test_text_and_group_carry_payloads():
    """Verify text keeps its literal and group keeps its children in order."""
    colon = LogComponent.text(":")
    group = LogComponent.group([LogComponent.file(), colon, LogComponent.line()])

    assert colon.text_value == ":"
    assert group.kind is ComponentKind.GROUP
    assert group.children == (LogComponent.file(), colon, LogComponent.line())


def test_components_are_immutable_and_comparable():
    """Verify components are frozen and compare by value."""
    component = LogComponent.text("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        component.text_value = "y"
    assert LogComponent.text("x") == component
    assert hash(LogComponent.text("x")) == hash(component)


def test_invalid_payloads_raise_type_error():
    """Verify text needs a str and groups need components."""
    with pytest.raises(TypeError):
        LogComponent.text(5)
    with pytest.raises(TypeError):
        LogComponent.group([LogComponent.level(), "message"])


def test_all_nonmeta_components_excludes_text_and_group():
    """Verify the default component set covers every field of a log call."""
    kinds = [component.kind for component in ALL_NONMETA_COMPONENTS]
    assert ComponentKind.TEXT not in kinds
    assert ComponentKind.GROUP not in kinds
    assert len(kinds) == 7


def test_repr_reads_like_constructor():
    """Verify repr mirrors the classmethod constructors."""
    assert repr(LogComponent.level()) == "LogComponent.level()"
    assert repr(LogComponent.text(":")) == "LogComponent.text(':')"


def test_log_event_parses_level_and_rejects_negative_line():
    """Verify LogEvent coerces level names and validates line numbers."""
    event = LogEvent(level="error", message="boom", line=3)
    assert event.level is LogLevel.error
    assert event.pretty_metadata is None

    with pytest.raises(ValueError):
        LogEvent(level=LogLevel.info, message="x", line=-1)

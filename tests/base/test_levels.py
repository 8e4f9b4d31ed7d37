import logging

import pytest

from formatpipe.base.levels import LogLevel


def test_levels_are_ordered_by_severity():
    """Verify trace < debug < info < notice < warning < error < critical."""
    ordered = [
        LogLevel.trace,
        LogLevel.debug,
        LogLevel.info,
        LogLevel.notice,
        LogLevel.warning,
        LogLevel.error,
        LogLevel.critical,
    ]
    assert sorted(ordered) == ordered
    assert LogLevel.info < LogLevel.error


def test_label_is_lowercase_name():
    """Verify the textual form of a level is its lowercase name."""
    assert LogLevel.warning.label == "warning"
    assert str(LogLevel.critical) == "critical"


def test_parse_accepts_names_and_levels():
    """Verify parse handles case-insensitive names and passes levels through."""
    assert LogLevel.parse("INFO") is LogLevel.info
    assert LogLevel.parse(" notice ") is LogLevel.notice
    assert LogLevel.parse(LogLevel.error) is LogLevel.error


def test_parse_rejects_unknown_names():
    """Verify unknown level names raise ValueError."""
    with pytest.raises(ValueError):
        LogLevel.parse("loud")


@pytest.mark.parametrize(
    "levelno, expected",
    [
        (5, LogLevel.trace),
        (logging.DEBUG, LogLevel.debug),
        (logging.INFO, LogLevel.info),
        (25, LogLevel.notice),
        (logging.WARNING, LogLevel.warning),
        (logging.ERROR, LogLevel.error),
        (logging.CRITICAL, LogLevel.critical),
        (100, LogLevel.critical),
    ],
)
def test_from_logging_maps_stdlib_levels(levelno, expected):
    """Verify stdlib level numbers map onto the nearest lower level."""
    assert LogLevel.from_logging(levelno) is expected

"""Timestamp rendering rule for the ``timestamp`` log component."""

from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TIMESTAMP_PATTERN = "%Y-%m-%dT%H:%M:%S%z"


class TimestampRule(BaseModel):
    """How an instant is turned into text.

    Attributes:
        pattern: ``strftime`` pattern. The default renders
            ``2020-03-30T12:29:27+0800``.
        timezone: IANA zone name (e.g. ``"UTC"``, ``"Asia/Singapore"``).
            None renders in the process's local zone.

    Example:
        >>> rule = TimestampRule(pattern="%H:%M:%S", timezone="UTC")
        >>> rule.render(datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt_timezone.utc))
        '03:04:05'
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = DEFAULT_TIMESTAMP_PATTERN
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    def zone(self) -> Optional[tzinfo]:
        """Resolved zone, or None for local time."""
        if self.timezone is None:
            return None
        return ZoneInfo(self.timezone)

    def render(self, instant: datetime) -> str:
        """Render ``instant`` using this rule.

        Naive datetimes are taken to be UTC.
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=dt_timezone.utc)
        return instant.astimezone(self.zone()).strftime(self.pattern)

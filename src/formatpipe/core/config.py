"""Formatter configuration."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from formatpipe.base.components import ALL_NONMETA_COMPONENTS, LogComponent
from formatpipe.base.timestamps import TimestampRule


class FormatterConfig(BaseModel):
    """Immutable description of how a log line is built.

    Attributes:
        format: Components rendered in order.
        separator: Text placed between non-empty components. None joins
            components with nothing in between.
        timestamp: Rule used for the ``timestamp`` component.
    """

    model_config = ConfigDict(frozen=True)

    format: Tuple[LogComponent, ...] = ALL_NONMETA_COMPONENTS
    separator: Optional[str] = " "
    timestamp: TimestampRule = Field(default_factory=TimestampRule)

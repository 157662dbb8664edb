"""Discord inline timestamps (``<t:unix:style>``)."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimestampStyle(Enum):
    """How the client renders a timestamp; values are Discord's format letters."""

    SHORT_TIME = "t"
    LONG_TIME = "T"
    SHORT_DATE = "d"
    LONG_DATE = "D"
    SHORT_DATE_TIME = "f"
    LONG_DATE_TIME = "F"
    RELATIVE_TIME = "R"


@dataclass(frozen=True)
class FormattedTimestamp:
    """A timestamp the Discord client renders in the reader's locale and zone."""

    unix: int
    style: TimestampStyle | None

    @classmethod
    def default_style(cls, unix: int) -> FormattedTimestamp:
        """A timestamp in Discord's default style, rendered as ``<t:unix>``."""
        return cls(unix, None)

    @classmethod
    def from_datetime(cls, dt: datetime, style: TimestampStyle) -> FormattedTimestamp:
        """Build from a datetime; a naive datetime is taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls((dt - _UNIX_EPOCH) // timedelta(seconds=1), style)

    @classmethod
    def now(cls, style: TimestampStyle) -> FormattedTimestamp:
        """A timestamp for the current moment."""
        return cls(int(time.time()), style)

    @classmethod
    def relative_now(cls) -> FormattedTimestamp:
        """A relative-time timestamp for the current moment."""
        return cls.now(TimestampStyle.RELATIVE_TIME)

    def all_styles(self) -> tuple[str, ...]:
        """This moment formatted in each of the seven styles, in declaration order."""
        return tuple(str(FormattedTimestamp(self.unix, style)) for style in TimestampStyle)

    def __str__(self) -> str:
        if self.style is None:
            return f"<t:{self.unix}>"
        return f"<t:{self.unix}:{self.style.value}>"
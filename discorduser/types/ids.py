"""Typed snowflake identifiers for Discord resources."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

DISCORD_EPOCH_MS = 1_420_070_400_000
"""Discord's snowflake epoch, 2015-01-01T00:00:00Z, in milliseconds."""

_U64_MAX = (1 << 64) - 1
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DIGITS = re.compile(r"\+?[0-9]+")


class InvalidSnowflakeError(ValueError):
    """Raised when text or JSON cannot be read as a snowflake ID."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid snowflake ID '{text}': must be a numeric non-zero value")


def _parse_u64(text: str) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


@dataclass(frozen=True)
class Snowflake:
    """A non-zero unsigned 64-bit Discord ID.

    Subclasses never compare equal to each other, so a ``UserId`` cannot
    stand in for a ``ChannelId`` with the same number.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} needs an int, got {type(self.value).__name__}")
        if not 0 < self.value <= _U64_MAX:
            raise ValueError(f"Invalid {type(self).__name__}: {self.value}")

    @classmethod
    def unchecked(cls, value: int) -> Snowflake:
        """Build an ID without rejecting zero; zero becomes 1."""
        return cls(value if value != 0 else 1)

    @classmethod
    def parse(cls, text: str) -> Snowflake:
        """Parse a decimal string into an ID."""
        value = _parse_u64(text)
        if not value:
            raise InvalidSnowflakeError(text)
        return cls(value)

    @classmethod
    def from_json(cls, value: str | int) -> Snowflake:
        """Read an ID from its JSON form, a decimal string or a number."""
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                "expected a string containing a 64-bit unsigned integer or a 64-bit unsigned integer"
            )
        if not 0 < value <= _U64_MAX:
            raise InvalidSnowflakeError(str(value))
        return cls(value)

    def to_json(self) -> str:
        """The JSON form of the ID: its decimal string."""
        return str(self.value)

    def created_at(self) -> datetime:
        """Creation time encoded in the top 42 bits of the ID, in UTC."""
        return _UNIX_EPOCH + timedelta(milliseconds=(self.value >> 22) + DISCORD_EPOCH_MS)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class ChannelId(Snowflake):
    """A channel ID."""


class UserId(Snowflake):
    """A user ID."""


class MessageId(Snowflake):
    """A message ID."""


class GuildId(Snowflake):
    """A guild (server) ID."""


class RoleId(Snowflake):
    """A role ID."""


class EmojiId(Snowflake):
    """An emoji ID."""


class WebhookId(Snowflake):
    """A webhook ID."""


class ApplicationId(Snowflake):
    """An application ID."""


class InteractionId(Snowflake):
    """An interaction ID."""


class StickerId(Snowflake):
    """A sticker ID."""


class ScheduledEventId(Snowflake):
    """A guild scheduled event ID."""


class AutoModerationRuleId(Snowflake):
    """An auto-moderation rule ID."""


class SoundboardSoundId(Snowflake):
    """A soundboard sound ID."""


class CommandId(Snowflake):
    """An application command ID."""
"""Request bodies for commands, interactions, channels, members and mentions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from .payloads import Payload, _omit_if_empty, _renamed

_EPHEMERAL_FLAG = 64


@dataclass
class CreateCommandRequest(Payload):
    """Body for creating or editing an application command."""

    name: str = ""
    description: str = ""
    command_type: int | None = _renamed("type")
    options: list[Any] = _omit_if_empty()
    dm_permission: bool | None = None
    default_member_permissions: str | None = None
    nsfw: bool | None = None


@dataclass
class CreateInteractionResponseRequest(Payload):
    """Body for answering an interaction callback."""

    response_type: int = field(metadata={"key": "type"})
    data: Any = None

    @classmethod
    def message(cls, content: str) -> CreateInteractionResponseRequest:
        """Reply with a visible channel message (type 4)."""
        return cls(4, {"content": content})

    @classmethod
    def ephemeral(cls, content: str) -> CreateInteractionResponseRequest:
        """Reply with a message only the invoking user sees (type 4, flag 64)."""
        return cls(4, {"content": content, "flags": _EPHEMERAL_FLAG})

    @classmethod
    def defer(cls) -> CreateInteractionResponseRequest:
        """Show a loading state and follow up later (type 5)."""
        return cls(5)

    @classmethod
    def defer_update(cls) -> CreateInteractionResponseRequest:
        """Acknowledge a component interaction without changing the message (type 6)."""
        return cls(6)

    @classmethod
    def update_message(cls, content: str) -> CreateInteractionResponseRequest:
        """Edit the original component message in place (type 7)."""
        return cls(7, {"content": content})

    @classmethod
    def modal(cls, modal_data: Any) -> CreateInteractionResponseRequest:
        """Show a modal dialog (type 9) described by ``modal_data``."""
        return cls(9, modal_data)


@dataclass
class CreateFollowupMessageRequest(Payload):
    """Body for a follow-up message to an interaction."""

    content: str | None = None
    embeds: list[Any] = _omit_if_empty()
    components: list[Any] = _omit_if_empty()
    flags: int | None = None


@dataclass
class CreateChannelRequest(Payload):
    """Body for creating a guild channel."""

    name: str
    channel_type: int | None = _renamed("type")
    topic: str | None = None
    rate_limit_per_user: int | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    nsfw: bool | None = None
    parent_id: str | None = None
    position: int | None = None


def _toggled(parse: list[str], kind: str, allow: bool) -> list[str]:
    if allow:
        return parse if kind in parse else [*parse, kind]
    return [item for item in parse if item != kind]


@dataclass
class AllowedMentions(Payload):
    """Which mentions in a message actually notify anyone.

    The builder methods return changed copies and leave the original alone.
    """

    parse: list[str] = _omit_if_empty()
    users: list[str] = _omit_if_empty()
    roles: list[str] = _omit_if_empty()
    replied_user: bool | None = None

    @classmethod
    def permissive(cls) -> AllowedMentions:
        """Ping roles, users and @everyone, as if nothing were restricted."""
        return cls(parse=["roles", "users", "everyone"])

    @classmethod
    def none(cls) -> AllowedMentions:
        """Ping nobody."""
        return cls()

    def everyone(self, allow: bool) -> AllowedMentions:
        """Allow or suppress @everyone and @here pings."""
        return replace(self, parse=_toggled(self.parse, "everyone", allow))

    def all_roles(self, allow: bool) -> AllowedMentions:
        """Allow or suppress pings of every mentioned role."""
        return replace(self, parse=_toggled(self.parse, "roles", allow))

    def all_users(self, allow: bool) -> AllowedMentions:
        """Allow or suppress pings of every mentioned user."""
        return replace(self, parse=_toggled(self.parse, "users", allow))

    def with_users(self, user_ids: Iterable[str]) -> AllowedMentions:
        """Ping only these users, replacing any blanket user setting."""
        return replace(
            self,
            parse=_toggled(self.parse, "users", False),
            users=[str(user_id) for user_id in user_ids],
        )

    def with_roles(self, role_ids: Iterable[str]) -> AllowedMentions:
        """Ping only these roles, replacing any blanket role setting."""
        return replace(
            self,
            parse=_toggled(self.parse, "roles", False),
            roles=[str(role_id) for role_id in role_ids],
        )

    def ping_replied_user(self, ping: bool) -> AllowedMentions:
        """Choose whether the author of the replied-to message is pinged."""
        return replace(self, replied_user=ping)


@dataclass
class EditGuildMemberRequest(Payload):
    """Body for editing a guild member."""

    nick: str | None = None
    roles: list[str] | None = None
    mute: bool | None = None
    deaf: bool | None = None
    channel_id: str | None = None
    communication_disabled_until: str | None = None

    @classmethod
    def for_nick(cls, nick: str) -> EditGuildMemberRequest:
        """Change only the member's nickname; an empty string clears it."""
        return cls(nick=nick)

    @classmethod
    def move_to_channel(cls, channel_id: str) -> EditGuildMemberRequest:
        """Move the member to another voice channel."""
        return cls(channel_id=channel_id)

    @classmethod
    def disconnect_voice(cls) -> EditGuildMemberRequest:
        """Disconnect the member from voice by clearing the channel."""
        return cls(channel_id="")


@dataclass
class EditChannelRequest(Payload):
    """Body for editing a channel."""

    name: str | None = None
    channel_type: int | None = _renamed("type")
    topic: str | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    position: int | None = None
    nsfw: bool | None = None
    parent_id: str | None = None
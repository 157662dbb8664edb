"""Discord guilds, channels, roles and related server objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, TypeVar

from .enums import ChannelType
from .ids import DISCORD_EPOCH_MS
from .user import User, _parse_u64

_CDN_BASE = "https://cdn.discordapp.com"
_INVITE_BASE = "https://discord.gg"
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

T = TypeVar("T")


def _optional(build: Callable[[dict[str, Any]], T], value: Any) -> T | None:
    return build(value) if value is not None else None


def _many(build: Callable[[dict[str, Any]], T], values: Any) -> list[T]:
    return [build(value) for value in values or []]


@dataclass
class PermissionOverwrite:
    """A per-channel permission overwrite for a role or member."""

    id: str
    overwrite_type: int
    allow: str = ""
    deny: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PermissionOverwrite:
        """Build an overwrite from its JSON object."""
        return cls(
            id=data["id"],
            overwrite_type=data["type"],
            allow=data.get("allow", ""),
            deny=data.get("deny", ""),
        )


@dataclass
class Role:
    """A guild role."""

    id: str
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: str = ""
    managed: bool = False
    mentionable: bool = False
    flags: int = 0
    tags: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Role:
        """Build a role from its JSON object."""
        return cls(
            id=data["id"],
            name=data["name"],
            color=data.get("color", 0),
            hoist=data.get("hoist", False),
            icon=data.get("icon"),
            unicode_emoji=data.get("unicode_emoji"),
            position=data.get("position", 0),
            permissions=data.get("permissions", ""),
            managed=data.get("managed", False),
            mentionable=data.get("mentionable", False),
            flags=data.get("flags", 0),
            tags=data.get("tags"),
        )

    def mention(self) -> str:
        """The mention string ``<@&id>``."""
        return f"<@&{self.id}>"

    def color_hex(self) -> str:
        """The role colour as ``#RRGGBB``."""
        return f"#{self.color:06X}"


@dataclass
class Channel:
    """A guild or private channel."""

    id: str
    channel_type: ChannelType = ChannelType.GUILD_TEXT
    guild_id: str | None = None
    name: str | None = None
    topic: str | None = None
    position: int | None = None
    permission_overwrites: list[PermissionOverwrite] = field(default_factory=list)
    parent_id: str | None = None
    nsfw: bool = False
    last_message_id: str | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] = field(default_factory=list)
    recipient_ids: list[str] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Channel:
        """Build a channel from its JSON object."""
        return cls(
            id=data["id"],
            channel_type=ChannelType(data.get("type", ChannelType.GUILD_TEXT)),
            guild_id=data.get("guild_id"),
            name=data.get("name"),
            topic=data.get("topic"),
            position=data.get("position"),
            permission_overwrites=_many(PermissionOverwrite.from_dict, data.get("permission_overwrites")),
            parent_id=data.get("parent_id"),
            nsfw=data.get("nsfw", False),
            last_message_id=data.get("last_message_id"),
            bitrate=data.get("bitrate"),
            user_limit=data.get("user_limit"),
            rate_limit_per_user=data.get("rate_limit_per_user"),
            recipients=_many(User.from_dict, data.get("recipients")),
            recipient_ids=list(data.get("recipient_ids", [])),
            flags=data.get("flags", 0),
        )

    def mention(self) -> str:
        """The mention string ``<#id>``."""
        return f"<#{self.id}>"


@dataclass
class GuildEmoji:
    """A custom emoji belonging to a guild."""

    id: str
    name: str | None = None
    roles: list[str] = field(default_factory=list)
    user: User | None = None
    require_colons: bool = False
    managed: bool = False
    animated: bool = False
    available: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GuildEmoji:
        """Build an emoji from its JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name"),
            roles=list(data.get("roles", [])),
            user=_optional(User.from_dict, data.get("user")),
            require_colons=data.get("require_colons", False),
            managed=data.get("managed", False),
            animated=data.get("animated", False),
            available=data.get("available", False),
        )

    def url(self) -> str:
        """CDN URL of the emoji image."""
        ext = "gif" if self.animated else "webp"
        return f"{_CDN_BASE}/emojis/{self.id}.{ext}?size=128"

    def reaction_string(self) -> str:
        """``<:name:id>``, or ``<a:name:id>`` when animated; the ID stands in for a missing name."""
        name = self.name if self.name is not None else self.id
        prefix = "a" if self.animated else ""
        return f"<{prefix}:{name}:{self.id}>"


@dataclass
class Sticker:
    """A sticker."""

    id: str
    name: str = ""
    description: str | None = None
    tags: str | None = None
    format_type: int = 0
    available: bool = False
    guild_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sticker:
        """Build a sticker from its JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            description=data.get("description"),
            tags=data.get("tags"),
            format_type=data.get("format_type", 0),
            available=data.get("available", False),
            guild_id=data.get("guild_id"),
        )


@dataclass
class Guild:
    """A guild (server)."""

    id: str
    name: str | None = None
    icon: str | None = None
    splash: str | None = None
    banner: str | None = None
    description: str | None = None
    owner_id: str | None = None
    member_count: int | None = None
    premium_subscription_count: int = 0
    premium_tier: int = 0
    verification_level: int = 0
    nsfw_level: int = 0
    nsfw: bool = False
    features: list[str] = field(default_factory=list)
    roles: list[Role] = field(default_factory=list)
    channels: list[Channel] = field(default_factory=list)
    emojis: list[GuildEmoji] = field(default_factory=list)
    stickers: list[Sticker] = field(default_factory=list)
    joined_at: str | None = None
    large: bool = False
    lazy: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Guild:
        """Build a guild from its JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name"),
            icon=data.get("icon"),
            splash=data.get("splash"),
            banner=data.get("banner"),
            description=data.get("description"),
            owner_id=data.get("owner_id"),
            member_count=data.get("member_count"),
            premium_subscription_count=data.get("premium_subscription_count", 0),
            premium_tier=data.get("premium_tier", 0),
            verification_level=data.get("verification_level", 0),
            nsfw_level=data.get("nsfw_level", 0),
            nsfw=data.get("nsfw", False),
            features=list(data.get("features", [])),
            roles=_many(Role.from_dict, data.get("roles")),
            channels=_many(Channel.from_dict, data.get("channels")),
            emojis=_many(GuildEmoji.from_dict, data.get("emojis")),
            stickers=_many(Sticker.from_dict, data.get("stickers")),
            joined_at=data.get("joined_at"),
            large=data.get("large", False),
            lazy=data.get("lazy", False),
        )

    def icon_url(self, size: int) -> str | None:
        """Icon URL at ``size``: ``.gif`` when animated, ``.png`` otherwise."""
        if self.icon is None:
            return None
        ext = "gif" if self.icon.startswith("a_") else "png"
        return f"{_CDN_BASE}/icons/{self.id}/{self.icon}.{ext}?size={int(size)}"

    def splash_url(self) -> str | None:
        """URL of the invite splash image, if set."""
        if self.splash is None:
            return None
        return f"{_CDN_BASE}/splashes/{self.id}/{self.splash}.png?size=512"

    def banner_url(self) -> str | None:
        """URL of the guild banner, if set."""
        if self.banner is None:
            return None
        ext = "gif" if self.banner.startswith("a_") else "webp"
        return f"{_CDN_BASE}/banners/{self.id}/{self.banner}.{ext}?size=512"

    def role_by_name(self, name: str) -> Role | None:
        """First role whose name matches ``name`` ignoring case."""
        wanted = name.lower()
        return next((role for role in self.roles if role.name.lower() == wanted), None)

    def channel_by_name(self, name: str) -> Channel | None:
        """First channel whose name matches ``name`` ignoring case."""
        wanted = name.lower()
        return next(
            (c for c in self.channels if c.name is not None and c.name.lower() == wanted),
            None,
        )

    def created_at(self) -> datetime | None:
        """Creation time from the snowflake ID, or None if the ID is not numeric."""
        guild_id = _parse_u64(self.id)
        if guild_id is None:
            return None
        return _UNIX_EPOCH + timedelta(milliseconds=(guild_id >> 22) + DISCORD_EPOCH_MS)


@dataclass
class PartialGuild:
    """The guild part of an invite."""

    id: str
    name: str | None = None
    icon: str | None = None
    splash: str | None = None
    banner: str | None = None
    description: str | None = None
    features: list[str] = field(default_factory=list)
    verification_level: int = 0
    vanity_url_code: str | None = None
    nsfw_level: int = 0
    nsfw: bool = False
    premium_subscription_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PartialGuild:
        """Build a partial guild from its JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name"),
            icon=data.get("icon"),
            splash=data.get("splash"),
            banner=data.get("banner"),
            description=data.get("description"),
            features=list(data.get("features", [])),
            verification_level=data.get("verification_level", 0),
            vanity_url_code=data.get("vanity_url_code"),
            nsfw_level=data.get("nsfw_level", 0),
            nsfw=data.get("nsfw", False),
            premium_subscription_count=data.get("premium_subscription_count", 0),
        )


@dataclass
class PartialChannel:
    """The channel part of an invite."""

    id: str
    name: str | None = None
    channel_type: ChannelType = ChannelType.GUILD_TEXT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PartialChannel:
        """Build a partial channel from its JSON object."""
        return cls(
            id=data["id"],
            name=data.get("name"),
            channel_type=ChannelType(data.get("type", ChannelType.GUILD_TEXT)),
        )


@dataclass
class Invite:
    """A guild invite."""

    code: str
    guild: PartialGuild | None = None
    channel: PartialChannel | None = None
    inviter: User | None = None
    uses: int = 0
    max_uses: int = 0
    max_age: int = 0
    temporary: bool = False
    created_at: str | None = None
    expires_at: str | None = None
    invite_type: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Invite:
        """Build an invite from its JSON object."""
        return cls(
            code=data["code"],
            guild=_optional(PartialGuild.from_dict, data.get("guild")),
            channel=_optional(PartialChannel.from_dict, data.get("channel")),
            inviter=_optional(User.from_dict, data.get("inviter")),
            uses=data.get("uses", 0),
            max_uses=data.get("max_uses", 0),
            max_age=data.get("max_age", 0),
            temporary=data.get("temporary", False),
            created_at=data.get("created_at"),
            expires_at=data.get("expires_at"),
            invite_type=data.get("type", 0),
        )

    def url(self) -> str:
        """The full invite link."""
        return f"{_INVITE_BASE}/{self.code}"


@dataclass
class AuditLogChange:
    """One changed field of an audit log entry."""

    key: str
    old_value: Any = None
    new_value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuditLogChange:
        """Build a change from its JSON object."""
        return cls(key=data["key"], old_value=data.get("old_value"), new_value=data.get("new_value"))


@dataclass
class AuditLogEntry:
    """One entry of a guild audit log."""

    id: str
    action_type: int
    target_id: str | None = None
    user_id: str | None = None
    changes: list[AuditLogChange] = field(default_factory=list)
    options: Any = None
    reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuditLogEntry:
        """Build an entry from its JSON object."""
        return cls(
            id=data["id"],
            action_type=data["action_type"],
            target_id=data.get("target_id"),
            user_id=data.get("user_id"),
            changes=_many(AuditLogChange.from_dict, data.get("changes")),
            options=data.get("options"),
            reason=data.get("reason"),
        )


@dataclass
class AuditLog:
    """A guild audit log page."""

    audit_log_entries: list[AuditLogEntry]
    users: list[User] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuditLog:
        """Build an audit log from its JSON object."""
        return cls(
            audit_log_entries=_many(AuditLogEntry.from_dict, data["audit_log_entries"]),
            users=_many(User.from_dict, data.get("users")),
        )


@dataclass
class Webhook:
    """A webhook."""

    id: str
    webhook_type: int
    guild_id: str | None = None
    channel_id: str | None = None
    user: User | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = None
    application_id: str | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Webhook:
        """Build a webhook from its JSON object."""
        return cls(
            id=data["id"],
            webhook_type=data["type"],
            guild_id=data.get("guild_id"),
            channel_id=data.get("channel_id"),
            user=_optional(User.from_dict, data.get("user")),
            name=data.get("name"),
            avatar=data.get("avatar"),
            token=data.get("token"),
            application_id=data.get("application_id"),
            url=data.get("url"),
        )


@dataclass
class Ban:
    """A guild ban."""

    user: User
    reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Ban:
        """Build a ban from its JSON object."""
        return cls(user=User.from_dict(data["user"]), reason=data.get("reason"))


@dataclass
class AutoModerationRule:
    """An auto-moderation rule."""

    id: str
    guild_id: str
    name: str
    creator_id: str
    event_type: int
    trigger_type: int
    trigger_metadata: Any
    actions: list[Any]
    enabled: bool = False
    exempt_channels: list[str] = field(default_factory=list)
    exempt_roles: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AutoModerationRule:
        """Build a rule from its JSON object."""
        return cls(
            id=data["id"],
            guild_id=data["guild_id"],
            name=data["name"],
            creator_id=data["creator_id"],
            event_type=data["event_type"],
            trigger_type=data["trigger_type"],
            trigger_metadata=data["trigger_metadata"],
            actions=list(data["actions"]),
            enabled=data.get("enabled", False),
            exempt_channels=list(data.get("exempt_channels", [])),
            exempt_roles=list(data.get("exempt_roles", [])),
        )


@dataclass
class ScheduledEvent:
    """A guild scheduled event."""

    id: str
    guild_id: str
    name: str
    scheduled_start_time: str
    privacy_level: int
    status: int
    entity_type: int
    channel_id: str | None = None
    creator_id: str | None = None
    description: str | None = None
    scheduled_end_time: str | None = None
    entity_id: str | None = None
    entity_metadata: Any = None
    creator: User | None = None
    user_count: int | None = None
    image: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScheduledEvent:
        """Build an event from its JSON object."""
        return cls(
            id=data["id"],
            guild_id=data["guild_id"],
            name=data["name"],
            scheduled_start_time=data["scheduled_start_time"],
            privacy_level=data["privacy_level"],
            status=data["status"],
            entity_type=data["entity_type"],
            channel_id=data.get("channel_id"),
            creator_id=data.get("creator_id"),
            description=data.get("description"),
            scheduled_end_time=data.get("scheduled_end_time"),
            entity_id=data.get("entity_id"),
            entity_metadata=data.get("entity_metadata"),
            creator=_optional(User.from_dict, data.get("creator")),
            user_count=data.get("user_count"),
            image=data.get("image"),
        )


@dataclass
class StageInstance:
    """A live audio session in a stage channel."""

    id: str
    guild_id: str
    channel_id: str
    topic: str
    privacy_level: int
    discoverable_disabled: bool = False
    guild_scheduled_event_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StageInstance:
        """Build a stage instance from its JSON object."""
        return cls(
            id=data["id"],
            guild_id=data["guild_id"],
            channel_id=data["channel_id"],
            topic=data["topic"],
            privacy_level=data["privacy_level"],
            discoverable_disabled=data.get("discoverable_disabled", False),
            guild_scheduled_event_id=data.get("guild_scheduled_event_id"),
        )


@dataclass
class VoiceRegion:
    """A voice region."""

    id: str
    name: str
    custom: bool = False
    deprecated: bool = False
    optimal: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoiceRegion:
        """Build a voice region from its JSON object."""
        return cls(
            id=data["id"],
            name=data["name"],
            custom=data.get("custom", False),
            deprecated=data.get("deprecated", False),
            optimal=data.get("optimal", False),
        )


@dataclass
class SoundboardSound:
    """A built-in or guild-uploaded soundboard sound."""

    sound_id: str
    name: str
    volume: float
    emoji_id: str | None = None
    emoji_name: str | None = None
    guild_id: str | None = None
    available: bool = True
    user: User | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SoundboardSound:
        """Build a sound from its JSON object."""
        return cls(
            sound_id=data["sound_id"],
            name=data["name"],
            volume=float(data["volume"]),
            emoji_id=data.get("emoji_id"),
            emoji_name=data.get("emoji_name"),
            guild_id=data.get("guild_id"),
            available=data.get("available", True),
            user=_optional(User.from_dict, data.get("user")),
        )


@dataclass
class ApplicationCommand:
    """A slash, user or message command."""

    id: str
    application_id: str
    name: str
    command_type: int = 1
    guild_id: str | None = None
    description: str = ""
    options: list[Any] = field(default_factory=list)
    dm_permission: bool = True
    nsfw: bool = False
    version: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationCommand:
        """Build a command from its JSON object."""
        return cls(
            id=data["id"],
            application_id=data["application_id"],
            name=data["name"],
            command_type=data.get("type", 1),
            guild_id=data.get("guild_id"),
            description=data.get("description", ""),
            options=list(data.get("options", [])),
            dm_permission=data.get("dm_permission", True),
            nsfw=data.get("nsfw", False),
            version=data.get("version"),
        )
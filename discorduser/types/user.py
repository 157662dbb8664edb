"""Discord users, guild members, sessions and profiles."""

from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, TypeVar

from .enums import UserPublicFlags, from_bits_truncate
from .ids import InvalidSnowflakeError, RoleId, Snowflake, UserId
from .image_hash import ImageHash, ImageSize

_U64_MAX = (1 << 64) - 1
_DIGITS = re.compile(r"\+?[0-9]+")
_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)
_CDN_BASE = "https://cdn.discordapp.com"

S = TypeVar("S", bound=Snowflake)


def _parse_u64(text: str) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def _typed_id(id_type: type[S], text: str | None) -> S | None:
    """Parse ``text`` as an ID of ``id_type``, or None if it is not one."""
    if text is None:
        return None
    try:
        return id_type.parse(text)
    except InvalidSnowflakeError:
        return None


def _parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    date, clock, fraction, offset = match.groups()
    fraction = ((fraction or "") + "000000")[:6]
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{date}T{clock}.{fraction}{offset}").astimezone(timezone.utc)


def _is_pomelo(discriminator: str) -> bool:
    return discriminator in ("", "0", "0000")


@dataclass
class User:
    """A Discord user."""

    id: str = ""
    username: str = ""
    discriminator: str = ""
    global_name: str | None = None
    avatar: ImageHash | None = None
    avatar_decoration_data: Any = None
    banner: str | None = None
    banner_color: str | None = None
    accent_color: int | None = None
    public_flags: UserPublicFlags = UserPublicFlags(0)
    flags: UserPublicFlags = UserPublicFlags(0)
    premium_type: int = 0
    bot: bool = False
    bio: str | None = None
    email: str | None = None
    verified: bool = False
    mfa_enabled: bool = False
    phone: str | None = None
    nsfw_allowed: bool | None = None
    mobile: bool = False
    desktop: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Build a user from its JSON object."""
        avatar = data.get("avatar")
        return cls(
            id=data["id"],
            username=data["username"],
            discriminator=data.get("discriminator", ""),
            global_name=data.get("global_name"),
            avatar=ImageHash(avatar) if avatar is not None else None,
            avatar_decoration_data=data.get("avatar_decoration_data"),
            banner=data.get("banner"),
            banner_color=data.get("banner_color"),
            accent_color=data.get("accent_color"),
            public_flags=from_bits_truncate(UserPublicFlags, data.get("public_flags", 0)),
            flags=from_bits_truncate(UserPublicFlags, data.get("flags", 0)),
            premium_type=data.get("premium_type", 0),
            bot=data.get("bot", False),
            bio=data.get("bio"),
            email=data.get("email"),
            verified=data.get("verified", False),
            mfa_enabled=data.get("mfa_enabled", False),
            phone=data.get("phone"),
            nsfw_allowed=data.get("nsfw_allowed"),
            mobile=data.get("mobile", False),
            desktop=data.get("desktop", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """The user's JSON object."""
        return {
            "id": self.id,
            "username": self.username,
            "discriminator": self.discriminator,
            "global_name": self.global_name,
            "avatar": str(self.avatar) if self.avatar is not None else None,
            "avatar_decoration_data": self.avatar_decoration_data,
            "banner": self.banner,
            "banner_color": self.banner_color,
            "accent_color": self.accent_color,
            "public_flags": int(self.public_flags),
            "flags": int(self.flags),
            "premium_type": self.premium_type,
            "bot": self.bot,
            "bio": self.bio,
            "email": self.email,
            "verified": self.verified,
            "mfa_enabled": self.mfa_enabled,
            "phone": self.phone,
            "nsfw_allowed": self.nsfw_allowed,
            "mobile": self.mobile,
            "desktop": self.desktop,
        }

    def display_name(self) -> str:
        """The global display name, or the username if none is set."""
        return self.global_name if self.global_name is not None else self.username

    def avatar_url(self, size: ImageSize | int) -> str | None:
        """Avatar URL at ``size``, or None without an avatar or a numeric ID."""
        if self.avatar is None:
            return None
        user_id = _parse_u64(self.id)
        if user_id is None:
            return None
        return self.avatar.user_avatar_url(user_id, size)

    def tag(self) -> str:
        """``username#discriminator`` for legacy accounts, else the username."""
        if _is_pomelo(self.discriminator):
            return self.username
        return f"{self.username}#{self.discriminator}"

    def mention(self) -> str:
        """The mention string ``<@id>``."""
        return f"<@{self.id}>"

    def default_avatar_url(self) -> str:
        """URL of the stock avatar shown for users without a custom one."""
        if _is_pomelo(self.discriminator):
            user_id = _parse_u64(self.id)
            index = (user_id >> 22) % 6 if user_id is not None else 0
        else:
            discriminator = _parse_u64(self.discriminator)
            index = (discriminator or 0) % 5
        return f"{_CDN_BASE}/embed/avatars/{index}.png"

    def face(self) -> str:
        """The custom avatar at size 128 if set, otherwise the default avatar."""
        url = self.avatar_url(ImageSize.SIZE_128)
        return url if url is not None else self.default_avatar_url()

    def banner_url(self) -> str | None:
        """Banner URL, if the user has a banner and a numeric ID."""
        if self.banner is None:
            return None
        user_id = _parse_u64(self.id)
        if user_id is None:
            return None
        ext = "gif" if self.banner.startswith("a_") else "webp"
        return f"{_CDN_BASE}/banners/{user_id}/{self.banner}.{ext}?size=512"


@dataclass
class Member:
    """A guild member."""

    user: User | None = None
    user_id: str | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[str] = field(default_factory=list)
    joined_at: str | None = None
    premium_since: str | None = None
    deaf: bool = False
    mute: bool = False
    pending: bool = False
    flags: int = 0
    communication_disabled_until: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Member:
        """Build a member from its JSON object."""
        user = data.get("user")
        return cls(
            user=User.from_dict(user) if user is not None else None,
            user_id=data.get("user_id"),
            nick=data.get("nick"),
            avatar=data.get("avatar"),
            roles=list(data.get("roles", [])),
            joined_at=data.get("joined_at"),
            premium_since=data.get("premium_since"),
            deaf=data.get("deaf", False),
            mute=data.get("mute", False),
            pending=data.get("pending", False),
            flags=data.get("flags", 0),
            communication_disabled_until=data.get("communication_disabled_until"),
        )

    def to_dict(self) -> dict[str, Any]:
        """The member's JSON object."""
        return {
            "user": self.user.to_dict() if self.user is not None else None,
            "user_id": self.user_id,
            "nick": self.nick,
            "avatar": self.avatar,
            "roles": list(self.roles),
            "joined_at": self.joined_at,
            "premium_since": self.premium_since,
            "deaf": self.deaf,
            "mute": self.mute,
            "pending": self.pending,
            "flags": self.flags,
            "communication_disabled_until": self.communication_disabled_until,
        }

    def display_name(self) -> str | None:
        """Nickname, else the user's display name, else None."""
        if self.nick is not None:
            return self.nick
        return self.user.display_name() if self.user is not None else None

    def mention(self) -> str | None:
        """``<@id>`` from the nested user or ``user_id``; None if neither is set."""
        member_id = self.user.id if self.user is not None else self.user_id
        return f"<@{member_id}>" if member_id is not None else None

    def is_timed_out(self) -> bool:
        """True while ``communication_disabled_until`` lies in the future."""
        if self.communication_disabled_until is None:
            return False
        try:
            until = _parse_rfc3339(self.communication_disabled_until)
        except ValueError:
            return False
        return math.floor(until.timestamp()) > int(time.time())

    def has_guild_avatar(self) -> bool:
        """True if the member has a guild-specific avatar."""
        return self.avatar is not None

    def user_id_typed(self) -> UserId | None:
        """The member's user ID from the nested user, else from ``user_id``."""
        if self.user is not None:
            found = _typed_id(UserId, self.user.id)
            if found is not None:
                return found
        return _typed_id(UserId, self.user_id)

    def role_ids(self) -> list[RoleId]:
        """The member's roles as typed IDs, skipping any that do not parse."""
        parsed = (_typed_id(RoleId, role) for role in self.roles)
        return [role for role in parsed if role is not None]


@dataclass
class ClientInfo:
    """Client details of a session."""

    version: int = 0
    os: str = ""
    client: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientInfo:
        """Build client info from its JSON object."""
        return cls(
            version=data.get("version", 0),
            os=data.get("os", ""),
            client=data.get("client", ""),
        )


@dataclass
class Session:
    """A session listed in the READY event."""

    status: str = ""
    session_id: str = ""
    client_info: ClientInfo = field(default_factory=ClientInfo)
    activities: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        """Build a session from its JSON object."""
        client_info = data.get("client_info")
        return cls(
            status=data["status"],
            session_id=data["session_id"],
            client_info=ClientInfo.from_dict(client_info) if client_info is not None else ClientInfo(),
            activities=list(data.get("activities", [])),
        )


@dataclass
class UserProfileData:
    """Profile card details: bio, banner, colours, pronouns."""

    bio: str | None = None
    banner: str | None = None
    accent_color: int | None = None
    theme_colors: list[int] | None = None
    pronouns: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserProfileData:
        """Build profile data from its JSON object."""
        theme_colors = data.get("theme_colors")
        return cls(
            bio=data.get("bio"),
            banner=data.get("banner"),
            accent_color=data.get("accent_color"),
            theme_colors=list(theme_colors) if theme_colors is not None else None,
            pronouns=data.get("pronouns"),
        )


@dataclass
class ConnectedAccount:
    """An external account linked to a profile."""

    id: str
    name: str
    account_type: str
    verified: bool = False
    metadata: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConnectedAccount:
        """Build a connected account from its JSON object."""
        return cls(
            id=data["id"],
            name=data["name"],
            account_type=data["type"],
            verified=data.get("verified", False),
            metadata=data.get("metadata"),
        )


@dataclass
class MutualGuild:
    """A guild shared with another user."""

    id: str
    nick: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MutualGuild:
        """Build a mutual guild from its JSON object."""
        return cls(id=data["id"], nick=data.get("nick"))


@dataclass
class UserProfile:
    """A user profile as returned by the profile endpoint."""

    user: User
    connected_accounts: list[ConnectedAccount] = field(default_factory=list)
    premium_since: str | None = None
    premium_type: int | None = None
    premium_guild_since: str | None = None
    user_profile: UserProfileData | None = None
    mutual_guilds: list[MutualGuild] = field(default_factory=list)
    mutual_friends: list[User] = field(default_factory=list)
    guild_member: Member | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserProfile:
        """Build a profile from its JSON object."""
        profile_data = data.get("user_profile")
        guild_member = data.get("guild_member")
        return cls(
            user=User.from_dict(data["user"]),
            connected_accounts=[ConnectedAccount.from_dict(a) for a in data.get("connected_accounts", [])],
            premium_since=data.get("premium_since"),
            premium_type=data.get("premium_type"),
            premium_guild_since=data.get("premium_guild_since"),
            user_profile=UserProfileData.from_dict(profile_data) if profile_data is not None else None,
            mutual_guilds=[MutualGuild.from_dict(g) for g in data.get("mutual_guilds", [])],
            mutual_friends=[User.from_dict(u) for u in data.get("mutual_friends", [])],
            guild_member=Member.from_dict(guild_member) if guild_member is not None else None,
        )
"""Request bodies for the Discord REST API."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from .message import PollAnswer, PollMedia

_OCTET_STREAM = "application/octet-stream"


def _renamed(key: str) -> Any:
    """An optional field sent under a different JSON key."""
    return field(default=None, metadata={"key": key})


def _omit_if_empty() -> Any:
    """A list field left out of the body while it is empty."""
    return field(default_factory=list, metadata={"omit_empty": True})


def _to_json(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value


@dataclass
class Payload:
    """Base for request bodies: unset (None) fields are left out of the JSON."""

    def to_dict(self) -> dict[str, Any]:
        """The JSON body of the request."""
        body: dict[str, Any] = {}
        for spec in fields(self):
            value = getattr(self, spec.name)
            if value is None:
                continue
            if spec.metadata.get("omit_empty") and not value:
                continue
            body[spec.metadata.get("key", spec.name)] = _to_json(value)
        return body


@dataclass
class CreateRoleRequest(Payload):
    """Body for creating or editing a guild role."""

    name: str | None = None
    permissions: str | None = None
    color: int | None = None
    hoist: bool | None = None
    mentionable: bool | None = None


EditRoleRequest = CreateRoleRequest


@dataclass(frozen=True)
class CreateAttachment:
    """A file to upload with a message."""

    filename: str
    data: bytes
    mime_type: str = _OCTET_STREAM
    description: str | None = None

    @classmethod
    def from_bytes(cls, filename: str, data: bytes) -> CreateAttachment:
        """An attachment of raw bytes with the generic binary MIME type."""
        return cls(filename=filename, data=bytes(data))

    @classmethod
    def with_mime(cls, filename: str, data: bytes, mime_type: str) -> CreateAttachment:
        """An attachment with an explicit MIME type."""
        return cls(filename=filename, data=bytes(data), mime_type=mime_type)

    def with_description(self, description: str) -> CreateAttachment:
        """A copy carrying ``description`` as alt-text."""
        return replace(self, description=description)


@dataclass
class CreateThreadRequest(Payload):
    """Body for starting a thread."""

    name: str
    auto_archive_duration: int | None = None
    rate_limit_per_user: int | None = None
    channel_type: int | None = _renamed("type")
    invitable: bool | None = None

    @classmethod
    def public(cls, name: str) -> CreateThreadRequest:
        """A public thread (channel type 11)."""
        return cls(name=name, channel_type=11)

    @classmethod
    def private(cls, name: str) -> CreateThreadRequest:
        """A private thread (channel type 12)."""
        return cls(name=name, channel_type=12)

    def auto_archive(self, minutes: int) -> CreateThreadRequest:
        """A copy that archives itself after ``minutes`` of inactivity."""
        return replace(self, auto_archive_duration=minutes)


@dataclass
class EditThreadRequest(Payload):
    """Body for editing a thread."""

    name: str | None = None
    archived: bool | None = None
    auto_archive_duration: int | None = None
    locked: bool | None = None
    rate_limit_per_user: int | None = None


@dataclass
class CreateWebhookRequest(Payload):
    """Body for creating a webhook."""

    name: str
    avatar: str | None = None


@dataclass
class EditWebhookRequest(Payload):
    """Body for editing a webhook."""

    name: str | None = None
    avatar: str | None = None
    channel_id: str | None = None


@dataclass
class ExecuteWebhookRequest(Payload):
    """Body for posting a message through a webhook."""

    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    tts: bool = False
    embeds: list[Any] = _omit_if_empty()


@dataclass
class CreateEmojiRequest(Payload):
    """Body for creating a guild emoji."""

    name: str
    image: str
    roles: list[str] = _omit_if_empty()


@dataclass
class EditEmojiRequest(Payload):
    """Body for editing a guild emoji; an empty role list lifts restrictions."""

    name: str | None = None
    roles: list[str] | None = None


@dataclass
class EditStickerRequest(Payload):
    """Body for editing a guild sticker."""

    name: str | None = None
    description: str | None = None
    tags: str | None = None


@dataclass
class CreateGuildRequest(Payload):
    """Body for creating a guild; only the name is required."""

    name: str
    icon: str | None = None
    verification_level: int | None = None
    default_message_notifications: int | None = None
    explicit_content_filter: int | None = None


@dataclass
class EditGuildRequest(Payload):
    """Body for editing guild settings."""

    name: str | None = None
    description: str | None = None
    icon: str | None = None
    banner: str | None = None
    splash: str | None = None
    afk_channel_id: str | None = None
    afk_timeout: int | None = None
    verification_level: int | None = None
    default_message_notifications: int | None = None
    explicit_content_filter: int | None = None
    system_channel_id: str | None = None
    rules_channel_id: str | None = None
    public_updates_channel_id: str | None = None
    preferred_locale: str | None = None


@dataclass
class CreatePollRequest(Payload):
    """The ``poll`` field of a message body."""

    question: PollMedia
    answers: list[PollAnswer]
    duration: int
    allow_multiselect: bool = False
    layout_type: int = 1


@dataclass
class AutoModerationRuleRequest(Payload):
    """Body for creating or editing an auto-moderation rule."""

    name: str | None = None
    event_type: int | None = None
    trigger_type: int | None = None
    trigger_metadata: Any = None
    actions: list[Any] | None = None
    enabled: bool | None = None
    exempt_channels: list[str] | None = None
    exempt_roles: list[str] | None = None


@dataclass(kw_only=True)
class CreateScheduledEventRequest(Payload):
    """Body for creating a guild scheduled event."""

    channel_id: str | None = None
    entity_metadata: Any = None
    name: str
    privacy_level: int
    scheduled_start_time: str
    scheduled_end_time: str | None = None
    description: str | None = None
    entity_type: int
    image: str | None = None


@dataclass
class EditScheduledEventRequest(Payload):
    """Body for editing a guild scheduled event."""

    channel_id: str | None = None
    entity_metadata: Any = None
    name: str | None = None
    privacy_level: int | None = None
    scheduled_start_time: str | None = None
    scheduled_end_time: str | None = None
    description: str | None = None
    entity_type: int | None = None
    status: int | None = None
    image: str | None = None


@dataclass
class CreateStageInstanceRequest(Payload):
    """Body for starting a stage instance."""

    channel_id: str
    topic: str
    privacy_level: int | None = None
    send_start_notification: bool | None = None


@dataclass
class EditStageInstanceRequest(Payload):
    """Body for editing a stage instance."""

    topic: str | None = None
    privacy_level: int | None = None


@dataclass
class EditVoiceStateRequest(Payload):
    """Body for updating a voice state."""

    channel_id: str | None = None
    request_to_speak_timestamp: str | None = None
    suppress: bool | None = None


@dataclass
class EditProfileRequest(Payload):
    """Body for editing the current user's profile."""

    username: str | None = None
    avatar: str | None = None
    banner: str | None = None
    bio: str | None = None
    pronouns: str | None = None
    accent_color: int | None = None


@dataclass
class CreateSoundboardSoundRequest(Payload):
    """Body for uploading a soundboard sound."""

    name: str
    sound: str
    volume: float | None = None
    emoji_id: str | None = None
    emoji_name: str | None = None


@dataclass
class EditSoundboardSoundRequest(Payload):
    """Body for editing a soundboard sound."""

    name: str | None = None
    volume: float | None = None
    emoji_id: str | None = None
    emoji_name: str | None = None


@dataclass
class SendSoundboardSoundRequest(Payload):
    """Body for playing a soundboard sound in a voice channel."""

    sound_id: str
    source_guild_id: str | None = None
"""Discord messages, embeds, polls and message payloads."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .enums import MessageFlags, MessageType, from_bits_truncate
from .ids import ChannelId, GuildId, MessageId, UserId
from .user import Member, User, _typed_id

_USER_AUTHORED = frozenset(
    {
        MessageType.DEFAULT,
        MessageType.REPLY,
        MessageType.CHAT_INPUT_COMMAND,
        MessageType.CONTEXT_MENU_COMMAND,
    }
)


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class PollMedia:
    """Text and emoji of a poll question or answer."""

    text: str | None = None
    emoji: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollMedia:
        """Build poll media from its JSON object."""
        return cls(text=data.get("text"), emoji=data.get("emoji"))

    def to_dict(self) -> dict[str, Any]:
        """JSON object, leaving out unset fields."""
        return _without_none({"text": self.text, "emoji": self.emoji})


@dataclass
class PollAnswer:
    """One answer option of a poll."""

    answer_id: int
    poll_media: PollMedia

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollAnswer:
        """Build an answer from its JSON object."""
        return cls(answer_id=data["answer_id"], poll_media=PollMedia.from_dict(data["poll_media"]))

    def to_dict(self) -> dict[str, Any]:
        """The answer's JSON object."""
        return {"answer_id": self.answer_id, "poll_media": self.poll_media.to_dict()}


@dataclass
class PollAnswerCount:
    """Vote count of one poll answer."""

    id: int
    count: int
    me_voted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollAnswerCount:
        """Build a vote count from its JSON object."""
        return cls(id=data["id"], count=data["count"], me_voted=data.get("me_voted", False))


@dataclass
class PollResults:
    """Vote counts of a poll."""

    answer_counts: list[PollAnswerCount]
    is_finalized: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollResults:
        """Build poll results from their JSON object."""
        return cls(
            answer_counts=[PollAnswerCount.from_dict(c) for c in data["answer_counts"]],
            is_finalized=data.get("is_finalized", False),
        )


@dataclass
class Poll:
    """A poll attached to a message."""

    question: PollMedia
    answers: list[PollAnswer]
    expiry: str | None = None
    allow_multiselect: bool = False
    layout_type: int = 1
    results: PollResults | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Poll:
        """Build a poll from its JSON object."""
        results = data.get("results")
        return cls(
            question=PollMedia.from_dict(data["question"]),
            answers=[PollAnswer.from_dict(a) for a in data["answers"]],
            expiry=data.get("expiry"),
            allow_multiselect=data.get("allow_multiselect", False),
            layout_type=data.get("layout_type", 1),
            results=PollResults.from_dict(results) if results is not None else None,
        )


@dataclass
class Attachment:
    """A file attached to a message."""

    id: str
    filename: str
    size: int
    url: str
    proxy_url: str
    description: str | None = None
    content_type: str | None = None
    height: int | None = None
    width: int | None = None
    ephemeral: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        """Build an attachment from its JSON object."""
        return cls(
            id=data["id"],
            filename=data["filename"],
            size=data["size"],
            url=data["url"],
            proxy_url=data["proxy_url"],
            description=data.get("description"),
            content_type=data.get("content_type"),
            height=data.get("height"),
            width=data.get("width"),
            ephemeral=data.get("ephemeral", False),
        )


@dataclass
class EmbedFooter:
    """Footer of an embed."""

    text: str = ""
    icon_url: str | None = None
    proxy_icon_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbedFooter:
        """Build a footer from its JSON object."""
        return cls(
            text=data["text"],
            icon_url=data.get("icon_url"),
            proxy_icon_url=data.get("proxy_icon_url"),
        )


@dataclass
class EmbedMedia:
    """Image, thumbnail or video of an embed."""

    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbedMedia:
        """Build embed media from its JSON object."""
        return cls(
            url=data.get("url"),
            proxy_url=data.get("proxy_url"),
            height=data.get("height"),
            width=data.get("width"),
        )


@dataclass
class EmbedProvider:
    """Provider of an embed."""

    name: str | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbedProvider:
        """Build a provider from its JSON object."""
        return cls(name=data.get("name"), url=data.get("url"))


@dataclass
class EmbedAuthor:
    """Author of an embed."""

    name: str | None = None
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbedAuthor:
        """Build an author from its JSON object."""
        return cls(
            name=data.get("name"),
            url=data.get("url"),
            icon_url=data.get("icon_url"),
            proxy_icon_url=data.get("proxy_icon_url"),
        )


@dataclass
class EmbedField:
    """A name/value field of an embed."""

    name: str = ""
    value: str = ""
    inline: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbedField:
        """Build a field from its JSON object."""
        return cls(name=data["name"], value=data["value"], inline=data.get("inline", False))


def _optional(kind: Any, value: Any) -> Any:
    return kind.from_dict(value) if value is not None else None


@dataclass
class Embed:
    """A rich embed on a message."""

    title: str | None = None
    embed_type: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: str | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedMedia | None = None
    thumbnail: EmbedMedia | None = None
    video: EmbedMedia | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Embed:
        """Build an embed from its JSON object."""
        return cls(
            title=data.get("title"),
            embed_type=data.get("type"),
            description=data.get("description"),
            url=data.get("url"),
            timestamp=data.get("timestamp"),
            color=data.get("color"),
            footer=_optional(EmbedFooter, data.get("footer")),
            image=_optional(EmbedMedia, data.get("image")),
            thumbnail=_optional(EmbedMedia, data.get("thumbnail")),
            video=_optional(EmbedMedia, data.get("video")),
            provider=_optional(EmbedProvider, data.get("provider")),
            author=_optional(EmbedAuthor, data.get("author")),
            fields=[EmbedField.from_dict(f) for f in data.get("fields", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        """The embed's JSON object."""
        data = asdict(self)
        data["type"] = data.pop("embed_type")
        return data


@dataclass
class Emoji:
    """An emoji used in a reaction."""

    id: str | None = None
    name: str | None = None
    animated: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Emoji:
        """Build an emoji from its JSON object."""
        return cls(id=data.get("id"), name=data.get("name"), animated=data.get("animated", False))


@dataclass
class Reaction:
    """A reaction on a message."""

    count: int = 0
    emoji: Emoji = field(default_factory=Emoji)
    me: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Reaction:
        """Build a reaction from its JSON object."""
        return cls(count=data["count"], emoji=Emoji.from_dict(data["emoji"]), me=data.get("me", False))


@dataclass
class MessageReference:
    """A pointer to another message, used for replies."""

    message_id: str | None = None
    channel_id: str | None = None
    guild_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageReference:
        """Build a reference from its JSON object."""
        return cls(
            message_id=data.get("message_id"),
            channel_id=data.get("channel_id"),
            guild_id=data.get("guild_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON object, leaving out unset fields."""
        return _without_none(
            {"message_id": self.message_id, "channel_id": self.channel_id, "guild_id": self.guild_id}
        )


@dataclass
class SendMessageRequest:
    """Payload for sending a message."""

    content: str = ""
    tts: bool = False
    flags: int = 0
    message_reference: MessageReference | None = None
    nonce: str | None = None
    mobile_network_type: str = "unknown"

    def to_dict(self) -> dict[str, Any]:
        """JSON body; reference and nonce appear only when set."""
        data: dict[str, Any] = {"content": self.content, "tts": self.tts, "flags": self.flags}
        if self.message_reference is not None:
            data["message_reference"] = self.message_reference.to_dict()
        if self.nonce is not None:
            data["nonce"] = self.nonce
        data["mobile_network_type"] = self.mobile_network_type
        return data


@dataclass
class EditMessageRequest:
    """Payload for editing a message."""

    content: str | None = None
    flags: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out unset fields."""
        return _without_none({"content": self.content, "flags": self.flags})


@dataclass
class Message:
    """A Discord message."""

    id: str
    channel_id: str
    author: User
    content: str
    timestamp: str
    guild_id: str | None = None
    member: Member | None = None
    edited_timestamp: str | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: list[User] = field(default_factory=list)
    mention_roles: list[str] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    embeds: list[Embed] = field(default_factory=list)
    reactions: list[Reaction] = field(default_factory=list)
    nonce: Any = None
    pinned: bool = False
    webhook_id: str | None = None
    message_type: MessageType = MessageType.DEFAULT
    flags: MessageFlags = MessageFlags(0)
    referenced_message: Message | None = None
    components: list[Any] = field(default_factory=list)
    poll: Poll | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Build a message from its JSON object."""
        return cls(
            id=data["id"],
            channel_id=data["channel_id"],
            author=User.from_dict(data["author"]),
            content=data["content"],
            timestamp=data["timestamp"],
            guild_id=data.get("guild_id"),
            member=_optional(Member, data.get("member")),
            edited_timestamp=data.get("edited_timestamp"),
            tts=data.get("tts", False),
            mention_everyone=data.get("mention_everyone", False),
            mentions=[User.from_dict(u) for u in data.get("mentions", [])],
            mention_roles=list(data.get("mention_roles", [])),
            attachments=[Attachment.from_dict(a) for a in data.get("attachments", [])],
            embeds=[Embed.from_dict(e) for e in data.get("embeds", [])],
            reactions=[Reaction.from_dict(r) for r in data.get("reactions", [])],
            nonce=data.get("nonce"),
            pinned=data.get("pinned", False),
            webhook_id=data.get("webhook_id"),
            message_type=MessageType(data.get("type", MessageType.DEFAULT)),
            flags=from_bits_truncate(MessageFlags, data.get("flags", 0)),
            referenced_message=_optional(Message, data.get("referenced_message")),
            components=list(data.get("components", [])),
            poll=_optional(Poll, data.get("poll")),
        )

    def channel_id_typed(self) -> ChannelId | None:
        """The channel ID as a typed ID, if it parses."""
        return _typed_id(ChannelId, self.channel_id)

    def author_id(self) -> UserId | None:
        """The author's ID as a typed ID, if it parses."""
        return _typed_id(UserId, self.author.id)

    def guild_id_typed(self) -> GuildId | None:
        """The guild ID as a typed ID; None for direct messages."""
        return _typed_id(GuildId, self.guild_id)

    def message_id(self) -> MessageId | None:
        """The message's own ID as a typed ID, if it parses."""
        return _typed_id(MessageId, self.id)

    def as_reference(self) -> MessageReference:
        """A reference to this message, for replying to it."""
        return MessageReference(message_id=self.id, channel_id=self.channel_id, guild_id=self.guild_id)

    def reply_builder(self, content: str) -> SendMessageRequest:
        """A send payload that replies to this message with ``content``."""
        return SendMessageRequest(content=content, message_reference=self.as_reference())

    def is_system(self) -> bool:
        """True for system messages such as joins, boosts and pins."""
        return self.message_type not in _USER_AUTHORED

    def is_ephemeral(self) -> bool:
        """True if only the target user can see the message."""
        return MessageFlags.EPHEMERAL in self.flags

    def mentions_user_id(self, user_id: str) -> bool:
        """True if the user with ``user_id`` is among the mentioned users."""
        return any(user.id == user_id for user in self.mentions)

    def is_reply(self) -> bool:
        """True if the message replies to another message."""
        return self.message_type is MessageType.REPLY or self.referenced_message is not None

    def is_crosspost(self) -> bool:
        """True if the message is a crosspost from another channel."""
        return MessageFlags.IS_CROSSPOST in self.flags
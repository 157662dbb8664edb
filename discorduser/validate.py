"""Checks of Discord's documented limits, run before any request is sent."""

from __future__ import annotations

from abc import ABC, abstractmethod

MAX_MESSAGE_LENGTH = 2000
MAX_EMBEDS_PER_MESSAGE = 10
MAX_EMBED_TOTAL_CHARS = 6000
MAX_STICKERS_PER_MESSAGE = 3
MIN_BULK_DELETE = 2
MAX_BULK_DELETE = 100
MAX_ROLE_NAME = 100
MIN_ROLE_NAME = 1
MAX_CHANNEL_NAME = 100
MIN_CHANNEL_NAME = 1
MAX_GUILD_NAME = 100
MIN_GUILD_NAME = 2
MAX_STICKER_NAME = 30
MIN_STICKER_NAME = 2
MAX_EMOJI_NAME = 32
MIN_EMOJI_NAME = 2
MAX_CHANNEL_TOPIC = 1024
MAX_WEBHOOK_NAME = 80
MIN_WEBHOOK_NAME = 1
MAX_INVITE_MAX_AGE = 604800
MAX_INVITE_MAX_USES = 100


class ModelError(ValueError):
    """A value breaks one of Discord's limits."""


class MessageTooLong(ModelError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"message is {length} characters long, at most {MAX_MESSAGE_LENGTH} allowed")


class EmbedAmount(ModelError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"{count} embeds given, at most {MAX_EMBEDS_PER_MESSAGE} allowed")


class StickerAmount(ModelError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"{count} stickers given, at most {MAX_STICKERS_PER_MESSAGE} allowed")


class BulkDeleteAmount(ModelError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"{count} messages given for bulk delete, between {MIN_BULK_DELETE} and {MAX_BULK_DELETE} allowed"
        )


class NameTooShort(ModelError):
    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(f"name is {length} characters long, at least {minimum} required")


class NameTooLong(ModelError):
    def __init__(self, length: int, maximum: int) -> None:
        self.length = length
        self.maximum = maximum
        super().__init__(f"name is {length} characters long, at most {maximum} allowed")


class GuildNameLength(ModelError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"guild name is {length} characters long, {MIN_GUILD_NAME}-{MAX_GUILD_NAME} allowed"
        )


class ChannelTopicLength(ModelError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"channel topic is {length} characters long, at most {MAX_CHANNEL_TOPIC} allowed")


class RoleNameLength(ModelError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"role name is {length} characters long, {MIN_ROLE_NAME}-{MAX_ROLE_NAME} allowed")


class WebhookNameLength(ModelError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"webhook name is {length} characters long, {MIN_WEBHOOK_NAME}-{MAX_WEBHOOK_NAME} allowed"
        )


class InviteMaxAge(ModelError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invite max_age {value} out of range 0-{MAX_INVITE_MAX_AGE}")


class InviteMaxUses(ModelError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invite max_uses {value} out of range 0-{MAX_INVITE_MAX_USES}")


class Validate(ABC):
    """A request that can check itself against Discord's limits."""

    @abstractmethod
    def validate(self) -> None:
        """Raise ModelError for the first limit that is broken."""


def validate_message_content(content: str) -> None:
    """Reject message content longer than 2000 characters."""
    if len(content) > MAX_MESSAGE_LENGTH:
        raise MessageTooLong(len(content))


def validate_embed_count(count: int) -> None:
    """Reject more than 10 embeds on one message."""
    if count > MAX_EMBEDS_PER_MESSAGE:
        raise EmbedAmount(count)


def validate_sticker_count(count: int) -> None:
    """Reject more than 3 stickers on one message."""
    if count > MAX_STICKERS_PER_MESSAGE:
        raise StickerAmount(count)


def validate_bulk_delete_count(count: int) -> None:
    """Require between 2 and 100 messages for a bulk delete."""
    if not MIN_BULK_DELETE <= count <= MAX_BULK_DELETE:
        raise BulkDeleteAmount(count)


def validate_name(name: str, min_len: int, max_len: int) -> None:
    """Require a name's character count to lie in ``[min_len, max_len]``."""
    length = len(name)
    if length < min_len:
        raise NameTooShort(length, min_len)
    if length > max_len:
        raise NameTooLong(length, max_len)


def validate_guild_name(name: str) -> None:
    """Require a guild name of 2-100 characters."""
    if not MIN_GUILD_NAME <= len(name) <= MAX_GUILD_NAME:
        raise GuildNameLength(len(name))


def validate_channel_topic(topic: str) -> None:
    """Require a channel topic of at most 1024 characters."""
    if len(topic) > MAX_CHANNEL_TOPIC:
        raise ChannelTopicLength(len(topic))


def validate_role_name(name: str) -> None:
    """Require a role name of 1-100 characters."""
    if not MIN_ROLE_NAME <= len(name) <= MAX_ROLE_NAME:
        raise RoleNameLength(len(name))


def validate_webhook_name(name: str) -> None:
    """Require a webhook name of 1-80 characters."""
    if not MIN_WEBHOOK_NAME <= len(name) <= MAX_WEBHOOK_NAME:
        raise WebhookNameLength(len(name))


def validate_invite_max_age(max_age: int) -> None:
    """Require an invite max_age of 0-604800 seconds."""
    if not 0 <= max_age <= MAX_INVITE_MAX_AGE:
        raise InviteMaxAge(max_age)


def validate_invite_max_uses(max_uses: int) -> None:
    """Require an invite max_uses of 0-100."""
    if not 0 <= max_uses <= MAX_INVITE_MAX_USES:
        raise InviteMaxUses(max_uses)
import pytest

from discorduser.validate import (
    BulkDeleteAmount,
    ChannelTopicLength,
    EmbedAmount,
    GuildNameLength,
    InviteMaxAge,
    InviteMaxUses,
    MessageTooLong,
    ModelError,
    NameTooLong,
    NameTooShort,
    RoleNameLength,
    StickerAmount,
    Validate,
    WebhookNameLength,
    validate_bulk_delete_count,
    validate_channel_topic,
    validate_embed_count,
    validate_guild_name,
    validate_invite_max_age,
    validate_invite_max_uses,
    validate_message_content,
    validate_name,
    validate_role_name,
    validate_sticker_count,
    validate_webhook_name,
)


def test_message_content_ok():
    assert validate_message_content("hello") is None
    assert validate_message_content("a" * 2000) is None


def test_message_content_too_long():
    with pytest.raises(MessageTooLong) as info:
        validate_message_content("a" * 2001)
    assert info.value.length == 2001


def test_message_content_counts_characters():
    assert validate_message_content("é" * 2000) is None
    with pytest.raises(MessageTooLong):
        validate_message_content("é" * 2001)


def test_embed_count_ok():
    assert validate_embed_count(10) is None
    assert validate_embed_count(0) is None


def test_embed_count_too_many():
    with pytest.raises(EmbedAmount) as info:
        validate_embed_count(11)
    assert info.value.count == 11


def test_sticker_count_too_many():
    with pytest.raises(StickerAmount) as info:
        validate_sticker_count(4)
    assert info.value.count == 4


def test_bulk_delete_bounds():
    assert validate_bulk_delete_count(2) is None
    assert validate_bulk_delete_count(100) is None
    for count in (1, 101):
        with pytest.raises(BulkDeleteAmount) as info:
            validate_bulk_delete_count(count)
        assert info.value.count == count


def test_name_bounds():
    assert validate_name("ab", 2, 32) is None
    with pytest.raises(NameTooShort) as short:
        validate_name("a", 2, 32)
    assert (short.value.length, short.value.minimum) == (1, 2)
    with pytest.raises(NameTooLong) as long_:
        validate_name("a" * 33, 2, 32)
    assert (long_.value.length, long_.value.maximum) == (33, 32)


@pytest.mark.parametrize(
    ("func", "value", "error"),
    [
        (validate_guild_name, "a", GuildNameLength),
        (validate_guild_name, "a" * 101, GuildNameLength),
        (validate_channel_topic, "a" * 1025, ChannelTopicLength),
        (validate_role_name, "", RoleNameLength),
        (validate_role_name, "a" * 101, RoleNameLength),
        (validate_webhook_name, "", WebhookNameLength),
        (validate_webhook_name, "a" * 81, WebhookNameLength),
        (validate_invite_max_age, 604801, InviteMaxAge),
        (validate_invite_max_uses, 101, InviteMaxUses),
    ],
)
def test_limits_rejected(func, value, error):
    with pytest.raises(error) as info:
        func(value)
    assert isinstance(info.value, ModelError)


@pytest.mark.parametrize(
    ("func", "value"),
    [
        (validate_guild_name, "ab"),
        (validate_guild_name, "a" * 100),
        (validate_channel_topic, ""),
        (validate_channel_topic, "a" * 1024),
        (validate_role_name, "a"),
        (validate_webhook_name, "a" * 80),
        (validate_invite_max_age, 604800),
        (validate_invite_max_uses, 0),
        (validate_invite_max_uses, 100),
    ],
)
def test_limits_accepted(func, value):
    assert func(value) is None


def test_guild_name_error_carries_length():
    with pytest.raises(GuildNameLength) as info:
        validate_guild_name("x")
    assert info.value.length == 1


class _NamedRequest(Validate):
    def __init__(self, name):
        self.name = name

    def validate(self):
        validate_role_name(self.name)


def test_validate_subclass_raises():
    empty = _NamedRequest("")
    with pytest.raises(RoleNameLength) as info:
        empty.validate()
    assert info.value.length == 0
    with pytest.raises(RoleNameLength):
        validate_role_name(empty.name)
    named = _NamedRequest("mods")
    assert named.validate() is None
    assert validate_role_name(named.name) is None


def test_validate_is_abstract():
    with pytest.raises(TypeError):
        Validate()
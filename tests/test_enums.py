import pytest

from discorduser.types.enums import (
    ActionType,
    ChannelType,
    ConnectionStage,
    GatewayIntents,
    InteractionResponseType,
    MessageFlags,
    MessageType,
    Permissions,
    RelationshipType,
    UserStatus,
    UserPublicFlags,
    from_bits_truncate,
)


def test_user_status_wire_values():
    assert UserStatus("dnd") is UserStatus.DO_NOT_DISTURB
    assert UserStatus.INVISIBLE.value == "invisible"
    assert UserStatus("online") is UserStatus.ONLINE


def test_message_type_from_wire():
    assert MessageType(19) is MessageType.REPLY
    assert MessageType(32) is MessageType.GUILD_APPLICATION_PREMIUM_SUBSCRIPTION


def test_message_type_gap_is_rejected():
    with pytest.raises(ValueError):
        MessageType(13)


def test_relationship_and_channel_types():
    assert RelationshipType(3) is RelationshipType.PENDING_INCOMING
    assert ChannelType(15) is ChannelType.GUILD_FORUM
    with pytest.raises(ValueError):
        ChannelType(6)


def test_action_type_values():
    assert ActionType(72) is ActionType.MESSAGE_DELETE
    assert ActionType(192) is ActionType.VOICE_CHANNEL_STATUS_UPDATED


def test_interaction_response_type():
    assert InteractionResponseType(9) is InteractionResponseType.MODAL
    with pytest.raises(ValueError):
        InteractionResponseType(2)


@pytest.mark.parametrize(
    "stage, expected",
    [
        (ConnectionStage.CONNECTED, False),
        (ConnectionStage.DISCONNECTED, False),
        (ConnectionStage.CONNECTING, True),
        (ConnectionStage.HANDSHAKE, True),
        (ConnectionStage.IDENTIFYING, True),
        (ConnectionStage.RESUMING, True),
    ],
)
def test_is_connecting(stage, expected):
    assert stage.is_connecting() is expected


def test_gateway_intents_default():
    intents = GatewayIntents.default()
    assert int(intents) == 16381
    assert GatewayIntents.GUILDS in intents
    assert GatewayIntents.GUILD_MEMBERS not in intents
    assert GatewayIntents.MESSAGE_CONTENT not in intents


def test_from_bits_truncate_drops_unknown_bits():
    flags = from_bits_truncate(MessageFlags, MessageFlags.EPHEMERAL | (1 << 9))
    assert flags == MessageFlags.EPHEMERAL


def test_from_bits_truncate_keeps_known_bits():
    bits = int(UserPublicFlags.STAFF | UserPublicFlags.ACTIVE_DEVELOPER)
    flags = from_bits_truncate(UserPublicFlags, bits)
    assert UserPublicFlags.STAFF in flags
    assert UserPublicFlags.ACTIVE_DEVELOPER in flags
    assert int(flags) == bits


def test_preset_all_contains_every_member_and_nothing_else():
    everything = Permissions.preset_all()
    for member in Permissions:
        assert member in everything
    assert from_bits_truncate(Permissions, everything) == everything
    assert int(everything) & (1 << 43) == 0


def test_preset_none_is_empty():
    assert int(Permissions.preset_none()) == 0
    assert Permissions.SEND_MESSAGES not in Permissions.preset_none()


def test_preset_text():
    text = Permissions.preset_text()
    assert Permissions.SEND_MESSAGES in text
    assert Permissions.SEND_MESSAGES_IN_THREADS in text
    assert Permissions.CONNECT not in text


def test_preset_voice():
    voice = Permissions.preset_voice()
    assert Permissions.SPEAK in voice
    assert Permissions.SEND_VOICE_MESSAGES in voice
    assert Permissions.SEND_MESSAGES not in voice


def test_preset_moderation():
    moderation = Permissions.preset_moderation()
    assert Permissions.BAN_MEMBERS in moderation
    assert Permissions.MODERATE_MEMBERS in moderation
    assert Permissions.ADMINISTRATOR not in moderation


def test_preset_administrator():
    assert Permissions.preset_administrator() == Permissions.ADMINISTRATOR


def test_preset_general_member_is_union():
    member = Permissions.preset_general_member()
    assert Permissions.preset_text() & member == Permissions.preset_text()
    assert Permissions.preset_voice() & member == Permissions.preset_voice()
    assert Permissions.CHANGE_NICKNAME in member
    assert Permissions.KICK_MEMBERS not in member
import pytest

from discorduser.types.command_payloads import (
    AllowedMentions,
    CreateChannelRequest,
    CreateCommandRequest,
    CreateFollowupMessageRequest,
    CreateInteractionResponseRequest,
    EditChannelRequest,
    EditGuildMemberRequest,
)


def test_command_request_minimal_body():
    body = CreateCommandRequest(name="ping", description="Pong back").to_dict()
    assert body == {"name": "ping", "description": "Pong back"}


def test_command_request_type_key_and_options():
    options = [{"name": "target", "type": 6}]
    body = CreateCommandRequest(name="hug", command_type=2, options=options, nsfw=False).to_dict()
    assert body["type"] == 2
    assert "command_type" not in body
    assert body["options"] == options
    assert body["nsfw"] is False


def test_command_request_default_has_empty_name_and_description():
    assert CreateCommandRequest().to_dict() == {"name": "", "description": ""}


def test_interaction_message():
    body = CreateInteractionResponseRequest.message("hello").to_dict()
    assert body == {"type": 4, "data": {"content": "hello"}}


def test_interaction_ephemeral_sets_flag():
    body = CreateInteractionResponseRequest.ephemeral("secret stuff").to_dict()
    assert body == {"type": 4, "data": {"content": "secret stuff", "flags": 64}}


@pytest.mark.parametrize(
    ("build", "expected_type"),
    [
        (CreateInteractionResponseRequest.defer, 5),
        (CreateInteractionResponseRequest.defer_update, 6),
    ],
)
def test_interaction_defers_have_no_data(build, expected_type):
    assert build().to_dict() == {"type": expected_type}


def test_interaction_update_message():
    request = CreateInteractionResponseRequest.update_message("edited")
    assert request.response_type == 7
    assert request.to_dict()["data"] == {"content": "edited"}


def test_interaction_modal_passes_data_through():
    modal_data = {"custom_id": "form", "title": "Form", "components": []}
    body = CreateInteractionResponseRequest.modal(modal_data).to_dict()
    assert body == {"type": 9, "data": modal_data}


def test_followup_omits_empty_lists():
    assert CreateFollowupMessageRequest(content="hi").to_dict() == {"content": "hi"}


def test_followup_with_embeds_and_flags():
    embeds = [{"title": "t"}]
    body = CreateFollowupMessageRequest(embeds=embeds, flags=64).to_dict()
    assert body == {"embeds": embeds, "flags": 64}


def test_create_channel_minimal_and_type_key():
    assert CreateChannelRequest("general").to_dict() == {"name": "general"}
    body = CreateChannelRequest("voice", channel_type=2, user_limit=10).to_dict()
    assert body == {"name": "voice", "type": 2, "user_limit": 10}


def test_allowed_mentions_permissive_and_none():
    assert AllowedMentions.permissive().parse == ["roles", "users", "everyone"]
    assert AllowedMentions.none().to_dict() == {}


def test_allowed_mentions_everyone_toggle():
    mentions = AllowedMentions.permissive().everyone(False)
    assert "everyone" not in mentions.parse
    restored = mentions.everyone(True)
    assert restored.parse.count("everyone") == 1
    assert restored.everyone(True).parse.count("everyone") == 1


def test_allowed_mentions_toggles_do_not_mutate_original():
    original = AllowedMentions.permissive()
    original.all_roles(False).all_users(False)
    assert original.parse == ["roles", "users", "everyone"]


def test_allowed_mentions_all_roles_and_users():
    mentions = AllowedMentions.none().all_roles(True).all_users(True)
    assert mentions.parse == ["roles", "users"]
    assert mentions.all_roles(False).parse == ["users"]


def test_allowed_mentions_explicit_users_override_parse():
    mentions = AllowedMentions.permissive().with_users(["111", "222"])
    assert "users" not in mentions.parse
    assert mentions.users == ["111", "222"]
    body = mentions.to_dict()
    assert body["users"] == ["111", "222"]
    assert "roles" not in body


def test_allowed_mentions_explicit_roles_override_parse():
    mentions = AllowedMentions.permissive().with_roles(iter(["333"]))
    assert "roles" not in mentions.parse
    assert mentions.to_dict()["roles"] == ["333"]


def test_allowed_mentions_replied_user():
    body = AllowedMentions.none().ping_replied_user(False).to_dict()
    assert body == {"replied_user": False}


def test_edit_member_for_nick():
    assert EditGuildMemberRequest.for_nick("nickname").to_dict() == {"nick": "nickname"}
    assert EditGuildMemberRequest.for_nick("").to_dict() == {"nick": ""}


def test_edit_member_move_and_disconnect():
    assert EditGuildMemberRequest.move_to_channel("42").to_dict() == {"channel_id": "42"}
    assert EditGuildMemberRequest.disconnect_voice().to_dict() == {"channel_id": ""}


def test_edit_member_roles_list():
    body = EditGuildMemberRequest(roles=[], mute=True).to_dict()
    assert body == {"roles": [], "mute": True}


def test_edit_channel_only_set_fields():
    assert EditChannelRequest().to_dict() == {}
    body = EditChannelRequest(name="news", channel_type=5, nsfw=True).to_dict()
    assert body == {"name": "news", "type": 5, "nsfw": True}
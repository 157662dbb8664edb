from datetime import datetime, timezone

import pytest

from discorduser.types.enums import UserPublicFlags
from discorduser.types.ids import RoleId, UserId
from discorduser.types.image_hash import ImageHash, ImageSize
from discorduser.types.user import (
    ClientInfo,
    Member,
    Session,
    User,
    UserProfile,
)

AVATARS = "https://cdn.discordapp.com/embed/avatars/"


def make_user(**overrides):
    data = {"id": "80351110224678912", "username": "alice"}
    data.update(overrides)
    return User.from_dict(data)


def test_display_name_prefers_global_name():
    assert make_user(global_name="Alice A").display_name() == "Alice A"
    assert make_user().display_name() == "alice"


def test_tag_legacy_and_pomelo():
    assert make_user(discriminator="1234").tag() == "alice#1234"
    assert make_user(discriminator="0").tag() == "alice"
    assert make_user(discriminator="0000").tag() == "alice"
    assert make_user().tag() == "alice"


def test_mention():
    user = make_user()
    assert user.mention() == f"<@{user.id}>"


def test_default_avatar_non_numeric_id_uses_first():
    assert make_user(id="not-a-number").default_avatar_url() == AVATARS + "0.png"


def test_default_avatar_legacy_cycles_by_five():
    first = make_user(discriminator="1231").default_avatar_url()
    second = make_user(discriminator="1236").default_avatar_url()
    assert first == second
    assert first.startswith(AVATARS)
    assert first[len(AVATARS):-len(".png")] in {"0", "1", "2", "3", "4"}


def test_default_avatar_pomelo_cycles_by_six_on_timestamp():
    base = 1 << 40
    first = make_user(id=str(base)).default_avatar_url()
    second = make_user(id=str(base + (6 << 22))).default_avatar_url()
    assert first == second
    assert first[len(AVATARS):-len(".png")] in {str(i) for i in range(6)}


def test_avatar_url():
    user = make_user(id="12345", avatar="a_abc")
    assert user.avatar_url(ImageSize.SIZE_512) == ImageHash("a_abc").user_avatar_url(12345, ImageSize.SIZE_512)
    assert make_user().avatar_url(ImageSize.SIZE_512) is None
    assert make_user(id="abc", avatar="x").avatar_url(ImageSize.SIZE_512) is None


def test_face_falls_back_to_default():
    user = make_user(discriminator="1234")
    assert user.face() == user.default_avatar_url()
    with_avatar = make_user(id="12345", avatar="hash")
    assert with_avatar.face() == with_avatar.avatar_url(ImageSize.SIZE_128)
    assert with_avatar.face().endswith("?size=128")


def test_banner_url():
    assert make_user(id="12345", banner="a_b").banner_url() == (
        "https://cdn.discordapp.com/banners/12345/a_b.gif?size=512"
    )
    assert make_user(id="12345", banner="b").banner_url().endswith("/b.webp?size=512")
    assert make_user().banner_url() is None
    assert make_user(id="x", banner="b").banner_url() is None


def test_user_round_trip_and_flag_truncation():
    user = make_user(public_flags=int(UserPublicFlags.STAFF) | (1 << 5), avatar="a_x", bot=True)
    assert user.public_flags == UserPublicFlags.STAFF
    assert user.avatar == ImageHash("a_x")
    data = user.to_dict()
    assert data["avatar"] == "a_x"
    assert data["public_flags"] == int(UserPublicFlags.STAFF)
    assert User.from_dict(data) == user


def test_user_requires_id():
    with pytest.raises(KeyError):
        User.from_dict({"username": "alice"})


def test_member_display_name_order():
    user_data = {"id": "1", "username": "bob", "global_name": "Bobby"}
    assert Member.from_dict({"nick": "B", "user": user_data}).display_name() == "B"
    assert Member.from_dict({"user": user_data}).display_name() == "Bobby"
    assert Member.from_dict({}).display_name() is None


def test_member_mention():
    assert Member.from_dict({"user": {"id": "42", "username": "x"}}).mention() == "<@42>"
    assert Member.from_dict({"user_id": "43"}).mention() == "<@43>"
    assert Member.from_dict({}).mention() is None


def test_member_timeout():
    assert Member(communication_disabled_until="2999-01-01T00:00:00Z").is_timed_out()
    assert not Member(communication_disabled_until="2000-01-01T00:00:00.123+00:00").is_timed_out()
    assert not Member(communication_disabled_until="garbage").is_timed_out()
    assert not Member().is_timed_out()


def test_member_guild_avatar():
    assert Member(avatar="h").has_guild_avatar()
    assert not Member().has_guild_avatar()


def test_member_typed_ids():
    member = Member.from_dict({"user_id": "77", "roles": ["1", "x", "2"]})
    assert member.user_id_typed() == UserId(77)
    assert member.role_ids() == [RoleId(1), RoleId(2)]
    nested = Member.from_dict({"user": {"id": "88", "username": "u"}, "user_id": "77"})
    assert nested.user_id_typed() == UserId(88)
    assert Member().user_id_typed() is None


def test_member_round_trip():
    member = Member.from_dict(
        {"user": {"id": "5", "username": "u"}, "nick": "n", "roles": ["9"], "deaf": True}
    )
    assert Member.from_dict(member.to_dict()) == member


def test_session_defaults():
    session = Session.from_dict({"status": "online", "session_id": "abc"})
    assert session.client_info == ClientInfo()
    assert session.client_info.version == 0
    assert session.activities == []
    with pytest.raises(KeyError):
        Session.from_dict({"status": "online"})


def test_user_profile_nested():
    profile = UserProfile.from_dict(
        {
            "user": {"id": "1", "username": "u"},
            "connected_accounts": [{"id": "a", "name": "n", "type": "spotify"}],
            "user_profile": {"bio": "hi", "theme_colors": [1, 2]},
            "mutual_guilds": [{"id": "g"}],
            "mutual_friends": [{"id": "2", "username": "f"}],
            "guild_member": {"nick": "m"},
        }
    )
    assert profile.user.username == "u"
    assert profile.connected_accounts[0].account_type == "spotify"
    assert not profile.connected_accounts[0].verified
    assert profile.user_profile.bio == "hi"
    assert profile.user_profile.theme_colors == [1, 2]
    assert profile.mutual_guilds[0].id == "g"
    assert profile.mutual_guilds[0].nick is None
    assert profile.mutual_friends[0].username == "f"
    assert profile.guild_member.nick == "m"
    assert profile.premium_type is None


def test_user_default_construction_has_empty_identity():
    user = User()
    assert user.tag() == ""
    assert user.public_flags == UserPublicFlags(0)
    assert datetime.now(timezone.utc).year >= 2024 or user.mention() == "<@>"
    assert user.mention() == "<@>"
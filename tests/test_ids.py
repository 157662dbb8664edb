import json
from datetime import datetime, timezone

import pytest

from discorduser.types.ids import (
    ChannelId,
    InvalidSnowflakeError,
    MessageId,
    RoleId,
    UserId,
)


def test_valid_snowflake():
    channel = ChannelId(12345678901234567)
    assert int(channel) == 12345678901234567
    assert str(channel) == "12345678901234567"


def test_role_id():
    assert RoleId(98765432109876543).value == 98765432109876543


def test_invalid_snowflake_zero():
    with pytest.raises(ValueError, match="Invalid ChannelId: 0"):
        ChannelId(0)


def test_from_json_string():
    assert ChannelId.from_json(json.loads('"12345678901234567"')).value == 12345678901234567


def test_from_json_number():
    assert ChannelId.from_json(json.loads("12345678901234567")).value == 12345678901234567


def test_to_json():
    assert json.dumps(ChannelId(12345678901234567).to_json()) == '"12345678901234567"'


def test_created_at():
    ts = MessageId(175_928_847_299_117_063).created_at()
    assert ts.strftime("%Y-%m-%d") == "2016-04-30"
    assert ts == datetime(2016, 4, 30, 11, 18, 25, 796000, tzinfo=timezone.utc)


@pytest.mark.parametrize("text", ["abc", "0", "-1", "", "1.5", str(1 << 64)])
def test_parse_rejects(text):
    with pytest.raises(InvalidSnowflakeError) as info:
        UserId.parse(text)
    assert info.value.text == text


def test_parse_accepts_digits():
    assert UserId.parse("42") == UserId(42)


def test_error_message():
    assert str(InvalidSnowflakeError("x")) == "Invalid snowflake ID 'x': must be a numeric non-zero value"


@pytest.mark.parametrize("value", [0, -5, "0"])
def test_from_json_rejects_non_positive(value):
    with pytest.raises(InvalidSnowflakeError):
        ChannelId.from_json(value)


def test_from_json_rejects_other_types():
    with pytest.raises(TypeError):
        ChannelId.from_json(1.5)


def test_unchecked_zero_becomes_one():
    assert ChannelId.unchecked(0).value == 1
    assert ChannelId.unchecked(7).value == 7


def test_distinct_types_not_equal():
    assert ChannelId(5) != UserId(5)
    assert ChannelId(5) == ChannelId(5)
    assert len({ChannelId(5), ChannelId(5)}) == 1
# discorduser

Plain-Python data models for the Discord user API: snowflake IDs, colours,
CDN image hashes, inline timestamps, permission and intent flags, message,
guild, user and relationship objects, and request payloads. The
`discorduser.validate` module checks Discord's documented limits before
anything is sent.

The package has no runtime dependencies.

## Installation

```
pip install discorduser
```

## Snowflake IDs

`discorduser.types.ids` defines `Snowflake` and one subclass per resource
(`ChannelId`, `UserId`, `MessageId`, `GuildId`, `RoleId`, `EmojiId`,
`WebhookId`, `ApplicationId`, `InteractionId`, `StickerId`,
`ScheduledEventId`, `AutoModerationRuleId`, `SoundboardSoundId`,
`CommandId`). IDs of different kinds never compare equal.

```python
from discorduser.types.ids import ChannelId, MessageId

channel = ChannelId.parse("12345678901234567")
print(channel.to_json())          # 12345678901234567
print(ChannelId.from_json(12345678901234567) == channel)  # True
print(MessageId(175928847299117063).created_at().date())  # 2016-04-30
```

`ChannelId(0)` raises `ValueError`; `ChannelId.unchecked(0)` turns zero into
1. `parse` and `from_json` raise `InvalidSnowflakeError` (a `ValueError`) for
values that are not a positive 64-bit integer.

## Colours, image hashes and timestamps

```python
from discorduser.types.colour import Colour
from discorduser.types.image_hash import ImageHash, ImageSize
from discorduser.types.timestamp import FormattedTimestamp, TimestampStyle

c = Colour.from_rgb(255, 87, 51)
print(c.r(), c.g(), c.b(), str(c))  # 255 87 51 #FF5733
print(str(Colour.BLURPLE))           # #5865F2

h = ImageHash("a_abc123")
print(h.is_animated())               # True
print(h.user_avatar_url(12345, ImageSize.SIZE_256))

ts = FormattedTimestamp(1_609_459_200, TimestampStyle.RELATIVE_TIME)
print(str(ts))                       # <t:1609459200:R>
print(str(FormattedTimestamp.default_style(1_609_459_200)))  # <t:1609459200>
```

## Enums and flags

`discorduser.types.enums` holds `UserStatus`, `MessageType`,
`RelationshipType`, `ActionType`, `ChannelType`, `ConnectionStage`,
`ReconnectType`, `InteractionResponseType` and the flag sets
`GatewayIntents`, `MessageFlags`, `UserPublicFlags` and `Permissions`.
`from_bits_truncate(flag_type, bits)` drops bits a flag type does not define.

```python
from discorduser.types.enums import Permissions, GatewayIntents

perms = Permissions.preset_text()
print(Permissions.SEND_MESSAGES in perms)  # True
print(GatewayIntents.default())
```

`Permissions` also has `preset_all`, `preset_none`, `preset_voice`,
`preset_moderation`, `preset_administrator` and `preset_general_member`.

## Models

Each model reads a decoded JSON object with `from_dict`:

```python
from discorduser.types.message import Message

msg = Message.from_dict({
    "id": "1", "channel_id": "2", "content": "hi",
    "timestamp": "2024-01-01T00:00:00+00:00",
    "author": {"id": "3", "username": "someone"},
})
print(msg.author.mention(), msg.is_system())  # <@3> False
reply = msg.reply_builder("hello back").to_dict()
```

- `discorduser.types.message`: messages, attachments, embeds, reactions,
  polls, `MessageReference`, `SendMessageRequest` and `EditMessageRequest`.
- `discorduser.types.user`: `User`, `Member`, `Session`, `ClientInfo`,
  `UserProfile` and its parts.
- `discorduser.types.relationship`: `Relationship` (friends, blocks, pending
  requests).
- `discorduser.types.guild`: guilds, channels, roles, emojis, stickers,
  invites, audit logs, webhooks, bans, auto-moderation rules, scheduled
  events, stage instances, voice regions, soundboard sounds and application
  commands.

## Validation

```python
from discorduser.validate import validate_message_content, MessageTooLong

try:
    validate_message_content("a" * 2001)
except MessageTooLong as exc:
    print(exc.length)  # 2001
```

Every check raises a subclass of `ModelError` (itself a `ValueError`).
`Validate` is an abstract base for requests that check themselves.

## Request payloads

`discorduser.types.payloads` and `discorduser.types.command_payloads` provide
request bodies built on `Payload`, whose `to_dict()` leaves out every field
that was not set:

```python
from discorduser.types.command_payloads import AllowedMentions
from discorduser.types.payloads import CreateThreadRequest

body = AllowedMentions.permissive().everyone(False).ping_replied_user(True)
print(body.to_dict())
# {'parse': ['roles', 'users'], 'replied_user': True}

print(CreateThreadRequest.public("news").auto_archive(60).to_dict())
# {'name': 'news', 'auto_archive_duration': 60, 'type': 11}
```

`CreateAttachment` describes a file to upload; it is not a JSON payload.

## What this package does not do

It holds data types only. It has no gateway connection, no HTTP client, no
rate limiting, no cache and no command framework: it never talks to the
network. Reading responses and sending the payloads' `to_dict()` output is
left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```
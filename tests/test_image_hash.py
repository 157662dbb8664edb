import pytest

from discorduser.types.image_hash import ImageHash, ImageSize


def test_animated_detection():
    assert ImageHash("a_1234abcd").is_animated() is True
    assert ImageHash("1234abcd").is_animated() is False


def test_avatar_url_animated():
    url = ImageHash("a_abc123").user_avatar_url(12345, None)
    assert ".gif" in url
    assert "/avatars/12345/" in url
    assert url == "https://cdn.discordapp.com/avatars/12345/a_abc123.gif"


def test_avatar_url_static_with_size():
    url = ImageHash("abc123").user_avatar_url(12345, ImageSize.SIZE_256)
    assert ".webp" in url
    assert url.endswith("?size=256")


def test_guild_icon_url():
    assert (
        ImageHash("abc").guild_icon_url(99, ImageSize.SIZE_64)
        == "https://cdn.discordapp.com/icons/99/abc.webp?size=64"
    )


def test_guild_banner_url_animated():
    assert ImageHash("a_x").guild_banner_url(7) == "https://cdn.discordapp.com/banners/7/a_x.gif"


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        ImageHash("abc").user_avatar_url(1, 100)


def test_str():
    assert str(ImageHash("a_1234")) == "a_1234"
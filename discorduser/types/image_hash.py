"""Discord CDN image hashes and URL helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_CDN_BASE = "https://cdn.discordapp.com"


class ImageSize(IntEnum):
    """Allowed CDN image sizes: powers of two from 16 to 4096."""

    SIZE_16 = 16
    SIZE_32 = 32
    SIZE_64 = 64
    SIZE_128 = 128
    SIZE_256 = 256
    SIZE_512 = 512
    SIZE_1024 = 1024
    SIZE_2048 = 2048
    SIZE_4096 = 4096


@dataclass(frozen=True)
class ImageHash:
    """A CDN asset hash; animated hashes start with ``a_``."""

    value: str

    def is_animated(self) -> bool:
        """True if the hash names an animated image."""
        return self.value.startswith("a_")

    def _url(self, kind: str, owner_id: int, size: ImageSize | int | None) -> str:
        ext = "gif" if self.is_animated() else "webp"
        url = f"{_CDN_BASE}/{kind}/{owner_id}/{self.value}.{ext}"
        if size is None:
            return url
        return f"{url}?size={int(ImageSize(size))}"

    def user_avatar_url(self, user_id: int, size: ImageSize | int | None = None) -> str:
        """URL of a user avatar: ``.gif`` when animated, ``.webp`` otherwise."""
        return self._url("avatars", user_id, size)

    def guild_icon_url(self, guild_id: int, size: ImageSize | int | None = None) -> str:
        """URL of a guild icon."""
        return self._url("icons", guild_id, size)

    def guild_banner_url(self, guild_id: int, size: ImageSize | int | None = None) -> str:
        """URL of a guild banner."""
        return self._url("banners", guild_id, size)

    def __str__(self) -> str:
        return self.value
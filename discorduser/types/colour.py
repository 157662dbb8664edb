"""Colour value for Discord embeds and roles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Colour:
    """A 24-bit RGB colour packed into an unsigned 32-bit integer."""

    value: int = 0

    BLURPLE: ClassVar[Colour]
    GREEN: ClassVar[Colour]
    YELLOW: ClassVar[Colour]
    FUCHSIA: ClassVar[Colour]
    RED: ClassVar[Colour]
    WHITE: ClassVar[Colour]
    DARK_GREY: ClassVar[Colour]
    LIGHT_GREY: ClassVar[Colour]
    BLACK: ClassVar[Colour]
    DARK_TEAL: ClassVar[Colour]
    TEAL: ClassVar[Colour]
    DARK_GREEN: ClassVar[Colour]
    DARK_BLUE: ClassVar[Colour]
    PURPLE: ClassVar[Colour]
    DARK_PURPLE: ClassVar[Colour]
    MAGENTA: ClassVar[Colour]
    DARK_MAGENTA: ClassVar[Colour]
    GOLD: ClassVar[Colour]
    DARK_GOLD: ClassVar[Colour]
    ORANGE: ClassVar[Colour]
    DARK_ORANGE: ClassVar[Colour]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(f"colour value out of range: {self.value}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Colour:
        """Build a colour from its red, green and blue components."""
        for component in (r, g, b):
            if not 0 <= component <= 0xFF:
                raise ValueError(f"colour component out of range: {component}")
        return cls((r << 16) | (g << 8) | b)

    def r(self) -> int:
        """Red component (0-255)."""
        return (self.value >> 16) & 0xFF

    def g(self) -> int:
        """Green component (0-255)."""
        return (self.value >> 8) & 0xFF

    def b(self) -> int:
        """Blue component (0-255)."""
        return self.value & 0xFF

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"#{self.value:06X}"


Colour.BLURPLE = Colour(0x5865F2)
Colour.GREEN = Colour(0x57F287)
Colour.YELLOW = Colour(0xFEE75C)
Colour.FUCHSIA = Colour(0xEB459E)
Colour.RED = Colour(0xED4245)
Colour.WHITE = Colour(0xFFFFFF)
Colour.DARK_GREY = Colour(0x2C2F33)
Colour.LIGHT_GREY = Colour(0x99AAB5)
Colour.BLACK = Colour(0x000000)
Colour.DARK_TEAL = Colour(0x1ABC9C)
Colour.TEAL = Colour(0x11806A)
Colour.DARK_GREEN = Colour(0x1F8B4C)
Colour.DARK_BLUE = Colour(0x206694)
Colour.PURPLE = Colour(0x9B59B6)
Colour.DARK_PURPLE = Colour(0x71368A)
Colour.MAGENTA = Colour(0xE91E63)
Colour.DARK_MAGENTA = Colour(0xAD1457)
Colour.GOLD = Colour(0xF1C40F)
Colour.DARK_GOLD = Colour(0xC27C0E)
Colour.ORANGE = Colour(0xE67E22)
Colour.DARK_ORANGE = Colour(0xA84300)
"""RGBA colours: 8-bit channels, float channels and a palette of named colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mobagen import rng

_CHANNEL_MAX = 255
_PACKED_MAX = 0xFFFFFFFF

# Subscript order of Color32 channels; index 4 falls back to alpha.
_SUBSCRIPT_CHANNELS = ("a", "r", "g", "b", "a")


def _to_byte(value: float) -> int:
    """Truncate toward zero and keep the result inside a byte."""
    return min(_CHANNEL_MAX, max(0, int(value)))


def _lerp(start: float, end: float, t: float) -> float:
    if t == 1:
        return end
    return start + t * (end - start)


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class Color32:
    """A colour with one byte per channel; alpha 255 is fully opaque."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= _CHANNEL_MAX:
                raise ValueError(f"channel {name} must be in 0..255, got {value}")

    @classmethod
    def from_packed(cls, packed: int) -> Color32:
        """Decode ``0xAABBGGRR``."""
        if not 0 <= packed <= _PACKED_MAX:
            raise ValueError(f"packed colour must fit in 32 bits, got {packed}")
        return cls(
            r=packed & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=(packed >> 16) & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    @classmethod
    def from_colorf(cls, color: Colorf) -> Color32:
        """Scale float channels to bytes, truncating the fraction."""
        return cls(
            r=_to_byte(color.r * _CHANNEL_MAX),
            g=_to_byte(color.g * _CHANNEL_MAX),
            b=_to_byte(color.b * _CHANNEL_MAX),
            a=_to_byte(color.a * _CHANNEL_MAX),
        )

    def packed(self) -> int:
        """Encode as ``0xAABBGGRR``."""
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    def __getitem__(self, index: int) -> int:
        """Channels by index: 0 alpha, 1 red, 2 green, 3 blue."""
        if not 0 <= index < len(_SUBSCRIPT_CHANNELS):
            raise IndexError("Out of color range")
        return getattr(self, _SUBSCRIPT_CHANNELS[index])

    @classmethod
    def random_color(cls, min_value: int = 0, max_value: int = _CHANNEL_MAX) -> Color32:
        """An opaque colour with each channel drawn from ``[min_value, max_value]``."""
        return cls(
            rng.range_int(min_value, max_value),
            rng.range_int(min_value, max_value),
            rng.range_int(min_value, max_value),
            _CHANNEL_MAX,
        )

    @classmethod
    def lerp(cls, c1: Color32, c2: Color32, t: float) -> Color32:
        """Opaque linear blend of the RGB channels of ``c1`` and ``c2``."""
        return cls(
            _to_byte(_lerp(c1.r, c2.r, t)),
            _to_byte(_lerp(c1.g, c2.g, t)),
            _to_byte(_lerp(c1.b, c2.b, t)),
        )

    def light(self) -> Color32:
        """Opaque colour halfway between this one and white."""
        return Color32(
            (self.r + _CHANNEL_MAX) // 2,
            (self.g + _CHANNEL_MAX) // 2,
            (self.b + _CHANNEL_MAX) // 2,
        )

    def dark(self) -> Color32:
        """Opaque colour halfway between this one and black."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)


@dataclass(frozen=True)
class Colorf:
    """A colour with float channels, nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> Colorf:
        """Decode a packed 32-bit value into float channels."""
        if not 0 <= packed <= _PACKED_MAX:
            raise ValueError(f"packed colour must fit in 32 bits, got {packed}")
        alpha = (packed >> 24) & 0xFF
        upper = (packed >> 16) & 0xFF
        middle = (packed >> 8) & 0xFF
        return cls(
            r=upper / _CHANNEL_MAX,
            g=middle / _CHANNEL_MAX,
            b=middle / _CHANNEL_MAX,
            a=alpha / _CHANNEL_MAX,
        )

    @classmethod
    def from_color32(cls, color: Color32) -> Colorf:
        return cls(
            r=color.r / _CHANNEL_MAX,
            g=color.g / _CHANNEL_MAX,
            b=color.b / _CHANNEL_MAX,
            a=color.a / _CHANNEL_MAX,
        )

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float, hdr: bool = True) -> Colorf:
        """Convert hue, saturation and value to an opaque RGB colour.

        Without ``hdr`` the channels are clamped to ``[0, 1]``.
        """
        if s == 0.0:
            return cls(v, v, v)
        if v == 0.0:
            return cls(0.0, 0.0, 0.0)

        f = h * 6.0
        sector = math.floor(f)
        fraction = f - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * fraction)
        t = v * (1.0 - s * (1.0 - fraction))
        sectors = {
            -1: (v, p, q),
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
            6: (v, t, p),
        }
        try:
            r, g, b = sectors[sector]
        except KeyError:
            raise ValueError(f"hue {h} is out of range") from None
        if not hdr:
            r, g, b = _clamp01(r), _clamp01(g), _clamp01(b)
        return cls(r, g, b)


class Color:
    """Named colours."""

    TRANSPARENT_BLACK = Color32.from_packed(0)
    TRANSPARENT = Color32.from_packed(0)
    ALICE_BLUE = Color32.from_packed(0xFFFFF8F0)
    ANTIQUE_WHITE = Color32.from_packed(0xFFD7EBFA)
    AQUA = Color32.from_packed(0xFFFFFF00)
    AQUAMARINE = Color32.from_packed(0xFFD4FF7F)
    AZURE = Color32.from_packed(0xFFFFFFF0)
    BEIGE = Color32.from_packed(0xFFDCF5F5)
    BISQUE = Color32.from_packed(0xFFC4E4FF)
    BLACK = Color32.from_packed(0xFF000000)
    BLANCHED_ALMOND = Color32.from_packed(0xFFCDEBFF)
    BLUE = Color32.from_packed(0xFFFF0000)
    BLUE_VIOLET = Color32.from_packed(0xFFE22B8A)
    BROWN = Color32.from_packed(0xFF2A2AA5)
    BURLY_WOOD = Color32.from_packed(0xFF87B8DE)
    CADET_BLUE = Color32.from_packed(0xFFA09E5F)
    CHARTREUSE = Color32.from_packed(0xFF00FF7F)
    CHOCOLATE = Color32.from_packed(0xFF1E69D2)
    CORAL = Color32.from_packed(0xFF507FFF)
    CORNFLOWER_BLUE = Color32.from_packed(0xFFED9564)
    CORNSILK = Color32.from_packed(0xFFDCF8FF)
    CRIMSON = Color32.from_packed(0xFF3C14DC)
    CYAN = Color32.from_packed(0xFFFFFF00)
    DARK_BLUE = Color32.from_packed(0xFF8B0000)
    DARK_CYAN = Color32.from_packed(0xFF8B8B00)
    DARK_GOLDENROD = Color32.from_packed(0xFF0B86B8)
    DARK_GRAY = Color32.from_packed(0xFFA9A9A9)
    DARK_GREEN = Color32.from_packed(0xFF006400)
    DARK_KHAKI = Color32.from_packed(0xFF6BB7BD)
    DARK_MAGENTA = Color32.from_packed(0xFF8B008B)
    DARK_OLIVE_GREEN = Color32.from_packed(0xFF2F6B55)
    DARK_ORANGE = Color32.from_packed(0xFF008CFF)
    DARK_ORCHID = Color32.from_packed(0xFFCC3299)
    DARK_RED = Color32.from_packed(0xFF00008B)
    DARK_SALMON = Color32.from_packed(0xFF7A96E9)
    DARK_SEA_GREEN = Color32.from_packed(0xFF8BBC8F)
    DARK_SLATE_BLUE = Color32.from_packed(0xFF8B3D48)
    DARK_SLATE_GRAY = Color32.from_packed(0xFF4F4F2F)
    DARK_TURQUOISE = Color32.from_packed(0xFFD1CE00)
    DARK_VIOLET = Color32.from_packed(0xFFD30094)
    DEEP_PINK = Color32.from_packed(0xFF9314FF)
    DEEP_SKY_BLUE = Color32.from_packed(0xFFFFBF00)
    DIM_GRAY = Color32.from_packed(0xFF696969)
    DODGER_BLUE = Color32.from_packed(0xFFFF901E)
    FIREBRICK = Color32.from_packed(0xFF2222B2)
    FLORAL_WHITE = Color32.from_packed(0xFFF0FAFF)
    FOREST_GREEN = Color32.from_packed(0xFF228B22)
    FUCHSIA = Color32.from_packed(0xFFFF00FF)
    GAINSBORO = Color32.from_packed(0xFFDCDCDC)
    GHOST_WHITE = Color32.from_packed(0xFFFFF8F8)
    GOLD = Color32.from_packed(0xFF00D7FF)
    GOLDENROD = Color32.from_packed(0xFF20A5DA)
    GRAY = Color32.from_packed(0xFF808080)
    GREEN = Color32.from_packed(0xFF008000)
    GREEN_YELLOW = Color32.from_packed(0xFF2FFFAD)
    HONEYDEW = Color32.from_packed(0xFFF0FFF0)
    HOT_PINK = Color32.from_packed(0xFFB469FF)
    INDIAN_RED = Color32.from_packed(0xFF5C5CCD)
    INDIGO = Color32.from_packed(0xFF82004B)
    IVORY = Color32.from_packed(0xFFF0FFFF)
    KHAKI = Color32.from_packed(0xFF8CE6F0)
    LAVENDER = Color32.from_packed(0xFFFAE6E6)
    LAVENDER_BLUSH = Color32.from_packed(0xFFF5F0FF)
    LAWN_GREEN = Color32.from_packed(0xFF00FC7C)
    LEMON_CHIFFON = Color32.from_packed(0xFFCDFAFF)
    LIGHT_BLUE = Color32.from_packed(0xFFE6D8AD)
    LIGHT_CORAL = Color32.from_packed(0xFF8080F0)
    LIGHT_CYAN = Color32.from_packed(0xFFFFFFE0)
    LIGHT_GOLDENROD_YELLOW = Color32.from_packed(0xFFD2FAFA)
    LIGHT_GRAY = Color32.from_packed(0xFFD3D3D3)
    LIGHT_GREEN = Color32.from_packed(0xFF90EE90)
    LIGHT_PINK = Color32.from_packed(0xFFC1B6FF)
    LIGHT_SALMON = Color32.from_packed(0xFF7AA0FF)
    LIGHT_SEA_GREEN = Color32.from_packed(0xFFAAB220)
    LIGHT_SKY_BLUE = Color32.from_packed(0xFFFACE87)
    LIGHT_SLATE_GRAY = Color32.from_packed(0xFF998877)
    LIGHT_STEEL_BLUE = Color32.from_packed(0xFFDEC4B0)
    LIGHT_YELLOW = Color32.from_packed(0xFFE0FFFF)
    LIME = Color32.from_packed(0xFF00FF00)
    LIME_GREEN = Color32.from_packed(0xFF32CD32)
    LINEN = Color32.from_packed(0xFFE6F0FA)
    MAGENTA = Color32.from_packed(0xFFFF00FF)
    MAROON = Color32.from_packed(0xFF000080)
    MEDIUM_AQUAMARINE = Color32.from_packed(0xFFAACD66)
    MEDIUM_BLUE = Color32.from_packed(0xFFCD0000)
    MEDIUM_ORCHID = Color32.from_packed(0xFFD355BA)
    MEDIUM_PURPLE = Color32.from_packed(0xFFDB7093)
    MEDIUM_SEA_GREEN = Color32.from_packed(0xFF71B33C)
    MEDIUM_SLATE_BLUE = Color32.from_packed(0xFFEE687B)
    MEDIUM_SPRING_GREEN = Color32.from_packed(0xFF9AFA00)
    MEDIUM_TURQUOISE = Color32.from_packed(0xFFCCD148)
    MEDIUM_VIOLET_RED = Color32.from_packed(0xFF8515C7)
    MIDNIGHT_BLUE = Color32.from_packed(0xFF701919)
    MINT_CREAM = Color32.from_packed(0xFFFAFFF5)
    MISTY_ROSE = Color32.from_packed(0xFFE1E4FF)
    MOCCASIN = Color32.from_packed(0xFFB5E4FF)
    NAVAJO_WHITE = Color32.from_packed(0xFFADDEFF)
    NAVY = Color32.from_packed(0xFF800000)
    OLD_LACE = Color32.from_packed(0xFFE6F5FD)
    OLIVE = Color32.from_packed(0xFF008080)
    OLIVE_DRAB = Color32.from_packed(0xFF238E6B)
    ORANGE = Color32.from_packed(0xFF00A5FF)
    ORANGE_RED = Color32.from_packed(0xFF0045FF)
    ORCHID = Color32.from_packed(0xFFD670DA)
    PALE_GOLDENROD = Color32.from_packed(0xFFAAE8EE)
    PALE_GREEN = Color32.from_packed(0xFF98FB98)
    PALE_TURQUOISE = Color32.from_packed(0xFFEEEEAF)
    PALE_VIOLET_RED = Color32.from_packed(0xFF9370DB)
    PAPAYA_WHIP = Color32.from_packed(0xFFD5EFFF)
    PEACH_PUFF = Color32.from_packed(0xFFB9DAFF)
    PERU = Color32.from_packed(0xFF3F85CD)
    PINK = Color32.from_packed(0xFFCBC0FF)
    PLUM = Color32.from_packed(0xFFDDA0DD)
    POWDER_BLUE = Color32.from_packed(0xFFE6E0B0)
    PURPLE = Color32.from_packed(0xFF800080)
    RED = Color32.from_packed(0xFF0000FF)
    ROSY_BROWN = Color32.from_packed(0xFF8F8FBC)
    ROYAL_BLUE = Color32.from_packed(0xFFE16941)
    SADDLE_BROWN = Color32.from_packed(0xFF13458B)
    SALMON = Color32.from_packed(0xFF7280FA)
    SANDY_BROWN = Color32.from_packed(0xFF60A4F4)
    SEA_GREEN = Color32.from_packed(0xFF578B2E)
    SEA_SHELL = Color32.from_packed(0xFFEEF5FF)
    SIENNA = Color32.from_packed(0xFF2D52A0)
    SILVER = Color32.from_packed(0xFFC0C0C0)
    SKY_BLUE = Color32.from_packed(0xFFEBCE87)
    SLATE_BLUE = Color32.from_packed(0xFFCD5A6A)
    SLATE_GRAY = Color32.from_packed(0xFF908070)
    SNOW = Color32.from_packed(0xFFFAFAFF)
    SPRING_GREEN = Color32.from_packed(0xFF7FFF00)
    STEEL_BLUE = Color32.from_packed(0xFFB48246)
    TAN = Color32.from_packed(0xFF8CB4D2)
    TEAL = Color32.from_packed(0xFF808000)
    THISTLE = Color32.from_packed(0xFFD8BFD8)
    TOMATO = Color32.from_packed(0xFF4763FF)
    TURQUOISE = Color32.from_packed(0xFFD0E040)
    VIOLET = Color32.from_packed(0xFFEE82EE)
    WHEAT = Color32.from_packed(0xFFB3DEF5)
    WHITE = Color32.from_packed(0xFFFFFFFF)
    WHITE_SMOKE = Color32.from_packed(0xFFF5F5F5)
    YELLOW = Color32.from_packed(0xFF00FFFF)
    YELLOW_GREEN = Color32.from_packed(0xFF32CD9A)
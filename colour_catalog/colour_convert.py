# colour_catalog/colour_convert.py
from __future__ import annotations

"""
Colour conversions and validation (hex, RGB, HSL).

Exports:
  validate_hex(text)
  validate_rgb(r, g, b)
  normalise_hex(hex_str)
  hex_to_rgb(hex_str)
  rgb_to_hex(r, g, b)
  rgb_to_hsl(r, g, b)
  hex_to_hsl(hex_str)

HSL values are rounded to 2 decimals (half away from zero). Catalog
distances are computed from these rounded values, so the rounding is part
of the classification result and must not be changed.
"""

import math

from .constants import HEX_PATTERN, HSL_DECIMALS
from .core_types import HexStr, HslColor, RgbColor, round_half_up
from .errors import InvalidFormatError, OutOfRangeError


# Validation


def validate_hex(text: str) -> bool:
    """True if text is 6 hex digits with an optional leading '#'."""
    return isinstance(text, str) and HEX_PATTERN.fullmatch(text) is not None


def validate_rgb(r: int, g: int, b: int) -> bool:
    """True if every channel lies in 0..255."""
    return max(r, g, b) <= 255 and min(r, g, b) >= 0


def normalise_hex(hex_str: str) -> HexStr:
    """'#ff6347' -> 'FF6347'. Raises InvalidFormatError."""
    match = HEX_PATTERN.fullmatch(hex_str) if isinstance(hex_str, str) else None
    if match is None:
        raise InvalidFormatError(
            f"expected a 6 character hexadecimal string, {hex_str!r} given"
        )
    return match.group(1).upper()


# Hex <-> RGB


def hex_to_rgb(hex_str: str) -> RgbColor:
    """Parse 'rrggbb' or '#rrggbb' (case-insensitive) into an RgbColor."""
    s = normalise_hex(hex_str)
    return RgbColor(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> HexStr:
    """RGB channels to canonical 'RRGGBB'. Raises OutOfRangeError."""
    if not validate_rgb(r, g, b):
        raise OutOfRangeError(
            f"red, green and blue must be between 0 and 255, got {r}, {g} and {b}"
        )
    return f"{int(r):02X}{int(g):02X}{int(b):02X}"


# RGB -> HSL


def rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    """
    RGB (0..255) to HSL (degrees, percent, percent).

    The hue branch is picked by the first channel equal to max, checked in
    red, green, blue order.
    """
    if not validate_rgb(r, g, b):
        raise OutOfRangeError(
            f"red, green and blue must be between 0 and 255, got {r}, {g} and {b}"
        )

    rf = r / 255
    gf = g / 255
    bf = b / 255
    c_max = max(rf, gf, bf)
    c_min = min(rf, gf, bf)
    lightness = (c_max + c_min) / 2
    delta = c_max - c_min

    if delta == 0:
        hue = saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))
        if c_max == rf:
            hue = 60 * math.fmod((gf - bf) / delta, 6)
            if bf > gf:
                hue += 360
        elif c_max == gf:
            hue = 60 * ((bf - rf) / delta + 2)
        else:
            hue = 60 * ((rf - gf) / delta + 4)

    return HslColor(
        h=round_half_up(hue, HSL_DECIMALS),
        s=round_half_up(saturation * 100, HSL_DECIMALS),
        l=round_half_up(lightness * 100, HSL_DECIMALS),
    )


def hex_to_hsl(hex_str: str) -> HslColor:
    """hex_to_rgb followed by rgb_to_hsl."""
    rgb = hex_to_rgb(hex_str)
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b)


__all__ = [
    "validate_hex",
    "validate_rgb",
    "normalise_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hex_to_hsl",
]

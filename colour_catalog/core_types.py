# colour_catalog/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import OutOfRangeError

# Basic aliases

RGBTuple = Tuple[int, int, int]
HSLTuple = Tuple[float, float, float]
HexStr = str  # canonical form: 6 uppercase hex digits, no '#'
EntryId = Union[int, str]  # shade / base identifiers

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8Mask = NDArray[np.uint8]  # (H, W)
Distances = NDArray[np.float64]  # (N,)

HexCount = Tuple[HexStr, int]  # (hex, pixel count)

# Value objects


@dataclass(frozen=True)
class RgbColor:
    """RGB triple with every channel in 0..255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        if not all(0 <= int(c) <= 255 for c in (self.r, self.g, self.b)):
            raise OutOfRangeError(
                f"red, green and blue must be between 0 and 255, "
                f"got {self.r}, {self.g} and {self.b}"
            )

    def as_tuple(self) -> RGBTuple:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HslColor:
    """Hue in degrees [0, 360), saturation and lightness in percent, 2 decimals."""

    h: float
    s: float
    l: float  # noqa: E741

    def as_tuple(self) -> HSLTuple:
        return (self.h, self.s, self.l)


@dataclass(frozen=True)
class ShadeRef:
    id: EntryId
    hex: HexStr


@dataclass(frozen=True)
class BaseRef:
    id: EntryId
    hex: HexStr
    title: str


@dataclass(frozen=True)
class NamedColor:
    """Catalog entry: a reference colour with its shade group and base family."""

    hex: HexStr
    rgb: RgbColor
    hsl: HslColor
    title: str
    shade: ShadeRef
    base: BaseRef

    def to_dict(self) -> Dict[str, Any]:
        """Flat record: r, g, b, h, s, l, hex, title, shade{id,hex}, base{id,hex,title}."""
        return {
            "r": self.rgb.r,
            "g": self.rgb.g,
            "b": self.rgb.b,
            "h": self.hsl.h,
            "s": self.hsl.s,
            "l": self.hsl.l,
            "hex": self.hex,
            "title": self.title,
            "shade": {"id": self.shade.id, "hex": self.shade.hex},
            "base": {
                "id": self.base.id,
                "hex": self.base.hex,
                "title": self.base.title,
            },
        }


MaybeNamed = Optional[NamedColor]
NamedList = List[NamedColor]

# Small helpers


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half away from zero (0.125 -> 0.13, -2.5 -> -3.0).

    The value is first cut to 15 significant digits, so a float that lands a
    hair below a half (40.62499999999999) still rounds up to 40.63.
    """
    exact = Decimal(f"{value:.15g}")
    step = Decimal(1).scaleb(-ndigits)
    rounded = float(exact.quantize(step, rounding=ROUND_HALF_UP))
    return rounded if rounded else 0.0


__all__ = [
    # aliases / types
    "RGBTuple",
    "HSLTuple",
    "HexStr",
    "EntryId",
    "U8Image",
    "U8Mask",
    "Distances",
    "HexCount",
    "MaybeNamed",
    "NamedList",
    # value objects
    "RgbColor",
    "HslColor",
    "ShadeRef",
    "BaseRef",
    "NamedColor",
    # helpers
    "round_half_up",
]

# colour_catalog/image_colours.py
from __future__ import annotations

"""
Pixel colour analysis for decoded images.

Exports:
- load_image_rgba(path) -> (rgb, alpha)
- binarise_alpha(alpha, threshold=127)
- quantise_channels(rgb)
- hex_colour_counts(rgb, alpha=None, *, limit=None, round_colours=True)
- base_colours(rgb, catalog, alpha=None, *, limit=10)
- greyscale_percentage(rgb, alpha=None)

Notes:
- load_image_rgba binarises alpha: a pixel is visible when its alpha is
  >= 127 and the returned mask holds only 0 or 255.
- The counting helpers take any uint8 mask and count a pixel as visible when
  its mask value is > 0. Without a mask every pixel is visible.
- Counts are ordered most-used first; equal counts keep the order in which
  the colour first appears scanning rows top to bottom.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageOps

from .catalog import ColourCatalog
from .constants import (
    DEFAULT_BASE_LIMIT,
    QUANTISE_CEILING,
    QUANTISE_OFFSET,
    QUANTISE_STEP,
)
from .core_types import HexCount, NamedList, U8Image, U8Mask, round_half_up


# Image I/O


def binarise_alpha(alpha: np.ndarray, threshold: int = 127) -> U8Mask:
    a = np.asarray(alpha, dtype=np.uint8)
    out = np.zeros_like(a, dtype=np.uint8)
    out[a >= np.uint8(threshold)] = 255
    return out


def load_image_rgba(path: Path) -> Tuple[U8Image, U8Mask]:
    """Load with Pillow (EXIF orientation applied) and split into rgb / binary alpha."""
    with Image.open(path) as im0:
        im = ImageOps.exif_transpose(im0).convert("RGBA")
    arr = np.array(im, dtype=np.uint8)
    return arr[..., :3], binarise_alpha(arr[..., 3])


# Pixel helpers


def _visible_pixels(rgb: U8Image, alpha: Optional[U8Mask]) -> U8Image:
    """(N,3) uint8 rows for visible pixels in row-major order."""
    if rgb.ndim != 3 or rgb.shape[-1] < 3:
        raise TypeError("expected (H,W,3) image")
    flat = rgb[..., :3].reshape(-1, 3)
    if alpha is None:
        return flat
    visible = np.asarray(alpha).reshape(-1) > 0
    return flat[visible]


def quantise_channels(rgb: np.ndarray) -> U8Image:
    """
    Snap every channel to a multiple of 32 (nearest, rounding up from 17),
    folding the 256 bucket back to 240.
    """
    q = ((rgb.astype(np.int32) + QUANTISE_OFFSET) // QUANTISE_STEP) * QUANTISE_STEP
    q[q >= 256] = QUANTISE_CEILING
    return q.astype(np.uint8)


def hex_colour_counts(
    rgb: U8Image,
    alpha: Optional[U8Mask] = None,
    *,
    limit: Optional[int] = None,
    round_colours: bool = True,
) -> List[HexCount]:
    """
    Count pixel colours as (hex, count), most used first.

    round_colours quantises channels first so near-identical shades group
    together. limit (if > 0) keeps only the top entries.
    """
    pixels = _visible_pixels(rgb, alpha)
    if pixels.shape[0] == 0:
        return []
    if round_colours:
        pixels = quantise_channels(pixels)

    p32 = pixels.astype(np.uint32)
    packed = (p32[:, 0] << 16) | (p32[:, 1] << 8) | p32[:, 2]
    uniques, first_seen, counts = np.unique(
        packed, return_index=True, return_counts=True
    )
    order = np.lexsort((first_seen, -counts.astype(np.int64)))
    if limit:
        order = order[:limit]

    return [(f"{int(uniques[i]):06X}", int(counts[i])) for i in order]


def base_colours(
    rgb: U8Image,
    catalog: ColourCatalog,
    alpha: Optional[U8Mask] = None,
    *,
    limit: int = DEFAULT_BASE_LIMIT,
) -> NamedList:
    """Named catalog colours for the `limit` most used (quantised) pixel colours."""
    out: NamedList = []
    for hex_code, _count in hex_colour_counts(rgb, alpha, limit=limit):
        named = catalog.classify(hex_code)
        if named is not None:
            out.append(named)
    return out


def greyscale_percentage(rgb: U8Image, alpha: Optional[U8Mask] = None) -> int:
    """Share of visible pixels with r == g == b, as an integer percentage."""
    pixels = _visible_pixels(rgb, alpha)
    total = pixels.shape[0]
    if total == 0:
        return 0
    grey = (pixels[:, 0] == pixels[:, 1]) & (pixels[:, 1] == pixels[:, 2])
    return int(round_half_up(int(np.count_nonzero(grey)) / total * 100))


__all__ = [
    "binarise_alpha",
    "load_image_rgba",
    "quantise_channels",
    "hex_colour_counts",
    "base_colours",
    "greyscale_percentage",
]

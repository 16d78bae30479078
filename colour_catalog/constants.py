# colour_catalog/constants.py
"""
Tunables used across the project.

- Hex parsing pattern
- Nearest-colour distance weighting
- Image quantisation (pixel colours are snapped to a coarse grid before counting)
- Default result limits
"""
from __future__ import annotations

import re

# =========================
# Hex colours
# =========================
HEX_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{6})$")

# =========================
# Nearest-colour distance
# =========================
# combined = distance_rgb + HSL_DISTANCE_WEIGHT * distance_hsl
HSL_DISTANCE_WEIGHT: float = 2.0

# Decimal places kept for hue / saturation / lightness.
HSL_DECIMALS: int = 2

# =========================
# Image quantisation
# =========================
# channel -> ((channel + QUANTISE_OFFSET) // QUANTISE_STEP) * QUANTISE_STEP
QUANTISE_STEP: int = 32
QUANTISE_OFFSET: int = 15
# 256 is not a byte; the top bucket folds back to this value.
QUANTISE_CEILING: int = 240

# =========================
# Limits
# =========================
DEFAULT_BASE_LIMIT: int = 10

__all__ = [
    "HEX_PATTERN",
    "HSL_DISTANCE_WEIGHT",
    "HSL_DECIMALS",
    "QUANTISE_STEP",
    "QUANTISE_OFFSET",
    "QUANTISE_CEILING",
    "DEFAULT_BASE_LIMIT",
]

# colour_catalog/errors.py
from __future__ import annotations

"""
Exception types raised by colour conversion and catalog construction.

All of them are ValueErrors so callers that only care about "bad input"
can catch that.
"""


class ColourError(ValueError):
    """Base class for colour_catalog errors."""


class InvalidFormatError(ColourError):
    """Hex string is not '#rrggbb' / 'rrggbb'."""


class OutOfRangeError(ColourError):
    """RGB channel outside 0..255."""


class MalformedCatalogEntryError(ColourError):
    """Dataset entry whose hex, shade or base reference cannot be resolved."""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"malformed catalog entry {entry}: {reason}")
        self.entry = entry
        self.reason = reason


__all__ = [
    "ColourError",
    "InvalidFormatError",
    "OutOfRangeError",
    "MalformedCatalogEntryError",
]

# colour_catalog/catalog.py
from __future__ import annotations

"""
Named-colour catalog and nearest-colour lookup.

A ColourCatalog is built once from ColourTables (colour -> shade -> base) and
is read-only afterwards. Construction of the index happens on first use, or
explicitly via build_index(), under a lock so concurrent first callers build
it exactly once.

Nearest colour:
  distance_rgb = dr^2 + dg^2 + db^2
  distance_hsl = dh^2 + ds^2 + dl^2
  combined     = distance_rgb + 2 * distance_hsl
The minimum wins; ties go to the entry that comes first in dataset order.
"""

import threading
import time
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

import numpy as np

from .colour_convert import hex_to_rgb, normalise_hex, rgb_to_hex, rgb_to_hsl
from .constants import HSL_DISTANCE_WEIGHT
from .core_types import (
    BaseRef,
    Distances,
    HexStr,
    HslColor,
    MaybeNamed,
    NamedColor,
    RgbColor,
    ShadeRef,
)
from .errors import ColourError, MalformedCatalogEntryError
from .palette_data import DEFAULT_TABLES, ColourTables
from .utils import debug_log, format_seconds_compact, print_config_line


@dataclass(frozen=True)
class _Index:
    """Built state, published in one assignment."""

    entries: Dict[HexStr, NamedColor]
    order: List[NamedColor]
    rgb: np.ndarray  # float64 [N,3]
    hsl: np.ndarray  # float64 [N,3]


class ColourCatalog:
    """Nearest named colour lookup over a fixed reference table."""

    def __init__(self, tables: ColourTables = DEFAULT_TABLES, *, debug: bool = False):
        self.tables = tables
        self.debug = debug
        self._lock = threading.Lock()
        self._index: Optional[_Index] = None

    # Construction

    @property
    def is_built(self) -> bool:
        return self._index is not None

    def build_index(self) -> _Index:
        """Resolve every dataset entry into a NamedColor. No-op once built."""
        index = self._index
        if index is not None:
            return index
        with self._lock:
            if self._index is not None:
                return self._index
            t0 = time.perf_counter()
            entries = self._resolve_entries()
            order = list(entries.values())
            rgb = np.array(
                [c.rgb.as_tuple() for c in order], dtype=np.float64
            ).reshape(-1, 3)
            hsl = np.array(
                [c.hsl.as_tuple() for c in order], dtype=np.float64
            ).reshape(-1, 3)
            index = _Index(entries=entries, order=order, rgb=rgb, hsl=hsl)
            self._index = index
            if self.debug:
                print_config_line(
                    "catalog",
                    [
                        ("Colours", len(order)),
                        ("Shades", len(self.tables.shades)),
                        ("Bases", len(self.tables.bases)),
                        ("Build", format_seconds_compact(time.perf_counter() - t0)),
                    ],
                    debug=True,
                )
        return index

    def _resolve_entries(self) -> Dict[HexStr, NamedColor]:
        shades = self.tables.shades
        bases = self.tables.bases
        entries: Dict[HexStr, NamedColor] = {}

        for raw_hex, (shade_id, title) in self.tables.colours.items():
            try:
                key = normalise_hex(raw_hex)
                rgb = hex_to_rgb(key)
            except ColourError as exc:
                raise MalformedCatalogEntryError(f"colour {raw_hex!r}", str(exc)) from exc
            if key in entries:
                raise MalformedCatalogEntryError(f"colour {raw_hex!r}", "duplicate hex")

            if shade_id not in shades:
                raise MalformedCatalogEntryError(
                    f"colour {raw_hex!r}", f"unknown shade {shade_id!r}"
                )
            shade_hex, base_id = shades[shade_id]
            if base_id not in bases:
                raise MalformedCatalogEntryError(
                    f"shade {shade_id!r}", f"unknown base {base_id!r}"
                )
            base_hex, base_title = bases[base_id]
            try:
                shade_hex = normalise_hex(shade_hex)
            except ColourError as exc:
                raise MalformedCatalogEntryError(f"shade {shade_id!r}", str(exc)) from exc
            try:
                base_hex = normalise_hex(base_hex)
            except ColourError as exc:
                raise MalformedCatalogEntryError(f"base {base_id!r}", str(exc)) from exc

            entries[key] = NamedColor(
                hex=key,
                rgb=rgb,
                hsl=rgb_to_hsl(rgb.r, rgb.g, rgb.b),
                title=title,
                shade=ShadeRef(id=shade_id, hex=shade_hex),
                base=BaseRef(id=base_id, hex=base_hex, title=base_title),
            )
        return entries

    def _built(self) -> _Index:
        return self.build_index()

    # Read access

    def __len__(self) -> int:
        return len(self._built().order)

    def __iter__(self) -> Iterator[NamedColor]:
        return iter(self._built().order)

    def __contains__(self, hex_str: object) -> bool:
        if not isinstance(hex_str, str):
            return False
        try:
            key = normalise_hex(hex_str)
        except ColourError:
            return False
        return key in self._built().entries

    def get(self, hex_str: str) -> MaybeNamed:
        """Exact catalog entry for hex_str, or None."""
        return self._built().entries.get(normalise_hex(hex_str))

    # Nearest colour

    def _distances_to(self, rgb: RgbColor, hsl: HslColor) -> Distances:
        index = self._built()
        d_rgb_cols = np.array(rgb.as_tuple(), dtype=np.float64) - index.rgb
        d_hsl_cols = np.array(hsl.as_tuple(), dtype=np.float64) - index.hsl
        d_rgb_sq = d_rgb_cols * d_rgb_cols
        d_hsl_sq = d_hsl_cols * d_hsl_cols
        distance_rgb = d_rgb_sq[:, 0] + d_rgb_sq[:, 1] + d_rgb_sq[:, 2]
        distance_hsl = d_hsl_sq[:, 0] + d_hsl_sq[:, 1] + d_hsl_sq[:, 2]
        return distance_rgb + distance_hsl * HSL_DISTANCE_WEIGHT

    def _nearest(self, rgb: RgbColor) -> MaybeNamed:
        hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
        index = self._built()
        if not index.order:
            return None
        combined = self._distances_to(rgb, hsl)
        best = int(np.argmin(combined))  # first minimum in dataset order
        match = index.order[best]
        if self.debug:
            debug_log(
                f"{rgb_to_hex(*rgb.as_tuple())} -> {match.hex} {match.title} "
                f"(distance {float(combined[best]):.2f})"
            )
        return match

    def distances(self, hex_str: str) -> Distances:
        """Combined distance from hex_str to every entry, in dataset order."""
        rgb = hex_to_rgb(hex_str)
        return self._distances_to(rgb, rgb_to_hsl(rgb.r, rgb.g, rgb.b))

    def classify(self, hex_str: str) -> MaybeNamed:
        """
        Nearest named colour for hex_str.

        Raises InvalidFormatError for a malformed hex. Returns None only when
        the catalog holds no colours.
        """
        return self._nearest(hex_to_rgb(hex_str))

    def classify_rgb(self, r: int, g: int, b: int) -> MaybeNamed:
        """Nearest named colour for an RGB triple. Raises OutOfRangeError."""
        return self._nearest(RgbColor(r, g, b))

    def classify_many(self, hexes: Iterable[str]) -> List[MaybeNamed]:
        return [self.classify(hx) for hx in hexes]


__all__ = ["ColourCatalog"]

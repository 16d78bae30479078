# colour_catalog/palette_data.py
from __future__ import annotations

"""
Reference colour tables and loaders.

Three relational tables, colour -> shade -> base:

  COLOURS:      hex -> (shade_id, title)
  SHADES:       shade_id -> (hex, base_id)
  BASE_COLOURS: base_id -> (hex, title)

Exports:
  BASE_COLOURS, SHADES, COLOURS
  ColourTables (with .empty(), .from_json(path), .to_json(path))
  DEFAULT_TABLES
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .core_types import EntryId, HexStr
from .errors import MalformedCatalogEntryError


BASE_COLOURS: Dict[int, Tuple[HexStr, str]] = {
    0: ("000000", "Black"),
    1: ("808080", "Grey"),
    2: ("FFFFFF", "White"),
    3: ("FF0000", "Red"),
    4: ("FFA500", "Orange"),
    5: ("FFFF00", "Yellow"),
    6: ("008000", "Green"),
    7: ("0000FF", "Blue"),
    8: ("800080", "Purple"),
    9: ("FFC0CB", "Pink"),
    10: ("A52A2A", "Brown"),
}

SHADES: Dict[int, Tuple[HexStr, int]] = {
    0: ("000000", 0),  # black
    1: ("404040", 1),  # dark grey
    2: ("808080", 1),  # grey
    3: ("C0C0C0", 1),  # light grey
    4: ("FFFFFF", 2),  # white
    5: ("8B0000", 3),  # dark red
    6: ("FF0000", 3),  # red
    7: ("FA8072", 3),  # light red
    8: ("FFA500", 4),  # orange
    9: ("FF8C00", 4),  # dark orange
    10: ("FFFF00", 5),  # yellow
    11: ("FFFFE0", 5),  # light yellow
    12: ("FFD700", 5),  # gold
    13: ("006400", 6),  # dark green
    14: ("008000", 6),  # green
    15: ("90EE90", 6),  # light green
    16: ("808000", 6),  # olive
    17: ("008080", 7),  # teal
    18: ("00008B", 7),  # dark blue
    19: ("0000FF", 7),  # blue
    20: ("ADD8E6", 7),  # light blue
    21: ("EE82EE", 8),  # violet
    22: ("800080", 8),  # purple
    23: ("FFC0CB", 9),  # pink
    24: ("FF1493", 9),  # deep pink
    25: ("A52A2A", 10),  # brown
    26: ("D2B48C", 10),  # tan
    27: ("00FFFF", 7),  # cyan
}

COLOURS: Dict[HexStr, Tuple[int, str]] = {
    # Black / greys
    "000000": (0, "Black"),
    "2F4F4F": (1, "Dark Slate Grey"),
    "696969": (1, "Dim Grey"),
    "708090": (2, "Slate Grey"),
    "778899": (2, "Light Slate Grey"),
    "808080": (2, "Grey"),
    "A9A9A9": (2, "Dark Grey"),
    "C0C0C0": (3, "Silver"),
    "D3D3D3": (3, "Light Grey"),
    "DCDCDC": (3, "Gainsboro"),
    # Whites
    "FFFFFF": (4, "White"),
    "FFFAFA": (4, "Snow"),
    "F0FFF0": (4, "Honeydew"),
    "F5FFFA": (4, "Mint Cream"),
    "F0FFFF": (4, "Azure"),
    "F0F8FF": (4, "Alice Blue"),
    "F8F8FF": (4, "Ghost White"),
    "F5F5F5": (4, "White Smoke"),
    "FFF5EE": (4, "Seashell"),
    "F5F5DC": (4, "Beige"),
    "FDF5E6": (4, "Old Lace"),
    "FFFAF0": (4, "Floral White"),
    "FFFFF0": (4, "Ivory"),
    "FAEBD7": (4, "Antique White"),
    "FAF0E6": (4, "Linen"),
    "FFF0F5": (4, "Lavender Blush"),
    "FFE4E1": (4, "Misty Rose"),
    # Reds
    "800000": (5, "Maroon"),
    "8B0000": (5, "Dark Red"),
    "B22222": (5, "Firebrick"),
    "FF0000": (6, "Red"),
    "DC143C": (6, "Crimson"),
    "CD5C5C": (6, "Indian Red"),
    "F08080": (7, "Light Coral"),
    "E9967A": (7, "Dark Salmon"),
    "FA8072": (7, "Salmon"),
    "FFA07A": (7, "Light Salmon"),
    # Oranges
    "FFA500": (8, "Orange"),
    "FF8C00": (9, "Dark Orange"),
    "FF7F50": (9, "Coral"),
    "FF6347": (9, "Tomato"),
    "FF4500": (9, "Orange Red"),
    # Yellows
    "FFFF00": (10, "Yellow"),
    "FFFFE0": (11, "Light Yellow"),
    "FFFACD": (11, "Lemon Chiffon"),
    "FAFAD2": (11, "Light Goldenrod Yellow"),
    "FFEFD5": (11, "Papaya Whip"),
    "FFE4B5": (11, "Moccasin"),
    "FFDAB9": (11, "Peach Puff"),
    "EEE8AA": (11, "Pale Goldenrod"),
    "FFD700": (12, "Gold"),
    "F0E68C": (12, "Khaki"),
    "BDB76B": (12, "Dark Khaki"),
    "DAA520": (12, "Goldenrod"),
    # Greens
    "006400": (13, "Dark Green"),
    "008000": (14, "Green"),
    "00FF00": (14, "Lime"),
    "32CD32": (14, "Lime Green"),
    "228B22": (14, "Forest Green"),
    "2E8B57": (14, "Sea Green"),
    "3CB371": (14, "Medium Sea Green"),
    "90EE90": (15, "Light Green"),
    "98FB98": (15, "Pale Green"),
    "8FBC8F": (15, "Dark Sea Green"),
    "00FA9A": (15, "Medium Spring Green"),
    "00FF7F": (15, "Spring Green"),
    "7CFC00": (15, "Lawn Green"),
    "7FFF00": (15, "Chartreuse"),
    "ADFF2F": (15, "Green Yellow"),
    "808000": (16, "Olive"),
    "6B8E23": (16, "Olive Drab"),
    "556B2F": (16, "Dark Olive Green"),
    "9ACD32": (16, "Yellow Green"),
    # Teals / cyans
    "008080": (17, "Teal"),
    "008B8B": (17, "Dark Cyan"),
    "20B2AA": (17, "Light Sea Green"),
    "5F9EA0": (17, "Cadet Blue"),
    "66CDAA": (17, "Medium Aquamarine"),
    "00FFFF": (27, "Cyan"),
    "E0FFFF": (27, "Light Cyan"),
    "AFEEEE": (27, "Pale Turquoise"),
    "7FFFD4": (27, "Aquamarine"),
    "40E0D0": (27, "Turquoise"),
    "48D1CC": (27, "Medium Turquoise"),
    "00CED1": (27, "Dark Turquoise"),
    # Blues
    "000080": (18, "Navy"),
    "00008B": (18, "Dark Blue"),
    "191970": (18, "Midnight Blue"),
    "0000FF": (19, "Blue"),
    "0000CD": (19, "Medium Blue"),
    "4169E1": (19, "Royal Blue"),
    "4682B4": (19, "Steel Blue"),
    "6495ED": (19, "Cornflower Blue"),
    "1E90FF": (19, "Dodger Blue"),
    "00BFFF": (19, "Deep Sky Blue"),
    "87CEFA": (20, "Light Sky Blue"),
    "87CEEB": (20, "Sky Blue"),
    "ADD8E6": (20, "Light Blue"),
    "B0E0E6": (20, "Powder Blue"),
    "B0C4DE": (20, "Light Steel Blue"),
    # Purples
    "E6E6FA": (21, "Lavender"),
    "D8BFD8": (21, "Thistle"),
    "DDA0DD": (21, "Plum"),
    "DA70D6": (21, "Orchid"),
    "EE82EE": (21, "Violet"),
    "FF00FF": (21, "Magenta"),
    "800080": (22, "Purple"),
    "8B008B": (22, "Dark Magenta"),
    "9400D3": (22, "Dark Violet"),
    "9932CC": (22, "Dark Orchid"),
    "BA55D3": (22, "Medium Orchid"),
    "8A2BE2": (22, "Blue Violet"),
    "9370DB": (22, "Medium Purple"),
    "7B68EE": (22, "Medium Slate Blue"),
    "6A5ACD": (22, "Slate Blue"),
    "483D8B": (22, "Dark Slate Blue"),
    "663399": (22, "Rebecca Purple"),
    "4B0082": (22, "Indigo"),
    # Pinks
    "FFC0CB": (23, "Pink"),
    "FFB6C1": (23, "Light Pink"),
    "FF69B4": (24, "Hot Pink"),
    "FF1493": (24, "Deep Pink"),
    "DB7093": (24, "Pale Violet Red"),
    "C71585": (24, "Medium Violet Red"),
    # Browns
    "A52A2A": (25, "Brown"),
    "A0522D": (25, "Sienna"),
    "8B4513": (25, "Saddle Brown"),
    "D2691E": (25, "Chocolate"),
    "CD853F": (25, "Peru"),
    "B8860B": (25, "Dark Goldenrod"),
    "D2B48C": (26, "Tan"),
    "DEB887": (26, "Burlywood"),
    "F4A460": (26, "Sandy Brown"),
    "BC8F8F": (26, "Rosy Brown"),
    "F5DEB3": (26, "Wheat"),
    "FFDEAD": (26, "Navajo White"),
    "FFE4C4": (26, "Bisque"),
    "FFEBCD": (26, "Blanched Almond"),
    "FFF8DC": (26, "Cornsilk"),
}


@dataclass(frozen=True)
class ColourTables:
    """The three source tables a catalog is built from. Order is preserved."""

    colours: Mapping[HexStr, Tuple[EntryId, str]] = field(default_factory=dict)
    shades: Mapping[EntryId, Tuple[HexStr, EntryId]] = field(default_factory=dict)
    bases: Mapping[EntryId, Tuple[HexStr, str]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ColourTables":
        return cls({}, {}, {})

    @classmethod
    def from_json(cls, path: Path) -> "ColourTables":
        """
        Load tables from a JSON file shaped as:
          {"bases":   [{"id": 0, "hex": "000000", "title": "Black"}, ...],
           "shades":  [{"id": 0, "hex": "000000", "base": 0}, ...],
           "colours": [{"hex": "000000", "shade": 0, "title": "Black"}, ...]}
        References are resolved later, when the catalog is built.
        """
        try:
            with open(path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except UnicodeDecodeError as exc:
            raise MalformedCatalogEntryError(str(path), "not UTF-8 text") from exc
        if not isinstance(raw, dict):
            raise MalformedCatalogEntryError(str(path), "top level must be an object")
        return cls(
            colours=_table(raw, "colours", ("hex", "shade", "title"), refs=("shade",)),
            shades=_table(raw, "shades", ("id", "hex", "base"), refs=("base",)),
            bases=_table(raw, "bases", ("id", "hex", "title")),
        )

    def to_json(self, path: Path) -> Path:
        """Write the tables in the shape read by from_json."""
        payload = {
            "bases": [
                {"id": bid, "hex": hx, "title": title}
                for bid, (hx, title) in self.bases.items()
            ],
            "shades": [
                {"id": sid, "hex": hx, "base": bid}
                for sid, (hx, bid) in self.shades.items()
            ],
            "colours": [
                {"hex": hx, "shade": sid, "title": title}
                for hx, (sid, title) in self.colours.items()
            ],
        }
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)
        return path


def _records(
    raw: Dict[str, Any], table: str, keys: Tuple[str, ...]
) -> List[Dict[str, Any]]:
    rows = raw.get(table, [])
    if not isinstance(rows, list):
        raise MalformedCatalogEntryError(table, "expected a list of records")
    for i, row in enumerate(rows):
        missing = [k for k in keys if not isinstance(row, dict) or k not in row]
        if missing:
            raise MalformedCatalogEntryError(
                f"{table}[{i}]", f"missing {', '.join(missing)}"
            )
    return rows


def _table(
    raw: Dict[str, Any],
    table: str,
    keys: Tuple[str, ...],
    refs: Tuple[str, ...] = (),
) -> Dict[Any, Tuple[Any, ...]]:
    """First key is the mapping key, the remaining keys form the value."""
    out: Dict[Any, Tuple[Any, ...]] = {}
    for i, rec in enumerate(_records(raw, table, keys)):
        entry = f"{table}[{i}]"
        for name in (keys[0],) + refs:
            try:
                hash(rec[name])
            except TypeError as exc:
                raise MalformedCatalogEntryError(
                    entry, f"{name} must be a string or number"
                ) from exc
        key = rec[keys[0]]
        if key in out:
            raise MalformedCatalogEntryError(entry, f"duplicate {keys[0]} {key!r}")
        out[key] = tuple(rec[k] for k in keys[1:])
    return out


DEFAULT_TABLES = ColourTables(colours=COLOURS, shades=SHADES, bases=BASE_COLOURS)


__all__ = ["BASE_COLOURS", "SHADES", "COLOURS", "ColourTables", "DEFAULT_TABLES"]

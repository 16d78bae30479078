# colour_catalog/__init__.py
"""
colour_catalog package.

Purpose:
  Name arbitrary colours after the nearest entry of a reference catalog
  (title, shade group and base family). See name_colours.py for CLI.

Public API:
  ColourCatalog  : nearest named colour lookup (classify, classify_rgb, ...).
  colour_convert : hex / RGB / HSL conversions and validators.
  core_types     : value objects (RgbColor, HslColor, NamedColor, ...).
  palette_data   : reference tables, ColourTables, DEFAULT_TABLES.
  image_colours  : pixel colour counting and naming for Pillow images.
  errors         : InvalidFormatError, OutOfRangeError, MalformedCatalogEntryError.
  utils          : console logging helpers.

Quick start:
  from colour_catalog import ColourCatalog
  ColourCatalog().classify("#dc143d").title  # 'Crimson'
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import errors
from . import palette_data
from . import image_colours
from . import utils

from .catalog import ColourCatalog
from .colour_convert import (
    hex_to_hsl,
    hex_to_rgb,
    rgb_to_hsl,
    validate_hex,
    validate_rgb,
)
from .core_types import BaseRef, HslColor, NamedColor, RgbColor, ShadeRef
from .errors import (
    ColourError,
    InvalidFormatError,
    MalformedCatalogEntryError,
    OutOfRangeError,
)
from .palette_data import DEFAULT_TABLES, ColourTables

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "errors",
    "palette_data",
    "image_colours",
    "utils",
    "ColourCatalog",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hex_to_hsl",
    "validate_hex",
    "validate_rgb",
    "RgbColor",
    "HslColor",
    "ShadeRef",
    "BaseRef",
    "NamedColor",
    "ColourError",
    "InvalidFormatError",
    "OutOfRangeError",
    "MalformedCatalogEntryError",
    "ColourTables",
    "DEFAULT_TABLES",
]

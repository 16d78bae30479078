#!/usr/bin/env python3
"""
name_colours.py
Name colours after the nearest entry of the reference colour catalog.

Usage:
  python name_colours.py HEX [HEX ...] [--dataset FILE] [--json] [--debug]
  python name_colours.py --image INPUT [--limit N] [--exact] [--dataset FILE] [--json] [--debug]

Modes:
  hex   : classify each given hex colour ('#rrggbb' or 'rrggbb').
  image : count the image's pixel colours (quantised unless --exact), name the
          top N and report how much of the image is greyscale.

Output:
  One line per colour: hex, title, shade hex, base title and hex.
  With --json, the flat records are printed as a JSON list instead.

Exit codes:
  0 on success, 2 on invalid input (bad hex, missing image, malformed dataset).
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from colour_catalog.catalog import ColourCatalog
from colour_catalog.constants import DEFAULT_BASE_LIMIT
from colour_catalog.core_types import NamedColor
from colour_catalog.errors import ColourError
from colour_catalog.image_colours import (
    greyscale_percentage,
    hex_colour_counts,
    load_image_rgba,
)
from colour_catalog.palette_data import DEFAULT_TABLES, ColourTables
from colour_catalog.utils import (
    debug_log,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args & small helpers


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        colours: list of hex strings (may be empty with --image)
        image: optional Path to an image
        limit: number of image colours to name
        exact: disable channel quantisation
        dataset: optional Path to a JSON dataset
        json: emit JSON records
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="name_colours",
        description="Name colours after the nearest entry of the colour catalog.",
    )
    parser.add_argument("colours", nargs="*", help="Hex colours to classify")
    parser.add_argument("--image", type=Path, default=None, help="Image to analyse")
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_BASE_LIMIT,
        help="Number of most used image colours to name.",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Count exact pixel colours instead of quantised ones.",
    )
    parser.add_argument(
        "--dataset", type=Path, default=None, help="JSON colour tables (optional)"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON records")
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    args = parser.parse_args(argv)
    if not args.colours and args.image is None:
        parser.error("give at least one hex colour or --image")
    return args


def _format_named(named: NamedColor) -> str:
    return (
        f"  {named.hex}  {named.title}  "
        f"shade: {named.shade.hex}  base: {named.base.title} ({named.base.hex})"
    )


def _load_tables(path: Optional[Path]) -> ColourTables:
    if path is None:
        return DEFAULT_TABLES
    return ColourTables.from_json(path)


def _name_hexes(
    catalog: ColourCatalog, hexes: Sequence[str], as_json: bool
) -> List[NamedColor]:
    records: List[NamedColor] = []
    for hx in hexes:
        named = catalog.classify(hx)
        if named is None:
            if not as_json:
                warn(f"{hx}: catalog holds no colours")
            continue
        records.append(named)
        if not as_json:
            log(_format_named(named))
    return records


def _name_image(
    catalog: ColourCatalog,
    path: Path,
    limit: int,
    exact: bool,
    as_json: bool,
    debug: bool,
) -> List[NamedColor]:
    """Load -> count (quantised unless exact) -> classify top colours -> report."""
    t_start = time.perf_counter()
    if not as_json:
        print_banner(path.name)
    rgb, alpha = load_image_rgba(path)
    counts = hex_colour_counts(rgb, alpha, limit=limit, round_colours=not exact)
    visible = int((alpha > 0).sum())
    if not visible and not as_json:
        warn(f"{path.name}: no visible pixels")

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{rgb.shape[1]}x{rgb.shape[0]}"),
                    ("Visible", visible),
                    ("Quantised", not exact),
                    ("Limit", limit),
                ]
            )
        )

    records: List[NamedColor] = []
    for hex_code, count in counts:
        named = catalog.classify(hex_code)
        if named is None:
            continue
        records.append(named)
        if not as_json:
            share = count / visible if visible else 0.0
            log(
                f"{_format_named(named)}  from {hex_code}: "
                f"pixels={count:,}  share={share:.1%}"
            )

    if not as_json:
        log(f"Greyscale: {greyscale_percentage(rgb, alpha)}%")
        log(f"Total pixels: {visible:,}")
    if debug:
        debug_log(f"Total {format_seconds_compact(time.perf_counter() - t_start)}")
    return records


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_cli_args(argv)

    try:
        tables = _load_tables(args.dataset)
        catalog = ColourCatalog(tables, debug=args.debug)
        catalog.build_index()
    except (OSError, json.JSONDecodeError, ColourError) as exc:
        error(f"cannot load dataset: {exc}")
        return 2

    if args.debug:
        print_config_line(
            "run",
            [
                ("Dataset", str(args.dataset) if args.dataset else "built-in"),
                ("Colours", len(catalog)),
                ("Image", args.image is not None),
            ],
            debug=True,
        )

    records: List[NamedColor] = []
    try:
        if args.colours:
            records += _name_hexes(catalog, args.colours, args.json)
        if args.image is not None:
            if not args.image.is_file():
                error(f"not found: {args.image}")
                return 2
            records += _name_image(
                catalog, args.image, args.limit, args.exact, args.json, args.debug
            )
    except ColourError as exc:
        error(str(exc))
        return 2

    if args.json:
        log(json.dumps([r.to_dict() for r in records], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

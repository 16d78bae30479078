"""
Shared fixtures for colour_catalog tests.
"""
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from colour_catalog import ColourCatalog, ColourTables


@pytest.fixture(scope="session")
def catalog():
    """Default catalog, built once for the whole session."""
    cat = ColourCatalog()
    cat.build_index()
    return cat


@pytest.fixture
def tiny_tables():
    """Three colours, two shades, two bases."""
    return ColourTables(
        colours={
            "FF0000": (0, "Red"),
            "CC0000": (0, "Darker Red"),
            "0000FF": (1, "Blue"),
        },
        shades={0: ("FF0000", 10), 1: ("0000FF", 20)},
        bases={10: ("FF0000", "Red"), 20: ("0000FF", "Blue")},
    )


@pytest.fixture
def write_png(tmp_path):
    """Write an RGB(A) uint8 array to a PNG under tmp_path and return its path."""

    def _write(arr: np.ndarray, name: str = "img.png") -> Path:
        path = tmp_path / name
        Image.fromarray(arr.astype(np.uint8)).save(path)
        return path

    return _write

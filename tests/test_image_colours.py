"""
Tests for pixel colour counting, quantisation and greyscale share.
"""
import numpy as np
import pytest

from colour_catalog.image_colours import (
    base_colours,
    binarise_alpha,
    greyscale_percentage,
    hex_colour_counts,
    load_image_rgba,
    quantise_channels,
)

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
GREY = (90, 90, 90)


def _image(rows):
    return np.array(rows, dtype=np.uint8)


class TestQuantise:
    def test_channel_buckets(self):
        values = np.array([0, 16, 17, 48, 49, 240, 241, 255], dtype=np.uint8)
        assert quantise_channels(values).tolist() == [0, 0, 32, 32, 64, 224, 240, 240]

    def test_shape_preserved(self):
        img = np.full((2, 3, 3), 200, dtype=np.uint8)
        out = quantise_channels(img)
        assert out.shape == img.shape
        assert out.dtype == np.uint8
        assert (out == 192).all()


class TestHexColourCounts:
    def test_exact_counts_most_used_first(self):
        img = _image([[RED, BLUE, GREEN], [BLUE, RED, RED]])
        assert hex_colour_counts(img, round_colours=False) == [
            ("FF0000", 3),
            ("0000FF", 2),
            ("00FF00", 1),
        ]

    def test_quantised_counts(self):
        img = _image([[RED, (250, 5, 3)], [BLUE, RED]])
        assert hex_colour_counts(img) == [("F00000", 3), ("0000F0", 1)]

    def test_ties_keep_first_appearance(self):
        img = _image([[BLUE, RED], [GREEN, GREEN]])
        assert hex_colour_counts(img, round_colours=False) == [
            ("00FF00", 2),
            ("0000FF", 1),
            ("FF0000", 1),
        ]

    def test_limit(self):
        img = _image([[RED, BLUE, GREEN], [BLUE, RED, RED]])
        assert hex_colour_counts(img, limit=1, round_colours=False) == [("FF0000", 3)]

    def test_alpha_hides_pixels(self):
        img = _image([[RED, BLUE], [BLUE, BLUE]])
        alpha = np.array([[255, 0], [0, 0]], dtype=np.uint8)
        assert hex_colour_counts(img, alpha, round_colours=False) == [("FF0000", 1)]

    def test_nothing_visible(self):
        img = _image([[RED]])
        assert hex_colour_counts(img, np.zeros((1, 1), dtype=np.uint8)) == []

    def test_rejects_flat_input(self):
        with pytest.raises(TypeError):
            hex_colour_counts(np.zeros((4, 3), dtype=np.uint8))


class TestGreyscalePercentage:
    @pytest.mark.parametrize(
        "pixels, expected",
        [
            ([GREY, RED, RED, RED], 25),
            ([GREY, RED, RED], 33),
            ([GREY, GREY, RED], 67),
            ([GREY] + [RED] * 7, 13),
            ([GREY, (0, 0, 0), (255, 255, 255)], 100),
            ([RED, BLUE], 0),
        ],
    )
    def test_share(self, pixels, expected):
        assert greyscale_percentage(_image([pixels])) == expected

    def test_only_visible_pixels(self):
        img = _image([[GREY, RED]])
        alpha = np.array([[255, 0]], dtype=np.uint8)
        assert greyscale_percentage(img, alpha) == 100

    def test_no_visible_pixels(self):
        img = _image([[GREY]])
        assert greyscale_percentage(img, np.zeros((1, 1), dtype=np.uint8)) == 0


class TestBaseColours:
    def test_names_most_used(self, catalog):
        img = _image([[RED, RED, RED], [BLUE, BLUE, GREY]])
        named = base_colours(img, catalog, limit=2)
        assert [n.base.title for n in named] == ["Red", "Blue"]

    def test_default_limit(self, catalog):
        rng = np.random.default_rng(7)
        img = rng.integers(0, 256, size=(32, 32, 3), dtype=np.uint8)
        assert len(base_colours(img, catalog)) == 10


class TestLoad:
    def test_load_rgba(self, write_png):
        rgba = np.zeros((2, 2, 4), dtype=np.uint8)
        rgba[..., :3] = RED
        rgba[..., 3] = 255
        rgba[1, 1, 3] = 40
        rgb, alpha = load_image_rgba(write_png(rgba))
        assert rgb.shape == (2, 2, 3)
        assert alpha.tolist() == [[255, 255], [255, 0]]
        assert hex_colour_counts(rgb, alpha, round_colours=False) == [("FF0000", 3)]

    def test_load_rgb_is_fully_visible(self, write_png):
        rgb_in = np.full((3, 2, 3), 90, dtype=np.uint8)
        rgb, alpha = load_image_rgba(write_png(rgb_in))
        assert (alpha == 255).all()
        assert greyscale_percentage(rgb, alpha) == 100

    def test_binarise_alpha(self):
        alpha = np.array([0, 126, 127, 255], dtype=np.uint8)
        assert binarise_alpha(alpha).tolist() == [0, 0, 255, 255]

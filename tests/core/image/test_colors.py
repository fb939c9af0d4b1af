"""
Tests for core.image.colors module.

Tests RGB/HSV conversions in both directions and the BT.601 YCbCr
conversion.
"""

import numpy as np
import pytest

from snaplab.core.image.colors import (
    hsv_to_rgb,
    hsv_to_rgb_array,
    rgb_to_hsv,
    rgb_to_hsv_array,
    rgb_to_ycbcr,
    rgb_to_ycbcr_array,
)


class TestRgbToHsv:
    """Tests for rgb_to_hsv function."""

    @pytest.mark.parametrize(
        "rgb,hue",
        [
            ((255, 0, 0), 0.0),
            ((255, 255, 0), 60.0),
            ((0, 255, 0), 120.0),
            ((0, 255, 255), 180.0),
            ((0, 0, 255), 240.0),
            ((255, 0, 255), 300.0),
        ],
    )
    def test_primary_and_secondary_hues(self, rgb, hue):
        """Test hues of the primary and secondary colors"""
        h, s, v = rgb_to_hsv(*rgb)

        assert h == pytest.approx(hue)
        assert s == pytest.approx(1.0)
        assert v == pytest.approx(1.0)

    def test_grey_has_zero_hue_and_saturation(self):
        """Test zero chroma defaults hue to 0."""
        h, s, v = rgb_to_hsv(128, 128, 128)

        assert h == 0.0
        assert s == 0.0
        assert v == pytest.approx(128 / 255)

    def test_black(self):
        """Test black is all zeros"""
        assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)

    def test_hue_just_below_red_wraps(self):
        """Test a red with a little blue lands near 360, not negative."""
        h, _, _ = rgb_to_hsv(255, 0, 10)

        assert 350.0 < h < 360.0

    def test_value_and_saturation(self):
        """Test saturation and value of a muted red"""
        h, s, v = rgb_to_hsv(100, 50, 50)

        assert h == pytest.approx(0.0)
        assert s == pytest.approx(0.5)
        assert v == pytest.approx(100 / 255)

    def test_array_matches_scalar(self, random_image):
        """Test vectorized conversion agrees with the scalar form."""
        r, g, b = (random_image[..., c] for c in range(3))
        h, s, v = rgb_to_hsv_array(r, g, b)

        for y, x in [(0, 0), (5, 7), (29, 39), (12, 20)]:
            expected = rgb_to_hsv(int(r[y, x]), int(g[y, x]), int(b[y, x]))
            assert (h[y, x], s[y, x], v[y, x]) == pytest.approx(expected)

    def test_hue_range(self, random_image):
        """Test every component stays in range"""
        h, s, v = rgb_to_hsv_array(
            random_image[..., 0], random_image[..., 1], random_image[..., 2]
        )

        assert h.min() >= 0.0 and h.max() < 360.0
        assert s.min() >= 0.0 and s.max() <= 1.0
        assert v.min() >= 0.0 and v.max() <= 1.0


class TestHsvToRgb:
    """Tests for hsv_to_rgb function."""

    @pytest.mark.parametrize(
        "hue,rgb",
        [
            (0, (255, 0, 0)),
            (60, (255, 255, 0)),
            (120, (0, 255, 0)),
            (180, (0, 255, 255)),
            (240, (0, 0, 255)),
            (300, (255, 0, 255)),
            (360, (255, 0, 0)),
        ],
    )
    def test_sector_boundaries(self, hue, rgb):
        """Test sector boundaries reproduce pure colors"""
        assert hsv_to_rgb(hue, 1.0, 1.0) == rgb

    def test_zero_saturation_is_grey(self):
        """Test zero saturation gives grey"""
        assert hsv_to_rgb(200, 0.0, 0.5) == (128, 128, 128)

    def test_zero_value_is_black(self):
        """Test zero value gives black"""
        assert hsv_to_rgb(90, 1.0, 0.0) == (0, 0, 0)

    def test_returns_ints_in_range(self):
        """Test scalar output is ints in 0-255"""
        r, g, b = hsv_to_rgb(33.3, 0.7, 0.9)

        for channel in (r, g, b):
            assert isinstance(channel, int)
            assert 0 <= channel <= 255

    def test_array_output_is_uint8(self):
        """Test array output is uint8"""
        r, g, b = hsv_to_rgb_array(np.array([0.0, 120.0]), 1.0, 1.0)

        assert r.dtype == np.uint8
        assert r.tolist() == [255, 0]
        assert g.tolist() == [0, 255]
        assert b.tolist() == [0, 0]


class TestHsvRoundTrip:
    """RGB -> HSV -> RGB reproduces the input within rounding."""

    def test_round_trip_within_one(self):
        """Test RGB grid survives the round trip within 1"""
        levels = np.arange(0, 256, 5)
        r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")

        h, s, v = rgb_to_hsv_array(r, g, b)
        r2, g2, b2 = hsv_to_rgb_array(h, s, v)

        for original, restored in ((r, r2), (g, g2), (b, b2)):
            assert np.abs(original.astype(np.int64) - restored.astype(np.int64)).max() <= 1

    @pytest.mark.parametrize("rgb", [(12, 200, 77), (255, 254, 253), (1, 0, 0), (90, 90, 91)])
    def test_round_trip_scalar(self, rgb):
        """Test single pixels survive the round trip within 1"""
        restored = hsv_to_rgb(*rgb_to_hsv(*rgb))

        assert all(abs(a - b) <= 1 for a, b in zip(rgb, restored))


class TestRgbToYCbCr:
    """Tests for rgb_to_ycbcr function."""

    def test_red(self):
        """Test YCbCr of pure red"""
        y, cb, cr = rgb_to_ycbcr(255, 0, 0)

        assert y == pytest.approx(76.245)
        assert cb == pytest.approx(84.97232)
        assert cr == pytest.approx(255.5)

    def test_white_is_neutral(self):
        """Test white has neutral chroma"""
        y, cb, cr = rgb_to_ycbcr(255, 255, 255)

        assert y == pytest.approx(255.0)
        assert cb == pytest.approx(128.0)
        assert cr == pytest.approx(128.0)

    def test_black_is_neutral(self):
        """Test black has neutral chroma"""
        assert rgb_to_ycbcr(0, 0, 0) == pytest.approx((0.0, 128.0, 128.0))

    def test_not_clamped(self):
        """Test chroma may exceed 255 before clamping."""
        _, _, cr = rgb_to_ycbcr(255, 0, 0)
        assert cr > 255

    def test_red_has_maximum_cr(self):
        """Test pure red yields the largest Cr of all 8-bit colors."""
        levels = np.arange(0, 256, 15)
        r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")

        _, _, cr = rgb_to_ycbcr_array(r, g, b)
        _, _, red_cr = rgb_to_ycbcr(255, 0, 0)

        assert cr.max() == pytest.approx(red_cr)
        assert cr.max() <= red_cr

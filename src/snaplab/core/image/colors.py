"""
Color space conversions.

RGB <-> HSV (hue in degrees, saturation and value in [0, 1]) and
RGB -> YCbCr (BT.601 full range). Each conversion has a vectorized form
working on whole channel planes and a scalar form for single pixels.
The scalar forms delegate to the vectorized ones so both always agree.
"""

from typing import Tuple

import numpy as np

from snaplab.common.constants import RasterConstants
from snaplab.core.image.raster import clamp8


def rgb_to_hsv_array(
    r: np.ndarray, g: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert RGB planes (0-255) to HSV planes.

    Uses the max/min/chroma formula. When several channels share the
    maximum, red takes precedence over green and green over blue. Pixels
    with zero chroma get hue 0.

    Args:
        r: Red plane (any numeric dtype, values 0-255)
        g: Green plane
        b: Blue plane

    Returns:
        Tuple of (hue in [0, 360), saturation in [0, 1], value in [0, 1])
    """
    rf = np.asarray(r, dtype=np.float64) / 255.0
    gf = np.asarray(g, dtype=np.float64) / 255.0
    bf = np.asarray(b, dtype=np.float64) / 255.0

    cmax = np.maximum(np.maximum(rf, gf), bf)
    cmin = np.minimum(np.minimum(rf, gf), bf)
    delta = cmax - cmin

    # Avoid division by zero; those pixels are overwritten below
    safe_delta = np.where(delta == 0, 1.0, delta)

    hue_r = 60.0 * (((gf - bf) / safe_delta) % 6.0)
    hue_g = 60.0 * (((bf - rf) / safe_delta) + 2.0)
    hue_b = 60.0 * (((rf - gf) / safe_delta) + 4.0)

    hue = np.where(cmax == rf, hue_r, np.where(cmax == gf, hue_g, hue_b))
    hue = np.where(delta == 0, 0.0, hue)
    # Floating point modulo can land exactly on 360
    hue = np.where(hue >= 360.0, hue - 360.0, hue)

    saturation = np.where(cmax == 0, 0.0, delta / np.where(cmax == 0, 1.0, cmax))

    return hue, saturation, cmax


def hsv_to_rgb_array(
    h: np.ndarray, s: np.ndarray, v: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert HSV planes back to uint8 RGB planes.

    Sector based reconstruction over six 60 degree sectors. Hue outside
    [0, 360) wraps around the wheel.

    Returns:
        Tuple of (R, G, B) uint8 planes
    """
    h = np.mod(np.asarray(h, dtype=np.float64), 360.0)
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    h, s, v = np.broadcast_arrays(h, s, v)

    chroma = v * s
    x = chroma * (1.0 - np.abs(((h / 60.0) % 2.0) - 1.0))
    m = v - chroma
    zero = np.zeros_like(chroma)

    sector = np.clip(np.floor(h / 60.0), 0, 5).astype(np.int64)
    conditions = [sector == k for k in range(6)]

    rf = np.select(conditions, [chroma, x, zero, zero, x, chroma])
    gf = np.select(conditions, [x, chroma, chroma, x, zero, zero])
    bf = np.select(conditions, [zero, zero, x, chroma, chroma, x])

    return clamp8((rf + m) * 255.0), clamp8((gf + m) * 255.0), clamp8((bf + m) * 255.0)


def rgb_to_ycbcr_array(
    r: np.ndarray, g: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert RGB planes to full-range BT.601 YCbCr.

    Values are returned unclamped; consumers clamp only when writing
    a pixel channel.
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    y = RasterConstants.YCC_Y_R * r + RasterConstants.YCC_Y_G * g + RasterConstants.YCC_Y_B * b
    cb = 128.0 - 0.168736 * r - 0.331264 * g + 0.5 * b
    cr = 128.0 + 0.5 * r - 0.418688 * g - 0.081312 * b

    return y, cb, cr


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert a single RGB pixel (0-255) to (H, S, V)."""
    h, s, v = rgb_to_hsv_array(r, g, b)
    return float(h), float(s), float(v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert a single HSV triple to (R, G, B) integers in [0, 255]."""
    r, g, b = hsv_to_rgb_array(h, s, v)
    return int(r), int(g), int(b)


def rgb_to_ycbcr(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert a single RGB pixel to unclamped (Y, Cb, Cr)."""
    y, cb, cr = rgb_to_ycbcr_array(r, g, b)
    return float(y), float(cb), float(cr)

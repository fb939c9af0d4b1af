"""
Per-pixel image transforms.

Every function maps a source raster to one or more new rasters of the
same size. Output depends only on the pixel at the same position, and
alpha is carried through unchanged.

- Greyscale (plain and +20% brightness)
- Channel isolation and per-channel thresholding
- HSV hue visualisation and hue-band thresholding
- YCbCr luma extraction and Cr thresholding
"""

import logging
from typing import Tuple

import numpy as np

from snaplab.common.constants import ProcessingConstants, RasterConstants
from snaplab.core.image.colors import hsv_to_rgb_array, rgb_to_hsv_array, rgb_to_ycbcr_array
from snaplab.core.image.raster import (
    binary_raster,
    clamp8,
    grey_raster,
    split_channels,
    validate_raster,
)

logger = logging.getLogger(__name__)


def _luma(raster: np.ndarray) -> np.ndarray:
    r, g, b, _ = split_channels(raster)
    return RasterConstants.LUMA_R * r + RasterConstants.LUMA_G * g + RasterConstants.LUMA_B * b


def grey_plus_20(
    src: np.ndarray, gain: float = ProcessingConstants.BRIGHTNESS_GAIN
) -> np.ndarray:
    """
    Greyscale then brighten.

    Args:
        src: Source raster
        gain: Brightness multiplier applied to the luma (1.2 = +20%)

    Returns:
        Grey raster, saturating at 255
    """
    validate_raster(src)
    return grey_raster(clamp8(_luma(src) * gain), src[..., 3])


def to_grey(src: np.ndarray) -> np.ndarray:
    """Greyscale using Rec. 709 luma weights."""
    validate_raster(src)
    return grey_raster(clamp8(_luma(src)), src[..., 3])


def split_rgb(src: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Isolate each color channel.

    Returns:
        Tuple of rasters (R,0,0,A), (0,G,0,A), (0,0,B,A)
    """
    validate_raster(src)
    outputs = []
    for channel in range(3):
        out = np.zeros_like(src)
        out[..., channel] = src[..., channel]
        out[..., 3] = src[..., 3]
        outputs.append(out)
    return outputs[0], outputs[1], outputs[2]


def threshold_rgb(
    src: np.ndarray, t_red: int, t_green: int, t_blue: int
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Binary threshold of each channel independently.

    A pixel is white in an output when its channel is >= that channel's
    threshold, black otherwise.

    Args:
        src: Source raster
        t_red: Red threshold (0-255)
        t_green: Green threshold (0-255)
        t_blue: Blue threshold (0-255)

    Returns:
        Tuple of (red mask, green mask, blue mask) rasters
    """
    validate_raster(src)
    alpha = src[..., 3]
    thresholds = (t_red, t_green, t_blue)
    outputs = tuple(
        binary_raster(src[..., channel] >= threshold, alpha)
        for channel, threshold in enumerate(thresholds)
    )
    return outputs


def hsv_hue_visual(src: np.ndarray) -> np.ndarray:
    """
    Show the pure hue of each pixel.

    Saturation and value are forced to 1, so only the hue survives.
    Grey pixels have hue 0 and therefore render red.
    """
    validate_raster(src)
    r, g, b, _ = split_channels(src)
    hue, _, _ = rgb_to_hsv_array(r, g, b)
    out_r, out_g, out_b = hsv_to_rgb_array(hue, 1.0, 1.0)
    return np.dstack([out_r, out_g, out_b, src[..., 3]]).astype(np.uint8)


def ycbcr_y(src: np.ndarray) -> np.ndarray:
    """Y (luma) plane of BT.601 YCbCr, replicated on R, G, B."""
    validate_raster(src)
    r, g, b, _ = split_channels(src)
    y, _, _ = rgb_to_ycbcr_array(r, g, b)
    return grey_raster(clamp8(y), src[..., 3])


def threshold_hsv_hue_band(
    src: np.ndarray,
    center_deg: float,
    half_width_deg: float = ProcessingConstants.HUE_BAND_HALF_WIDTH_DEG,
) -> np.ndarray:
    """
    Select pixels whose hue lies in a band around a centre angle.

    Distance is measured around the hue wheel, so a band centred on 350
    also covers hues just above 0. Centres outside [0, 360) wrap onto
    the wheel.

    Args:
        src: Source raster
        center_deg: Band centre in degrees
        half_width_deg: Half of the band's angular width

    Returns:
        Binary raster, white inside the band
    """
    validate_raster(src)
    r, g, b, _ = split_channels(src)
    hue, _, _ = rgb_to_hsv_array(r, g, b)

    distance = np.mod(hue - center_deg, 360.0)
    distance = np.minimum(distance, 360.0 - distance)

    logger.debug(f"Hue band threshold: center={center_deg}, half_width={half_width_deg}")
    return binary_raster(distance <= half_width_deg, src[..., 3])


def threshold_ycbcr_cr(src: np.ndarray, threshold: float) -> np.ndarray:
    """
    Select pixels by red chroma.

    Compares the unclamped Cr value against the threshold, white where
    Cr >= threshold.
    """
    validate_raster(src)
    r, g, b, _ = split_channels(src)
    _, _, cr = rgb_to_ycbcr_array(r, g, b)
    return binary_raster(cr >= threshold, src[..., 3])

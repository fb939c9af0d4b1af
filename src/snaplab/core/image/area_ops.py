"""
Spatially windowed image transforms.

- Box blur: uniform square kernel with edge-clamped sampling
- Block pixelation: greyscale, then non-overlapping block averages
"""

import logging

import numpy as np

from snaplab.common.constants import ProcessingConstants, RasterConstants
from snaplab.core.image.point_ops import to_grey
from snaplab.core.image.raster import clamp8, grey_raster, validate_raster
from snaplab.exceptions import ErrorMessages

logger = logging.getLogger(__name__)


def _window_sum(values: np.ndarray, size: int, axis: int) -> np.ndarray:
    """Sliding window sums of length `size` along an axis (valid positions only)."""
    cumulative = np.cumsum(values, axis=axis)
    pad_shape = list(values.shape)
    pad_shape[axis] = 1
    cumulative = np.concatenate([np.zeros(pad_shape, dtype=cumulative.dtype), cumulative], axis=axis)

    upper = np.take(cumulative, np.arange(size, cumulative.shape[axis]), axis=axis)
    lower = np.take(cumulative, np.arange(0, cumulative.shape[axis] - size), axis=axis)
    return upper - lower


def box_blur(src: np.ndarray, radius: int = ProcessingConstants.FACE_BLUR_RADIUS) -> np.ndarray:
    """
    Blur with a uniform (2*radius+1) square kernel.

    Samples outside the raster are clamped to the nearest edge row or
    column. Window sums are computed exactly in integers with two
    separable passes, so the result matches a naive convolution.
    All four channels are blurred, including alpha.

    Args:
        src: Source raster
        radius: Kernel radius in pixels (0 is the identity)

    Returns:
        Blurred raster

    Raises:
        ValueError: If radius is negative
    """
    validate_raster(src)
    if radius < 0:
        raise ValueError(ErrorMessages.NEGATIVE_RADIUS.format(radius=radius))
    if radius == 0:
        return src.copy()

    size = 2 * radius + 1
    padded = np.pad(
        src.astype(np.int64), ((radius, radius), (radius, radius), (0, 0)), mode="edge"
    )

    sums = _window_sum(_window_sum(padded, size, axis=0), size, axis=1)

    logger.debug(f"Box blur: radius={radius}, shape={src.shape}")
    return clamp8(sums / float(size * size))


def pixelate_grey(
    src: np.ndarray, block_size: int = ProcessingConstants.PIXELATE_BLOCK_SIZE
) -> np.ndarray:
    """
    Greyscale then pixelate into square blocks.

    Blocks on the right and bottom borders shrink to the pixels that
    remain, and their mean is taken over the actual pixel count. Output
    is fully opaque regardless of source alpha.

    Args:
        src: Source raster
        block_size: Block edge length in pixels

    Returns:
        Pixelated grey raster
    """
    validate_raster(src)
    if block_size < 1:
        raise ValueError(ErrorMessages.INVALID_BLOCK_SIZE.format(block_size=block_size))

    grey = to_grey(src)[..., 0].astype(np.int64)
    height, width = grey.shape

    row_starts = np.arange(0, height, block_size)
    col_starts = np.arange(0, width, block_size)
    row_sizes = np.minimum(block_size, height - row_starts)
    col_sizes = np.minimum(block_size, width - col_starts)

    block_sums = np.add.reduceat(np.add.reduceat(grey, row_starts, axis=0), col_starts, axis=1)
    block_means = clamp8(block_sums / np.outer(row_sizes, col_sizes))

    value = np.repeat(np.repeat(block_means, row_sizes, axis=0), col_sizes, axis=1)
    alpha = np.full((height, width), RasterConstants.OPAQUE, dtype=np.uint8)

    logger.debug(f"Pixelate: block={block_size}, blocks={len(row_starts)}x{len(col_starts)}")
    return grey_raster(value, alpha)

"""
Raster model and shared pixel helpers.

A raster is a NumPy array of shape (height, width, 4), dtype uint8, with
channels in R, G, B, A order. Every transform in this package accepts a
raster and returns a freshly allocated one.
"""

from typing import Tuple, Union

import numpy as np

from snaplab.common.constants import RasterConstants
from snaplab.exceptions import ErrorMessages, InvalidRasterError

Pixel = Tuple[int, int, int, int]


def validate_raster(raster: np.ndarray) -> np.ndarray:
    """
    Check that an array satisfies the raster contract.

    Args:
        raster: Candidate raster

    Returns:
        The same array, for call chaining

    Raises:
        InvalidRasterError: If type, shape, dtype or dimensions are wrong
    """
    if not isinstance(raster, np.ndarray):
        raise InvalidRasterError(ErrorMessages.RASTER_NOT_ARRAY.format(type=type(raster).__name__))

    if raster.ndim != 3 or raster.shape[2] != RasterConstants.CHANNELS:
        raise InvalidRasterError(
            ErrorMessages.RASTER_BAD_SHAPE.format(shape=raster.shape), shape=raster.shape
        )

    if raster.dtype != np.uint8:
        raise InvalidRasterError(
            ErrorMessages.RASTER_BAD_DTYPE.format(dtype=raster.dtype), shape=raster.shape
        )

    height, width = raster.shape[:2]
    if width <= 0 or height <= 0:
        raise InvalidRasterError(
            ErrorMessages.RASTER_EMPTY.format(width=width, height=height), shape=raster.shape
        )

    return raster


def create_raster(width: int, height: int) -> np.ndarray:
    """
    Allocate a zero-initialised raster.

    Raises:
        InvalidRasterError: If width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise InvalidRasterError(ErrorMessages.RASTER_EMPTY.format(width=width, height=height))
    return np.zeros((height, width, RasterConstants.CHANNELS), dtype=np.uint8)


def raster_size(raster: np.ndarray) -> Tuple[int, int]:
    """Return (width, height)."""
    height, width = raster.shape[:2]
    return width, height


def get_pixel(raster: np.ndarray, x: int, y: int) -> Pixel:
    """Return the (R, G, B, A) sample at column x, row y."""
    height, width = raster.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"Pixel ({x}, {y}) outside {width}x{height} raster")
    r, g, b, a = raster[y, x]
    return int(r), int(g), int(b), int(a)


def copy_raster(raster: np.ndarray) -> np.ndarray:
    """Deep copy, never a view of the source buffer."""
    return np.array(validate_raster(raster), dtype=np.uint8, copy=True)


def clamp8(value: Union[float, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Round to nearest integer (halves go up) and clamp to [0, 255].

    Scalars return a Python int, arrays return a uint8 array of the same shape.
    """
    rounded = np.clip(np.floor(np.asarray(value, dtype=np.float64) + 0.5), 0, 255)
    if rounded.ndim == 0:
        return int(rounded)
    return rounded.astype(np.uint8)


def split_channels(raster: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return R, G, B, A planes as float64 arrays for arithmetic."""
    planes = raster.astype(np.float64)
    return planes[..., 0], planes[..., 1], planes[..., 2], planes[..., 3]


def grey_raster(value: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    """
    Build a raster replicating a single uint8 plane across R, G, B.

    Args:
        value: uint8 plane of shape (height, width)
        alpha: uint8 alpha plane of the same shape

    Returns:
        New raster
    """
    return np.dstack([value, value, value, alpha]).astype(np.uint8)


def binary_raster(mask: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    """Build a black/white raster from a boolean mask, preserving alpha."""
    value = np.where(mask, RasterConstants.MAX_VALUE, RasterConstants.MIN_VALUE).astype(np.uint8)
    return grey_raster(value, alpha)

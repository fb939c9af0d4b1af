"""
Image format conversion utilities.

Handles conversions between rasters and other formats using OpenCV:
- OpenCV frames (BGR, BGRA, grayscale) <-> RGBA rasters
- PNG bytes and base64 strings
- PNG files on disk
"""

import base64
import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from snaplab.common.constants import SnapshotConstants
from snaplab.core.image.raster import validate_raster
from snaplab.exceptions import ErrorMessages, InvalidRasterError, PersistenceException

logger = logging.getLogger(__name__)


def from_bgr(frame: np.ndarray) -> np.ndarray:
    """
    Convert an OpenCV frame to an RGBA raster.

    Args:
        frame: Grayscale (H, W), BGR (H, W, 3) or BGRA (H, W, 4) uint8 image

    Returns:
        New RGBA raster; alpha is opaque unless the frame had one
    """
    if frame.dtype != np.uint8:
        raise InvalidRasterError(ErrorMessages.RASTER_BAD_DTYPE.format(dtype=frame.dtype))

    if frame.ndim == 2:
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2RGBA)

    channels = frame.shape[2]
    if channels == 3:
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2RGBA)

    raise InvalidRasterError(
        ErrorMessages.RASTER_BAD_SHAPE.format(shape=frame.shape), shape=frame.shape
    )


def to_bgra(raster: np.ndarray) -> np.ndarray:
    """Convert an RGBA raster to an OpenCV BGRA image."""
    validate_raster(raster)
    return cv2.cvtColor(raster, cv2.COLOR_RGBA2BGRA)


def encode_png(raster: np.ndarray, compression: int = SnapshotConstants.PNG_COMPRESSION) -> bytes:
    """
    Encode a raster as PNG, alpha included.

    Args:
        raster: RGBA raster
        compression: PNG compression level (0-9)

    Returns:
        PNG file contents
    """
    params = [cv2.IMWRITE_PNG_COMPRESSION, max(0, min(9, compression))]
    success, buffer = cv2.imencode(".png", to_bgra(raster), params)

    if not success:
        raise ValueError(ErrorMessages.ENCODE_FAILED.format(format="PNG"))

    return buffer.tobytes()


def decode_png(data: bytes) -> np.ndarray:
    """
    Decode PNG (or any OpenCV-readable) bytes into an RGBA raster.

    Raises:
        ValueError: If the bytes cannot be decoded
    """
    array = np.frombuffer(data, dtype=np.uint8)
    frame = cv2.imdecode(array, cv2.IMREAD_UNCHANGED)

    if frame is None:
        raise ValueError(ErrorMessages.DECODE_FAILED)

    if frame.dtype != np.uint8:
        # 16-bit PNGs
        frame = (frame >> 8).astype(np.uint8)

    return from_bgr(frame)


def to_base64(raster: np.ndarray) -> str:
    """Encode a raster as a base64 PNG string."""
    try:
        return base64.b64encode(encode_png(raster)).decode("utf-8")
    except Exception as e:
        logger.error(f"Failed to convert raster to base64: {e}")
        raise


def save_png(raster: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Write a raster to a PNG file.

    Args:
        raster: RGBA raster
        path: Destination; the .png suffix is added when missing

    Returns:
        Path actually written

    Raises:
        PersistenceException: If encoding or writing fails
    """
    path = Path(path)
    if path.suffix.lower() != SnapshotConstants.FILE_EXTENSION:
        path = path.with_name(path.name + SnapshotConstants.FILE_EXTENSION)

    validate_raster(raster)
    try:
        data = encode_png(raster)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save PNG {path}: {e}")
        raise PersistenceException(str(path), str(e)) from e

    logger.info(f"Saved {raster.shape[1]}x{raster.shape[0]} image to {path}")
    return path


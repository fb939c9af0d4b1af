"""
Region of Interest (ROI) handling for face regions.

Provides utility functions for clamping detector rectangles, extracting
sub-rasters and pasting processed regions back.

NOTE: Clamping geometry lives on the Rect model itself.
"""

import logging
from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np

from snaplab.common.base import Rect
from snaplab.core.image.raster import validate_raster

logger = logging.getLogger(__name__)

RectLike = Union[Rect, Dict, Sequence[float]]


def to_rect(rect: RectLike) -> Rect:
    """Coerce a Rect, dictionary or (x, y, w, h) sequence to a Rect."""
    if isinstance(rect, Rect):
        return rect
    if isinstance(rect, dict):
        return Rect.from_dict(rect)
    return Rect.from_tuple(rect)


def clamp_rect(image: np.ndarray, rect: RectLike) -> Rect:
    """
    Clamp a rectangle to the bounds of an image.

    Args:
        image: Raster the rectangle refers to
        rect: Rectangle, possibly partly or fully outside the image

    Returns:
        Integral Rect of at least 1x1 pixels inside the image
    """
    rect = to_rect(rect)
    img_height, img_width = image.shape[:2]
    clamped = rect.clamp(img_width, img_height)

    if clamped != rect:
        logger.debug(f"Clamped face region {rect.to_tuple()} -> {clamped.to_tuple()}")

    return clamped


def extract_region(image: np.ndarray, rect: RectLike) -> np.ndarray:
    """
    Extract a copy of the region covered by a rectangle.

    The rectangle is clamped first, so the result is never empty and
    never reads outside the image.
    """
    validate_raster(image)
    rows, cols = clamp_rect(image, rect).slices()
    return image[rows, cols].copy()


def paste_region(image: np.ndarray, region: np.ndarray, x: int, y: int) -> np.ndarray:
    """
    Return a copy of image with region written at (x, y).

    The region must fit inside the image at that position.

    Raises:
        ValueError: If the region does not fit
    """
    validate_raster(image)
    validate_raster(region)

    img_height, img_width = image.shape[:2]
    reg_height, reg_width = region.shape[:2]
    if x < 0 or y < 0 or x + reg_width > img_width or y + reg_height > img_height:
        raise ValueError(
            f"Region {reg_width}x{reg_height} at ({x}, {y}) "
            f"does not fit in {img_width}x{img_height} image"
        )

    out = np.array(image, dtype=np.uint8, copy=True)
    out[y : y + reg_height, x : x + reg_width] = region
    return out


def select_largest_face(detections: Iterable[RectLike]) -> Optional[Rect]:
    """
    Pick the detection with the largest area.

    Usually the person nearest the camera. The first detection wins ties.

    Args:
        detections: Rects or (x, y, w, h) boxes from a face locator

    Returns:
        Largest Rect, or None when there are no detections
    """
    best: Optional[Rect] = None
    for detection in detections:
        rect = to_rect(detection)
        if best is None or rect.area > best.area:
            best = rect
    return best

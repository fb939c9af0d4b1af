"""
Face region compositing.

Replaces the detected face region of a snapshot with a privacy filtered
version of itself, leaving every other pixel untouched.
"""

import logging
from typing import Callable, Dict, Optional, Union

import numpy as np

from snaplab.common.constants import ProcessingConstants
from snaplab.common.enums import FilterMode
from snaplab.core.image.area_ops import box_blur, pixelate_grey
from snaplab.core.image.point_ops import hsv_hue_visual, to_grey
from snaplab.core.image.raster import validate_raster
from snaplab.core.image.roi import RectLike, clamp_rect, paste_region

logger = logging.getLogger(__name__)

FACE_FILTERS: Dict[FilterMode, Callable[[np.ndarray], np.ndarray]] = {
    FilterMode.GREYSCALE: to_grey,
    FilterMode.BLUR: lambda region: box_blur(region, ProcessingConstants.FACE_BLUR_RADIUS),
    FilterMode.HUE_VISUAL: hsv_hue_visual,
    FilterMode.PIXELATE: lambda region: pixelate_grey(
        region, ProcessingConstants.PIXELATE_BLOCK_SIZE
    ),
}


def _resolve_mode(mode: Union[FilterMode, str, None]) -> Optional[FilterMode]:
    if isinstance(mode, FilterMode):
        return mode
    try:
        return FilterMode(mode)
    except ValueError:
        return None


def apply_face_filter(region: np.ndarray, mode: Union[FilterMode, str, None]) -> np.ndarray:
    """
    Apply the privacy filter selected by mode to a region.

    A value that is not a known FilterMode leaves the region unchanged.

    Returns:
        Filtered copy of the region
    """
    resolved = _resolve_mode(mode)
    if resolved is None:
        logger.warning(f"Unknown face filter mode {mode!r}, passing region through")
        return region.copy()
    return FACE_FILTERS[resolved](region)


def replace_face_in_snapshot(
    source: Optional[np.ndarray],
    rect: Optional[RectLike],
    mode: Union[FilterMode, str, None],
) -> Optional[np.ndarray]:
    """
    Composite a filtered face region into a copy of the snapshot.

    Args:
        source: Snapshot raster, or None if no snapshot exists yet
        rect: Face region from the detector, or None if nothing was found
        mode: Privacy filter to apply inside the region

    Returns:
        New raster with the region replaced, or None when either input is missing
    """
    if source is None or rect is None:
        logger.debug("No snapshot or no face region, nothing to composite")
        return None

    validate_raster(source)
    clamped = clamp_rect(source, rect)
    rows, cols = clamped.slices()

    region = source[rows, cols].copy()
    processed = apply_face_filter(region, mode)

    return paste_region(source, processed, int(clamped.x), int(clamped.y))

"""
Image processing utilities - functional architecture.

This package provides the snapshot processing pipeline as pure functions:
- raster: Raster contract, allocation and pixel helpers
- colors: RGB/HSV/YCbCr conversions
- point_ops: Per-pixel transforms (greyscale, channel split, thresholds)
- area_ops: Windowed transforms (box blur, pixelation)
- roi: Face region clamping, extraction and pasting
- compositor: Face region replacement with a privacy filter
- converters: OpenCV frames, PNG bytes, base64 and files
- test_patterns: Deterministic rasters for demos and tests

All utilities are re-exported from this module for convenient access.
"""

# Area transforms
from snaplab.core.image.area_ops import box_blur, pixelate_grey

# Color conversions
from snaplab.core.image.colors import (
    hsv_to_rgb,
    hsv_to_rgb_array,
    rgb_to_hsv,
    rgb_to_hsv_array,
    rgb_to_ycbcr,
    rgb_to_ycbcr_array,
)

# Compositing
from snaplab.core.image.compositor import apply_face_filter, replace_face_in_snapshot

# Converter functions
from snaplab.core.image.converters import (
    decode_png,
    encode_png,
    from_bgr,
    save_png,
    to_base64,
    to_bgra,
)

# Point transforms
from snaplab.core.image.point_ops import (
    grey_plus_20,
    hsv_hue_visual,
    split_rgb,
    threshold_hsv_hue_band,
    threshold_rgb,
    threshold_ycbcr_cr,
    to_grey,
    ycbcr_y,
)

# Raster helpers
from snaplab.core.image.raster import (
    clamp8,
    copy_raster,
    create_raster,
    get_pixel,
    raster_size,
    validate_raster,
)

# ROI functions
from snaplab.core.image.roi import clamp_rect, extract_region, paste_region, select_largest_face

__all__ = [
    # Raster helpers
    "clamp8",
    "copy_raster",
    "create_raster",
    "get_pixel",
    "raster_size",
    "validate_raster",
    # Color conversions
    "rgb_to_hsv",
    "rgb_to_hsv_array",
    "hsv_to_rgb",
    "hsv_to_rgb_array",
    "rgb_to_ycbcr",
    "rgb_to_ycbcr_array",
    # Point transforms
    "grey_plus_20",
    "to_grey",
    "split_rgb",
    "threshold_rgb",
    "hsv_hue_visual",
    "ycbcr_y",
    "threshold_hsv_hue_band",
    "threshold_ycbcr_cr",
    # Area transforms
    "box_blur",
    "pixelate_grey",
    # ROI functions
    "clamp_rect",
    "extract_region",
    "paste_region",
    "select_largest_face",
    # Compositing
    "apply_face_filter",
    "replace_face_in_snapshot",
    # Converter functions
    "from_bgr",
    "to_bgra",
    "encode_png",
    "decode_png",
    "to_base64",
    "save_png",
]

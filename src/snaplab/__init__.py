"""
SnapLab - snapshot image processing pipeline.

Pure transforms over RGBA rasters (greyscale, channel split, thresholds,
color space views, blur, pixelation) and face region compositing.
"""

__version__ = "1.0.0"

from snaplab.common import FilterMode, Panel, Rect
from snaplab.core import ModeSelector, SnapshotBuffer
from snaplab.core.image import replace_face_in_snapshot
from snaplab.exceptions import InvalidRasterError, SnapLabException
from snaplab.schemas import ThresholdParams
from snaplab.services import PanelService, PanelSet

__all__ = [
    "FilterMode",
    "InvalidRasterError",
    "ModeSelector",
    "Panel",
    "PanelService",
    "PanelSet",
    "Rect",
    "SnapLabException",
    "SnapshotBuffer",
    "ThresholdParams",
    "replace_face_in_snapshot",
]

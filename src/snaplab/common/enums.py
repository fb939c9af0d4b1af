"""
Centralized enums for SnapLab.
"""

from enum import Enum
from typing import Dict, Optional


class FilterMode(str, Enum):
    """Privacy filter applied inside the detected face region."""

    GREYSCALE = "greyscale"
    BLUR = "blur"
    HUE_VISUAL = "hue_visual"
    PIXELATE = "pixelate"

    @classmethod
    def from_key(cls, key: str) -> Optional["FilterMode"]:
        """Map a number key ("1".."4") to a mode, or None for any other key."""
        return _KEY_TO_MODE.get(str(key))


_KEY_TO_MODE: Dict[str, FilterMode] = {
    "1": FilterMode.GREYSCALE,
    "2": FilterMode.BLUR,
    "3": FilterMode.HUE_VISUAL,
    "4": FilterMode.PIXELATE,
}


class Panel(str, Enum):
    """Names of the panels rendered from a snapshot."""

    GREY_BRIGHT = "grey_bright"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    RED_THRESHOLD = "red_threshold"
    GREEN_THRESHOLD = "green_threshold"
    BLUE_THRESHOLD = "blue_threshold"
    SNAPSHOT = "snapshot"
    HUE_VISUAL = "hue_visual"
    LUMA = "luma"
    HUE_BAND = "hue_band"
    CR_THRESHOLD = "cr_threshold"
    FACE_REPLACED = "face_replaced"

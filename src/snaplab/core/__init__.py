"""
Core modules for SnapLab
"""

from snaplab.common.enums import FilterMode

from .mode_selector import ModeSelector
from .snapshot_buffer import SnapshotBuffer

__all__ = [
    "FilterMode",
    "ModeSelector",
    "SnapshotBuffer",
]

"""
Common package - fundamental types without dependencies on other packages.

- Enums (FilterMode, Panel)
- Constants (ProcessingConstants, SnapshotConstants, ...)
- Base models (Rect)

IMPORTANT: This package must NOT import from core, schemas or services
to avoid circular dependencies.
"""

from snaplab.common.base import Rect
from snaplab.common.constants import (
    Colors,
    ProcessingConstants,
    RasterConstants,
    SnapshotConstants,
    SystemConstants,
    ThresholdConstants,
)
from snaplab.common.enums import FilterMode, Panel

__all__ = [
    # Enums
    "FilterMode",
    "Panel",
    # Constants
    "Colors",
    "ProcessingConstants",
    "RasterConstants",
    "SnapshotConstants",
    "SystemConstants",
    "ThresholdConstants",
    # Base models
    "Rect",
]

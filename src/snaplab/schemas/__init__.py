"""
Schemas Package

Pydantic schemas for parameter validation shared by the services and
their callers.
"""

from snaplab.common.base import Rect
from snaplab.schemas.params import ThresholdParams

__all__ = [
    "Rect",
    "ThresholdParams",
]

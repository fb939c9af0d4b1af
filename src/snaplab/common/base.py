"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the system:
- Rect: rectangular face region reported by a detector

IMPORTANT: This module must NOT import from core, schemas or services
to avoid circular dependencies.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class Rect(BaseModel):
    """
    Face region in the coordinate space of a raster.

    Detectors report floating point boxes that may extend past the raster
    edges, so coordinates are not range-checked here. Use clamp() before
    indexing.
    """

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    w: float = Field(..., gt=0, description="Width")
    h: float = Field(..., gt=0, description="Height")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_tuple(cls, box: Sequence[Union[int, float]]) -> "Rect":
        """Create Rect from an (x, y, w, h) sequence."""
        x, y, w, h = box[:4]
        return cls(x=x, y=y, w=w, h=h)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rect":
        """Create Rect from dictionary (accepts width/height aliases)."""
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            w=data.get("w", data.get("width", 0)),
            h=data.get("h", data.get("height", 0)),
        )

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.w, self.h)

    @property
    def area(self) -> float:
        return self.w * self.h

    def clamp(self, image_width: int, image_height: int) -> "Rect":
        """
        Clamp to image bounds with integer coordinates.

        The result always covers at least one pixel inside the image:
        a region that starts past the right or bottom edge collapses to
        the last column or row.

        Args:
            image_width: Raster width
            image_height: Raster height

        Returns:
            Rect with integral x, y, w, h fully inside the image
        """
        x = min(max(0, math.floor(self.x)), image_width - 1)
        y = min(max(0, math.floor(self.y)), image_height - 1)
        w = max(1, min(image_width - x, math.floor(self.w)))
        h = max(1, min(image_height - y, math.floor(self.h)))

        return Rect(x=x, y=y, w=w, h=h)

    def slices(self) -> tuple:
        """Row and column slices for a clamped Rect."""
        x, y, w, h = int(self.x), int(self.y), int(self.w), int(self.h)
        return slice(y, y + h), slice(x, x + w)

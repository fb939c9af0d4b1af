"""
Per-call parameters for the snapshot panels.

Slider values are supplied fresh on every render; nothing here is
persisted inside the pipeline.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from snaplab.common.constants import ProcessingConstants, ThresholdConstants


class ThresholdParams(BaseModel):
    """
    Threshold slider values.

    Contains the three RGB channel thresholds, the hue band centre and
    the Cr threshold, with validation and defaults.
    """

    model_config = ConfigDict(extra="forbid")

    red: int = Field(
        default=ThresholdConstants.DEFAULT_RED, ge=0, le=255, description="Red channel threshold"
    )
    green: int = Field(
        default=ThresholdConstants.DEFAULT_GREEN,
        ge=0,
        le=255,
        description="Green channel threshold",
    )
    blue: int = Field(
        default=ThresholdConstants.DEFAULT_BLUE, ge=0, le=255, description="Blue channel threshold"
    )
    hue_center: float = Field(
        default=ThresholdConstants.DEFAULT_HUE_CENTER,
        ge=ProcessingConstants.HUE_MIN_DEG,
        le=ProcessingConstants.HUE_MAX_DEG,
        description="Hue band centre in degrees",
    )
    cr: int = Field(
        default=ThresholdConstants.DEFAULT_CR, ge=0, le=255, description="Cr (red chroma) threshold"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Export parameters to dictionary."""
        return self.model_dump()

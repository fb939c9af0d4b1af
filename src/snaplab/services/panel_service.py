"""
Panel Service - Renders the fixed battery of panels for a snapshot.

This service ties the pure transforms together: it reads the current
snapshot, applies every transform with the supplied slider values and
returns the results keyed by panel name, ready for a renderer.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple, Union

import numpy as np

from snaplab.common.base import Rect
from snaplab.common.constants import ProcessingConstants
from snaplab.common.enums import FilterMode, Panel
from snaplab.config import Settings, configure_logging, get_settings
from snaplab.core.image import (
    grey_plus_20,
    hsv_hue_visual,
    replace_face_in_snapshot,
    split_rgb,
    threshold_hsv_hue_band,
    threshold_rgb,
    threshold_ycbcr_cr,
    ycbcr_y,
)
from snaplab.core.image.roi import RectLike, to_rect
from snaplab.core.mode_selector import ModeSelector
from snaplab.core.snapshot_buffer import SnapshotBuffer
from snaplab.schemas.params import ThresholdParams

logger = logging.getLogger(__name__)


class PanelSet:
    """
    Rendered panels for one snapshot version.

    A panel is None when there is nothing to show (no snapshot yet, or no
    face region for the replacement panel); renderers draw a placeholder.
    """

    def __init__(self, panels: Dict[Panel, Optional[np.ndarray]], version: int = 0):
        self.panels = panels
        self.version = version

    @classmethod
    def empty(cls) -> "PanelSet":
        return cls({panel: None for panel in Panel}, version=0)

    def __getitem__(self, panel: Union[Panel, str]) -> Optional[np.ndarray]:
        return self.panels[Panel(panel)]

    def __iter__(self) -> Iterator[Tuple[Panel, Optional[np.ndarray]]]:
        return iter(self.panels.items())

    def __len__(self) -> int:
        return len(self.panels)

    def missing(self) -> list:
        """Names of panels that should show a placeholder."""
        return [panel.value for panel, image in self.panels.items() if image is None]


class PanelService:
    """
    Service rendering every panel from the current snapshot.

    The face filter mode is read from the mode selector on each render and
    passed explicitly to the compositor.
    """

    def __init__(self, snapshot_buffer: SnapshotBuffer, mode_selector: ModeSelector):
        """
        Initialize panel service.

        Args:
            snapshot_buffer: Holder of the current snapshot
            mode_selector: Current face filter mode
        """
        self.snapshot_buffer = snapshot_buffer
        self.mode_selector = mode_selector

    def render(
        self,
        thresholds: Optional[ThresholdParams] = None,
        face_rect: Optional[RectLike] = None,
    ) -> PanelSet:
        """
        Render all panels from the current snapshot.

        Args:
            thresholds: Slider values (configured defaults when omitted)
            face_rect: Face region detected on the snapshot, if any

        Returns:
            PanelSet; every panel is None when no snapshot exists
        """
        snapshot, version = self.snapshot_buffer.get_with_version()
        if snapshot is None:
            logger.debug("No snapshot yet, rendering placeholders")
            return PanelSet.empty()

        panels = render_panels(
            snapshot,
            thresholds or get_settings().thresholds.to_params(),
            to_rect(face_rect) if face_rect is not None else None,
            self.mode_selector.mode,
        )
        return PanelSet(panels, version=version)


def create_panel_service(settings: Optional[Settings] = None) -> PanelService:
    """
    Build a PanelService with its snapshot buffer and mode selector.

    Logging is configured and the buffer sized from settings, the way
    the application wires its components at startup.

    Args:
        settings: Settings to use (cached settings when omitted)

    Returns:
        Ready to use PanelService
    """
    settings = settings or get_settings()
    configure_logging(settings)

    snapshot = settings.snapshot
    buffer = SnapshotBuffer(
        target_width=snapshot.width,
        target_height=snapshot.height,
        save_dir=snapshot.save_dir,
        file_stem=snapshot.file_stem,
    )
    logger.info(f"Panel service ready: {snapshot.width}x{snapshot.height} snapshots")
    return PanelService(buffer, ModeSelector())


def render_panels(
    snapshot: np.ndarray,
    thresholds: ThresholdParams,
    face_rect: Optional[Rect],
    mode: FilterMode,
) -> Dict[Panel, Optional[np.ndarray]]:
    """
    Apply the fixed transform battery to a snapshot.

    Each panel is computed independently from the same snapshot.

    Args:
        snapshot: RGBA snapshot raster
        thresholds: Slider values
        face_rect: Face region or None
        mode: Face filter mode

    Returns:
        Dictionary mapping every Panel to its raster (face panel may be None)
    """
    red, green, blue = split_rgb(snapshot)
    red_t, green_t, blue_t = threshold_rgb(
        snapshot, thresholds.red, thresholds.green, thresholds.blue
    )

    panels: Dict[Panel, Optional[np.ndarray]] = {
        Panel.GREY_BRIGHT: grey_plus_20(snapshot),
        Panel.RED: red,
        Panel.GREEN: green,
        Panel.BLUE: blue,
        Panel.RED_THRESHOLD: red_t,
        Panel.GREEN_THRESHOLD: green_t,
        Panel.BLUE_THRESHOLD: blue_t,
        Panel.SNAPSHOT: snapshot.copy(),
        Panel.HUE_VISUAL: hsv_hue_visual(snapshot),
        Panel.LUMA: ycbcr_y(snapshot),
        Panel.HUE_BAND: threshold_hsv_hue_band(
            snapshot, thresholds.hue_center, ProcessingConstants.HUE_BAND_HALF_WIDTH_DEG
        ),
        Panel.CR_THRESHOLD: threshold_ycbcr_cr(snapshot, thresholds.cr),
        Panel.FACE_REPLACED: replace_face_in_snapshot(snapshot, face_rect, mode),
    }

    logger.debug(
        f"Rendered {len(panels)} panels (mode={mode.value}, face={face_rect is not None})"
    )
    return panels

"""
Snapshot Buffer - Holds the single frozen frame all panels render from
"""

import logging
import time
from pathlib import Path
from threading import Lock
from typing import Dict, Optional, Tuple, Union

import cv2
import numpy as np

from snaplab.config import get_settings
from snaplab.core.image.converters import from_bgr, save_png
from snaplab.core.image.raster import validate_raster
from snaplab.exceptions import SnapshotNotAvailableException

logger = logging.getLogger(__name__)


class SnapshotBuffer:
    """
    Stores one snapshot at a fixed working resolution.

    Every capture replaces the previous snapshot and bumps a version
    counter, so consumers can tell whether their derived panels are stale.
    """

    def __init__(
        self,
        target_width: Optional[int] = None,
        target_height: Optional[int] = None,
        save_dir: Optional[Union[str, Path]] = None,
        file_stem: Optional[str] = None,
    ):
        """
        Initialize Snapshot Buffer

        Arguments left as None are read from the snapshot settings.

        Args:
            target_width: Working width every snapshot is resized to
            target_height: Working height every snapshot is resized to
            save_dir: Default directory for save()
            file_stem: Default file name (without extension) for save()
        """
        config = get_settings().snapshot
        target_width = config.width if target_width is None else target_width
        target_height = config.height if target_height is None else target_height
        self.save_dir = Path(config.save_dir if save_dir is None else save_dir)
        self.file_stem = config.file_stem if file_stem is None else file_stem

        if target_width <= 0 or target_height <= 0:
            raise ValueError(
                f"Working resolution must be positive, got {target_width}x{target_height}"
            )

        self.target_width = target_width
        self.target_height = target_height
        self.version = 0
        self.captured_at: Optional[float] = None

        self._image: Optional[np.ndarray] = None

        # Thread safety
        self.lock = Lock()

        logger.info(f"Snapshot buffer initialized: {target_width}x{target_height}")

    def capture(self, frame: np.ndarray, is_rgba: bool = False) -> int:
        """
        Freeze a frame as the current snapshot.

        Args:
            frame: OpenCV frame (BGR, BGRA or grayscale), or an RGBA raster
                when is_rgba is True
            is_rgba: Frame is already an RGBA raster

        Returns:
            New snapshot version
        """
        raster = validate_raster(frame) if is_rgba else from_bgr(frame)

        height, width = raster.shape[:2]
        if (width, height) != (self.target_width, self.target_height):
            raster = cv2.resize(
                raster, (self.target_width, self.target_height), interpolation=cv2.INTER_AREA
            )
        else:
            raster = raster.copy()

        with self.lock:
            self._image = raster
            self.version += 1
            self.captured_at = time.time()
            version = self.version

        logger.debug(f"Captured snapshot v{version} from {width}x{height} frame")
        return version

    def has(self) -> bool:
        """Check whether a snapshot has been captured"""
        with self.lock:
            return self._image is not None

    def get(self) -> Optional[np.ndarray]:
        """
        Get a copy of the current snapshot

        Returns:
            RGBA raster or None if nothing was captured yet
        """
        with self.lock:
            if self._image is None:
                return None
            return self._image.copy()

    def get_with_version(self) -> Tuple[Optional[np.ndarray], int]:
        """
        Get a copy of the current snapshot together with its version

        Both are read under one lock acquisition, so the version always
        belongs to the returned raster.
        """
        with self.lock:
            image = None if self._image is None else self._image.copy()
            return image, self.version

    def clear(self):
        """Drop the current snapshot"""
        with self.lock:
            self._image = None
            self.captured_at = None

    def save(
        self,
        directory: Optional[Union[str, Path]] = None,
        file_stem: Optional[str] = None,
    ) -> Path:
        """
        Save the current snapshot as PNG.

        Args:
            directory: Destination directory (buffer's save_dir when None)
            file_stem: File name without extension (buffer's file_stem when None)

        Returns:
            Path of the written file

        Raises:
            SnapshotNotAvailableException: If no snapshot was captured
        """
        image = self.get()
        if image is None:
            raise SnapshotNotAvailableException("save")

        directory = self.save_dir if directory is None else Path(directory)
        return save_png(image, directory / (file_stem or self.file_stem))

    def get_stats(self) -> Dict:
        """Get buffer statistics"""
        with self.lock:
            return {
                "has_snapshot": self._image is not None,
                "version": self.version,
                "width": self.target_width,
                "height": self.target_height,
                "captured_at": self.captured_at,
            }

"""
Constants and configuration values for SnapLab.
Centralizes all magic numbers used by the processing pipeline.
"""


# Raster Constants
class RasterConstants:
    """Constants describing the in-memory raster layout."""

    CHANNELS = 4  # R, G, B, A
    MIN_VALUE = 0
    MAX_VALUE = 255
    OPAQUE = 255

    # Luma weights (Rec. 709) used by the greyscale transforms
    LUMA_R = 0.2126
    LUMA_G = 0.7152
    LUMA_B = 0.0722

    # Rec. 601 weights used by the YCbCr conversion
    YCC_Y_R = 0.299
    YCC_Y_G = 0.587
    YCC_Y_B = 0.114


# Processing Constants
class ProcessingConstants:
    """Constants for the fixed transform battery."""

    # Greyscale + brightness panel
    BRIGHTNESS_GAIN = 1.2  # +20%

    # Hue band thresholding
    HUE_BAND_HALF_WIDTH_DEG = 20.0
    HUE_MIN_DEG = 0.0
    HUE_MAX_DEG = 360.0

    # Face privacy filters
    FACE_BLUR_RADIUS = 6
    PIXELATE_BLOCK_SIZE = 5


# Threshold slider defaults
class ThresholdConstants:
    """Initial slider values for the threshold panels."""

    DEFAULT_RED = 128
    DEFAULT_GREEN = 128
    DEFAULT_BLUE = 128
    DEFAULT_HUE_CENTER = 0
    DEFAULT_CR = 128


# Snapshot Constants
class SnapshotConstants:
    """Constants related to snapshot capture and persistence."""

    WORKING_WIDTH = 160
    WORKING_HEIGHT = 120
    MIN_DIMENSION = 1
    MAX_DIMENSION = 4096

    DEFAULT_SAVE_DIR = "."
    DEFAULT_FILE_STEM = "snapshot"
    FILE_EXTENSION = ".png"
    PNG_COMPRESSION = 3  # OpenCV default (0-9)


# System Constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# Color Constants (RGBA format, matching the raster layout)
class Colors:
    """Reference colors used by test patterns and tests (RGBA)."""

    RED = (255, 0, 0, 255)
    GREEN = (0, 255, 0, 255)
    BLUE = (0, 0, 255, 255)
    CYAN = (0, 255, 255, 255)
    WHITE = (255, 255, 255, 255)
    BLACK = (0, 0, 0, 255)

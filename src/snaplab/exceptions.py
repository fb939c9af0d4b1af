"""
Custom exceptions for SnapLab.
Provides consistent error reporting across the pipeline and its services.
"""

from typing import Dict, Optional


class SnapLabException(Exception):
    """Base exception for SnapLab."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidRasterError(SnapLabException, ValueError):
    """Raised when an array does not satisfy the raster contract."""

    def __init__(self, reason: str, shape: Optional[tuple] = None):
        super().__init__(
            message=f"Invalid raster: {reason}",
            details={"reason": reason, "shape": shape},
        )


class SnapshotNotAvailableException(SnapLabException):
    """Raised when an operation needs a snapshot but none was captured."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"No snapshot available for {operation}",
            details={"operation": operation},
        )


class PersistenceException(SnapLabException):
    """Raised when encoding or writing an image fails."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Failed to save image to {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ConfigurationException(SnapLabException):
    """Raised when configuration is invalid."""

    def __init__(self, config_key: str, reason: str):
        super().__init__(
            message=f"Invalid configuration for {config_key}: {reason}",
            details={"config_key": config_key, "reason": reason},
        )


# Standard Messages
class ErrorMessages:
    """Standard error messages."""

    # Raster errors
    RASTER_NOT_ARRAY = "expected numpy.ndarray, got {type}"
    RASTER_BAD_SHAPE = "expected shape (height, width, 4), got {shape}"
    RASTER_BAD_DTYPE = "expected dtype uint8, got {dtype}"
    RASTER_EMPTY = "width and height must be positive, got {width}x{height}"

    # Parameter errors
    NEGATIVE_RADIUS = "blur radius must be >= 0, got {radius}"
    INVALID_BLOCK_SIZE = "block size must be >= 1, got {block_size}"

    # Snapshot errors
    DECODE_FAILED = "failed to decode image data"
    ENCODE_FAILED = "failed to encode image as {format}"

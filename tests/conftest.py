"""
Pytest configuration and fixtures for SnapLab tests
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from snaplab.common.constants import Colors
from snaplab.config import reload_settings
from snaplab.core.image.test_patterns import create_horizontal_gradient, create_solid
from snaplab.core.mode_selector import ModeSelector
from snaplab.core.snapshot_buffer import SnapshotBuffer


@pytest.fixture
def red_snapshot():
    """160x120 opaque pure red snapshot"""
    return create_solid(160, 120, Colors.RED)


@pytest.fixture
def gradient_snapshot():
    """160x120 opaque grey gradient"""
    return create_horizontal_gradient(160, 120)


@pytest.fixture
def random_image():
    """Random RGBA raster with a fixed seed"""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(30, 40, 4), dtype=np.uint8)


@pytest.fixture
def snapshot_buffer():
    """Empty SnapshotBuffer at the working resolution"""
    return SnapshotBuffer(160, 120)


@pytest.fixture
def mode_selector():
    """ModeSelector in its initial state"""
    return ModeSelector()


@pytest.fixture
def mock_snapshot_buffer(red_snapshot):
    """Create mock SnapshotBuffer for unit testing"""
    mock = MagicMock()
    mock.get.return_value = red_snapshot
    mock.get_with_version.return_value = (red_snapshot, 3)
    mock.has.return_value = True
    mock.version = 3
    return mock


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from SNAPLAB_* environment variables and cached settings"""
    import os

    for key in list(os.environ):
        if key.startswith("SNAPLAB_"):
            monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    reload_settings()

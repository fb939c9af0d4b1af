"""
Services package - orchestration on top of the pure pipeline.
"""

from snaplab.services.panel_service import (
    PanelService,
    PanelSet,
    create_panel_service,
    render_panels,
)

__all__ = [
    "PanelService",
    "PanelSet",
    "create_panel_service",
    "render_panels",
]

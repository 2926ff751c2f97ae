"""Rendering and export

The GL preview window lives in ``preview_window`` and is imported on demand,
so exporting works without a display.
"""
from .figure_renderer import FigureRenderer
from .sprite_sheet import SpriteSheetExporter, frame_times

__all__ = [
    "FigureRenderer",
    "SpriteSheetExporter",
    "frame_times",
]

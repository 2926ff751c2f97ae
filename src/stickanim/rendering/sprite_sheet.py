"""
Sprite Sheet Exporter

Samples an animation at evenly spaced times and writes the frames as a grid
image (sprite sheet) or as a numbered PNG sequence. Sampling goes through the
pure sampler, so live playback on any figure is never touched.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image

from ..animation.animation import Animation, sample_pose
from ..config.settings import (
    BACKGROUND_COLOR,
    DEFAULT_FRAME_COUNT,
    DEFAULT_SHEET_COLUMNS,
    SPRITE_FRAME_SIZE,
)
from ..figure.pose import Pose
from .figure_renderer import FigureRenderer


logger = logging.getLogger(__name__)


def frame_times(duration: float, frame_count: int) -> List[float]:
    """
    Evenly spaced sample times covering [0, duration], both ends included.

    A single frame samples time 0.
    """
    if frame_count < 1:
        raise ValueError(f"frame_count must be at least 1, got {frame_count}")
    if frame_count == 1:
        return [0.0]
    return [float(t) for t in np.linspace(0.0, duration, frame_count)]


class SpriteSheetExporter:
    """Renders animation frames into sprite sheets and image sequences."""

    def __init__(
        self,
        frame_size: Tuple[int, int] = SPRITE_FRAME_SIZE,
        background: Tuple[int, int, int, int] = BACKGROUND_COLOR,
    ):
        """
        Initialize exporter.

        Args:
            frame_size: Size of one frame cell (width, height)
            background: RGBA fill for each cell
        """
        self.frame_size = frame_size
        self.renderer = FigureRenderer(size=frame_size, background=background)

    def render_frames(
        self,
        animation: Animation,
        base_pose: Pose,
        frame_count: int = DEFAULT_FRAME_COUNT,
    ) -> List[Image.Image]:
        """
        Render one image per sample time.

        The figure is anchored so that the base pose position lands in the
        center of each cell; motion relative to it is preserved.
        """
        if animation.is_empty:
            raise ValueError(f"Cannot export animation '{animation.name}': it has no keyframes")

        width, height = self.frame_size
        offset = (width / 2 - base_pose.x, height / 2 - base_pose.y)

        frames = []
        for time in frame_times(animation.duration, frame_count):
            pose = sample_pose(animation, time, base_pose)
            image = Image.new("RGBA", self.frame_size, self.renderer.background)
            self.renderer.draw(image, pose, offset=offset)
            frames.append(image)
        return frames

    def compose_sheet(self, frames: List[Image.Image], columns: int = DEFAULT_SHEET_COLUMNS) -> Image.Image:
        """Paste frames row by row into a single grid image."""
        if not frames:
            raise ValueError("Cannot compose a sprite sheet without frames")
        if columns < 1:
            raise ValueError(f"columns must be at least 1, got {columns}")

        columns = min(columns, len(frames))
        rows = math.ceil(len(frames) / columns)
        width, height = self.frame_size

        sheet = Image.new("RGBA", (columns * width, rows * height), (0, 0, 0, 0))
        for index, frame in enumerate(frames):
            row, col = divmod(index, columns)
            sheet.paste(frame, (col * width, row * height))
        return sheet

    def export_sheet(
        self,
        animation: Animation,
        base_pose: Pose,
        path: Path | str,
        frame_count: int = DEFAULT_FRAME_COUNT,
        columns: int = DEFAULT_SHEET_COLUMNS,
    ) -> Path:
        """Render frames and save them as one PNG sprite sheet."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        frames = self.render_frames(animation, base_pose, frame_count)
        sheet = self.compose_sheet(frames, columns)
        sheet.save(output_path, format="PNG")
        logger.info(
            "Exported sprite sheet for '%s' (%d frames, %dx%d) to %s",
            animation.name, len(frames), sheet.width, sheet.height, output_path,
        )
        return output_path

    def export_frames(
        self,
        animation: Animation,
        base_pose: Pose,
        output_dir: Path | str,
        frame_count: int = DEFAULT_FRAME_COUNT,
        prefix: Optional[str] = None,
    ) -> List[Path]:
        """Render frames and save each one as ``<prefix>_<index>.png``."""
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        stem = prefix or _safe_name(animation.name)

        paths = []
        for index, frame in enumerate(self.render_frames(animation, base_pose, frame_count)):
            frame_path = directory / f"{stem}_{index:03d}.png"
            frame.save(frame_path, format="PNG")
            paths.append(frame_path)
        logger.info("Exported %d frames for '%s' to %s", len(paths), animation.name, directory)
        return paths


def _safe_name(name: str) -> str:
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in name)

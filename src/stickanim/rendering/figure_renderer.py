"""
Figure Renderer

Draws stick figure poses into Pillow images.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..config.settings import BACKGROUND_COLOR, CANVAS_SIZE
from ..figure.pose import Pose
from ..figure.stick_figure import compute_joint_positions


class FigureRenderer:
    """Rasterizes a Pose with the same layout as the interactive canvas."""

    def __init__(
        self,
        size: Tuple[int, int] = CANVAS_SIZE,
        background: Tuple[int, int, int, int] = BACKGROUND_COLOR,
    ):
        """
        Initialize renderer.

        Args:
            size: Output image size (width, height)
            background: RGBA fill for new images
        """
        self.size = size
        self.background = background

    def render(self, pose: Pose) -> Image.Image:
        """Render a pose into a new RGBA image."""
        image = Image.new("RGBA", self.size, self.background)
        self.draw(image, pose)
        return image

    def draw(self, image: Image.Image, pose: Pose, offset: Optional[Tuple[float, float]] = None) -> None:
        """
        Draw a pose onto an existing image.

        Args:
            image: Target image (modified in place)
            pose: Pose to draw
            offset: Extra translation applied to every joint (pixels)
        """
        joints = compute_joint_positions(pose)
        shift = np.array(offset if offset is not None else (0.0, 0.0), dtype=float)
        width = max(1, int(round(pose.line_width)))
        draw = ImageDraw.Draw(image)

        def point(name: str) -> Tuple[float, float]:
            x, y = joints[name] + shift
            return float(x), float(y)

        # Head
        radius = float(joints["head_radius"])
        cx, cy = point("head")
        draw.ellipse(
            (cx - radius, cy - radius, cx + radius, cy + radius),
            fill=pose.head_color,
            outline=pose.body_color,
            width=width,
        )

        # Torso
        draw.line([point("neck"), point("hip")], fill=pose.body_color, width=width)

        # Limbs
        for root, middle, end in (
            ("shoulder", "left_elbow", "left_hand"),
            ("shoulder", "right_elbow", "right_hand"),
            ("hip", "left_knee", "left_foot"),
            ("hip", "right_knee", "right_foot"),
        ):
            draw.line([point(root), point(middle)], fill=pose.limb_color, width=width)
            draw.line([point(middle), point(end)], fill=pose.limb_color, width=width)
            ex, ey = point(end)
            dot = pose.line_width
            draw.ellipse((ex - dot, ey - dot, ex + dot, ey + dot), fill=pose.limb_color)

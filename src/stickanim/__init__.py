"""
stickanim - Stick Figure Keyframe Animator

Pose an articulated stick figure, record poses as timed keyframes, play them
back with eased interpolation and export sprite sheets.
"""

# Configuration
from .config.settings import *

# Figure
from .figure.pose import Pose, PartialPose, create_default_pose, merge_pose
from .figure.stick_figure import StickFigure

# Animation
from .animation import (
    Animation,
    AnimationCatalog,
    Animator,
    Keyframe,
    PlaybackState,
    PoseRecorder,
    sample_keyframes,
    sample_pose,
)

# Rendering / export
from .rendering import FigureRenderer, SpriteSheetExporter

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Figure
    "Pose",
    "PartialPose",
    "create_default_pose",
    "merge_pose",
    "StickFigure",
    # Animation
    "Keyframe",
    "Animation",
    "AnimationCatalog",
    "Animator",
    "PlaybackState",
    "PoseRecorder",
    "sample_keyframes",
    "sample_pose",
    # Rendering
    "FigureRenderer",
    "SpriteSheetExporter",
]

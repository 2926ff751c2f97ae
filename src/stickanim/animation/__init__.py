"""
Animation System

Keyframe animation data, sampling and playback for stick figures.
"""

from .animation import (
    Animation,
    Keyframe,
    ease_in_out_quad,
    interpolate_params,
    lerp,
    sample_keyframes,
    sample_pose,
)
from .animation_controller import Animator, PlaybackState
from .catalog import AnimationCatalog
from .recorder import PoseRecorder

__all__ = [
    'Keyframe',
    'Animation',
    'ease_in_out_quad',
    'lerp',
    'interpolate_params',
    'sample_keyframes',
    'sample_pose',
    'Animator',
    'PlaybackState',
    'AnimationCatalog',
    'PoseRecorder',
]

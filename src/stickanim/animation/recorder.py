"""
Pose Recorder

Builds animations by capturing the figure's pose at chosen times, the way a
user poses the figure and records keyframes one by one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..figure.pose import PartialPose
from .animation import Animation, Keyframe

if TYPE_CHECKING:
    from ..figure.stick_figure import StickFigure


class PoseRecorder:
    """Records keyframes from a figure and turns them into an Animation."""

    def __init__(self, figure: StickFigure):
        self.figure = figure
        self._captures: Dict[float, Keyframe] = {}

    @property
    def keyframe_count(self) -> int:
        return len(self._captures)

    @property
    def keyframes(self) -> List[Keyframe]:
        return [self._captures[t] for t in sorted(self._captures)]

    def capture(self, time: float) -> Keyframe:
        """Record the figure's full current pose at ``time``."""
        params = PartialPose.from_pose(self.figure.get_pose())
        return self._store(Keyframe(time, params))

    def capture_partial(self, time: float, params: Union[PartialPose, Dict[str, Any]]) -> Keyframe:
        """Record only the given parameters at ``time``."""
        return self._store(Keyframe(time, params))

    def clear(self) -> None:
        self._captures.clear()

    def build(self, name: str, loop: bool = False, duration: Optional[float] = None) -> Animation:
        """
        Create an animation from the recorded keyframes.

        Args:
            name: Animation name
            loop: Whether the animation loops
            duration: Total duration; defaults to the last recorded time

        Raises:
            ValueError: If nothing was recorded or the duration would be zero
        """
        if not self._captures:
            raise ValueError(f"Cannot build animation '{name}': no keyframes recorded")
        if duration is None:
            duration = max(self._captures)
        return Animation(name, duration, loop=loop, keyframes=self.keyframes)

    def _store(self, keyframe: Keyframe) -> Keyframe:
        self._captures[keyframe.time] = keyframe
        return keyframe


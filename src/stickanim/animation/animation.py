"""
Animation

Keyframe animation data and sampling.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Any, Dict, List, Optional, Sequence, Union

from ..figure.pose import CATEGORICAL_PARAMS, NUMERIC_PARAMS, PartialPose, Pose, merge_pose


class Keyframe:
    """
    Single keyframe in an animation.

    Stores a time and the partial pose recorded at that time.
    """

    def __init__(self, time: float, params: Union[PartialPose, Dict[str, Any]]):
        """
        Initialize keyframe.

        Args:
            time: Time in seconds (non-negative)
            params: Pose parameters set at this time (PartialPose or JSON dict)
        """
        time = float(time)
        if not math.isfinite(time) or time < 0.0:
            raise ValueError(f"Keyframe time must be finite and non-negative, got {time}")
        self.time = time
        self.params = params if isinstance(params, PartialPose) else PartialPose.from_dict(params)

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "params": self.params.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Keyframe":
        if not isinstance(data, dict):
            raise ValueError(f"Keyframe definition must be an object, got {data!r}")
        if "time" not in data:
            raise ValueError("Keyframe is missing required 'time' field")
        time = data["time"]
        if isinstance(time, bool) or not isinstance(time, (int, float)):
            raise ValueError(f"Keyframe time must be a number, got {time!r}")
        return cls(time, data.get("params", {}))

    def __repr__(self):
        return f"Keyframe(t={self.time:.3f}, params={list(self.params.set_names())})"


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in/ease-out over [0, 1]."""
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def interpolate_params(start: PartialPose, end: PartialPose, t: float) -> PartialPose:
    """
    Blend two partial poses.

    Numeric parameters set on both sides are eased and interpolated; a
    parameter set on one side only keeps that value. Categorical parameters
    never blend: the end value wins when present.

    Args:
        start: Pose at the earlier keyframe
        end: Pose at the later keyframe
        t: Normalized position between the keyframes [0, 1]
    """
    eased = ease_in_out_quad(t)
    result = PartialPose()

    for name in NUMERIC_PARAMS:
        start_value = getattr(start, name)
        end_value = getattr(end, name)
        if start_value is not None and end_value is not None:
            setattr(result, name, lerp(start_value, end_value, eased))
        elif end_value is not None:
            setattr(result, name, end_value)
        elif start_value is not None:
            setattr(result, name, start_value)

    for name in CATEGORICAL_PARAMS:
        end_value = getattr(end, name)
        setattr(result, name, end_value if end_value is not None else getattr(start, name))

    return result


def sample_keyframes(keyframes: Sequence[Keyframe], time: float) -> PartialPose:
    """
    Sample keyframes at a given time.

    Args:
        keyframes: Keyframes sorted ascending by time
        time: Time in seconds

    Returns:
        Interpolated partial pose (only parameters set by the bracketing keyframes)
    """
    if not keyframes:
        raise ValueError("Cannot sample an animation with no keyframes")

    # Clamp time to keyframe range
    if time <= keyframes[0].time:
        return keyframes[0].params.copy()
    if time >= keyframes[-1].time:
        return keyframes[-1].params.copy()

    # Find surrounding keyframes
    for i in range(len(keyframes) - 1):
        k0 = keyframes[i]
        k1 = keyframes[i + 1]

        if k0.time <= time <= k1.time:
            # Equal-time pairs only match at their shared time, where an earlier pair wins first
            t = (time - k0.time) / (k1.time - k0.time) if k1.time > k0.time else 0.0
            return interpolate_params(k0.params, k1.params, t)

    return keyframes[-1].params.copy()


class Animation:
    """
    Named keyframe animation.

    Keyframes are kept sorted by time with at most one keyframe per time.
    Playback clamps to ``duration`` independently of where the keyframes end.
    """

    def __init__(
        self,
        name: str,
        duration: float,
        loop: bool = False,
        keyframes: Optional[Sequence[Keyframe]] = None,
    ):
        """
        Initialize animation.

        Args:
            name: Animation name (unique within a catalog)
            duration: Total duration in seconds (positive)
            loop: Whether playback wraps around at the end
            keyframes: Initial keyframes in any order; later duplicates of a
                time replace earlier ones
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Animation name must be a non-empty string")
        duration = float(duration)
        if not math.isfinite(duration) or duration <= 0.0:
            raise ValueError(f"Animation '{name}' duration must be finite and positive, got {duration}")

        self.name = name
        self.duration = duration
        self.loop = bool(loop)
        self.keyframes: List[Keyframe] = []
        for keyframe in keyframes or []:
            self._insert(keyframe)

    @property
    def is_empty(self) -> bool:
        return not self.keyframes

    def add_keyframe(self, time: float, params: Union[PartialPose, Dict[str, Any]]) -> Keyframe:
        """Add a keyframe, replacing any keyframe already at this time."""
        keyframe = Keyframe(time, params)
        self._insert(keyframe)
        return keyframe

    def remove_keyframe(self, time: float) -> bool:
        """Remove the keyframe at exactly this time. Returns True if one was removed."""
        index = self._index_of(float(time))
        if index is None:
            return False
        del self.keyframes[index]
        return True

    def keyframe_at(self, time: float) -> Optional[Keyframe]:
        index = self._index_of(float(time))
        return self.keyframes[index] if index is not None else None

    def fit_duration(self) -> None:
        """Set duration to the last keyframe time (if that time is positive)."""
        if self.keyframes and self.keyframes[-1].time > 0.0:
            self.duration = self.keyframes[-1].time

    def sample(self, time: float) -> PartialPose:
        """
        Sample the animation at a given time.

        Raises:
            ValueError: If the animation has no keyframes
        """
        return sample_keyframes(self.keyframes, time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "loop": self.loop,
            "keyframes": [keyframe.to_dict() for keyframe in self.keyframes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Animation":
        """
        Create an animation from JSON data.

        Example JSON:
            {
                "name": "wave",
                "duration": 1.0,
                "loop": true,
                "keyframes": [
                    {"time": 0.0, "params": {"right_shoulder_angle": -0.78}},
                    {"time": 0.5, "params": {"right_shoulder_angle": -2.6}}
                ]
            }
        """
        if not isinstance(data, dict):
            raise ValueError(f"Animation definition must be an object, got {data!r}")
        if "name" not in data:
            raise ValueError("Animation definition is missing required 'name' field")
        if "duration" not in data:
            raise ValueError(f"Animation '{data['name']}' is missing required 'duration' field")

        name = data["name"]
        duration = data["duration"]
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise ValueError(f"Animation '{name}' duration must be a number, got {duration!r}")
        loop = data.get("loop", False)
        if not isinstance(loop, bool):
            raise ValueError(f"Animation '{name}' loop must be true or false, got {loop!r}")
        items = data.get("keyframes", [])
        if not isinstance(items, list):
            raise ValueError(f"Animation '{name}' keyframes must be a list, got {items!r}")

        keyframes = [Keyframe.from_dict(item) for item in items]
        return cls(
            name=name,
            duration=duration,
            loop=loop,
            keyframes=keyframes,
        )

    def _insert(self, keyframe: Keyframe) -> None:
        times = [kf.time for kf in self.keyframes]
        index = bisect_left(times, keyframe.time)
        if index < len(times) and times[index] == keyframe.time:
            self.keyframes[index] = keyframe
        else:
            self.keyframes.insert(index, keyframe)

    def _index_of(self, time: float) -> Optional[int]:
        times = [kf.time for kf in self.keyframes]
        index = bisect_left(times, time)
        if index < len(times) and times[index] == time:
            return index
        return None

    def __repr__(self):
        return (
            f"Animation(name='{self.name}', duration={self.duration:.2f}s, "
            f"loop={self.loop}, keyframes={len(self.keyframes)})"
        )


def sample_pose(animation: Animation, time: float, base: Pose) -> Pose:
    """
    Sample an animation and overlay the result on a base pose.

    Pure: neither the animation nor ``base`` is modified, and repeated calls
    with the same arguments give equal poses.
    """
    return merge_pose(base, animation.sample(time))

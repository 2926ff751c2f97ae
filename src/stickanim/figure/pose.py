"""
Pose

Typed figure parameters. A Pose is the complete configuration of one stick
figure at an instant; a PartialPose carries one optional slot per parameter
and is what keyframes store.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional, Tuple

from ..config.settings import DEFAULT_FIGURE_POSITION


# Parameters that blend between keyframes
NUMERIC_PARAMS: Tuple[str, ...] = (
    "x",
    "y",
    "scale",
    # Joint angles (radians)
    "head_tilt",
    "neck_angle",
    "torso_angle",
    # Bone lengths (base units)
    "torso_length",
    "upper_arm_length",
    "forearm_length",
    "thigh_length",
    "calf_length",
    # Arms
    "left_shoulder_angle",
    "left_elbow_angle",
    "right_shoulder_angle",
    "right_elbow_angle",
    # Legs
    "left_hip_angle",
    "left_knee_angle",
    "right_hip_angle",
    "right_knee_angle",
    "line_width",
)

# Parameters that switch at keyframe boundaries
CATEGORICAL_PARAMS: Tuple[str, ...] = (
    "head_color",
    "body_color",
    "limb_color",
)

PARAM_NAMES: Tuple[str, ...] = NUMERIC_PARAMS + CATEGORICAL_PARAMS

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass
class Pose:
    """Complete stick figure configuration."""

    x: float = DEFAULT_FIGURE_POSITION[0]
    y: float = DEFAULT_FIGURE_POSITION[1]
    scale: float = 1.0

    head_tilt: float = 0.0
    neck_angle: float = 0.0
    torso_angle: float = 0.0

    torso_length: float = 50.0
    upper_arm_length: float = 35.0
    forearm_length: float = 30.0
    thigh_length: float = 40.0
    calf_length: float = 35.0

    left_shoulder_angle: float = math.pi / 4
    left_elbow_angle: float = math.pi / 6
    right_shoulder_angle: float = -math.pi / 4
    right_elbow_angle: float = -math.pi / 6

    left_hip_angle: float = math.pi / 8
    left_knee_angle: float = math.pi / 12
    right_hip_angle: float = -math.pi / 8
    right_knee_angle: float = -math.pi / 12

    line_width: float = 4.0

    head_color: str = "#FFD1A3"
    body_color: str = "#333333"
    limb_color: str = "#333333"

    def copy(self) -> "Pose":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PartialPose:
    """
    Subset of pose parameters.

    Every slot defaults to None, meaning the parameter is not set and the
    value underneath (baseline or figure pose) shows through.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    scale: Optional[float] = None

    head_tilt: Optional[float] = None
    neck_angle: Optional[float] = None
    torso_angle: Optional[float] = None

    torso_length: Optional[float] = None
    upper_arm_length: Optional[float] = None
    forearm_length: Optional[float] = None
    thigh_length: Optional[float] = None
    calf_length: Optional[float] = None

    left_shoulder_angle: Optional[float] = None
    left_elbow_angle: Optional[float] = None
    right_shoulder_angle: Optional[float] = None
    right_elbow_angle: Optional[float] = None

    left_hip_angle: Optional[float] = None
    left_knee_angle: Optional[float] = None
    right_hip_angle: Optional[float] = None
    right_knee_angle: Optional[float] = None

    line_width: Optional[float] = None

    head_color: Optional[str] = None
    body_color: Optional[str] = None
    limb_color: Optional[str] = None

    @classmethod
    def from_pose(cls, pose: Pose) -> "PartialPose":
        """Capture every slot of a complete pose."""
        return cls(**{name: getattr(pose, name) for name in PARAM_NAMES})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartialPose":
        """
        Create a partial pose from JSON data.

        Accepts snake_case names as well as the camelCase names used by the
        browser version of the tool (e.g. ``leftShoulderAngle``).

        Raises:
            ValueError: On unknown parameter names or wrongly typed values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Pose parameters must be an object, got {data!r}")
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _normalize_param_name(key)
            if name in NUMERIC_PARAMS:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"Pose parameter '{key}' must be a number, got {value!r}")
                values[name] = float(value)
            elif name in CATEGORICAL_PARAMS:
                if not isinstance(value, str):
                    raise ValueError(f"Pose parameter '{key}' must be a string, got {value!r}")
                values[name] = value
            else:
                raise ValueError(f"Unknown pose parameter: {key}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize only the slots that are set."""
        return {name: getattr(self, name) for name in PARAM_NAMES if getattr(self, name) is not None}

    def set_names(self) -> Tuple[str, ...]:
        return tuple(name for name in PARAM_NAMES if getattr(self, name) is not None)

    def is_empty(self) -> bool:
        return not self.set_names()

    def copy(self) -> "PartialPose":
        return replace(self)


def create_default_pose(x: float = DEFAULT_FIGURE_POSITION[0], y: float = DEFAULT_FIGURE_POSITION[1]) -> Pose:
    """Return the default standing pose at the given canvas position."""
    return Pose(x=x, y=y)


def merge_pose(base: Pose, partial: PartialPose) -> Pose:
    """
    Overlay a partial pose on a complete one.

    Set slots in ``partial`` win; unset slots keep the value from ``base``.
    Neither argument is modified.
    """
    overrides = {
        name: getattr(partial, name)
        for name in PARAM_NAMES
        if getattr(partial, name) is not None
    }
    return replace(base, **overrides)


def _normalize_param_name(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


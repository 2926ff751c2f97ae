"""
Stick Figure

Mutable figure instance that animation playback writes into and the renderer
reads from. Also computes joint positions from the pose (forward kinematics
over the fixed limb chain).
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Union

import numpy as np

from ..config.settings import HEAD_RADIUS
from .pose import PartialPose, Pose, create_default_pose, merge_pose


class StickFigure:
    """
    Articulated 2D stick figure.

    Canvas coordinates: x grows right, y grows down. A limb segment of length
    L at angle a ends at start + L * (sin a, cos a), so angle 0 points
    straight down.
    """

    def __init__(self, params: Optional[PartialPose] = None):
        """
        Initialize figure from the default pose.

        Args:
            params: Optional overrides applied on top of the default pose
        """
        self._pose = create_default_pose()
        if params is not None:
            self._pose = merge_pose(self._pose, params)

    def get_pose(self) -> Pose:
        """Return a copy of the current pose."""
        return self._pose.copy()

    def set_pose(self, pose: Union[Pose, PartialPose]) -> None:
        """Replace (Pose) or overlay (PartialPose) the current pose."""
        if isinstance(pose, PartialPose):
            self._pose = merge_pose(self._pose, pose)
        else:
            self._pose = pose.copy()

    def joint_positions(self) -> Dict[str, np.ndarray]:
        """Compute canvas positions of every joint for the current pose."""
        return compute_joint_positions(self._pose)

    def __repr__(self):
        p = self._pose
        return f"StickFigure(x={p.x:.1f}, y={p.y:.1f}, scale={p.scale:.2f})"


def compute_joint_positions(pose: Pose) -> Dict[str, np.ndarray]:
    """
    Forward kinematics for a pose.

    Returns:
        Dictionary mapping joint name -> np.ndarray([x, y]) in canvas space.
        Also contains 'head_radius' as a 0-d array.
    """
    s = pose.scale
    origin = np.array([pose.x, pose.y], dtype=float)

    head_radius = HEAD_RADIUS * s
    torso_length = pose.torso_length * s
    upper_arm = pose.upper_arm_length * s
    forearm = pose.forearm_length * s
    thigh = pose.thigh_length * s
    calf = pose.calf_length * s

    neck = np.array([0.0, -torso_length / 2])
    head = np.array([
        head_radius * math.sin(pose.head_tilt),
        -torso_length / 2 - head_radius + head_radius * (1 - math.cos(pose.head_tilt)),
    ])
    hip = neck + _segment(torso_length, pose.torso_angle)
    shoulder = np.array([0.0, -torso_length / 2 + 5 * s])

    left_elbow, left_hand = _limb(shoulder, pose.left_shoulder_angle, pose.left_elbow_angle, upper_arm, forearm)
    right_elbow, right_hand = _limb(shoulder, pose.right_shoulder_angle, pose.right_elbow_angle, upper_arm, forearm)
    left_knee, left_foot = _limb(hip, pose.left_hip_angle, pose.left_knee_angle, thigh, calf)
    right_knee, right_foot = _limb(hip, pose.right_hip_angle, pose.right_knee_angle, thigh, calf)

    local = {
        "head": head,
        "neck": neck,
        "shoulder": shoulder,
        "hip": hip,
        "left_elbow": left_elbow,
        "left_hand": left_hand,
        "right_elbow": right_elbow,
        "right_hand": right_hand,
        "left_knee": left_knee,
        "left_foot": left_foot,
        "right_knee": right_knee,
        "right_foot": right_foot,
    }
    joints = {name: origin + offset for name, offset in local.items()}
    joints["head_radius"] = np.array(head_radius)
    return joints


def _segment(length: float, angle: float) -> np.ndarray:
    return np.array([length * math.sin(angle), length * math.cos(angle)])


def _limb(start: np.ndarray, root_angle: float, bend_angle: float, upper: float, lower: float):
    """Two-segment chain; the lower segment angle is relative to the upper."""
    middle = start + _segment(upper, root_angle)
    end = middle + _segment(lower, root_angle + bend_angle)
    return middle, end

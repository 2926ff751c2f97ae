"""Figure pose model and stick figure sink"""
from .pose import (
    CATEGORICAL_PARAMS,
    NUMERIC_PARAMS,
    PARAM_NAMES,
    PartialPose,
    Pose,
    create_default_pose,
    merge_pose,
)
from .stick_figure import StickFigure, compute_joint_positions

__all__ = [
    "Pose",
    "PartialPose",
    "NUMERIC_PARAMS",
    "CATEGORICAL_PARAMS",
    "PARAM_NAMES",
    "create_default_pose",
    "merge_pose",
    "StickFigure",
    "compute_joint_positions",
]

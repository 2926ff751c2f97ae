"""Tests for PoseRecorder"""

import pytest

from stickanim.animation.recorder import PoseRecorder
from stickanim.figure.pose import PARAM_NAMES, PartialPose
from stickanim.figure.stick_figure import StickFigure


def test_capture_records_full_pose():
    """capture() stores every parameter of the current figure pose"""
    figure = StickFigure()
    recorder = PoseRecorder(figure)

    figure.set_pose(PartialPose(left_elbow_angle=1.2))
    keyframe = recorder.capture(0.0)

    assert keyframe.params.set_names() == PARAM_NAMES
    assert keyframe.params.left_elbow_angle == 1.2


def test_build_animation_from_captures():
    """Captured poses become a sorted animation ending at the last capture"""
    figure = StickFigure()
    recorder = PoseRecorder(figure)

    figure.set_pose(PartialPose(torso_angle=0.5))
    recorder.capture(1.0)
    figure.set_pose(PartialPose(torso_angle=0.0))
    recorder.capture(0.0)

    animation = recorder.build("bow", loop=True)

    assert animation.name == "bow"
    assert animation.loop is True
    assert animation.duration == 1.0
    assert [kf.time for kf in animation.keyframes] == [0.0, 1.0]
    assert animation.keyframes[1].params.torso_angle == 0.5


def test_capture_same_time_replaces():
    """Recording twice at one time keeps only the latest capture"""
    recorder = PoseRecorder(StickFigure())
    recorder.capture_partial(0.5, PartialPose(x=1.0))
    recorder.capture_partial(0.5, {"x": 2.0})

    assert recorder.keyframe_count == 1
    assert recorder.keyframes[0].params.x == 2.0


def test_build_with_explicit_duration():
    """An explicit duration overrides the last capture time"""
    recorder = PoseRecorder(StickFigure())
    recorder.capture_partial(0.0, PartialPose(x=0.0))
    recorder.capture_partial(0.5, PartialPose(x=5.0))

    assert recorder.build("slide", duration=2.0).duration == 2.0


def test_build_without_captures_raises():
    """Empty recordings cannot become animations"""
    recorder = PoseRecorder(StickFigure())
    with pytest.raises(ValueError):
        recorder.build("nothing")

    recorder.capture(0.0)
    with pytest.raises(ValueError):
        recorder.build("instant")

    recorder.clear()
    assert recorder.keyframe_count == 0

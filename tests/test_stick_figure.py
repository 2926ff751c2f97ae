"""Tests for StickFigure and FigureRenderer"""

import math

import numpy as np

from stickanim.figure.pose import PartialPose, create_default_pose
from stickanim.figure.stick_figure import StickFigure, compute_joint_positions
from stickanim.rendering.figure_renderer import FigureRenderer


def test_figure_initialization():
    """Figures start from the default pose plus overrides"""
    figure = StickFigure(PartialPose(x=10.0))
    pose = figure.get_pose()

    assert pose.x == 10.0
    assert pose.y == create_default_pose().y


def test_set_pose_partial_and_full():
    """Partial poses overlay, full poses replace"""
    figure = StickFigure()
    figure.set_pose(PartialPose(head_tilt=0.3))
    assert figure.get_pose().head_tilt == 0.3
    assert figure.get_pose().scale == 1.0

    figure.set_pose(create_default_pose(1.0, 2.0))
    pose = figure.get_pose()
    assert (pose.x, pose.y, pose.head_tilt) == (1.0, 2.0, 0.0)


def test_get_pose_returns_copy():
    """Changing a returned pose does not change the figure"""
    figure = StickFigure()
    pose = figure.get_pose()
    pose.x = -50.0
    assert figure.get_pose().x != -50.0


def test_joint_positions_default_pose():
    """Forward kinematics for the default standing pose"""
    joints = StickFigure().joint_positions()

    assert np.allclose(joints["neck"], [400.0, 275.0])
    assert np.allclose(joints["hip"], [400.0, 325.0])
    assert np.allclose(joints["head"], [400.0, 260.0])
    assert np.allclose(joints["shoulder"], [400.0, 280.0])

    a = math.pi / 4
    expected_elbow = np.array([400.0 + 35 * math.sin(a), 280.0 + 35 * math.cos(a)])
    assert np.allclose(joints["left_elbow"], expected_elbow)

    b = a + math.pi / 6
    expected_hand = expected_elbow + 30 * np.array([math.sin(b), math.cos(b)])
    assert np.allclose(joints["left_hand"], expected_hand)


def test_joint_positions_scale():
    """Scale multiplies every distance from the origin"""
    base = compute_joint_positions(create_default_pose(0.0, 0.0))
    pose = create_default_pose(0.0, 0.0)
    pose.scale = 2.0
    scaled = compute_joint_positions(pose)

    assert np.allclose(scaled["right_foot"], base["right_foot"] * 2.0)
    assert float(scaled["head_radius"]) == 30.0


def test_renderer_draws_head():
    """Rendered image has the head color at the head center"""
    renderer = FigureRenderer(size=(800, 600))
    image = renderer.render(create_default_pose())

    assert image.size == (800, 600)
    assert image.getpixel((400, 260)) == (0xFF, 0xD1, 0xA3, 255)
    assert image.getpixel((5, 5)) == (255, 255, 255, 255)

"""Tests for sprite sheet export"""

import pytest
from PIL import Image

from stickanim.animation.animation import Animation, Keyframe
from stickanim.figure.pose import PartialPose, create_default_pose
from stickanim.rendering.sprite_sheet import SpriteSheetExporter, frame_times


FRAME_SIZE = (64, 64)


def _kick():
    return Animation(
        "kick",
        1.0,
        keyframes=[
            Keyframe(0.0, PartialPose(right_hip_angle=-0.4, scale=0.5)),
            Keyframe(1.0, PartialPose(right_hip_angle=-1.4, scale=0.5)),
        ],
    )


def test_frame_times_cover_duration():
    """Sample times are evenly spaced and include both ends"""
    assert frame_times(1.0, 5) == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert frame_times(2.0, 1) == [0.0]
    with pytest.raises(ValueError):
        frame_times(1.0, 0)


def test_render_frames_does_not_modify_base_pose():
    """Export works on detached poses"""
    base = create_default_pose()
    before = base.copy()
    frames = SpriteSheetExporter(frame_size=FRAME_SIZE).render_frames(_kick(), base, frame_count=3)

    assert len(frames) == 3
    assert all(frame.size == FRAME_SIZE for frame in frames)
    assert base == before


def test_render_frames_is_deterministic():
    """Rendering the same times twice gives identical pixels"""
    exporter = SpriteSheetExporter(frame_size=FRAME_SIZE)
    base = create_default_pose()
    first = exporter.render_frames(_kick(), base, frame_count=4)
    second = exporter.render_frames(_kick(), base, frame_count=4)

    assert [f.tobytes() for f in first] == [f.tobytes() for f in second]
    assert first[0].tobytes() != first[-1].tobytes()


def test_compose_sheet_grid_size():
    """Sheets are columns x rows cells"""
    exporter = SpriteSheetExporter(frame_size=FRAME_SIZE)
    frames = [Image.new("RGBA", FRAME_SIZE) for _ in range(5)]

    assert exporter.compose_sheet(frames, columns=4).size == (4 * 64, 2 * 64)
    assert exporter.compose_sheet(frames, columns=10).size == (5 * 64, 64)
    with pytest.raises(ValueError):
        exporter.compose_sheet([], columns=4)
    with pytest.raises(ValueError):
        exporter.compose_sheet(frames, columns=0)


def test_export_sheet_writes_png(tmp_path):
    """export_sheet saves a PNG with the expected grid"""
    exporter = SpriteSheetExporter(frame_size=FRAME_SIZE)
    path = exporter.export_sheet(_kick(), create_default_pose(), tmp_path / "out" / "kick.png",
                                 frame_count=8, columns=4)

    assert path.exists()
    with Image.open(path) as sheet:
        assert sheet.size == (4 * 64, 2 * 64)


def test_export_frames_writes_sequence(tmp_path):
    """export_frames writes one numbered PNG per frame"""
    exporter = SpriteSheetExporter(frame_size=FRAME_SIZE)
    paths = exporter.export_frames(_kick(), create_default_pose(), tmp_path, frame_count=3)

    assert [p.name for p in paths] == ["kick_000.png", "kick_001.png", "kick_002.png"]
    assert all(p.exists() for p in paths)


def test_export_empty_animation_raises(tmp_path):
    """Animations without keyframes are rejected before rendering"""
    exporter = SpriteSheetExporter(frame_size=FRAME_SIZE)
    with pytest.raises(ValueError):
        exporter.export_sheet(Animation("empty", 1.0), create_default_pose(), tmp_path / "x.png")

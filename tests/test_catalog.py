"""Tests for AnimationCatalog"""

import json

import pytest

from stickanim.animation.animation import Animation, Keyframe
from stickanim.animation.catalog import AnimationCatalog
from stickanim.config.settings import DEFAULT_CATALOG_PATH
from stickanim.figure.pose import PartialPose


def _animation(name, loop=False):
    return Animation(
        name,
        1.0,
        loop=loop,
        keyframes=[
            Keyframe(0.0, PartialPose(left_hip_angle=0.2)),
            Keyframe(1.0, PartialPose(left_hip_angle=0.8, limb_color="#123456")),
        ],
    )


def test_catalog_add_find_list():
    """Animations are found by name and listed in insertion order"""
    catalog = AnimationCatalog()
    walk = _animation("walk")
    run = _animation("run")

    catalog.add(walk)
    catalog.add(run)

    assert len(catalog) == 2
    assert catalog.find_by_name("walk") is walk
    assert catalog.find_by_name("missing") is None
    assert catalog.list() == [walk, run]
    assert catalog.names() == ["walk", "run"]
    assert "run" in catalog
    assert list(catalog) == [walk, run]


def test_catalog_rejects_duplicates_unless_replacing():
    """Names are unique within a catalog"""
    catalog = AnimationCatalog([_animation("walk")])
    replacement = _animation("walk", loop=True)

    with pytest.raises(ValueError):
        catalog.add(replacement)

    catalog.add(replacement, replace=True)
    assert catalog.find_by_name("walk") is replacement
    assert len(catalog) == 1


def test_catalog_rejects_empty_animation():
    """Animations without keyframes cannot be stored"""
    with pytest.raises(ValueError):
        AnimationCatalog().add(Animation("empty", 1.0))


def test_catalog_remove():
    """remove() reports whether the animation existed"""
    catalog = AnimationCatalog([_animation("walk")])
    assert catalog.remove("walk") is True
    assert catalog.remove("walk") is False
    assert len(catalog) == 0


def test_catalog_save_and_load(tmp_path):
    """Saving and loading preserves every animation record"""
    catalog = AnimationCatalog([_animation("walk"), _animation("spin", loop=True)])
    path = catalog.save(tmp_path / "nested" / "catalog.json")

    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert [item["name"] for item in payload["animations"]] == ["walk", "spin"]

    loaded = AnimationCatalog.load(path)
    assert loaded.to_dict() == catalog.to_dict()
    assert loaded.find_by_name("spin").loop is True


def test_catalog_load_missing_file(tmp_path):
    """Missing catalog files raise FileNotFoundError"""
    with pytest.raises(FileNotFoundError):
        AnimationCatalog.load(tmp_path / "nope.json")


def test_catalog_load_invalid_definition(tmp_path):
    """Invalid records surface as ValueError"""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"animations": [{"name": "x", "duration": -1}]}), encoding="utf-8")
    with pytest.raises(ValueError):
        AnimationCatalog.load(path)


def test_catalog_load_rejects_top_level_list(tmp_path):
    """A catalog file must hold an object"""
    path = tmp_path / "list.json"
    path.write_text(json.dumps([{"name": "x", "duration": 1.0}]), encoding="utf-8")
    with pytest.raises(ValueError):
        AnimationCatalog.load(path)


def test_catalog_load_rejects_malformed_records(tmp_path):
    """Null params, non-list fields and non-object records raise ValueError"""
    payloads = [
        {"animations": [{"name": "x", "duration": 1.0, "keyframes": [{"time": 0, "params": None}]}]},
        {"animations": [{"name": "x", "duration": 1.0, "keyframes": {"time": 0}}]},
        {"animations": {"name": "x"}},
        {"animations": ["x"]},
    ]
    for index, payload in enumerate(payloads):
        path = tmp_path / f"bad_{index}.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ValueError):
            AnimationCatalog.load(path)


def test_catalog_load_rejects_nan_duration(tmp_path):
    """NaN written by json.dump is refused on load"""
    path = tmp_path / "nan.json"
    path.write_text('{"animations": [{"name": "x", "duration": NaN, "keyframes": [{"time": 0, "params": {}}]}]}',
                    encoding="utf-8")
    with pytest.raises(ValueError):
        AnimationCatalog.load(path)


def test_sample_catalog_loads():
    """The bundled sample catalog is valid"""
    catalog = AnimationCatalog.load(DEFAULT_CATALOG_PATH)

    assert catalog.names() == ["wave", "jump", "blush"]
    assert catalog.find_by_name("wave").loop is True
    assert catalog.find_by_name("jump").loop is False
    blush = catalog.find_by_name("blush")
    assert blush.keyframes[1].params.head_tilt == pytest.approx(0.35)
    assert blush.keyframes[1].params.head_color == "#FF8A8A"

import json

import pytest

from cubeview.config import DEFAULT_SCENE_PATH
from cubeview.model.io import SceneIO
from cubeview.model.scene import CubeConfig, Scene, SceneConfig


def test_save_and_load(tmp_path):
    config = SceneConfig()
    config.camera.yaw_degrees = 15.0
    config.cubes.append(CubeConfig(size=30.0, position=(1.0, 2.0, 3.0), with_faces=False, name="small"))
    path = tmp_path / "scene.json"

    SceneIO.save_scene(config, str(path))
    loaded = SceneIO.load_scene(str(path))

    assert loaded == config


def test_saved_file_carries_version(tmp_path):
    path = tmp_path / "scene.json"
    SceneIO.save_scene(SceneConfig(), str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert "version" in data
    assert data["camera"]["position"] == [0.0, 0.0, -5.0]


def test_bundled_default_scene_matches_builtin_defaults():
    assert SceneIO.load_scene(DEFAULT_SCENE_PATH) == SceneConfig()


def test_missing_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"screen": {"width": 1024}}), encoding="utf-8")
    config = SceneIO.load_scene(str(path))
    assert config.screen.width == 1024
    assert config.screen.height == 600
    assert [c.name for c in config.cubes] == ["center", "left", "right"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SceneIO.load_scene(str(tmp_path / "nope.json"))


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        SceneIO.load_scene(str(path))


@pytest.mark.parametrize(
    "payload",
    [
        {"camera": {"bogus": 1}},
        {"cubes": [{"size": 10, "colour": "red"}]},
        {"cubes": [{"position": [1, 2]}]},
        [1, 2, 3],
    ],
)
def test_malformed_scene_raises_value_error(tmp_path, payload):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        SceneIO.load_scene(str(path))


def test_scene_from_default_config():
    scene = Scene.from_config(SceneConfig())
    assert [f.name for f in scene.world] == ["center", "left", "right"]
    assert scene.camera.position.z == -5.0
    assert (scene.screen.width, scene.screen.height) == (800, 600)


@pytest.mark.parametrize(
    "data",
    [
        {"camera": {"near": 10.0, "far": 1.0}},
        {"camera": {"fov_y_degrees": 200.0}},
        {"screen": {"width": 0}},
        {"cubes": [{"size": -1.0}]},
    ],
)
def test_invalid_values_are_rejected_when_building_the_scene(data):
    config = SceneConfig.from_dict(data)
    with pytest.raises(ValueError):
        Scene.from_config(config)


def test_reset_restores_config_but_keeps_viewport_size():
    scene = Scene.from_config(SceneConfig())
    scene.screen.resize(1280, 720)
    scene.screen.zoom_by(2.0)
    scene.camera.move_forward(100)
    scene.world.figure(0).rotate(1.0, 1.0)

    scene.reset()

    assert (scene.screen.width, scene.screen.height) == (1280, 720)
    assert scene.screen.zoom == 1.0
    assert scene.camera.position.z == -5.0
    assert scene.world.figure(0).yaw == 0.0

"""
Scene State (Data Model)
========================
Initial scene configuration and the live scene built from it.

Classes:
    ScreenConfig, CameraConfig, CubeConfig, InteractionConfig: plain
        parameters, supplied once at setup.
    SceneConfig: container of the above, (de)serialized by `SceneIO`.
    Scene: the running objects (World, CameraEye, ScreenSpace). Views and
        controllers receive this instance explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
import logging
import math
from typing import Any, Dict

from cubeview.model.camera import CameraEye
from cubeview.model.figure import Figure
from cubeview.model.primitives import Vertex3D
from cubeview.model.screen import ScreenSpace
from cubeview.model.world import World

logger = logging.getLogger(__name__)


@dataclass
class ScreenConfig:
    width: int = 800
    height: int = 600
    zoom: float = 1.0
    min_zoom: float = 0.2
    max_zoom: float = 5.0


@dataclass
class CameraConfig:
    position: tuple[float, float, float] = (0.0, 0.0, -5.0)
    fov_y_degrees: float = 60.0
    near: float = 0.1
    far: float = 1e6
    yaw_degrees: float = 0.0
    pitch_degrees: float = 0.0


@dataclass
class CubeConfig:
    size: float = 120.0
    position: tuple[float, float, float] = (0.0, 0.0, 400.0)
    yaw_degrees: float = 0.0
    pitch_degrees: float = 0.0
    with_faces: bool = True
    name: str = ""


@dataclass
class InteractionConfig:
    """Speeds that turn input deltas into scene changes."""
    yaw_speed: float = 0.01  # rad / px
    pitch_speed: float = 0.01  # rad / px
    move_speed: float = 1.0  # units / px
    zoom_in_factor: float = 1.1
    zoom_out_factor: float = 0.9
    camera_rotation_speed: float = 0.05  # rad / key press
    camera_movement_speed: float = 10.0  # units / key press


def _default_cubes() -> list[CubeConfig]:
    # Same "ground" level for all cubes
    return [
        CubeConfig(size=120.0, position=(0.0, 0.0, 400.0), name="center"),
        CubeConfig(size=80.0, position=(-200.0, 0.0, 300.0), name="left"),
        CubeConfig(size=150.0, position=(250.0, 0.0, 500.0), name="right"),
    ]


@dataclass
class SceneConfig:
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    cubes: list[CubeConfig] = field(default_factory=_default_cubes)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SceneConfig:
        """
        Build a config from a (JSON) dictionary. Missing sections and keys fall
        back to defaults; unknown keys raise.

        Raises:
            ValueError: On unknown keys or malformed values.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Scene config must be a mapping, got {type(data).__name__}.")
        try:
            screen = ScreenConfig(**data.get("screen", {}))
            camera_data = dict(data.get("camera", {}))
            if "position" in camera_data:
                camera_data["position"] = _as_triple(camera_data["position"])
            camera = CameraConfig(**camera_data)

            cubes = _default_cubes()
            if "cubes" in data:
                cubes = []
                for cube_data in data["cubes"]:
                    cube_data = dict(cube_data)
                    if "position" in cube_data:
                        cube_data["position"] = _as_triple(cube_data["position"])
                    cubes.append(CubeConfig(**cube_data))

            interaction = InteractionConfig(**data.get("interaction", {}))
        except TypeError as e:
            raise ValueError(f"Invalid scene config: {e}") from e

        return cls(screen=screen, camera=camera, cubes=cubes, interaction=interaction)


def _as_triple(values: Any) -> tuple[float, float, float]:
    coords = tuple(float(v) for v in values)
    if len(coords) != 3:
        raise ValueError(f"Expected 3 coordinates, got {len(coords)}.")
    return coords  # type: ignore[return-value]


class Scene:
    """The live scene: one world, one camera, one screen."""

    def __init__(self, world: World, camera: CameraEye, screen: ScreenSpace, config: SceneConfig) -> None:
        self.world = world
        self.camera = camera
        self.screen = screen
        self.config = config

    @classmethod
    def from_config(cls, config: SceneConfig) -> Scene:
        """
        Raises:
            ValueError: If the config describes an invalid camera, screen or cube.
        """
        sc = config.screen
        screen = ScreenSpace(sc.width, sc.height, zoom=sc.zoom, min_zoom=sc.min_zoom, max_zoom=sc.max_zoom)

        cc = config.camera
        camera = CameraEye(
            position=Vertex3D(*cc.position),
            fov_y=math.radians(cc.fov_y_degrees),
            near=cc.near,
            far=cc.far,
            yaw=math.radians(cc.yaw_degrees),
            pitch=math.radians(cc.pitch_degrees),
        )

        world = World()
        for i, cube in enumerate(config.cubes):
            world.add_figure(Figure.cube(
                cube.size,
                *cube.position,
                yaw=math.radians(cube.yaw_degrees),
                pitch=math.radians(cube.pitch_degrees),
                with_faces=cube.with_faces,
                name=cube.name or f"cube-{i}",
            ))

        logger.info(f"Scene built: {len(world)} figure(s), screen {screen.width}x{screen.height}.")
        return cls(world=world, camera=camera, screen=screen, config=config)

    def reset(self) -> None:
        """Rebuild world, camera and zoom from the config, keeping the current viewport size."""
        fresh = Scene.from_config(self.config)
        fresh.screen.resize(self.screen.width, self.screen.height)
        self.world = fresh.world
        self.camera = fresh.camera
        self.screen = fresh.screen
        logger.info("Scene has been reset.")

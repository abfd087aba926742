import math

import pytest

from cubeview.model.camera import PITCH_LIMIT, CameraEye, ProjectedPoint
from cubeview.model.primitives import Vertex2D, Vertex3D


@pytest.mark.parametrize("z", [0.2, 1.0, 400.0, 12345.6])
def test_on_axis_point_projects_to_center(z):
    camera = CameraEye(fov_y=math.radians(90), near=0.1, far=1e6)
    assert camera.project_norm(Vertex3D(0, 0, z), aspect=1.0) == Vertex2D(0.0, 0.0)


def test_projection_formula(camera):
    aspect = 800 / 600
    t = math.tan(math.radians(60) / 2)
    projected = camera.project(Vertex3D(30, -20, 200), aspect)
    assert isinstance(projected, ProjectedPoint)
    assert projected.x == pytest.approx((30 / (200 * t)) / aspect)
    assert projected.y == pytest.approx(-20 / (200 * t))
    assert projected.depth == pytest.approx(200)


def test_fov_90_edge_of_view_maps_to_one():
    camera = CameraEye(fov_y=math.radians(90), near=0.1, far=1e6)
    assert camera.project_norm(Vertex3D(0, 50, 50), 1.0).y == pytest.approx(1.0)


def test_project_norm_matches_project(camera):
    vertex = Vertex3D(12, 34, 56)
    projected = camera.project(vertex, 1.5)
    assert camera.project_norm(vertex, 1.5) == Vertex2D(projected.x, projected.y)


@pytest.mark.parametrize("z", [-10.0, 0.0, 0.05, 0.1, 1e6, 2e6])
def test_outside_near_far_is_rejected(camera, z):
    assert camera.project(Vertex3D(0, 0, z), 1.0) is None
    assert camera.project_norm(Vertex3D(0, 0, z), 1.0) is None


def test_vertex_at_camera_position_is_rejected():
    camera = CameraEye(position=Vertex3D(5, 5, 5))
    assert camera.project(Vertex3D(5, 5, 5), 1.0) is None


def test_non_finite_vertex_is_rejected(camera):
    assert camera.project(Vertex3D(math.nan, 0, 100), 1.0) is None
    assert camera.project(Vertex3D(0, 0, math.nan), 1.0) is None
    assert camera.project(Vertex3D(math.inf, 0, 100), 1.0) is None


def test_camera_does_not_clip_to_unit_square(camera):
    # Far off to the side but in front of the camera: clipping is done in pixel space
    projected = camera.project_norm(Vertex3D(1000, 0, 100), 1.0)
    assert projected is not None
    assert projected.x > 1


def test_position_offsets_projection():
    camera = CameraEye(position=Vertex3D(10, 20, -100))
    assert camera.project_norm(Vertex3D(10, 20, 300), 1.0) == Vertex2D(0.0, 0.0)


@pytest.mark.parametrize("fov", [0.0, -1.0, math.pi, 4.0])
def test_invalid_fov_raises(fov):
    with pytest.raises(ValueError):
        CameraEye(fov_y=fov)


@pytest.mark.parametrize("near, far", [(0.0, 10.0), (-1.0, 10.0), (10.0, 10.0), (20.0, 10.0)])
def test_invalid_clip_planes_raise(near, far):
    with pytest.raises(ValueError):
        CameraEye(near=near, far=far)


def test_set_clip_planes_validates(camera):
    camera.set_clip_planes(1.0, 50.0)
    assert (camera.near, camera.far) == (1.0, 50.0)
    with pytest.raises(ValueError):
        camera.set_clip_planes(50.0, 1.0)
    assert (camera.near, camera.far) == (1.0, 50.0)


def test_yawed_camera_looks_along_forward():
    camera = CameraEye(yaw=math.pi / 2)
    forward = camera.forward()
    assert (forward.x, forward.y, forward.z) == pytest.approx((-1, 0, 0), abs=1e-12)
    projected = camera.project(Vertex3D(-100, 0, 0), 1.0)
    assert (projected.x, projected.y, projected.depth) == pytest.approx((0, 0, 100), abs=1e-9)
    assert camera.project(Vertex3D(0, 0, 100), 1.0) is None


def test_pitched_camera_looks_along_forward():
    camera = CameraEye(pitch=0.5)
    target = camera.forward() * 250
    projected = camera.project(target, 1.3)
    assert (projected.x, projected.y, projected.depth) == pytest.approx((0, 0, 250), abs=1e-9)


def test_right_vector_maps_to_screen_right():
    camera = CameraEye(yaw=0.8)
    point = camera.forward() * 100 + camera.right() * 10
    projected = camera.project_norm(point, 1.0)
    assert projected.x > 0
    assert projected.y == pytest.approx(0, abs=1e-9)


def test_move_forward_keeps_target_centered():
    camera = CameraEye(yaw=0.3, pitch=-0.2)
    target = camera.forward() * 500
    camera.move_forward(120)
    projected = camera.project(target, 1.0)
    assert (projected.x, projected.y, projected.depth) == pytest.approx((0, 0, 380), abs=1e-9)


def test_move_forward_with_default_orientation_increases_z():
    camera = CameraEye()
    camera.move_forward(10)
    camera.move_forward(-4)
    assert (camera.position.x, camera.position.y, camera.position.z) == pytest.approx((0, 0, 6))


def test_move_sideways_and_up():
    camera = CameraEye()
    camera.move_sideways(5)
    camera.move_up(2)
    assert (camera.position.x, camera.position.y, camera.position.z) == pytest.approx((5, 2, 0))


def test_rotate_yaw_accumulates():
    camera = CameraEye()
    camera.rotate_yaw(0.05)
    camera.rotate_yaw(0.05)
    assert camera.yaw == pytest.approx(0.1)


def test_rotate_pitch_is_clamped_below_vertical():
    camera = CameraEye()
    for _ in range(100):
        camera.rotate_pitch(0.1)
    assert camera.pitch == pytest.approx(PITCH_LIMIT)
    assert camera.pitch < math.pi / 2
    camera.rotate_pitch(-10)
    assert camera.pitch == pytest.approx(-PITCH_LIMIT)


def test_motion_has_no_projection_side_effects():
    camera = CameraEye()
    fov, near, far = camera.fov_y, camera.near, camera.far
    camera.rotate_yaw(1)
    camera.rotate_pitch(0.2)
    camera.move_forward(3)
    camera.move_sideways(4)
    assert (camera.fov_y, camera.near, camera.far) == (fov, near, far)

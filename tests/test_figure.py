import logging
import math

import numpy as np
import pytest

from cubeview.model.figure import Figure
from cubeview.model.geometry import CUBE_EDGES, GeometryDescriptor, cube_geometry
from cubeview.model.primitives import Vertex3D
from cubeview.model.world import World
from cubeview.model.world_space import rotate_yaw_pitch


def vertices_array(figure: Figure) -> np.ndarray:
    return figure.vertex_array()


def test_cube_has_8_vertices_12_edges_6_faces(cube):
    assert len(cube.vertices) == 8
    assert len(cube.edges) == 12
    assert len(cube.faces) == 6
    assert cube.has_edges and cube.has_faces
    assert cube.edges == CUBE_EDGES


def test_cube_without_faces():
    figure = Figure.cube(50, with_faces=False)
    assert figure.has_edges
    assert not figure.has_faces


def test_invalid_cube_size_raises():
    with pytest.raises(ValueError):
        cube_geometry(0)


def test_face_with_too_few_vertices_raises():
    with pytest.raises(ValueError):
        GeometryDescriptor(vertices=(Vertex3D(0, 0, 0),) * 3, faces=((0, 1),))


def test_missing_face_colors_are_padded():
    geometry = GeometryDescriptor(
        vertices=(Vertex3D(0, 0, 0), Vertex3D(1, 0, 0), Vertex3D(0, 1, 0)),
        faces=((0, 1, 2),),
    )
    assert len(geometry.face_colors) == 1


def test_move_round_trip(cube):
    before = vertices_array(cube)
    cube.move(12.5, -3.0, 40.0)
    assert not np.allclose(vertices_array(cube), before)
    cube.move(-12.5, 3.0, -40.0)
    np.testing.assert_allclose(vertices_array(cube), before, atol=1e-9)


def test_move_defaults_dz_to_zero(cube):
    cube.move(1, 2)
    assert cube.position == Vertex3D(1, 2, 400)


def test_rotate_round_trip(cube):
    cube.rotate(0.3, -0.2)
    before = vertices_array(cube)
    cube.rotate(0.8, 0.5)
    cube.rotate(-0.8, -0.5)
    np.testing.assert_allclose(vertices_array(cube), before, atol=1e-9)


def test_base_is_never_mutated(cube):
    base = cube.base
    cube.rotate(1.0, 1.0)
    cube.move(10, 10, 10)
    assert cube.base is base
    assert cube.base == cube_geometry(120).vertices


def test_vertices_are_recomputed_from_base():
    """Many small steps land on exactly the same vertices as one big step."""
    stepped = Figure.cube(100, 0, 0, 300)
    direct = Figure.cube(100, 0, 0, 300)
    for _ in range(1000):
        stepped.rotate(0.01, 0.005)
    direct.set_rotation(stepped.yaw, stepped.pitch)
    np.testing.assert_allclose(vertices_array(stepped), vertices_array(direct), atol=1e-12)


def test_update_transform_order_yaw_then_pitch_then_translate():
    figure = Figure.cube(2, 5, 6, 7, yaw=0.4, pitch=-0.9)
    expected = [rotate_yaw_pitch(v, figure.center, 0.4, -0.9) + Vertex3D(5, 6, 7) for v in figure.base]
    np.testing.assert_allclose(
        vertices_array(figure),
        np.array([(v.x, v.y, v.z) for v in expected]),
        atol=1e-12,
    )


def test_center_of_symmetric_cube_is_position(cube):
    cube.rotate(0.7, 1.3)
    cube.move(10, -20, 30)
    center = cube.get_center()
    assert (center.x, center.y, center.z) == pytest.approx((10, -20, 430))


def test_center_of_asymmetric_base():
    base = (Vertex3D(0, 0, 0), Vertex3D(100, 0, 0), Vertex3D(0, 100, 0), Vertex3D(0, 0, 100))
    pivot = Vertex3D(50, 50, 50)
    position = Vertex3D(1, 2, 3)
    figure = Figure(GeometryDescriptor(vertices=base), center=pivot, position=position, yaw=0.5, pitch=0.25)

    mean_base = Vertex3D(25, 25, 25)
    expected = rotate_yaw_pitch(mean_base, pivot, 0.5, 0.25) + position
    center = figure.get_center()
    assert (center.x, center.y, center.z) == pytest.approx((expected.x, expected.y, expected.z))


def test_empty_figure_center_is_origin():
    figure = Figure(GeometryDescriptor(vertices=()))
    assert figure.get_center() == Vertex3D(0, 0, 0)
    assert figure.vertex_array().shape == (0, 3)


def test_reset_restores_initial_pose():
    figure = Figure.cube(10, 1, 2, 3, yaw=0.1, pitch=0.2)
    before = vertices_array(figure)
    figure.rotate(1, 1)
    figure.set_position(50, 50, 50)
    figure.reset()
    assert (figure.yaw, figure.pitch, figure.position) == (0.1, 0.2, Vertex3D(1, 2, 3))
    np.testing.assert_allclose(vertices_array(figure), before)


def test_get_vertices_returns_copy(cube):
    vertices = cube.get_vertices()
    vertices.clear()
    assert len(cube.vertices) == 8


def test_dangling_topology_is_warned_not_raised(caplog):
    geometry = GeometryDescriptor(
        vertices=(Vertex3D(0, 0, 0), Vertex3D(1, 0, 0)),
        edges=((0, 1), (1, 5), (-1, 0)),
        faces=((0, 1, 9),),
    )
    with caplog.at_level(logging.WARNING, logger="cubeview.model.figure"):
        figure = Figure(geometry, name="broken")
    assert len(figure.edges) == 3
    messages = [r.getMessage() for r in caplog.records]
    assert sum("edge" in m for m in messages) == 2
    assert sum("face" in m for m in messages) == 1


def test_is_valid_index_rejects_negative(cube):
    assert cube.is_valid_index(0)
    assert cube.is_valid_index(7)
    assert not cube.is_valid_index(8)
    assert not cube.is_valid_index(-1)


def test_non_finite_input_propagates_without_raising():
    figure = Figure.cube(10)
    figure.move(math.inf, 0, 0)
    assert not figure.vertices[0].is_finite


def test_world_keeps_insertion_order(cube):
    world = World()
    other = Figure.cube(10, name="other")
    world.add_figure(cube)
    world.add_figure(other)
    assert len(world) == 2
    assert list(world) == [cube, other]
    assert world.figure(1) is other


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_world_figure_rejects_out_of_range_index(world, index):
    with pytest.raises(IndexError):
        world.figure(index)


def test_world_get_figures_returns_copy(world):
    figures = world.get_figures()
    figures.clear()
    assert len(world) == 1


def test_world_rejects_non_figures():
    with pytest.raises(TypeError):
        World().add_figure("cube")

from __future__ import annotations

import numpy as np
import pytest

from geomlab.geometry.grid import (
    generate_plane_geometry_data,
    generate_rectangle_geometry_data,
    grid_indices,
)
from geomlab.geometry.types import GeometryType, positions, validate_pair
from tests.conftest import triangle_areas, triangle_normals


def test_unit_rectangle_scenario() -> None:
    vertices, indices = generate_rectangle_geometry_data(GeometryType.TRIANGLES, 1, 1, 1, 1)

    np.testing.assert_array_equal(
        positions(vertices),
        [[-0.5, -0.5, 0.0], [0.5, -0.5, 0.0], [-0.5, 0.5, 0.0], [0.5, 0.5, 0.0]],
    )
    assert indices.tolist() == [0, 1, 2, 1, 3, 2]


@pytest.mark.parametrize(("w", "h"), [(1, 1), (1, 4), (3, 2), (5, 5), (7, 1)])
def test_lattice_counts(w: int, h: int) -> None:
    pair = generate_rectangle_geometry_data(GeometryType.TRIANGLES, 2.0, 3.0, w, h)

    assert len(pair.vertices) == (w + 1) * (h + 1)
    assert len(pair.indices) == 6 * w * h
    assert pair.indices.max() < len(pair.vertices)
    validate_pair(GeometryType.TRIANGLES, pair)


def test_lattice_spans_the_rectangle_row_major() -> None:
    vertices, _ = generate_rectangle_geometry_data(GeometryType.POINTS, 4.0, 2.0, 4, 2)

    assert vertices["x"].min() == -2.0 and vertices["x"].max() == 2.0
    assert vertices["y"].min() == -1.0 and vertices["y"].max() == 1.0
    # first row is the bottom edge, walked left to right
    np.testing.assert_array_equal(vertices["y"][:5], -1.0)
    np.testing.assert_array_equal(vertices["x"][:5], [-2.0, -1.0, 0.0, 1.0, 2.0])


def test_triangles_face_plus_z() -> None:
    pair = generate_rectangle_geometry_data(GeometryType.TRIANGLES, 1.0, 2.0, 3, 4)
    normals = triangle_normals(pair)

    assert np.all(normals[:, 2] > 0)
    np.testing.assert_allclose(normals[:, :2], 0.0)
    np.testing.assert_allclose(triangle_areas(pair).sum(), 2.0, rtol=1e-5)


def test_line_pattern_per_cell() -> None:
    assert grid_indices(GeometryType.LINES, 1, 1) == [0, 1, 1, 2, 2, 0, 1, 3, 3, 2, 2, 1]

    pair = generate_rectangle_geometry_data(GeometryType.LINES, 1.0, 1.0, 3, 2)
    assert len(pair.indices) == 12 * 3 * 2
    validate_pair(GeometryType.LINES, pair)


def test_points_cover_every_vertex_once() -> None:
    pair = generate_rectangle_geometry_data(GeometryType.POINTS, 1.0, 1.0, 3, 2)
    assert pair.indices.tolist() == list(range(12))


def test_flip_winding_and_offset() -> None:
    assert grid_indices(GeometryType.TRIANGLES, 1, 1, flip_winding=True) == [2, 1, 0, 2, 3, 1]
    assert grid_indices(GeometryType.TRIANGLES, 1, 1, offset=10) == [10, 11, 12, 11, 13, 12]
    assert grid_indices(GeometryType.POINTS, 1, 1, offset=4) == [4, 5, 6, 7]


def test_color_reaches_every_vertex() -> None:
    vertices, _ = generate_rectangle_geometry_data(
        GeometryType.TRIANGLES, 1.0, 1.0, 2, 2, color=(1.0, 0.3, 0.3)
    )
    np.testing.assert_allclose(vertices["g"], 0.3, rtol=1e-6)
    np.testing.assert_array_equal(vertices["a"], 1.0)


def test_plane_is_the_rectangle_generator() -> None:
    assert generate_plane_geometry_data is generate_rectangle_geometry_data


@pytest.mark.parametrize(
    ("kwargs", "name"),
    [
        ({"width_segments": 0}, "width_segments"),
        ({"height_segments": 0}, "height_segments"),
        ({"width": float("nan")}, "width"),
    ],
)
def test_invalid_parameters_fail_fast(kwargs: dict, name: str) -> None:
    params = {"width": 1.0, "height": 1.0, "width_segments": 2, "height_segments": 2}
    params.update(kwargs)
    with pytest.raises(ValueError, match=name):
        generate_rectangle_geometry_data(GeometryType.TRIANGLES, **params)


def test_topology_must_be_a_geometry_type() -> None:
    with pytest.raises(ValueError, match="topology"):
        generate_rectangle_geometry_data("triangles", 1.0, 1.0, 1, 1)

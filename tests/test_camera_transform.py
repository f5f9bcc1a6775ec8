from __future__ import annotations

import math

import numpy as np
import pytest

from geomlab.config import CAMERA_FAR_PLANE, CAMERA_NEAR_PLANE
from geomlab.gameobjects.camera import Camera, perspective
from geomlab.gameobjects.transform import Transform, rotation_matrix


def _apply(matrix: np.ndarray, point) -> np.ndarray:
    return matrix @ np.array([*point, 1.0], dtype=np.float32)


def test_transform_scales_then_rotates_then_translates() -> None:
    transform = Transform(position=(0.0, 0.0, 5.0), rotation=(0.0, 0.0, math.pi / 2), scale=(2.0, 2.0, 2.0))
    np.testing.assert_allclose(_apply(transform.matrix(), (1.0, 0.0, 0.0))[:3], [0.0, 2.0, 5.0], atol=1e-6)


def test_default_transform_is_identity() -> None:
    np.testing.assert_array_equal(Transform().matrix(), np.identity(4, dtype=np.float32))


def test_rotation_order_is_x_then_y() -> None:
    r = rotation_matrix((math.pi / 2, math.pi / 2, 0.0))
    # X turns +Y into +Z, then Y turns +Z into +X
    np.testing.assert_allclose((r @ np.array([0, 1, 0, 0], dtype=np.float32))[:3], [1, 0, 0], atol=1e-6)


def test_view_matrix_inverts_camera_placement() -> None:
    camera = Camera(position=(0.0, 0.0, 2.0))
    np.testing.assert_allclose(_apply(camera.get_view_matrix(), (0.0, 0.0, 0.0)), [0, 0, -2, 1], atol=1e-6)

    camera = Camera(position=(-0.9, 0.8, 1.6), rotation=(-0.5, -0.55, 0.0))
    np.testing.assert_allclose(
        camera.get_view_matrix() @ camera.world_matrix(), np.identity(4), atol=1e-5
    )


def test_forward_move_and_turn() -> None:
    camera = Camera(position=(0.0, 0.0, 2.0))
    np.testing.assert_allclose(camera.forward(), [0, 0, -1], atol=1e-6)

    camera.move(0.5)
    np.testing.assert_allclose(camera.position, [0, 0, 1.5], atol=1e-6)

    camera.turn(yaw=math.pi / 2)
    np.testing.assert_allclose(camera.forward(), [-1, 0, 0], atol=1e-6)

    camera.turn(pitch=0.1)
    assert camera.rotation[0] == pytest.approx(0.1)


def test_perspective_maps_clip_planes() -> None:
    proj = perspective(1.13, 1.0, CAMERA_NEAR_PLANE, CAMERA_FAR_PLANE)

    near = _apply(proj, (0.0, 0.0, -CAMERA_NEAR_PLANE))
    far = _apply(proj, (0.0, 0.0, -CAMERA_FAR_PLANE))
    assert near[2] / near[3] == pytest.approx(-1.0, abs=1e-4)
    assert far[2] / far[3] == pytest.approx(1.0, abs=1e-4)


def test_projection_uses_aspect() -> None:
    camera = Camera()
    wide = camera.get_projection_matrix(2.0)
    square = camera.get_projection_matrix(1.0)
    assert wide[0, 0] == pytest.approx(square[0, 0] / 2)
    assert wide[1, 1] == pytest.approx(square[1, 1])

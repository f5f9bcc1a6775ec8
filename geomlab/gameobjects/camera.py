import math

import numpy as np

from geomlab.config import CAMERA_FAR_PLANE, CAMERA_FOV, CAMERA_NEAR_PLANE
from geomlab.gameobjects.transform import rotation_matrix, translation_matrix


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """
    Docstring für perspective

    :param fov: Vertical field of view in radians
    :param aspect: Viewport width / height
    :param near: Near clipping plane distance
    :param far: Far clipping plane distance
    :return: The projection matrix
    :rtype: ndarray[Any, Any]
    """
    f = 1.0 / math.tan(fov / 2.0)

    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2 * far * near) / (near - far)
    proj[3, 2] = -1.0

    return proj


class Camera:
    def __init__(
        self,
        position=(0.0, 0.0, 2.0),
        rotation=(0.0, 0.0, 0.0),
        fov=CAMERA_FOV,
        near=CAMERA_NEAR_PLANE,
        far=CAMERA_FAR_PLANE,
    ):
        """
        Free camera placed by a translation followed by an Euler rotation.

        :param position: Camera position in world space
        :param rotation: Euler XYZ angles in radians (pitch, yaw, roll)
        :param fov: Vertical field of view in radians
        """
        self.position = np.array(position, dtype=np.float32)
        self.rotation = np.array(rotation, dtype=np.float32)
        self.fov = fov
        self.near = near
        self.far = far

    def world_matrix(self) -> np.ndarray:
        return translation_matrix(self.position) @ rotation_matrix(self.rotation)

    def get_view_matrix(self) -> np.ndarray:
        return np.linalg.inv(self.world_matrix()).astype(np.float32)

    def get_projection_matrix(self, aspect: float) -> np.ndarray:
        return perspective(self.fov, aspect, self.near, self.far)

    def forward(self) -> np.ndarray:
        """Unit vector the camera looks along (its local -Z) in world space."""
        return -(rotation_matrix(self.rotation) @ np.array([0.0, 0.0, 1.0, 0.0], dtype=np.float32))[:3]

    def move(self, distance: float):
        self.position += self.forward() * np.float32(distance)

    def turn(self, pitch: float = 0.0, yaw: float = 0.0):
        self.rotation[0] += pitch
        self.rotation[1] += yaw

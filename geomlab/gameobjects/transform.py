import numpy as np


def translation_matrix(offset) -> np.ndarray:
    m = np.identity(4, dtype=np.float32)
    m[:3, 3] = offset
    return m


def rotation_matrix(rotation) -> np.ndarray:
    """
    Euler XYZ rotation (radians), applied X first.

    :param rotation: (rx, ry, rz)
    """
    rx, ry, rz = rotation
    cx, sx = np.cos(rx), np.sin(rx)
    cy, sy = np.cos(ry), np.sin(ry)
    cz, sz = np.cos(rz), np.sin(rz)

    Rx = np.array([[1, 0, 0, 0],
                   [0, cx, -sx, 0],
                   [0, sx, cx, 0],
                   [0, 0, 0, 1]], dtype=np.float32)

    Ry = np.array([[cy, 0, sy, 0],
                   [0, 1, 0, 0],
                   [-sy, 0, cy, 0],
                   [0, 0, 0, 1]], dtype=np.float32)

    Rz = np.array([[cz, -sz, 0, 0],
                   [sz, cz, 0, 0],
                   [0, 0, 1, 0],
                   [0, 0, 0, 1]], dtype=np.float32)

    return Rz @ Ry @ Rx


def scale_matrix(scale) -> np.ndarray:
    return np.diag(np.array([*scale, 1.0], dtype=np.float32))


class Transform:
    def __init__(self, position=(0.0, 0.0, 0.0), rotation=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0)):
        """
        Docstring für __init__

        :param self: The object itself
        :param position: The position of the transform
        :param rotation: The rotation of the transform (Euler angles in radians)
        :param scale: The scale of the transform
        """
        self.position = np.array(position, dtype=np.float32)
        self.rotation = np.array(rotation, dtype=np.float32)
        self.scale    = np.array(scale, dtype=np.float32)

    def matrix(self) -> np.ndarray:
        """
        Model matrix: scale, then rotate, then translate.
        """
        return (
            translation_matrix(self.position)
            @ rotation_matrix(self.rotation)
            @ scale_matrix(self.scale)
        )

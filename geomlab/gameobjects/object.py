import numpy as np

from geomlab.gameobjects.transform import Transform


class GameObject:
    def __init__(self, mesh, transform: Transform | None = None, spin=(0.0, 0.0, 0.0), name: str = ""):
        """
        Docstring für __init__

        :param self: The object itself
        :param mesh: The uploaded mesh (shared through the MeshCache)
        :param transform: The transform of the object
        :param spin: Rotation speed per axis in radians per second
        :param name: Label used in log messages
        """
        self.mesh = mesh
        self.transform = transform if transform is not None else Transform()
        self.spin = np.array(spin, dtype=np.float32)
        self.name = name

    def update(self, dt: float):
        if self.spin.any():
            self.transform.rotation += self.spin * np.float32(dt)

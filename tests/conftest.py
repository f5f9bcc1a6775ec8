from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pytest

from geomlab.geometry.types import GeometryPair, positions


def triangles(pair: GeometryPair) -> np.ndarray:
    """(T, 3, 3) corner positions of every indexed triangle."""
    points = positions(pair.vertices).astype(np.float64)
    return points[pair.indices.reshape(-1, 3)]


def triangle_normals(pair: GeometryPair) -> np.ndarray:
    corners = triangles(pair)
    return np.cross(corners[:, 1] - corners[:, 0], corners[:, 2] - corners[:, 0])


def triangle_centroids(pair: GeometryPair) -> np.ndarray:
    return triangles(pair).mean(axis=1)


def triangle_areas(pair: GeometryPair) -> np.ndarray:
    return np.linalg.norm(triangle_normals(pair), axis=1) * 0.5


class FakeGL(SimpleNamespace):
    """Records GL calls; hands out increasing object names."""

    def __init__(self) -> None:
        super().__init__(
            GL_TRIANGLES=4,
            GL_LINES=1,
            GL_POINTS=0,
            GL_ARRAY_BUFFER=0x8892,
            GL_ELEMENT_ARRAY_BUFFER=0x8893,
            GL_STATIC_DRAW=0x88E4,
            GL_FLOAT=0x1406,
            GL_FALSE=0,
            GL_UNSIGNED_INT=0x1405,
            GL_TRUE=1,
            GL_VERTEX_SHADER=0x8B31,
            GL_FRAGMENT_SHADER=0x8B30,
            GL_COMPILE_STATUS=0x8B81,
            GL_LINK_STATUS=0x8B82,
            GL_DEPTH_TEST=0x0B71,
            GL_PROGRAM_POINT_SIZE=0x8642,
            GL_CULL_FACE=0x0B44,
            GL_BACK=0x0405,
            GL_CCW=0x0901,
            GL_COLOR_BUFFER_BIT=0x4000,
            GL_DEPTH_BUFFER_BIT=0x0100,
        )
        self.calls: list[tuple] = []
        self.returns: dict[str, object] = {}
        self._next_name = 1

    def _gen(self, *_args) -> int:
        name = self._next_name
        self._next_name += 1
        return name

    def __getattr__(self, name: str):
        if not name.startswith("gl"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))
            if name.startswith("glGen"):
                return self._gen()
            return self.returns.get(name)

        return record

    def called(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]


@pytest.fixture
def fake_gl() -> FakeGL:
    return FakeGL()

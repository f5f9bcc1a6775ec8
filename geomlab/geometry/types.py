import math
from enum import Enum
from typing import NamedTuple

import numpy as np


# Vertex format: x, y, z, r, g, b, a (float32, packed, 28 bytes)
VERTEX_DTYPE = np.dtype(
    [
        ("x", np.float32),
        ("y", np.float32),
        ("z", np.float32),
        ("r", np.float32),
        ("g", np.float32),
        ("b", np.float32),
        ("a", np.float32),
    ]
)

INDEX_DTYPE = np.uint32

WHITE = (1.0, 1.0, 1.0, 1.0)


class GeometryType(Enum):
    TRIANGLES = "triangles"
    LINES = "lines"
    POINTS = "points"

    @property
    def indices_per_primitive(self) -> int:
        return {"triangles": 3, "lines": 2, "points": 1}[self.value]

    @classmethod
    def parse(cls, name) -> "GeometryType":
        """
        Convert a scene-file name ("triangles", "lines", "points") to a tag.

        :param name: Topology name or an existing GeometryType
        :return: The matching GeometryType
        :raises ValueError: If the name is not a known topology
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown topology: {name!r}")


class GeometryPair(NamedTuple):
    vertices: np.ndarray
    indices: np.ndarray


# =========================
# Parameter checks
# =========================

def check_topology(topology) -> GeometryType:
    if not isinstance(topology, GeometryType):
        raise ValueError(
            f"topology must be one of {[t.name for t in GeometryType]}, got {topology!r}"
        )
    return topology


def check_segments(name: str, value) -> int:
    # bool is an int subclass but never a meaningful segment count
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return int(value)


def check_scalar(name: str, value) -> float:
    if isinstance(value, (str, bytes, bool)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


def check_color(color) -> tuple[float, float, float, float]:
    """
    Normalize an RGB or RGBA color to an RGBA float tuple.

    :param color: 3 or 4 components in [0, 1]
    :return: (r, g, b, a)
    """
    try:
        components = tuple(color)
    except TypeError:
        raise ValueError(f"color must be a sequence of 3 or 4 numbers, got {color!r}") from None
    if len(components) == 3:
        components = components + (1.0,)
    if len(components) != 4:
        raise ValueError(f"color must have 3 or 4 components, got {len(components)}")
    return tuple(check_scalar("color", c) for c in components)


# =========================
# Building / editing
# =========================

def build_pair(vertices: list, indices: list) -> GeometryPair:
    """
    Pack the (x, y, z, r, g, b, a) tuples and index list produced by a
    generator into typed arrays.
    """
    return GeometryPair(
        np.array(vertices, dtype=VERTEX_DTYPE),
        np.array(indices, dtype=INDEX_DTYPE),
    )


def positions(vertices: np.ndarray) -> np.ndarray:
    """
    :param vertices: Structured vertex array (VERTEX_DTYPE)
    :return: (N, 3) float32 array of x, y, z
    """
    return np.stack([vertices["x"], vertices["y"], vertices["z"]], axis=1)


def colors(vertices: np.ndarray) -> np.ndarray:
    return np.stack([vertices["r"], vertices["g"], vertices["b"], vertices["a"]], axis=1)


def offset_positions(pair: GeometryPair, dx=0.0, dy=0.0, dz=0.0) -> GeometryPair:
    """
    Return a copy of the pair with every vertex translated.

    Used to push wireframe and point overlays slightly off the solid surface
    so they do not z-fight with it.
    """
    vertices = pair.vertices.copy()
    vertices["x"] += np.float32(dx)
    vertices["y"] += np.float32(dy)
    vertices["z"] += np.float32(dz)
    return GeometryPair(vertices, pair.indices.copy())


def validate_pair(topology: GeometryType, pair: GeometryPair) -> None:
    """
    Check the index invariants the renderer relies on.

    :raises ValueError: If an index is out of range or the index count does
        not fit the topology
    """
    topology = check_topology(topology)
    vertices, indices = pair
    if vertices.dtype != VERTEX_DTYPE:
        raise ValueError(f"vertices must use VERTEX_DTYPE, got {vertices.dtype}")
    if indices.size and int(indices.max()) >= len(vertices):
        raise ValueError(
            f"index {int(indices.max())} out of range for {len(vertices)} vertices"
        )
    if indices.size % topology.indices_per_primitive:
        raise ValueError(
            f"{indices.size} indices is not a multiple of "
            f"{topology.indices_per_primitive} for {topology.value}"
        )
    if topology is GeometryType.POINTS and indices.size != len(vertices):
        raise ValueError(
            f"points need one index per vertex, got {indices.size} for {len(vertices)} vertices"
        )

import logging

from geomlab.geometry.grid import grid_indices
from geomlab.geometry.types import (
    GeometryPair,
    GeometryType,
    WHITE,
    build_pair,
    check_color,
    check_scalar,
    check_segments,
    check_topology,
)

logger = logging.getLogger(__name__)

X, Y, Z = 0, 1, 2

# Faces in emission order: (column axis, row axis, fixed axis, side of the fixed axis).
# Odd faces have a mirrored basis, so flipping their winding keeps every
# triangle facing out of the box.
BOX_FACES = (
    (X, Y, Z, +1),  # +Z front
    (Z, Y, X, +1),  # +X right
    (Z, Y, X, -1),  # -X left
    (X, Y, Z, -1),  # -Z back
    (X, Z, Y, -1),  # -Y bottom
    (X, Z, Y, +1),  # +Y top
)


def generate_box_geometry_data(
    topology: GeometryType,
    width: float,
    height: float,
    depth: float,
    width_segments: int,
    height_segments: int,
    depth_segments: int,
    color=WHITE,
) -> GeometryPair:
    """
    Closed box centered at the origin, built from six subdivided faces.

    Faces do not share vertices along their edges, so a box has
    sum((cols + 1) * (rows + 1)) vertices over its six faces.

    :param topology: Triangles, Lines or Points
    :param width: Extent along X
    :param height: Extent along Y
    :param depth: Extent along Z
    :param width_segments: Subdivisions along X
    :param height_segments: Subdivisions along Y
    :param depth_segments: Subdivisions along Z
    :param color: RGB(A) color for every vertex
    """
    topology = check_topology(topology)
    sizes = (
        check_scalar("width", width),
        check_scalar("height", height),
        check_scalar("depth", depth),
    )
    segments = (
        check_segments("width_segments", width_segments),
        check_segments("height_segments", height_segments),
        check_segments("depth_segments", depth_segments),
    )
    r, g, b, a = check_color(color)

    halves = [size * 0.5 for size in sizes]
    steps = [size / count for size, count in zip(sizes, segments)]

    vertices = []
    indices: list[int] = []

    for side, (col_axis, row_axis, fixed_axis, sign) in enumerate(BOX_FACES):
        offset = len(vertices)
        cols = segments[col_axis]
        rows = segments[row_axis]

        position = [0.0, 0.0, 0.0]
        position[fixed_axis] = sign * halves[fixed_axis]

        for i in range(rows + 1):
            position[row_axis] = i * steps[row_axis] - halves[row_axis]
            for j in range(cols + 1):
                position[col_axis] = j * steps[col_axis] - halves[col_axis]
                vertices.append((position[0], position[1], position[2], r, g, b, a))

        indices.extend(
            grid_indices(topology, cols, rows, offset=offset, flip_winding=bool(side & 1))
        )

    logger.debug(
        "box %s: %d vertices, %d indices",
        topology.value, len(vertices), len(indices),
    )
    return build_pair(vertices, indices)

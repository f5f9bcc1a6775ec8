import logging

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


def grid_indices(
    topology: GeometryType,
    width_segments: int,
    height_segments: int,
    offset: int = 0,
    flip_winding: bool = False,
) -> list[int]:
    """
    Index pattern for a row-major (width_segments + 1) x (height_segments + 1)
    lattice whose first vertex sits at ``offset``.

    :param topology: Triangles, Lines or Points
    :param width_segments: Cells per row
    :param height_segments: Number of rows of cells
    :param offset: Index of the lattice's first vertex in the vertex buffer
    :param flip_winding: Emit the two triangles of a cell in the opposite order
    :return: Flat index list
    """
    topology = check_topology(topology)
    width_segments = check_segments("width_segments", width_segments)
    height_segments = check_segments("height_segments", height_segments)

    row = width_segments + 1

    if topology is GeometryType.POINTS:
        return list(range(offset, offset + row * (height_segments + 1)))

    indices: list[int] = []
    for i in range(height_segments):
        for j in range(width_segments):
            a = offset + i * row + j
            b = a + 1
            c = a + row
            d = c + 1

            if topology is GeometryType.LINES:
                indices.extend((a, b, b, c, c, a))
                indices.extend((b, d, d, c, c, b))
            elif flip_winding:
                indices.extend((c, b, a))
                indices.extend((c, d, b))
            else:
                indices.extend((a, b, c))
                indices.extend((b, d, c))

    return indices


def generate_rectangle_geometry_data(
    topology: GeometryType,
    width: float,
    height: float,
    width_segments: int,
    height_segments: int,
    color=WHITE,
) -> GeometryPair:
    """
    Subdivided rectangle in the XY plane, centered at the origin, facing +Z.

    Vertices run row by row from the bottom edge (y = -height / 2) upwards,
    each row from left (x = -width / 2) to right.
    """
    topology = check_topology(topology)
    width = check_scalar("width", width)
    height = check_scalar("height", height)
    width_segments = check_segments("width_segments", width_segments)
    height_segments = check_segments("height_segments", height_segments)
    r, g, b, a = check_color(color)

    half_width = width * 0.5
    half_height = height * 0.5
    segment_width = width / width_segments
    segment_height = height / height_segments

    vertices = []
    for i in range(height_segments + 1):
        y = i * segment_height - half_height
        for j in range(width_segments + 1):
            x = j * segment_width - half_width
            vertices.append((x, y, 0.0, r, g, b, a))

    indices = grid_indices(topology, width_segments, height_segments)

    logger.debug(
        "rectangle %s: %d vertices, %d indices",
        topology.value, len(vertices), len(indices),
    )
    return build_pair(vertices, indices)


# Scenes call the same lattice a plane
generate_plane_geometry_data = generate_rectangle_geometry_data

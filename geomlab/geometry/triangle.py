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


def generate_triangle_geometry_data(
    topology: GeometryType,
    width: float,
    height: float,
    width_segments: int,
    height_segments: int,
    color=WHITE,
) -> GeometryPair:
    """
    Large upward triangle tiled with small ones, apex at (0, height / 2).

    Row i holds i + 1 upward triangles and, between them, i inverted ones,
    so height_segments rows give height_segments ** 2 triangles. Every small
    triangle owns three consecutive vertices (no sharing), listed
    counter-clockwise.

    :param topology: Triangles, Lines or Points
    :param width: Used with width_segments to size one small triangle
    :param height: Total height of the arrangement
    :param width_segments: Divisor of width giving a small triangle's base
    :param height_segments: Number of rows
    :param color: RGB(A) color for every vertex
    """
    topology = check_topology(topology)
    width = check_scalar("width", width)
    height = check_scalar("height", height)
    width_segments = check_segments("width_segments", width_segments)
    height_segments = check_segments("height_segments", height_segments)
    r, g, b, a = check_color(color)

    half_height = height * 0.5
    segment_height = height / height_segments
    segment_width = width / width_segments
    segment_half_width = segment_width * 0.5

    vertices = []
    for i in range(height_segments):
        offset = -i * segment_half_width
        y1 = half_height - i * segment_height
        y2 = half_height - (i + 1) * segment_height

        for j in range(i + 1):
            x1 = offset + segment_width * j
            x2 = x1 - segment_half_width
            x3 = x1 + segment_half_width

            vertices.append((x1, y1, 0.0, r, g, b, a))
            vertices.append((x2, y2, 0.0, r, g, b, a))
            vertices.append((x3, y2, 0.0, r, g, b, a))

            # inverted triangle filling the gap to the previous upward one
            if j > 0:
                x4 = x1 - segment_width
                vertices.append((x1, y1, 0.0, r, g, b, a))
                vertices.append((x4, y1, 0.0, r, g, b, a))
                vertices.append((x2, y2, 0.0, r, g, b, a))

    indices: list[int] = []
    if topology is GeometryType.POINTS:
        indices.extend(range(len(vertices)))
    else:
        for index_a in range(0, len(vertices), 3):
            index_b = index_a + 1
            index_c = index_a + 2
            if topology is GeometryType.LINES:
                indices.extend((index_a, index_b, index_b, index_c, index_c, index_a))
            else:
                indices.extend((index_a, index_b, index_c))

    logger.debug(
        "triangle %s: %d vertices, %d indices",
        topology.value, len(vertices), len(indices),
    )
    return build_pair(vertices, indices)

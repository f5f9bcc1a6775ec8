import logging
import math

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


def generate_sphere_geometry_data(
    topology: GeometryType,
    radius: float,
    width_segments: int,
    height_segments: int,
    color=WHITE,
) -> GeometryPair:
    """
    UV sphere centered at the origin with its poles on the Y axis.

    Row i sits at polar angle phi = i / height_segments * pi, column j at
    azimuth theta = j / width_segments * 2pi. The seam column and both pole
    rows are kept as duplicated vertices so the lattice stays rectangular.

    :param topology: Triangles, Lines or Points
    :param radius: Sphere radius
    :param width_segments: Azimuthal subdivisions (longitude)
    :param height_segments: Polar subdivisions (latitude)
    :param color: RGB(A) color for every vertex
    """
    topology = check_topology(topology)
    radius = check_scalar("radius", radius)
    width_segments = check_segments("width_segments", width_segments)
    height_segments = check_segments("height_segments", height_segments)
    r, g, b, a = check_color(color)

    vertices = []
    for i in range(height_segments + 1):
        phi = i / height_segments * math.pi
        cos_phi = math.cos(phi)
        sin_phi = math.sin(phi)

        for j in range(width_segments + 1):
            theta = j / width_segments * 2.0 * math.pi
            cos_theta = math.cos(theta)
            sin_theta = math.sin(theta)

            x = radius * cos_theta * sin_phi
            y = radius * cos_phi
            z = radius * sin_phi * sin_theta
            vertices.append((x, y, z, r, g, b, a))

    row = width_segments + 1
    indices: list[int] = []

    if topology is GeometryType.POINTS:
        indices.extend(range(len(vertices)))
    else:
        for rows in range(height_segments):
            for columns in range(width_segments):
                index_a = rows * row + columns
                index_b = index_a + 1
                index_c = index_a + row
                index_d = index_c + 1

                if topology is GeometryType.LINES:
                    indices.extend((index_a, index_b, index_b, index_c, index_c, index_a))
                    indices.extend((index_b, index_d, index_d, index_c, index_c, index_b))
                    continue

                # a and b collapse onto the north pole in the first row,
                # c and d onto the south pole in the last one
                if rows != 0:
                    indices.extend((index_a, index_b, index_c))
                if rows != height_segments - 1:
                    indices.extend((index_b, index_d, index_c))

    logger.debug(
        "sphere %s: %d vertices, %d indices",
        topology.value, len(vertices), len(indices),
    )
    return build_pair(vertices, indices)

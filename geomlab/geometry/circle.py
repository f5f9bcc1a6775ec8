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


def generate_circle_geometry_data(
    topology: GeometryType,
    radius: float,
    segment_count: int,
    color=WHITE,
) -> GeometryPair:
    """
    Triangle fan disc in the XY plane, facing +Z.

    Vertex 0 is the center; vertices 1..segment_count + 1 walk the rim
    counter-clockwise, the last one repeating the first rim angle.
    """
    topology = check_topology(topology)
    radius = check_scalar("radius", radius)
    segment_count = check_segments("segment_count", segment_count)
    r, g, b, a = check_color(color)

    angle_delta = 2.0 * math.pi / segment_count

    vertices = [(0.0, 0.0, 0.0, r, g, b, a)]
    for i in range(segment_count + 1):
        angle = i * angle_delta
        vertices.append((math.cos(angle) * radius, math.sin(angle) * radius, 0.0, r, g, b, a))

    indices: list[int] = []
    if topology is GeometryType.POINTS:
        indices.extend(range(len(vertices)))
    else:
        for k in range(1, segment_count + 1):
            if topology is GeometryType.TRIANGLES:
                indices.extend((0, k, k + 1))
            else:
                indices.extend((0, k, k, k + 1, k + 1, 0))

    logger.debug(
        "circle %s: %d vertices, %d indices",
        topology.value, len(vertices), len(indices),
    )
    return build_pair(vertices, indices)

from geomlab.geometry.box import generate_box_geometry_data
from geomlab.geometry.circle import generate_circle_geometry_data
from geomlab.geometry.grid import generate_plane_geometry_data, generate_rectangle_geometry_data
from geomlab.geometry.sphere import generate_sphere_geometry_data
from geomlab.geometry.triangle import generate_triangle_geometry_data
from geomlab.geometry.types import GeometryPair, GeometryType

GENERATOR_TABLE = {
    "rectangle": generate_rectangle_geometry_data,
    "plane": generate_plane_geometry_data,
    "box": generate_box_geometry_data,
    "sphere": generate_sphere_geometry_data,
    "circle": generate_circle_geometry_data,
    "triangle": generate_triangle_geometry_data,
}

# Parameters that measure size; overlays scale these and leave segment counts alone
DIMENSION_PARAMS = ("width", "height", "depth", "radius")


def generate(name: str, topology: GeometryType, **params) -> GeometryPair:
    """
    Look up a generator by shape name and call it.

    :param name: Key in GENERATOR_TABLE
    :param topology: Triangles, Lines or Points
    :param params: Shape parameters, passed through by keyword
    :raises ValueError: If the shape name is unknown
    """
    if name not in GENERATOR_TABLE:
        raise ValueError(f"Unknown shape: {name}")
    return GENERATOR_TABLE[name](topology, **params)


def scale_params(params: dict, factor: float) -> dict:
    scaled = dict(params)
    for key in DIMENSION_PARAMS:
        if key in scaled:
            scaled[key] = scaled[key] * factor
    return scaled

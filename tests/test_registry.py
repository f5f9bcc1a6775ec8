from __future__ import annotations

import numpy as np
import pytest

from geomlab.geometry.box import generate_box_geometry_data
from geomlab.geometry.registry import GENERATOR_TABLE, generate, scale_params
from geomlab.geometry.types import GeometryType


def test_table_covers_every_shape() -> None:
    assert set(GENERATOR_TABLE) == {"rectangle", "plane", "box", "sphere", "circle", "triangle"}


def test_generate_dispatches_by_name() -> None:
    via_registry = generate(
        "box", GeometryType.LINES,
        width=1.0, height=9.0, depth=1.0, width_segments=5, height_segments=5, depth_segments=5,
    )
    direct = generate_box_geometry_data(GeometryType.LINES, 1.0, 9.0, 1.0, 5, 5, 5)

    np.testing.assert_array_equal(via_registry.vertices, direct.vertices)
    np.testing.assert_array_equal(via_registry.indices, direct.indices)


def test_unknown_shape() -> None:
    with pytest.raises(ValueError, match="Unknown shape: torus"):
        generate("torus", GeometryType.TRIANGLES, radius=1.0)


def test_scale_params_only_touches_dimensions() -> None:
    params = {"radius": 0.5, "width_segments": 20, "height_segments": 20}
    scaled = scale_params(params, 1.01)

    assert scaled == {"radius": pytest.approx(0.505), "width_segments": 20, "height_segments": 20}
    assert params["radius"] == 0.5

import ctypes
import logging

import numpy as np
from OpenGL import GL

from geomlab.geometry.types import (
    GeometryPair,
    GeometryType,
    INDEX_DTYPE,
    VERTEX_DTYPE,
    validate_pair,
)

logger = logging.getLogger(__name__)

POSITION_LOCATION = 0
COLOR_LOCATION = 1


def draw_mode(topology: GeometryType) -> int:
    if topology is GeometryType.TRIANGLES:
        return GL.GL_TRIANGLES
    if topology is GeometryType.LINES:
        return GL.GL_LINES
    return GL.GL_POINTS


class Mesh:
    def __init__(self, topology: GeometryType, pair: GeometryPair):
        """
        Upload a generated vertex/index pair to the GPU.

        :param topology: How the index buffer is drawn
        :param pair: (vertices, indices) from a geometry generator
        """
        validate_pair(topology, pair)
        vertices = np.ascontiguousarray(pair.vertices, dtype=VERTEX_DTYPE)
        indices = np.ascontiguousarray(pair.indices, dtype=INDEX_DTYPE)

        self.topology = topology
        self.mode = draw_mode(topology)
        self.vertex_count = len(vertices)
        self.index_count = len(indices)

        self.vao = GL.glGenVertexArrays(1)
        self.vbo = GL.glGenBuffers(1)
        self.ebo = GL.glGenBuffers(1)

        GL.glBindVertexArray(self.vao)
        # VBO
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, vertices.nbytes, vertices, GL.GL_STATIC_DRAW)

        # EBO
        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        GL.glBufferData(GL.GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices, GL.GL_STATIC_DRAW)

        stride = VERTEX_DTYPE.itemsize

        # position (location = 0)
        GL.glEnableVertexAttribArray(POSITION_LOCATION)
        GL.glVertexAttribPointer(
            POSITION_LOCATION, 3, GL.GL_FLOAT, GL.GL_FALSE, stride,
            ctypes.c_void_p(VERTEX_DTYPE.fields["x"][1]),
        )

        # color (location = 1)
        GL.glEnableVertexAttribArray(COLOR_LOCATION)
        GL.glVertexAttribPointer(
            COLOR_LOCATION, 4, GL.GL_FLOAT, GL.GL_FALSE, stride,
            ctypes.c_void_p(VERTEX_DTYPE.fields["r"][1]),
        )

        GL.glBindVertexArray(0)

        logger.debug(
            "uploaded %s mesh: %d vertices, %d indices",
            topology.value, self.vertex_count, self.index_count,
        )

    def draw(self):
        GL.glBindVertexArray(self.vao)
        GL.glDrawElements(self.mode, self.index_count, GL.GL_UNSIGNED_INT, None)
        GL.glBindVertexArray(0)

    def destroy(self):
        GL.glDeleteBuffers(2, [self.vbo, self.ebo])
        GL.glDeleteVertexArrays(1, [self.vao])


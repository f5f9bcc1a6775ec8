import logging

import numpy as np
from OpenGL import GL

from geomlab.config import LINE_WIDTH, POINT_SIZE

logger = logging.getLogger(__name__)

# =========================
# Shader sources
# =========================

VERTEX_SHADER_SRC = """
#version 330 core
layout (location = 0) in vec3 aPos;
layout (location = 1) in vec4 aColor;

uniform mat4 u_mvp;
uniform float u_point_size;

out vec4 vColor;

void main()
{
    vColor = aColor;
    gl_Position = u_mvp * vec4(aPos, 1.0);
    gl_PointSize = u_point_size;
}
"""

FRAGMENT_SHADER_SRC = """
#version 330 core
in vec4 vColor;
out vec4 FragColor;

void main()
{
    FragColor = vColor;
}
"""


# =========================
# Shader Utils
# =========================

def compile_shader(source: str, shader_type: int) -> int:
    """Compile a GLSL shader from source and return the handle.

    :param source: The shader source code as a single string.
    :param shader_type: GL.GL_VERTEX_SHADER or GL.GL_FRAGMENT_SHADER.
    :raises RuntimeError: On compilation failure.
    """
    shader = GL.glCreateShader(shader_type)
    if shader is None or shader == 0:
        raise RuntimeError("Failed to create shader")
    GL.glShaderSource(shader, source)
    GL.glCompileShader(shader)

    if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
        error = GL.glGetShaderInfoLog(shader)
        error = error.decode() if error else "<no shader log>"
        raise RuntimeError(f"Shader compilation failed: {error}")

    return shader


def create_program(vs_src: str, fs_src: str) -> int:
    """
    Docstring für create_program

    :param vs_src: The vertex shader source
    :param fs_src: The fragment shader source
    :raises RuntimeError: On linking failure.
    """
    vs = compile_shader(vs_src, GL.GL_VERTEX_SHADER)
    fs = compile_shader(fs_src, GL.GL_FRAGMENT_SHADER)

    program = GL.glCreateProgram()
    GL.glAttachShader(program, vs)
    GL.glAttachShader(program, fs)
    GL.glLinkProgram(program)

    if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
        error = GL.glGetProgramInfoLog(program)
        error = error.decode() if error else "<no program log>"
        raise RuntimeError(f"Program linking failed: {error}")

    GL.glDeleteShader(vs)
    GL.glDeleteShader(fs)
    return program


# =========================
# Renderer
# =========================

class Renderer:
    def __init__(self, width: int, height: int):
        """
        :param width: Viewport width in pixels
        :param height: Viewport height in pixels
        """
        self.width = width
        self.height = height

        self.program = create_program(VERTEX_SHADER_SRC, FRAGMENT_SHADER_SRC)
        self.u_mvp = GL.glGetUniformLocation(self.program, "u_mvp")
        self.u_point_size = GL.glGetUniformLocation(self.program, "u_point_size")

        GL.glViewport(0, 0, width, height)
        GL.glEnable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_PROGRAM_POINT_SIZE)
        GL.glClearColor(0.0, 0.0, 0.0, 1.0)

        self.point_size = POINT_SIZE
        self.set_line_width(LINE_WIDTH)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def set_face_culling(self, enabled: bool):
        if enabled:
            GL.glEnable(GL.GL_CULL_FACE)
            GL.glCullFace(GL.GL_BACK)
            GL.glFrontFace(GL.GL_CCW)
        else:
            GL.glDisable(GL.GL_CULL_FACE)

    def set_line_width(self, width: float):
        # core profiles only guarantee 1.0; drivers clamp larger values
        GL.glLineWidth(width)

    def begin_frame(self):
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

    def render(self, objects, camera):
        """
        Draw every object with u_mvp = projection * view * model.

        :param objects: Iterable of GameObject
        :param camera: The camera object
        """
        GL.glUseProgram(self.program)
        GL.glUniform1f(self.u_point_size, self.point_size)

        view_projection = camera.get_projection_matrix(self.aspect) @ camera.get_view_matrix()

        for obj in objects:
            mvp = (view_projection @ obj.transform.matrix()).astype(np.float32)
            GL.glUniformMatrix4fv(self.u_mvp, 1, GL.GL_TRUE, mvp)
            obj.mesh.draw()

        GL.glUseProgram(0)

    def destroy(self):
        GL.glDeleteProgram(self.program)

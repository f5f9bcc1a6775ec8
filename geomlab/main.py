import logging
import sys

import pygame
from OpenGL import GL

from geomlab.config import (
    CAMERA_ROT_SPEED,
    CAMERA_SPEED,
    LINE_WIDTH,
    apply_args,
    build_arg_parser,
    load_app_config,
)
from geomlab.gameobjects.mesh import Mesh
from geomlab.gameobjects.mesh_cache import MeshCache
from geomlab.input import InputState, apply_camera_actions
from geomlab.logs import setup_logging
from geomlab.rendering.renderer import Renderer
from geomlab.world import World

logger = logging.getLogger(__name__)


def open_window(width: int, height: int, title: str):
    pygame.init()
    pygame.display.set_caption(title)

    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
    pygame.display.gl_set_attribute(
        pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
    )
    pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

    pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF)

    version = GL.glGetString(GL.GL_VERSION)
    if version:
        logger.info("OpenGL: %s", version.decode())


def load_scene(path: str, renderer: Renderer, cache: MeshCache):
    """
    Docstring für load_scene

    :param path: Scene JSON file
    :param renderer: Receives the scene's culling / line width settings
    :param cache: Mesh owner; cleared before the new scene uploads
    :return: (world, objects)
    """
    world = World(path)
    cache.clear()
    objects = world.build_objects(cache, Mesh)

    renderer.set_face_culling(world.culling)
    renderer.set_line_width(world.line_width or LINE_WIDTH)
    pygame.display.set_caption(world.title)

    logger.info("scene %r: %d objects, %d meshes", world.title, len(objects), len(cache))
    return world, objects


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = apply_args(load_app_config(), args)
    setup_logging(config.log_level)

    # ====================
    # Pygame / OpenGL init
    # ====================

    open_window(config.width, config.height, config.title)

    clock = pygame.time.Clock()
    input_state = InputState()
    renderer = Renderer(config.width, config.height)
    cache = MeshCache()

    scene_index = 0
    world, objects = load_scene(config.scenes[scene_index], renderer, cache)
    camera = world.camera

    # ====================
    # Main Loop
    # ====================

    running = True
    while running:
        dt = clock.tick(config.fps) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

        actions = input_state.update()
        if actions["quit"]:
            running = False

        if actions["next_scene"] and len(config.scenes) > 1:
            scene_index = (scene_index + 1) % len(config.scenes)
            world, objects = load_scene(config.scenes[scene_index], renderer, cache)
            camera = world.camera

        apply_camera_actions(camera, actions, CAMERA_ROT_SPEED, CAMERA_SPEED)

        for obj in objects:
            obj.update(dt)

        renderer.begin_frame()
        renderer.render(objects, camera)

        pygame.display.flip()

    logger.info("shutting down")
    cache.clear()
    renderer.destroy()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

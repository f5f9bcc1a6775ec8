import pygame


class InputState:
    """
    Collects and normalizes raw input into logical actions.

    - Camera look & move: continuous (hold)
    - Next scene: edge-triggered (press once)
    """

    def __init__(self):
        self.actions = {
            "pitch_up": False,
            "pitch_down": False,
            "yaw_left": False,
            "yaw_right": False,
            "forward": False,
            "backward": False,
            "next_scene": False,
            "quit": False,
        }

        # previous key state for edge detection
        self._prev_next_scene = False

    def update(self, keys=None):
        """
        Docstring für update

        :param self: The object itself
        :param keys: Key state sequence; polled from pygame when omitted
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        # camera (continuous)
        self.actions["pitch_up"] = bool(keys[pygame.K_w])
        self.actions["pitch_down"] = bool(keys[pygame.K_s])
        self.actions["yaw_left"] = bool(keys[pygame.K_a])
        self.actions["yaw_right"] = bool(keys[pygame.K_d])
        self.actions["forward"] = bool(keys[pygame.K_UP])
        self.actions["backward"] = bool(keys[pygame.K_DOWN])
        self.actions["quit"] = bool(keys[pygame.K_ESCAPE])

        # scene switch TAP (edge-triggered)
        next_now = bool(keys[pygame.K_TAB])
        self.actions["next_scene"] = next_now and not self._prev_next_scene
        self._prev_next_scene = next_now

        return self.actions


def apply_camera_actions(camera, actions, rot_speed: float, speed: float):
    """
    Docstring für apply_camera_actions

    :param camera: The camera to steer
    :param actions: Dict returned by InputState.update
    :param rot_speed: Radians per frame for W/S/A/D
    :param speed: World units per frame for Up/Down
    """
    if actions["pitch_up"]:
        camera.turn(pitch=rot_speed)
    if actions["pitch_down"]:
        camera.turn(pitch=-rot_speed)
    if actions["yaw_left"]:
        camera.turn(yaw=rot_speed)
    if actions["yaw_right"]:
        camera.turn(yaw=-rot_speed)
    if actions["forward"]:
        camera.move(speed)
    if actions["backward"]:
        camera.move(-speed)
